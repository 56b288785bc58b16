"""
Summaries Module - Read-only projections of posts and projects used for list rendering
"""

from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Any, Dict, Optional, Tuple


DATE_KEYS = ('publishedAt', 'published_at', 'date')


@dataclass(frozen=True)
class PostSummary:
    slug: str
    title: str
    published_at: datetime
    excerpt: str = ''

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> 'PostSummary':
        """
        Map a raw content record to a post summary

        Raises:
            ValueError: when a required field is missing or unparseable
        """
        return cls(
            slug=_required_text(record, 'slug'),
            title=_required_text(record, 'title'),
            published_at=parse_timestamp(_first(record, DATE_KEYS)),
            excerpt=_optional_text(record, ('excerpt', 'summary')),
        )

    def to_dict(self) -> Dict[str, str]:
        return {
            'slug': self.slug,
            'title': self.title,
            'publishedAt': self.published_at.isoformat(),
            'excerpt': self.excerpt,
        }


@dataclass(frozen=True)
class ProjectSummary:
    slug: str
    title: str
    published_at: datetime
    description: str = ''

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> 'ProjectSummary':
        """Map a raw content record to a project summary"""
        return cls(
            slug=_required_text(record, 'slug'),
            title=_required_text(record, 'title'),
            published_at=parse_timestamp(_first(record, DATE_KEYS)),
            description=_optional_text(record, ('description', 'summary')),
        )

    def to_dict(self) -> Dict[str, str]:
        return {
            'slug': self.slug,
            'title': self.title,
            'publishedAt': self.published_at.isoformat(),
            'description': self.description,
        }


def parse_timestamp(value: Any) -> datetime:
    """
    Normalize a date-like value to a timezone-aware datetime

    Accepts datetime, date, or an ISO-8601 string (a trailing "Z" is allowed).
    Naive values are taken as UTC so every summary compares against every other.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime(value.year, value.month, value.day)
    elif isinstance(value, str) and value.strip():
        text = value.strip()
        if text.endswith(('Z', 'z')):
            text = text[:-1] + '+00:00'
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError as e:
            raise ValueError(f"unparseable date {value!r}") from e
    else:
        raise ValueError(f"missing or invalid date {value!r}")

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _first(record: Dict[str, Any], keys: Tuple[str, ...]) -> Optional[Any]:
    for key in keys:
        if record.get(key) is not None:
            return record[key]
    return None


def _required_text(record: Dict[str, Any], key: str) -> str:
    value = record.get(key)
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"missing required field '{key}'")
    return value.strip()


def _optional_text(record: Dict[str, Any], keys: Tuple[str, ...]) -> str:
    value = _first(record, keys)
    if value is None:
        return ''
    if not isinstance(value, str):
        raise ValueError(f"field '{keys[0]}' must be text")
    return value.strip()


__all__ = ['PostSummary', 'ProjectSummary', 'parse_timestamp']
