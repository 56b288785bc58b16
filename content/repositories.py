"""
Repositories Module - Ordered, limited listings of posts and projects

Repositories take an injected content source and hold no other state.
Failures propagate to the caller; nothing here logs or swallows them.
"""

from .errors import ContentSourceUnavailable, InvalidLimit
from .summaries import PostSummary, ProjectSummary


def validate_limit(limit):
    """Return the limit unchanged if it is None or a positive int, else raise InvalidLimit"""
    if limit is None:
        return None
    if isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
        raise InvalidLimit(limit)
    return limit


def map_records(source, collection, summary_type, records):
    """
    Map raw records to summaries in their original order

    Raises:
        ContentSourceUnavailable: a record is malformed or repeats a slug
    """
    summaries = []
    seen = set()
    for record in records:
        try:
            summary = summary_type.from_record(record)
        except (TypeError, ValueError, AttributeError) as e:
            raise ContentSourceUnavailable(source, f"malformed {collection} record: {e}") from e
        if summary.slug in seen:
            raise ContentSourceUnavailable(source, f"duplicate {collection} slug '{summary.slug}'")
        seen.add(summary.slug)
        summaries.append(summary)
    return summaries


class _SummaryRepository:
    collection = None
    summary_type = None

    def __init__(self, source):
        self.source = source

    def _list(self, limit):
        limit = validate_limit(limit)
        records = self.source.fetch(self.collection)
        summaries = map_records(self.source, self.collection, self.summary_type, records)

        # Newest first; equal timestamps fall back to slug order
        summaries.sort(key=lambda s: s.slug)
        summaries.sort(key=lambda s: s.published_at, reverse=True)
        return summaries if limit is None else summaries[:limit]


class PostRepository(_SummaryRepository):
    collection = 'posts'
    summary_type = PostSummary

    def list_posts(self, limit=None):
        """
        List post summaries, newest first

        Args:
            limit (int, optional): Maximum number of posts; all posts when omitted

        Returns:
            list[PostSummary]: min(limit, total) posts

        Raises:
            InvalidLimit: limit is not a positive integer
            ContentSourceUnavailable: the store cannot be read or holds a malformed post
        """
        return self._list(limit)


class ProjectRepository(_SummaryRepository):
    collection = 'projects'
    summary_type = ProjectSummary

    def list_projects(self, limit=None):
        """List project summaries, most recent first (same contract as list_posts)"""
        return self._list(limit)


__all__ = ['validate_limit', 'map_records', 'PostRepository', 'ProjectRepository']
