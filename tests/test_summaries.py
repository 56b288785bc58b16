"""
Tests for summary mapping and timestamp parsing
"""

from datetime import date, datetime, timedelta, timezone

import pytest

from content import PostSummary, ProjectSummary, parse_timestamp


@pytest.mark.parametrize('value, expected', [
    ('2024-01-05', datetime(2024, 1, 5, tzinfo=timezone.utc)),
    ('2024-01-05T10:30:00Z', datetime(2024, 1, 5, 10, 30, tzinfo=timezone.utc)),
    (date(2024, 1, 5), datetime(2024, 1, 5, tzinfo=timezone.utc)),
    (datetime(2024, 1, 5, 8), datetime(2024, 1, 5, 8, tzinfo=timezone.utc)),
])
def test_parse_timestamp(value, expected):
    assert parse_timestamp(value) == expected


def test_parse_timestamp_keeps_offset():
    parsed = parse_timestamp('2024-01-05T10:00:00+03:00')
    assert parsed.utcoffset() == timedelta(hours=3)


@pytest.mark.parametrize('value', [None, '', 'yesterday', 20240105])
def test_parse_timestamp_rejects(value):
    with pytest.raises(ValueError):
        parse_timestamp(value)


def test_post_from_record_prefers_excerpt_over_summary():
    post = PostSummary.from_record({
        'slug': 'a', 'title': ' A ', 'date': '2024-01-01',
        'excerpt': 'Excerpt', 'summary': 'Summary',
    })
    assert post.title == 'A'
    assert post.excerpt == 'Excerpt'


def test_post_from_record_requires_title():
    with pytest.raises(ValueError, match="'title'"):
        PostSummary.from_record({'slug': 'a', 'publishedAt': '2024-01-01'})


def test_project_to_dict():
    project = ProjectSummary.from_record({
        'slug': 'p', 'title': 'P', 'published_at': '2024-02-01', 'description': 'D',
    })
    assert project.to_dict() == {
        'slug': 'p',
        'title': 'P',
        'publishedAt': '2024-02-01T00:00:00+00:00',
        'description': 'D',
    }


def test_unparseable_date_chains_cause():
    with pytest.raises(ValueError, match='unparseable date') as excinfo:
        parse_timestamp('2024-13-45')
    assert isinstance(excinfo.value.__cause__, ValueError)
