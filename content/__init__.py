"""
Content Package - Read-only data access for posts and projects
"""

from .errors import ContentError, ContentSourceUnavailable, InvalidLimit
from .summaries import PostSummary, ProjectSummary, parse_timestamp
from .sources import (
    FileContentSource,
    HttpContentSource,
    DatabaseContentSource,
    build_content_source,
    parse_front_matter
)
from .repositories import PostRepository, ProjectRepository, map_records, validate_limit

__all__ = [
    # Errors
    'ContentError',
    'ContentSourceUnavailable',
    'InvalidLimit',

    # Summaries
    'PostSummary',
    'ProjectSummary',
    'parse_timestamp',

    # Sources
    'FileContentSource',
    'HttpContentSource',
    'DatabaseContentSource',
    'build_content_source',
    'parse_front_matter',

    # Repositories
    'PostRepository',
    'ProjectRepository',
    'validate_limit',
    'map_records'
]
