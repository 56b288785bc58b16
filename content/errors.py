"""
Content Errors - Failures surfaced by content sources and repositories
"""


class ContentError(Exception):
    """Base class for content listing failures"""


class ContentSourceUnavailable(ContentError):
    """The content store could not be read, timed out, or holds a malformed record"""

    def __init__(self, source, reason):
        self.source = source
        self.reason = reason
        super().__init__(f"Content source {source} unavailable: {reason}")


class InvalidLimit(ContentError, ValueError):
    """A listing limit that is not a positive integer"""

    def __init__(self, limit):
        self.limit = limit
        super().__init__(f"Limit must be a positive integer, got {limit!r}")


__all__ = ['ContentError', 'ContentSourceUnavailable', 'InvalidLimit']
