class TrimmingError(Exception):
    """Base exception for route trimming failures."""


class NotFoundError(TrimmingError):
    """Raised when a requested transit line does not exist in the schedule."""


class MalformedRouteError(TrimmingError):
    """Raised when a route or one of its stops cannot be processed."""
