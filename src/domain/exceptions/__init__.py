from .trimming import MalformedRouteError, NotFoundError, TrimmingError

__all__ = ["MalformedRouteError", "NotFoundError", "TrimmingError"]
