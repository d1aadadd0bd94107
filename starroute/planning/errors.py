"""
Route planning errors.

Not finding a route is never an error; these are raised only for caller
mistakes that a search cannot sensibly answer.
"""


class RouteSearchError(ValueError):
    """Base exception for route search misuse."""

    pass


class InvalidOriginError(RouteSearchError):
    """Raised when a search is started from a missing or unknown system."""

    def __init__(self, origin: object, reason: str = "not in the galaxy"):
        self.origin = origin
        self.reason = reason
        super().__init__(f"Invalid route origin {origin!r}: {reason}")
