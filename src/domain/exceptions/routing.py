class RoutingError(Exception):
    """Base exception for route calculation failures."""


class NoPathFound(RoutingError):
    """Raised when no feasible path exists for the given request."""


class StopNotFound(RoutingError):
    """Raised when a route endpoint is not a known stop."""

    def __init__(self, stop_name: str) -> None:
        super().__init__(f"Unknown stop: {stop_name!r}")
        self.stop_name = stop_name
