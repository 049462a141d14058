class CatalogueError(Exception):
    """Base exception for inconsistent catalogue data."""


class DuplicateStopError(CatalogueError):
    """Raised when a stop name is added twice."""


class DuplicateBusError(CatalogueError):
    """Raised when a bus name is added twice."""


class UnknownStopError(CatalogueError):
    """Raised when a bus or distance refers to a stop that was never added."""

    def __init__(self, stop_name: str) -> None:
        super().__init__(f"Unknown stop: {stop_name!r}")
        self.stop_name = stop_name


class InvalidBusError(CatalogueError):
    """Raised when a bus does not visit at least two stops."""


class MissingDistanceError(CatalogueError):
    """Raised when a bus runs between two stops with no road distance."""

    def __init__(self, from_stop: str, to_stop: str, bus_name: str | None = None) -> None:
        where = f" (bus {bus_name!r})" if bus_name is not None else ""
        super().__init__(
            f"No road distance between {from_stop!r} and {to_stop!r}{where}"
        )
        self.from_stop = from_stop
        self.to_stop = to_stop
        self.bus_name = bus_name
