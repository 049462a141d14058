from __future__ import annotations

from dataclasses import dataclass

from .stop import Stop


@dataclass(frozen=True, slots=True)
class Bus:
    """A named bus line over catalogue stops.

    ``stops`` is the declared sequence. Round-trip lines already return to
    their first stop; other lines run there and back.
    """

    name: str
    stops: tuple[Stop, ...]
    is_roundtrip: bool

    @property
    def effective_stops(self) -> tuple[Stop, ...]:
        if self.is_roundtrip:
            return self.stops
        return self.stops + tuple(reversed(self.stops[:-1]))


@dataclass(frozen=True, slots=True)
class BusStats:
    stop_count: int
    unique_stop_count: int
    route_length: int | None  # meters; None if a road distance is missing
    curvature: float | None
