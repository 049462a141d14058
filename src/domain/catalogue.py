from __future__ import annotations

import logging

from src.domain.algorithms.geo_utils import polyline_distance_m
from src.domain.exceptions import (
    DuplicateBusError,
    DuplicateStopError,
    InvalidBusError,
    UnknownStopError,
)
from src.domain.models import Bus, BusStats, GeoPoint, Stop

logger = logging.getLogger(__name__)


class TransportCatalogue:
    """In-memory registry of stops, buses and road distances.

    Stops and buses keep their insertion order, which the graph builder relies
    on for reproducible vertex and edge ids. Road distances are stored only in
    the declared direction; lookups fall back to the reverse direction when a
    pair was declared one way only.
    """

    def __init__(self) -> None:
        self._stops: dict[str, Stop] = {}
        self._buses: dict[str, Bus] = {}
        self._buses_by_stop: dict[str, set[str]] = {}
        self._distances: dict[tuple[str, str], int] = {}

    # Stops

    def add_stop(self, name: str, lat: float, lon: float) -> Stop:
        if name in self._stops:
            raise DuplicateStopError(f"Stop already exists: {name!r}")
        stop = Stop(name=name, location=GeoPoint(lat=lat, lon=lon))
        self._stops[name] = stop
        self._buses_by_stop[name] = set()
        return stop

    def find_stop(self, name: str) -> Stop | None:
        return self._stops.get(name)

    @property
    def stops(self) -> tuple[Stop, ...]:
        return tuple(self._stops.values())

    # Buses

    def add_bus(self, name: str, stop_names: list[str] | tuple[str, ...], is_roundtrip: bool) -> Bus:
        if name in self._buses:
            raise DuplicateBusError(f"Bus already exists: {name!r}")

        stops: list[Stop] = []
        for stop_name in stop_names:
            stop = self._stops.get(stop_name)
            if stop is None:
                raise UnknownStopError(stop_name)
            stops.append(stop)

        bus = Bus(name=name, stops=tuple(stops), is_roundtrip=bool(is_roundtrip))
        if len(bus.effective_stops) < 2:
            raise InvalidBusError(f"Bus {name!r} must visit at least two stops")

        self._buses[name] = bus
        for stop in bus.stops:
            self._buses_by_stop[stop.name].add(name)
        return bus

    def find_bus(self, name: str) -> Bus | None:
        return self._buses.get(name)

    @property
    def buses(self) -> tuple[Bus, ...]:
        return tuple(self._buses.values())

    # Distances

    def add_distance(self, from_stop: str, to_stop: str, distance_m: int) -> None:
        for stop_name in (from_stop, to_stop):
            if stop_name not in self._stops:
                raise UnknownStopError(stop_name)
        if distance_m < 0:
            raise ValueError(
                f"Invalid distance {from_stop!r} -> {to_stop!r}: {distance_m}"
            )
        self._distances[(from_stop, to_stop)] = int(distance_m)

    def get_distance(self, from_stop: str, to_stop: str) -> int | None:
        # The reverse fallback treats one-way declarations as symmetric roads.
        direct = self._distances.get((from_stop, to_stop))
        if direct is not None:
            return direct
        return self._distances.get((to_stop, from_stop))

    # Statistics

    def get_bus_stats(self, name: str) -> BusStats | None:
        bus = self._buses.get(name)
        if bus is None:
            return None

        stops = bus.effective_stops
        route_length: int | None = 0
        for a, b in zip(stops, stops[1:]):
            distance = self.get_distance(a.name, b.name)
            if distance is None:
                logger.warning(
                    "Bus %r has no road distance between %r and %r",
                    name,
                    a.name,
                    b.name,
                )
                route_length = None
                break
            route_length += distance

        geo_length = polyline_distance_m(tuple(s.location for s in stops))

        curvature: float | None = None
        if route_length is not None and geo_length > 0.0:
            curvature = route_length / geo_length

        return BusStats(
            stop_count=len(stops),
            unique_stop_count=len({s.name for s in stops}),
            route_length=route_length,
            curvature=curvature,
        )

    def get_stop_buses(self, name: str) -> tuple[str, ...] | None:
        """Names of buses serving the stop, sorted; ``None`` for unknown stops."""

        bus_names = self._buses_by_stop.get(name)
        if bus_names is None:
            return None
        return tuple(sorted(bus_names))
