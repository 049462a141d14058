from __future__ import annotations

import logging

from src.domain.algorithms.graph_builder import build_transit_graph
from src.domain.algorithms.shortest_path import find_shortest_path
from src.domain.catalogue import TransportCatalogue
from src.domain.exceptions import NoPathFound, RoutingError, StopNotFound
from src.domain.models import Itinerary, RoutingSettings

logger = logging.getLogger(__name__)


class TransportRouter:
    """Minimum-time itineraries between catalogue stops.

    The transit graph is built once on construction and never changes, so a
    router can serve concurrent queries.
    """

    def __init__(self, catalogue: TransportCatalogue, settings: RoutingSettings) -> None:
        self.settings = settings
        self._transit = build_transit_graph(catalogue, settings)

    def find_route(self, from_stop: str, to_stop: str) -> Itinerary:
        vertices = self._transit.vertices_by_stop
        for name in (from_stop, to_stop):
            if name not in vertices:
                raise StopNotFound(name)

        if from_stop == to_stop:
            return Itinerary(total_time=0.0, items=())

        path = find_shortest_path(
            self._transit.graph, vertices[from_stop].idle, vertices[to_stop].idle
        )
        if path is None:
            raise NoPathFound(f"No route from {from_stop!r} to {to_stop!r}")

        return Itinerary(
            total_time=path.weight,
            items=tuple(self._transit.edge_items[e] for e in path.edges),
        )

    def get_route(self, from_stop: str, to_stop: str) -> Itinerary | None:
        try:
            return self.find_route(from_stop, to_stop)
        except RoutingError as exc:
            logger.debug("Route %r -> %r not found: %s", from_stop, to_stop, exc)
            return None
