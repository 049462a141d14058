from __future__ import annotations

import logging
from dataclasses import dataclass

from src.domain.catalogue import TransportCatalogue
from src.domain.exceptions import MissingDistanceError
from src.domain.models import Bus, ItemKind, ItineraryItem, RoutingSettings, Stop

from .graph import DirectedWeightedGraph

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class StopVertices:
    idle: int  # standing at the stop
    boarding: int  # on board a bus leaving the stop


@dataclass(frozen=True, slots=True)
class TransitGraph:
    graph: DirectedWeightedGraph
    edge_items: tuple[ItineraryItem, ...]  # indexed by edge id
    vertices_by_stop: dict[str, StopVertices]


def bus_legs(bus: Bus) -> tuple[tuple[Stop, ...], ...]:
    """Split a bus into the stop sequences a rider can stay on board for.

    Round-trip buses form a single leg. Other buses run out and back, split
    at the turnaround stop, which ends the first leg and starts the second.
    """

    stops = bus.effective_stops
    if bus.is_roundtrip:
        return (stops,)
    middle = len(stops) // 2
    return (stops[: middle + 1], stops[middle:])


def build_transit_graph(
    catalogue: TransportCatalogue, settings: RoutingSettings
) -> TransitGraph:
    """Compile the catalogue into a frozen weighted graph for routing.

    Every stop gets an idle and a boarding vertex joined by a wait edge. Every
    pair of positions ``i < j`` within a bus leg gets one ride edge from
    boarding(i) to idle(j) weighted with the cumulative travel time, so a leg
    of L stops adds L*(L-1)/2 edges.
    """

    stops = catalogue.stops
    graph = DirectedWeightedGraph(len(stops) * 2)
    edge_items: list[ItineraryItem] = []

    vertices_by_stop: dict[str, StopVertices] = {}
    for i, stop in enumerate(stops):
        vertices_by_stop[stop.name] = StopVertices(idle=2 * i, boarding=2 * i + 1)

    for stop in stops:
        v = vertices_by_stop[stop.name]
        graph.add_edge(v.idle, v.boarding, settings.bus_wait_time)
        edge_items.append(
            ItineraryItem(kind=ItemKind.WAIT, name=stop.name, time=settings.bus_wait_time)
        )

    for bus in catalogue.buses:
        for leg in bus_legs(bus):
            logger.debug("Adding bus %r leg of %d stops", bus.name, len(leg))
            _add_leg_edges(
                graph, edge_items, catalogue, settings, vertices_by_stop, bus, leg
            )

    logger.info(
        "Built transit graph: %d stops, %d buses, %d vertices, %d edges",
        len(stops),
        len(catalogue.buses),
        graph.vertex_count,
        graph.edge_count,
    )

    return TransitGraph(
        graph=graph.freeze(),
        edge_items=tuple(edge_items),
        vertices_by_stop=vertices_by_stop,
    )


def _add_leg_edges(
    graph: DirectedWeightedGraph,
    edge_items: list[ItineraryItem],
    catalogue: TransportCatalogue,
    settings: RoutingSettings,
    vertices_by_stop: dict[str, StopVertices],
    bus: Bus,
    leg: tuple[Stop, ...],
) -> None:
    # Hop times are resolved up front so a missing distance aborts the build
    # before any edge of the leg is added.
    hop_times: list[float] = []
    for a, b in zip(leg, leg[1:]):
        distance = catalogue.get_distance(a.name, b.name)
        if distance is None:
            raise MissingDistanceError(a.name, b.name, bus.name)
        hop_times.append(settings.travel_time_min(distance))

    for i in range(len(leg) - 1):
        from_vertex = vertices_by_stop[leg[i].name].boarding
        time = 0.0
        for j in range(i + 1, len(leg)):
            time += hop_times[j - 1]
            to_vertex = vertices_by_stop[leg[j].name].idle
            graph.add_edge(from_vertex, to_vertex, time)
            edge_items.append(
                ItineraryItem(
                    kind=ItemKind.BUS, name=bus.name, time=time, span_count=j - i
                )
            )
