from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable

from src.app.ports.output import ICatalogueRepository
from src.app.services.transport_router import TransportRouter
from src.domain.catalogue import TransportCatalogue
from src.domain.models import (
    BusStats,
    ItemKind,
    Itinerary,
    RequestType,
    StatRequest,
)

NOT_FOUND = "not found"
MISSING_DISTANCE = "missing road distance"
MAP_NOT_SUPPORTED = "map rendering is not supported"

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class RequestHandler:
    """Application service answering bus, stop and route queries.

    Catalogue and router are read-only here; one handler can be shared by
    every request of a process.
    """

    catalogue: TransportCatalogue
    router: TransportRouter

    @classmethod
    def from_repository(cls, repository: ICatalogueRepository) -> "RequestHandler":
        """Load the network and build its router; fails on inconsistent data."""

        catalogue = repository.load_catalogue()
        router = TransportRouter(catalogue, repository.load_routing_settings())
        return cls(catalogue=catalogue, router=router)

    def get_bus_stats(self, name: str) -> BusStats | None:
        return self.catalogue.get_bus_stats(name)

    def get_stop_buses(self, name: str) -> tuple[str, ...] | None:
        return self.catalogue.get_stop_buses(name)

    def get_route(self, from_stop: str, to_stop: str) -> Itinerary | None:
        return self.router.get_route(from_stop, to_stop)

    def answer(self, requests: Iterable[StatRequest]) -> list[dict[str, Any]]:
        return [self.answer_one(request) for request in requests]

    def answer_one(self, request: StatRequest) -> dict[str, Any]:
        out: dict[str, Any] = {"request_id": request.id}

        if request.type == RequestType.BUS:
            stats = self.get_bus_stats(request.name or "")
            if stats is None:
                return {**out, "error_message": NOT_FOUND}
            if stats.route_length is None:
                logger.warning("Bus %r has a stop pair without road distance", request.name)
                return {**out, "error_message": MISSING_DISTANCE}
            return {**out, **bus_stats_to_dict(stats)}

        if request.type == RequestType.STOP:
            buses = self.get_stop_buses(request.name or "")
            if buses is None:
                return {**out, "error_message": NOT_FOUND}
            return {**out, "buses": list(buses)}

        if request.type == RequestType.ROUTE:
            itinerary = self.get_route(request.from_stop or "", request.to_stop or "")
            if itinerary is None:
                return {**out, "error_message": NOT_FOUND}
            return {**out, **itinerary_to_dict(itinerary)}

        if request.type == RequestType.MAP:
            return {**out, "error_message": MAP_NOT_SUPPORTED}

        raise ValueError(f"Unsupported request type: {request.type}")


def bus_stats_to_dict(stats: BusStats) -> dict[str, Any]:
    return {
        "stop_count": stats.stop_count,
        "unique_stop_count": stats.unique_stop_count,
        "route_length": stats.route_length,
        "curvature": stats.curvature,
    }


def itinerary_to_dict(itinerary: Itinerary) -> dict[str, Any]:
    items: list[dict[str, Any]] = []
    for item in itinerary.items:
        if item.kind == ItemKind.WAIT:
            items.append({"type": "Wait", "stop_name": item.name, "time": item.time})
        else:
            items.append(
                {
                    "type": "Bus",
                    "bus": item.name,
                    "span_count": item.span_count,
                    "time": item.time,
                }
            )
    return {"total_time": itinerary.total_time, "items": items}
