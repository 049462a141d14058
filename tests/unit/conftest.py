from __future__ import annotations

import copy
import json

import pytest

from src.app.services.request_handler import RequestHandler
from src.app.services.transport_router import TransportRouter
from src.domain.catalogue import TransportCatalogue
from src.domain.models import RoutingSettings


def build_abc_catalogue() -> TransportCatalogue:
    """Three stops on the equator served by round-trip bus "1"."""

    catalogue = TransportCatalogue()
    catalogue.add_stop("A", 0.0, 0.0)
    catalogue.add_stop("B", 0.0, 1.0)
    catalogue.add_stop("C", 0.0, 2.0)
    catalogue.add_distance("A", "B", 1000)
    catalogue.add_distance("B", "C", 1000)
    catalogue.add_distance("C", "A", 2000)
    catalogue.add_bus("1", ["A", "B", "C", "A"], is_roundtrip=True)
    return catalogue


ABC_DOCUMENT = {
    "base_requests": [
        {
            "type": "Bus",
            "name": "1",
            "stops": ["A", "B", "C", "A"],
            "is_roundtrip": True,
        },
        {
            "type": "Stop",
            "name": "A",
            "latitude": 0.0,
            "longitude": 0.0,
            "road_distances": {"B": 1000},
        },
        {
            "type": "Stop",
            "name": "B",
            "latitude": 0.0,
            "longitude": 1.0,
            "road_distances": {"C": 1000},
        },
        {
            "type": "Stop",
            "name": "C",
            "latitude": 0.0,
            "longitude": 2.0,
            "road_distances": {"A": 2000},
        },
        {
            "type": "Stop",
            "name": "D",
            "latitude": 1.0,
            "longitude": 1.0,
            "road_distances": {},
        },
    ],
    "routing_settings": {"bus_wait_time": 6, "bus_velocity": 40},
    "render_settings": {"width": 600},
    "stat_requests": [
        {"id": 1, "type": "Bus", "name": "1"},
        {"id": 2, "type": "Stop", "name": "B"},
        {"id": 3, "type": "Route", "from": "A", "to": "C"},
        {"id": 4, "type": "Map"},
        {"id": 5, "type": "Stop", "name": "Z"},
    ],
}


@pytest.fixture
def abc_catalogue() -> TransportCatalogue:
    return build_abc_catalogue()


@pytest.fixture
def abc_settings() -> RoutingSettings:
    return RoutingSettings(bus_wait_time=6.0, bus_velocity=40.0)


@pytest.fixture
def abc_handler(
    abc_catalogue: TransportCatalogue, abc_settings: RoutingSettings
) -> RequestHandler:
    return RequestHandler(
        catalogue=abc_catalogue, router=TransportRouter(abc_catalogue, abc_settings)
    )


@pytest.fixture
def abc_document() -> dict:
    return copy.deepcopy(ABC_DOCUMENT)


@pytest.fixture
def abc_document_text(abc_document: dict) -> str:
    return json.dumps(abc_document)
