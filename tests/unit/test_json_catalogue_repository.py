from __future__ import annotations

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from src.adapters.persistence import JsonCatalogueRepository
from src.domain.exceptions import CatalogueError
from src.domain.models import RequestType


def test_loads_catalogue_from_text(abc_document_text: str) -> None:
    repo = JsonCatalogueRepository(text=abc_document_text)

    catalogue = repo.load_catalogue()

    assert [s.name for s in catalogue.stops] == ["A", "B", "C", "D"]
    assert [b.name for b in catalogue.buses] == ["1"]
    assert catalogue.get_distance("C", "A") == 2000
    assert catalogue.get_distance("A", "C") == 2000
    assert catalogue.get_bus_stats("1").route_length == 4000
    assert catalogue.get_stop_buses("D") == ()


def test_loads_routing_settings(abc_document_text: str) -> None:
    settings = JsonCatalogueRepository(text=abc_document_text).load_routing_settings()

    assert settings.bus_wait_time == 6.0
    assert settings.bus_velocity == 40.0


def test_loads_every_stat_request_in_document_order(abc_document_text: str) -> None:
    requests = JsonCatalogueRepository(text=abc_document_text).load_stat_requests()

    assert [r.id for r in requests] == [1, 2, 3, 4, 5]
    assert requests[3].type == RequestType.MAP
    assert requests[0].type == RequestType.BUS
    assert (requests[2].from_stop, requests[2].to_stop) == ("A", "C")


def test_loads_from_catalogue_path_env(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, abc_document_text: str
) -> None:
    path = tmp_path / "network.json"
    path.write_text(abc_document_text, encoding="utf-8")
    monkeypatch.setenv("CATALOGUE_PATH", str(path))

    catalogue = JsonCatalogueRepository().load_catalogue()

    assert catalogue.find_stop("B") is not None


def test_distance_to_unknown_stop_is_catalogue_error(abc_document: dict) -> None:
    abc_document["base_requests"].append(
        {
            "type": "Stop",
            "name": "E",
            "latitude": 0.0,
            "longitude": 0.0,
            "road_distances": {"Nowhere": 10},
        }
    )
    repo = JsonCatalogueRepository(text=json.dumps(abc_document))

    with pytest.raises(CatalogueError, match="Nowhere"):
        repo.load_catalogue()


def test_bus_with_unknown_stop_is_catalogue_error(abc_document: dict) -> None:
    abc_document["base_requests"].append(
        {"type": "Bus", "name": "9", "stops": ["A", "Q"], "is_roundtrip": False}
    )
    repo = JsonCatalogueRepository(text=json.dumps(abc_document))

    with pytest.raises(CatalogueError, match="'Q'"):
        repo.load_catalogue()


def test_missing_routing_settings_is_catalogue_error(abc_document: dict) -> None:
    del abc_document["routing_settings"]
    repo = JsonCatalogueRepository(text=json.dumps(abc_document))

    with pytest.raises(CatalogueError):
        repo.load_routing_settings()


@pytest.mark.parametrize(
    "settings",
    [
        {"bus_wait_time": 0, "bus_velocity": 40},
        {"bus_wait_time": 6, "bus_velocity": 1001},
        {"bus_wait_time": 6},
    ],
)
def test_invalid_routing_settings_fail_validation(
    abc_document: dict, settings: dict
) -> None:
    abc_document["routing_settings"] = settings
    repo = JsonCatalogueRepository(text=json.dumps(abc_document))

    with pytest.raises(ValidationError):
        repo.load_routing_settings()


def test_route_request_requires_from_and_to(abc_document: dict) -> None:
    abc_document["stat_requests"] = [{"id": 1, "type": "Route", "from": "A"}]
    repo = JsonCatalogueRepository(text=json.dumps(abc_document))

    with pytest.raises(ValidationError):
        repo.load_stat_requests()


def test_negative_road_distance_fails_validation(abc_document: dict) -> None:
    abc_document["base_requests"][1]["road_distances"] = {"B": -5}
    repo = JsonCatalogueRepository(text=json.dumps(abc_document))

    with pytest.raises(ValidationError):
        repo.load_catalogue()
