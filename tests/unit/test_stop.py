from __future__ import annotations

import dataclasses

import pytest

from src.domain.catalogue import TransportCatalogue
from src.domain.models import GeoPoint, Stop


def test_stop_keeps_coordinates_at_the_poles_and_antimeridian() -> None:
    catalogue = TransportCatalogue()

    north = catalogue.add_stop("North Pole", 90.0, 0.0)
    dateline = catalogue.add_stop("Dateline", 0.0, -180.0)

    assert north.location == GeoPoint(lat=90.0, lon=0.0)
    assert catalogue.find_stop("Dateline").location.lon == -180.0
    assert [s.name for s in catalogue.stops] == ["North Pole", "Dateline"]
    assert dateline == Stop(name="Dateline", location=GeoPoint(lat=0.0, lon=-180.0))


@pytest.mark.parametrize(
    ("lat", "lon"),
    [(91.0, 37.6), (-90.5, 37.6), (55.7, 181.0), (55.7, -200.0)],
)
def test_catalogue_refuses_stop_with_bad_coordinates(lat: float, lon: float) -> None:
    catalogue = TransportCatalogue()

    with pytest.raises(ValueError):
        catalogue.add_stop("Nowhere", lat, lon)

    assert catalogue.find_stop("Nowhere") is None


def test_stop_is_immutable() -> None:
    stop = Stop(name="A", location=GeoPoint(lat=0.0, lon=0.0))

    with pytest.raises(dataclasses.FrozenInstanceError):
        stop.name = "B"  # type: ignore[misc]
