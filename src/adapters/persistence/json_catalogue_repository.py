from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from src.adapters.persistence.json_catalogue_schema import (
    BusEntrySchema,
    StopEntrySchema,
    TransitDocumentSchema,
)
from src.app.ports.output import ICatalogueRepository
from src.domain.catalogue import TransportCatalogue
from src.domain.exceptions import CatalogueError, UnknownStopError
from src.domain.models import RequestType, RoutingSettings, StatRequest

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class JsonCatalogueRepository(ICatalogueRepository):
    """Loads the transit network from a JSON document.

    The document comes from ``text`` when given, else from ``path``.

    Env vars:
      - CATALOGUE_PATH: path to the JSON document (default data/catalogue.json)
    """

    path: str | Path | None = None
    text: str | None = None
    _document: TransitDocumentSchema | None = field(
        default=None, init=False, repr=False
    )

    def _path(self) -> Path:
        value = self.path or os.getenv("CATALOGUE_PATH") or "data/catalogue.json"
        return Path(value)

    def document(self) -> TransitDocumentSchema:
        if self._document is None:
            if self.text is not None:
                raw = self.text
            else:
                raw = self._path().read_text(encoding="utf-8")
            self._document = TransitDocumentSchema.model_validate_json(raw)
        return self._document

    def load_catalogue(self) -> TransportCatalogue:
        entries = self.document().base_requests
        stops = [e for e in entries if isinstance(e, StopEntrySchema)]
        buses = [e for e in entries if isinstance(e, BusEntrySchema)]

        catalogue = TransportCatalogue()

        # Distances and buses refer to stops by name, so all stops go first.
        for stop in stops:
            catalogue.add_stop(stop.name, stop.latitude, stop.longitude)

        for stop in stops:
            for other, distance_m in stop.road_distances.items():
                try:
                    catalogue.add_distance(stop.name, other, distance_m)
                except UnknownStopError as exc:
                    raise CatalogueError(
                        f"Stop {stop.name!r} declares a road distance to unknown stop {other!r}"
                    ) from exc

        for bus in buses:
            try:
                catalogue.add_bus(bus.name, bus.stops, bus.is_roundtrip)
            except UnknownStopError as exc:
                raise CatalogueError(
                    f"Bus {bus.name!r} refers to unknown stop {exc.stop_name!r}"
                ) from exc

        logger.info(
            "Loaded catalogue: %d stops, %d buses", len(stops), len(buses)
        )
        return catalogue

    def load_routing_settings(self) -> RoutingSettings:
        settings = self.document().routing_settings
        if settings is None:
            raise CatalogueError("Document has no routing_settings")
        return RoutingSettings(
            bus_wait_time=settings.bus_wait_time,
            bus_velocity=settings.bus_velocity,
        )

    def load_stat_requests(self) -> tuple[StatRequest, ...]:
        out: list[StatRequest] = []
        for req in self.document().stat_requests:
            out.append(
                StatRequest(
                    id=req.id,
                    type=RequestType(req.type),
                    name=req.name,
                    from_stop=req.from_stop,
                    to_stop=req.to_stop,
                )
            )
        return tuple(out)
