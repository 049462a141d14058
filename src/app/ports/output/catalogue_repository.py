from __future__ import annotations

from abc import ABC, abstractmethod

from src.domain.catalogue import TransportCatalogue
from src.domain.models import RoutingSettings, StatRequest


class ICatalogueRepository(ABC):
    """Port for loading the transit network and the queries asked about it."""

    @abstractmethod
    def load_catalogue(self) -> TransportCatalogue:
        """Return a fully populated catalogue (stops, distances, buses)."""

    @abstractmethod
    def load_routing_settings(self) -> RoutingSettings:
        raise NotImplementedError

    @abstractmethod
    def load_stat_requests(self) -> tuple[StatRequest, ...]:
        raise NotImplementedError
