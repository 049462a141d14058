from .bus import Bus, BusStats
from .itinerary import ItemKind, Itinerary, ItineraryItem
from .requests import RequestType, StatRequest
from .settings import RoutingSettings
from .stop import GeoPoint, Stop

__all__ = [
    "Bus",
    "BusStats",
    "GeoPoint",
    "ItemKind",
    "Itinerary",
    "ItineraryItem",
    "RequestType",
    "RoutingSettings",
    "StatRequest",
    "Stop",
]
