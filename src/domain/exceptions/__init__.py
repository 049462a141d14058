from .catalogue import (
    CatalogueError,
    DuplicateBusError,
    DuplicateStopError,
    InvalidBusError,
    MissingDistanceError,
    UnknownStopError,
)
from .routing import NoPathFound, RoutingError, StopNotFound

__all__ = [
    "CatalogueError",
    "DuplicateBusError",
    "DuplicateStopError",
    "InvalidBusError",
    "MissingDistanceError",
    "NoPathFound",
    "RoutingError",
    "StopNotFound",
    "UnknownStopError",
]
