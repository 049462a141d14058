from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class RequestType(str, Enum):
    BUS = "Bus"
    STOP = "Stop"
    ROUTE = "Route"
    MAP = "Map"


@dataclass(frozen=True, slots=True)
class StatRequest:
    id: int
    type: RequestType
    name: str | None = None  # Bus and Stop requests
    from_stop: str | None = None  # Route requests
    to_stop: str | None = None
