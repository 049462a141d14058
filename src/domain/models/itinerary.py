from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class ItemKind(str, Enum):
    WAIT = "Wait"
    BUS = "Bus"


@dataclass(frozen=True, slots=True)
class ItineraryItem:
    """One rider action: wait at stop ``name`` or ride bus ``name``."""

    kind: ItemKind
    name: str
    time: float  # minutes
    span_count: int | None = None


@dataclass(frozen=True, slots=True)
class Itinerary:
    total_time: float
    items: tuple[ItineraryItem, ...] = field(default_factory=tuple)
