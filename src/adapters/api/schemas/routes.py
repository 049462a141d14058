from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel

from src.adapters.persistence.json_catalogue_schema import StatRequestSchema


class ItineraryItemSchema(BaseModel):
    type: Literal["Wait", "Bus"]
    stop_name: str | None = None
    bus: str | None = None
    span_count: int | None = None
    time: float


class RouteSchema(BaseModel):
    from_stop: str
    to_stop: str
    total_time: float
    items: list[ItineraryItemSchema] = []


class StatRequestsSchema(BaseModel):
    stat_requests: list[StatRequestSchema] = []


class StatAnswersSchema(BaseModel):
    answers: list[dict[str, Any]] = []
