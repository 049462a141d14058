from __future__ import annotations

from pydantic import BaseModel


class BusStatsSchema(BaseModel):
    name: str
    stop_count: int
    unique_stop_count: int
    route_length: int | None = None
    curvature: float | None = None


class StopBusesSchema(BaseModel):
    name: str
    buses: list[str] = []
