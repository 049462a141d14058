from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt, model_validator


class StopEntrySchema(BaseModel):
    type: Literal["Stop"]
    name: str
    latitude: float = Field(..., ge=-90.0, le=90.0)
    longitude: float = Field(..., ge=-180.0, le=180.0)
    road_distances: dict[str, NonNegativeInt] = Field(default_factory=dict)


class BusEntrySchema(BaseModel):
    type: Literal["Bus"]
    name: str
    stops: list[str]
    is_roundtrip: bool


BaseEntrySchema = Annotated[
    Union[StopEntrySchema, BusEntrySchema], Field(discriminator="type")
]


class RoutingSettingsSchema(BaseModel):
    bus_wait_time: float = Field(..., ge=1.0, le=1000.0)  # minutes
    bus_velocity: float = Field(..., ge=1.0, le=1000.0)  # km/h


class StatRequestSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    type: Literal["Bus", "Stop", "Route", "Map"]
    name: str | None = None
    from_stop: str | None = Field(default=None, alias="from")
    to_stop: str | None = Field(default=None, alias="to")

    @model_validator(mode="after")
    def _check_names(self) -> "StatRequestSchema":
        if self.type in ("Bus", "Stop") and self.name is None:
            raise ValueError(f"{self.type} request {self.id} needs a name")
        if self.type == "Route" and (self.from_stop is None or self.to_stop is None):
            raise ValueError(f"Route request {self.id} needs 'from' and 'to'")
        return self


class TransitDocumentSchema(BaseModel):
    """Input document: network description, routing settings and queries.

    Unknown top-level keys (e.g. ``render_settings``) are ignored.
    """

    base_requests: list[BaseEntrySchema] = Field(default_factory=list)
    routing_settings: RoutingSettingsSchema | None = None
    stat_requests: list[StatRequestSchema] = Field(default_factory=list)
