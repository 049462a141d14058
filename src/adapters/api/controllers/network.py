from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from src.adapters.api.dependencies import get_request_handler
from src.adapters.api.schemas.network import BusStatsSchema, StopBusesSchema
from src.app.services.request_handler import NOT_FOUND, RequestHandler

router = APIRouter(tags=["network"])


@router.get("/buses/{name}", response_model=BusStatsSchema)
def get_bus(
    name: str,
    handler: RequestHandler = Depends(get_request_handler),
) -> BusStatsSchema:
    stats = handler.get_bus_stats(name)
    if stats is None:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return BusStatsSchema(
        name=name,
        stop_count=stats.stop_count,
        unique_stop_count=stats.unique_stop_count,
        route_length=stats.route_length,
        curvature=stats.curvature,
    )


@router.get("/stops/{name}", response_model=StopBusesSchema)
def get_stop(
    name: str,
    handler: RequestHandler = Depends(get_request_handler),
) -> StopBusesSchema:
    buses = handler.get_stop_buses(name)
    if buses is None:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return StopBusesSchema(name=name, buses=list(buses))
