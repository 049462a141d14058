from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query

from src.adapters.api.dependencies import get_request_handler
from src.adapters.api.schemas.routes import (
    ItineraryItemSchema,
    RouteSchema,
    StatAnswersSchema,
    StatRequestsSchema,
)
from src.app.services.request_handler import (
    NOT_FOUND,
    RequestHandler,
    itinerary_to_dict,
)
from src.domain.models import RequestType, StatRequest

router = APIRouter(tags=["routes"])


@router.get("/routes", response_model=RouteSchema)
def get_route(
    from_stop: str = Query(..., min_length=1),
    to_stop: str = Query(..., min_length=1),
    handler: RequestHandler = Depends(get_request_handler),
) -> RouteSchema:
    itinerary = handler.get_route(from_stop, to_stop)
    if itinerary is None:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    payload = itinerary_to_dict(itinerary)
    return RouteSchema(
        from_stop=from_stop,
        to_stop=to_stop,
        total_time=payload["total_time"],
        items=[ItineraryItemSchema(**item) for item in payload["items"]],
    )


@router.post("/stat_requests", response_model=StatAnswersSchema)
def answer_stat_requests(
    req: StatRequestsSchema,
    handler: RequestHandler = Depends(get_request_handler),
) -> StatAnswersSchema:
    requests = [
        StatRequest(
            id=r.id,
            type=RequestType(r.type),
            name=r.name,
            from_stop=r.from_stop,
            to_stop=r.to_stop,
        )
        for r in req.stat_requests
    ]
    return StatAnswersSchema(answers=handler.answer(requests))
