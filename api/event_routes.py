"""Event-related FastAPI routes."""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from Events.event import Event
from Events.usecase import EventUsecase

from .deps import get_event_usecase
from .utils import _decode_body, _parse_id, _respond

logger = logging.getLogger(__name__)

# mount api router
event_router = APIRouter()


@event_router.post("")
async def create_event(
    request: Request,
    usecase: EventUsecase = Depends(get_event_usecase),
) -> JSONResponse:
    """
    Create an event.

    Returns:
        201 with the stored event, including its assigned id.

    Raises:
        BadRequestError: 400 when the body cannot be decoded.
        InvalidPayloadError: 400 when title or date are missing or malformed.
    """

    event = await _decode_body(request, Event, logger)
    created = usecase.create_event(event)
    return _respond(status.HTTP_201_CREATED, "Success create event", data=created)


@event_router.get("")
async def get_events(
    id: Optional[str] = None,
    usecase: EventUsecase = Depends(get_event_usecase),
) -> JSONResponse:
    """List every event, or fetch the one matching ``id``."""

    if id is None:
        return _respond(status.HTTP_200_OK, "Success get all events", data=usecase.list_events())

    event_id = _parse_id(id, logger, "Event ID is required", "Invalid event ID")
    event = usecase.get_event(event_id)
    return _respond(status.HTTP_200_OK, "Success get event by id", data=event)
