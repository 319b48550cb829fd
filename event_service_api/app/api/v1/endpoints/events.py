"""
Event endpoints for API v1.

Three resource groups live here: ``/event`` itself, ``/event-item``
(items scheduled in an event) and ``/event-part-option`` (participation
options offered by an event).

``DELETE /event/{id}`` is a soft delete that also marks the event's
items, participation options and participation statuses as deleted.
``DELETE /event/hard/{id}`` removes the event row.
"""

from typing import List

from fastapi import APIRouter, Depends, Query, status

from event_service_api.app.core.db import Database, get_db
from event_service_api.app.core.errors import NotFoundError
from event_service_api.app.schemas.common import ERROR_RESPONSES, Envelope, Message, envelope
from event_service_api.app.schemas.event import (
    EventCreate,
    EventItemCreate,
    EventItemRead,
    EventItemUpdate,
    EventParticipationOptionCreate,
    EventParticipationOptionRead,
    EventParticipationOptionUpdate,
    EventRead,
    EventUpdate,
)
from event_service_api.app.services.event_service import (
    EventItemService,
    EventParticipationOptionService,
    EventService,
)
from .pagination import OptionalFilterStr, Page, page_params

router = APIRouter(responses=ERROR_RESPONSES)


@router.post("/event/", response_model=Envelope[EventRead], status_code=status.HTTP_201_CREATED)
def create_event(payload: EventCreate, db: Database = Depends(get_db)):
    """Create an event.  ``slug``, ``name``, ``starts_on`` and ``ends_on`` are required."""
    return envelope("Created new Event!", EventService(db).create(payload))


@router.get("/events", response_model=Envelope[List[EventRead]])
def list_events(
    page: Page = Depends(page_params),
    slug: OptionalFilterStr = Query(None, description="Only the event with this slug"),
    db: Database = Depends(get_db),
):
    """List events.

    Without a filter an empty page is a normal result.  A ``slug`` lookup
    that matches nothing answers 404.
    """
    events = EventService(db).list_events(skip=page.skip, limit=page.limit, slug=slug)
    if slug is not None and not events:
        raise NotFoundError("no event found")
    return envelope("Fetched!", events)


@router.get("/event/{event_id}", response_model=Envelope[EventRead])
def get_event(event_id: int, db: Database = Depends(get_db)):
    return envelope("Fetched!", EventService(db).get(event_id))


@router.patch("/event/{event_id}", response_model=Envelope[EventRead])
def update_event(event_id: int, payload: EventUpdate, db: Database = Depends(get_db)):
    """Partially update an event; unspecified fields remain unchanged."""
    return envelope("Event updated successfully", EventService(db).update(event_id, payload))


@router.delete("/event/hard/{event_id}", response_model=Message)
def hard_delete_event(event_id: int, db: Database = Depends(get_db)):
    EventService(db).hard_delete(event_id)
    return envelope("Event deleted successfully!")


@router.delete("/event/{event_id}", response_model=Message)
def delete_event(event_id: int, db: Database = Depends(get_db)):
    EventService(db).delete(event_id)
    return envelope("Event deleted successfully!")


@router.post("/event-item/", response_model=Envelope[EventItemRead], status_code=status.HTTP_201_CREATED)
def create_event_item(payload: EventItemCreate, db: Database = Depends(get_db)):
    return envelope("Created new Event Item!", EventItemService(db).create(payload))


@router.get("/event-items", response_model=Envelope[List[EventItemRead]])
def list_event_items(page: Page = Depends(page_params), db: Database = Depends(get_db)):
    return envelope("Fetched!", EventItemService(db).list(skip=page.skip, limit=page.limit))


@router.get("/event-item/{event_item_id}", response_model=Envelope[EventItemRead])
def get_event_item(event_item_id: int, db: Database = Depends(get_db)):
    return envelope("Fetched!", EventItemService(db).get(event_item_id))


@router.patch("/event-item/{event_item_id}", response_model=Envelope[EventItemRead])
def update_event_item(event_item_id: int, payload: EventItemUpdate, db: Database = Depends(get_db)):
    return envelope("Event Item updated successfully", EventItemService(db).update(event_item_id, payload))


@router.delete("/event-item/{event_item_id}", response_model=Message)
def delete_event_item(event_item_id: int, db: Database = Depends(get_db)):
    EventItemService(db).delete(event_item_id)
    return envelope("Event Item deleted successfully!")


@router.post(
    "/event-part-option/",
    response_model=Envelope[EventParticipationOptionRead],
    status_code=status.HTTP_201_CREATED,
)
def create_event_part_option(payload: EventParticipationOptionCreate, db: Database = Depends(get_db)):
    record = EventParticipationOptionService(db).create(payload)
    return envelope("Created new Event Participation Option!", record)


@router.get("/event-part-options", response_model=Envelope[List[EventParticipationOptionRead]])
def list_event_part_options(page: Page = Depends(page_params), db: Database = Depends(get_db)):
    records = EventParticipationOptionService(db).list(skip=page.skip, limit=page.limit)
    return envelope("Fetched!", records)


@router.get("/event-part-option/{option_id}", response_model=Envelope[EventParticipationOptionRead])
def get_event_part_option(option_id: int, db: Database = Depends(get_db)):
    return envelope("Fetched!", EventParticipationOptionService(db).get(option_id))


@router.patch("/event-part-option/{option_id}", response_model=Envelope[EventParticipationOptionRead])
def update_event_part_option(
    option_id: int,
    payload: EventParticipationOptionUpdate,
    db: Database = Depends(get_db),
):
    record = EventParticipationOptionService(db).update(option_id, payload)
    return envelope("Event Participation Option updated successfully", record)


@router.delete("/event-part-option/{option_id}", response_model=Message)
def delete_event_part_option(option_id: int, db: Database = Depends(get_db)):
    EventParticipationOptionService(db).delete(option_id)
    return envelope("Event Participation Option deleted successfully!")
