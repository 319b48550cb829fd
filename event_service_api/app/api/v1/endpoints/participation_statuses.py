"""
Participation status endpoints for API v1.

The collection endpoint lists statuses in registration order
(``created_at``) and can be narrowed to one event with ``eventid``.
"""

from typing import List

from fastapi import APIRouter, Depends, Query, status

from event_service_api.app.core.db import Database, get_db
from event_service_api.app.schemas.common import ERROR_RESPONSES, Envelope, Message, envelope
from event_service_api.app.schemas.participation_status import (
    ParticipationStatusCreate,
    ParticipationStatusRead,
    ParticipationStatusUpdate,
)
from event_service_api.app.services.participation_status_service import ParticipationStatusService
from .pagination import OptionalFilterInt, Page, page_params

router = APIRouter(responses=ERROR_RESPONSES)


@router.post(
    "/participation-status/",
    response_model=Envelope[ParticipationStatusRead],
    status_code=status.HTTP_201_CREATED,
)
def create_participation_status(payload: ParticipationStatusCreate, db: Database = Depends(get_db)):
    record = ParticipationStatusService(db).create(payload)
    return envelope("Created new Participation Status!", record)


@router.get("/participation-statuses", response_model=Envelope[List[ParticipationStatusRead]])
def list_participation_statuses(
    page: Page = Depends(page_params),
    event_id: OptionalFilterInt = Query(None, alias="eventid", description="Only statuses for this event"),
    db: Database = Depends(get_db),
):
    records = ParticipationStatusService(db).list_for_event(skip=page.skip, limit=page.limit, event_id=event_id)
    return envelope("Fetched!", records)


@router.get("/participation-status/{status_id}", response_model=Envelope[ParticipationStatusRead])
def get_participation_status(status_id: int, db: Database = Depends(get_db)):
    return envelope("Fetched!", ParticipationStatusService(db).get(status_id))


@router.patch("/participation-status/{status_id}", response_model=Envelope[ParticipationStatusRead])
def update_participation_status(status_id: int, payload: ParticipationStatusUpdate, db: Database = Depends(get_db)):
    record = ParticipationStatusService(db).update(status_id, payload)
    return envelope("Participation Status updated successfully", record)


@router.delete("/participation-status/{status_id}", response_model=Message)
def delete_participation_status(status_id: int, db: Database = Depends(get_db)):
    ParticipationStatusService(db).delete(status_id)
    return envelope("Participation Status deleted successfully!")
