"""
Participation option endpoints for API v1.

Options (e.g. ``onsite``, ``online``) are addressed by name.  Renaming an
option through PATCH updates every event option and participation
status that refers to it.
"""

from typing import List

from fastapi import APIRouter, Depends, status

from event_service_api.app.core.db import Database, get_db
from event_service_api.app.schemas.catalog import (
    ParticipationOptionCreate,
    ParticipationOptionRead,
    ParticipationOptionUpdate,
)
from event_service_api.app.schemas.common import ERROR_RESPONSES, Envelope, Message, envelope
from event_service_api.app.services.catalog_service import ParticipationOptionService
from .pagination import Page, page_params

router = APIRouter(responses=ERROR_RESPONSES)


@router.post(
    "/participation-option/",
    response_model=Envelope[ParticipationOptionRead],
    status_code=status.HTTP_201_CREATED,
)
def create_participation_option(payload: ParticipationOptionCreate, db: Database = Depends(get_db)):
    option = ParticipationOptionService(db).create(payload)
    return envelope("Created new participation option!", option)


@router.get("/participation-options", response_model=Envelope[List[ParticipationOptionRead]])
def list_participation_options(page: Page = Depends(page_params), db: Database = Depends(get_db)):
    options = ParticipationOptionService(db).list(skip=page.skip, limit=page.limit)
    return envelope("Fetched!", options)


@router.get("/participation-option/{name}", response_model=Envelope[ParticipationOptionRead])
def get_participation_option(name: str, db: Database = Depends(get_db)):
    return envelope("Fetched!", ParticipationOptionService(db).get(name))


@router.patch("/participation-option/{name}", response_model=Envelope[ParticipationOptionRead])
def update_participation_option(name: str, payload: ParticipationOptionUpdate, db: Database = Depends(get_db)):
    option = ParticipationOptionService(db).update(name, payload)
    return envelope("Participation option updated successfully", option)


@router.delete("/participation-option/{name}", response_model=Message)
def delete_participation_option(name: str, db: Database = Depends(get_db)):
    ParticipationOptionService(db).delete(name)
    return envelope("Participation option deleted successfully!")
