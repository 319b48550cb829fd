"""
Audience endpoints for API v1.

An audience is addressed by name and carries an optional description.
Events point at an audience by name.
"""

from typing import List

from fastapi import APIRouter, Depends, status

from event_service_api.app.core.db import Database, get_db
from event_service_api.app.schemas.catalog import AudienceCreate, AudienceRead, AudienceUpdate
from event_service_api.app.schemas.common import ERROR_RESPONSES, Envelope, Message, envelope
from event_service_api.app.services.catalog_service import AudienceService
from .pagination import Page, page_params

router = APIRouter(responses=ERROR_RESPONSES)


@router.post("/audience/", response_model=Envelope[AudienceRead], status_code=status.HTTP_201_CREATED)
def create_audience(payload: AudienceCreate, db: Database = Depends(get_db)):
    return envelope("Created new audience!", AudienceService(db).create(payload))


@router.get("/audiences", response_model=Envelope[List[AudienceRead]])
def list_audiences(page: Page = Depends(page_params), db: Database = Depends(get_db)):
    return envelope("Fetched!", AudienceService(db).list(skip=page.skip, limit=page.limit))


@router.get("/audience/{name}", response_model=Envelope[AudienceRead])
def get_audience(name: str, db: Database = Depends(get_db)):
    return envelope("Fetched!", AudienceService(db).get(name))


@router.patch("/audience/{name}", response_model=Envelope[AudienceRead])
def update_audience(name: str, payload: AudienceUpdate, db: Database = Depends(get_db)):
    """Partially update an audience; a missing ``description`` is left alone."""
    return envelope("Audience updated successfully", AudienceService(db).update(name, payload))


@router.delete("/audience/{name}", response_model=Message)
def delete_audience(name: str, db: Database = Depends(get_db)):
    AudienceService(db).delete(name)
    return envelope("Audience deleted successfully!")
