"""Platform endpoints for API v1.  Platforms are addressed by name."""

from typing import List

from fastapi import APIRouter, Depends, status

from event_service_api.app.core.db import Database, get_db
from event_service_api.app.schemas.catalog import PlatformCreate, PlatformRead, PlatformUpdate
from event_service_api.app.schemas.common import ERROR_RESPONSES, Envelope, Message, envelope
from event_service_api.app.services.catalog_service import PlatformService
from .pagination import Page, page_params

router = APIRouter(responses=ERROR_RESPONSES)


@router.post("/platform/", response_model=Envelope[PlatformRead], status_code=status.HTTP_201_CREATED)
def create_platform(payload: PlatformCreate, db: Database = Depends(get_db)):
    return envelope("Created new platform!", PlatformService(db).create(payload))


@router.get("/platforms", response_model=Envelope[List[PlatformRead]])
def list_platforms(page: Page = Depends(page_params), db: Database = Depends(get_db)):
    return envelope("Fetched!", PlatformService(db).list(skip=page.skip, limit=page.limit))


@router.get("/platform/{name}", response_model=Envelope[PlatformRead])
def get_platform(name: str, db: Database = Depends(get_db)):
    return envelope("Fetched!", PlatformService(db).get(name))


@router.patch("/platform/{name}", response_model=Envelope[PlatformRead])
def update_platform(name: str, payload: PlatformUpdate, db: Database = Depends(get_db)):
    return envelope("platform updated successfully", PlatformService(db).update(name, payload))


@router.delete("/platform/{name}", response_model=Message)
def delete_platform(name: str, db: Database = Depends(get_db)):
    PlatformService(db).delete(name)
    return envelope("platform deleted successfully!")
