"""Broadcast URL endpoints for API v1."""

from typing import List

from fastapi import APIRouter, Depends, status

from event_service_api.app.core.db import Database, get_db
from event_service_api.app.schemas.broadcast_url import BroadcastURLCreate, BroadcastURLRead, BroadcastURLUpdate
from event_service_api.app.schemas.common import ERROR_RESPONSES, Envelope, Message, envelope
from event_service_api.app.services.broadcast_url_service import BroadcastURLService
from .pagination import Page, page_params

router = APIRouter(responses=ERROR_RESPONSES)


@router.post("/broadcasturl/", response_model=Envelope[BroadcastURLRead], status_code=status.HTTP_201_CREATED)
def create_broadcast_url(payload: BroadcastURLCreate, db: Database = Depends(get_db)):
    """Create a broadcast URL.  ``platform`` must name an existing platform."""
    return envelope("Created new Broadcast url!", BroadcastURLService(db).create(payload))


@router.get("/broadcasturls", response_model=Envelope[List[BroadcastURLRead]])
def list_broadcast_urls(page: Page = Depends(page_params), db: Database = Depends(get_db)):
    return envelope("Fetched!", BroadcastURLService(db).list(skip=page.skip, limit=page.limit))


@router.get("/broadcasturl/{broadcast_url_id}", response_model=Envelope[BroadcastURLRead])
def get_broadcast_url(broadcast_url_id: int, db: Database = Depends(get_db)):
    return envelope("Fetched!", BroadcastURLService(db).get(broadcast_url_id))


@router.patch("/broadcasturl/{broadcast_url_id}", response_model=Envelope[BroadcastURLRead])
def update_broadcast_url(broadcast_url_id: int, payload: BroadcastURLUpdate, db: Database = Depends(get_db)):
    record = BroadcastURLService(db).update(broadcast_url_id, payload)
    return envelope("Broadcast url updated successfully", record)


@router.delete("/broadcasturl/{broadcast_url_id}", response_model=Message)
def delete_broadcast_url(broadcast_url_id: int, db: Database = Depends(get_db)):
    BroadcastURLService(db).delete(broadcast_url_id)
    return envelope("Broadcast url deleted successfully!")
