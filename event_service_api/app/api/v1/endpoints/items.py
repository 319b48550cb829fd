"""
Item endpoints for API v1.

Two resource groups live here: ``/item`` for programme items and
``/item-broadcasturl`` for the links between an item and the broadcast
URLs it is streamed on.
"""

from typing import List

from fastapi import APIRouter, Depends, status

from event_service_api.app.core.db import Database, get_db
from event_service_api.app.schemas.common import ERROR_RESPONSES, Envelope, Message, envelope
from event_service_api.app.schemas.item import (
    ItemBroadcastURLCreate,
    ItemBroadcastURLRead,
    ItemBroadcastURLUpdate,
    ItemCreate,
    ItemRead,
    ItemUpdate,
)
from event_service_api.app.services.item_service import ItemBroadcastURLService, ItemService
from .pagination import Page, page_params

router = APIRouter(responses=ERROR_RESPONSES)


@router.post("/item/", response_model=Envelope[ItemRead], status_code=status.HTTP_201_CREATED)
def create_item(payload: ItemCreate, db: Database = Depends(get_db)):
    return envelope("Created new Item!", ItemService(db).create(payload))


@router.get("/items", response_model=Envelope[List[ItemRead]])
def list_items(page: Page = Depends(page_params), db: Database = Depends(get_db)):
    return envelope("Fetched!", ItemService(db).list(skip=page.skip, limit=page.limit))


@router.get("/item/{item_id}", response_model=Envelope[ItemRead])
def get_item(item_id: int, db: Database = Depends(get_db)):
    return envelope("Fetched!", ItemService(db).get(item_id))


@router.patch("/item/{item_id}", response_model=Envelope[ItemRead])
def update_item(item_id: int, payload: ItemUpdate, db: Database = Depends(get_db)):
    return envelope("Item updated successfully", ItemService(db).update(item_id, payload))


@router.delete("/item/{item_id}", response_model=Message)
def delete_item(item_id: int, db: Database = Depends(get_db)):
    ItemService(db).delete(item_id)
    return envelope("Item deleted successfully!")


@router.post(
    "/item-broadcasturl/",
    response_model=Envelope[ItemBroadcastURLRead],
    status_code=status.HTTP_201_CREATED,
)
def create_item_broadcast_url(payload: ItemBroadcastURLCreate, db: Database = Depends(get_db)):
    return envelope("Created new Item BroadcastURL!", ItemBroadcastURLService(db).create(payload))


@router.get("/item-broadcasturls", response_model=Envelope[List[ItemBroadcastURLRead]])
def list_item_broadcast_urls(page: Page = Depends(page_params), db: Database = Depends(get_db)):
    links = ItemBroadcastURLService(db).list(skip=page.skip, limit=page.limit)
    return envelope("Fetched!", links)


@router.get("/item-broadcasturl/{link_id}", response_model=Envelope[ItemBroadcastURLRead])
def get_item_broadcast_url(link_id: int, db: Database = Depends(get_db)):
    return envelope("Fetched!", ItemBroadcastURLService(db).get(link_id))


@router.patch("/item-broadcasturl/{link_id}", response_model=Envelope[ItemBroadcastURLRead])
def update_item_broadcast_url(link_id: int, payload: ItemBroadcastURLUpdate, db: Database = Depends(get_db)):
    link = ItemBroadcastURLService(db).update(link_id, payload)
    return envelope("Item BroadcastURL updated successfully", link)


@router.delete("/item-broadcasturl/{link_id}", response_model=Message)
def delete_item_broadcast_url(link_id: int, db: Database = Depends(get_db)):
    ItemBroadcastURLService(db).delete(link_id)
    return envelope("Item BroadcastURL deleted successfully!")
