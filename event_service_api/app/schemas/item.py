"""
Item schemas.

An item is one programme entry (talk, session, performance) with its own
start date and duration.  ``ItemBroadcastURL`` links an item to the
broadcast URLs it is streamed on.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from .common import PartialModel, ReadModel


class ItemCreate(BaseModel):
    start_date: datetime = Field(..., examples=["2025-09-01T10:00:00Z"])
    duration: int = Field(..., examples=[45], description="Duration in minutes")
    name: str = Field(..., examples=["Opening keynote"])
    content: Optional[str] = None
    original_language: str = Field(..., examples=["en"])
    translated: bool = Field(..., examples=[False])


class ItemUpdate(PartialModel):
    not_nullable = ("start_date", "duration", "name", "original_language", "translated")

    start_date: Optional[datetime] = None
    duration: Optional[int] = None
    name: Optional[str] = None
    content: Optional[str] = None
    original_language: Optional[str] = None
    translated: Optional[bool] = None


class ItemRead(ReadModel):
    id: int
    start_date: datetime
    duration: int
    name: str
    content: Optional[str] = None
    original_language: str
    translated: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class ItemBroadcastURLCreate(BaseModel):
    item_id: int
    broadcast_url_id: int


class ItemBroadcastURLUpdate(PartialModel):
    not_nullable = ("item_id", "broadcast_url_id")

    item_id: Optional[int] = None
    broadcast_url_id: Optional[int] = None


class ItemBroadcastURLRead(ReadModel):
    id: int
    item_id: int
    broadcast_url_id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
