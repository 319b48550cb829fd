"""Broadcast URL schemas: a stream location on a given platform and language."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from .common import PartialModel, ReadModel


class BroadcastURLCreate(BaseModel):
    url: str = Field(..., examples=["https://youtube.com/live/abc"])
    platform: str = Field(..., examples=["youtube"])
    language: str = Field(..., examples=["en"])


class BroadcastURLUpdate(PartialModel):
    not_nullable = ("url", "platform", "language")

    url: Optional[str] = None
    platform: Optional[str] = None
    language: Optional[str] = None


class BroadcastURLRead(ReadModel):
    id: int
    url: str
    platform: str
    language: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
