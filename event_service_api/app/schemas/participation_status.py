"""Participation status: a participant's registration for an event under one option."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from .common import PartialModel, ReadModel


class ParticipationStatusCreate(BaseModel):
    participation_option: str = Field(..., examples=["onsite"])
    participant_id: int
    event_id: int
    confirmed: Optional[bool] = None
    registration_date: datetime = Field(..., examples=["2025-08-15T12:30:00Z"])
    deleted: Optional[bool] = None


class ParticipationStatusUpdate(PartialModel):
    not_nullable = ("participation_option", "participant_id", "event_id", "registration_date", "deleted")

    participation_option: Optional[str] = None
    participant_id: Optional[int] = None
    event_id: Optional[int] = None
    confirmed: Optional[bool] = None
    registration_date: Optional[datetime] = None
    deleted: Optional[bool] = None


class ParticipationStatusRead(ReadModel):
    id: int
    participation_option: str
    participant_id: int
    event_id: int
    confirmed: Optional[bool] = None
    registration_date: datetime
    deleted: bool = False
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
