"""
Schemas for the name-keyed lookup tables.

Participation options, platforms and audiences are addressed by their
``name``.  Request bodies accept the name as ``name`` or ``Name``; older
clients send the capitalised form.
"""

from typing import Optional

from pydantic import AliasChoices, BaseModel, Field

from .common import PartialModel, ReadModel

_NAME_ALIASES = AliasChoices("name", "Name")


class ParticipationOptionCreate(BaseModel):
    name: str = Field(..., validation_alias=_NAME_ALIASES, examples=["onsite"])


class ParticipationOptionUpdate(PartialModel):
    not_nullable = ("name",)

    name: Optional[str] = Field(None, validation_alias=_NAME_ALIASES)


class ParticipationOptionRead(ReadModel):
    name: str


class PlatformCreate(BaseModel):
    name: str = Field(..., validation_alias=_NAME_ALIASES, examples=["youtube"])


class PlatformUpdate(PartialModel):
    not_nullable = ("name",)

    name: Optional[str] = Field(None, validation_alias=_NAME_ALIASES)


class PlatformRead(ReadModel):
    name: str


class AudienceCreate(BaseModel):
    name: str = Field(..., validation_alias=_NAME_ALIASES, examples=["public"])
    description: Optional[str] = Field(None, examples=["Open to everyone"])


class AudienceUpdate(PartialModel):
    not_nullable = ("name",)

    name: Optional[str] = Field(None, validation_alias=_NAME_ALIASES)
    description: Optional[str] = None


class AudienceRead(ReadModel):
    name: str
    description: Optional[str] = None
