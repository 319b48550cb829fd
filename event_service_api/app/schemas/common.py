"""
Shared schema pieces: the response envelope and the partial-update base.

Every successful response is wrapped as ``{"message", "data",
"success"}``; deletions carry no ``data``.  ``PartialModel`` is the base
for PATCH bodies: all fields are optional, and which ones the client
actually sent is tracked by pydantic in ``model_fields_set``.
"""

from typing import ClassVar, Generic, Optional, Tuple, TypeVar

from pydantic import BaseModel, ConfigDict, model_validator

T = TypeVar("T")


class Envelope(BaseModel, Generic[T]):
    message: str
    data: T
    success: bool = True


class Message(BaseModel):
    message: str
    success: bool = True


class ErrorResponse(BaseModel):
    error: str
    success: bool = False


class PartialModel(BaseModel):
    """Base class for update payloads.

    Subclasses list the columns that may not be set to NULL in
    ``not_nullable``; sending an explicit ``null`` for one of them is a
    validation error instead of a database error.
    """

    not_nullable: ClassVar[Tuple[str, ...]] = ()

    model_config = ConfigDict(extra="ignore")

    @model_validator(mode="after")
    def reject_null_for_required_columns(self):
        for name in self.not_nullable:
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{name} may not be null")
        return self


class ReadModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)


ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Invalid values"},
    404: {"model": ErrorResponse, "description": "Not found"},
    500: {"model": ErrorResponse, "description": "Store error"},
}


def envelope(message: str, data: Optional[object] = None) -> dict:
    """Build a success envelope; ``data`` is omitted when ``None``."""
    body = {"message": message, "success": True}
    if data is not None:
        body["data"] = data
    return body
