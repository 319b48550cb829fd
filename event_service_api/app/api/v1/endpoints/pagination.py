"""Query parameters shared by the collection endpoints."""

from dataclasses import dataclass
from typing import Annotated, Any, Optional

from fastapi import Query
from pydantic import BeforeValidator


def blank_as_none(value: Any) -> Any:
    """Treat ``?name=`` like an absent filter."""
    if isinstance(value, str) and not value.strip():
        return None
    return value


OptionalFilterInt = Annotated[Optional[int], BeforeValidator(blank_as_none)]
OptionalFilterStr = Annotated[Optional[str], BeforeValidator(blank_as_none)]


@dataclass
class Page:
    skip: int
    limit: int


def page_params(
    skip: int = Query(0, ge=0, description="Number of records to skip"),
    limit: int = Query(10, ge=0, le=1000, description="Maximum number of records to return"),
) -> Page:
    return Page(skip=skip, limit=limit)
