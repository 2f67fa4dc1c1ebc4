"""Request and record schemas.

Pydantic models used at the invocation boundary and as the parsed output of
the completion text.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class GeneratePOIsIn(BaseModel):
    """Arguments for generating points of interest.

    Examples:
        >>> GeneratePOIsIn.model_validate({"location": "Paris", "tags": ["museums", "food"]})
        GeneratePOIsIn(location='Paris', tags=['museums', 'food'])
    """

    location: str = Field(min_length=1, description='Free-text place name, e.g. "Paris".')
    tags: list[str] = Field(description='Ordered interests joined into the prompt. May be empty.')


class POIRecord(BaseModel):
    """A point-of-interest entry with a title and optional description."""

    title: str
    description: str = ''


class CallableRequest(BaseModel):
    """Callable-function request envelope: the arguments travel under `data`."""

    data: GeneratePOIsIn


class CallableResult(BaseModel):
    """Callable-function success envelope."""

    result: list[POIRecord]


class CallableError(BaseModel):
    status: str
    message: str
    details: Any | None = None


class CallableErrorResponse(BaseModel):
    """Callable-function failure envelope."""

    error: CallableError
