"""Request/response models for the contracts API."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _to_naive_utc(value: Optional[datetime]) -> Optional[datetime]:
    if value is not None and value.tzinfo is not None:
        return value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


class ContractDTO(BaseModel):
    """Client-supplied contract. The identifier is always server-assigned."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = ""
    start_date: Optional[datetime] = Field(default=None, alias="startDate")
    end_date: Optional[datetime] = Field(default=None, alias="endDate")

    @field_validator("start_date", "end_date")
    @classmethod
    def _normalize_dates(cls, v: Optional[datetime]) -> Optional[datetime]:
        try:
            return _to_naive_utc(v)
        except OverflowError:
            raise ValueError("date out of range")


class ContractResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    name: str
    start_date: datetime = Field(alias="startDate")
    end_date: datetime = Field(alias="endDate")


class FieldErrorOut(BaseModel):
    field: str
    message: str


class ValidationErrorResponse(BaseModel):
    errors: List[FieldErrorOut]


class ErrorResponse(BaseModel):
    error: str
