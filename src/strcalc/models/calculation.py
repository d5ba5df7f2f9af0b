"""Request, response and error models for the calculator API."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class SumRequest(BaseModel):
    """Delimited number string to sum."""

    numbers: str = ""


class SumResponse(BaseModel):
    numbers: str
    total: int


class ErrorResponse(BaseModel):
    """Rejection returned for any calculator error."""

    error: str  # negative_numbers_not_allowed, invalid_number_format, malformed_header
    message: str
    negatives: Optional[list[int]] = Field(default=None)
