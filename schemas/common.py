"""
schemas/common.py

- Shared schemas used across the API
- Pydantic v2
- Contents:
  1) Error response standard: ErrorDetail, ErrorResponse
  2) Success envelope: SuccessEnvelope[T]
  3) CamelModel: base for request/response bodies exposed in camelCase
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


# =========================================================
# 1) Error response standard
# =========================================================

class ErrorDetail(BaseModel):
    """Smallest unit of an error: machine code + readable message"""
    code: str = Field(..., description="Error code (e.g. VALIDATION_ERROR, NOT_FOUND)")
    message: str = Field(..., description="Human readable message")

class ErrorResponse(BaseModel):
    """
    Envelope returned by the global error handlers
    - middlewares/error_handler.py builds every error body from this schema
    """
    success: bool = False
    error: ErrorDetail
    generated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Response generation time (UTC)"
    )

    model_config = ConfigDict(extra="ignore")


# =========================================================
# 2) Success envelope
# =========================================================

T = TypeVar("T")

class SuccessEnvelope(BaseModel, Generic[T]):
    """
    Standard success wrapper
    - success: always True
    - data: payload
    - message: optional human readable note
    """
    success: bool = True
    data: T
    message: Optional[str] = None

    model_config = ConfigDict(extra="ignore")


# =========================================================
# 3) camelCase base
# =========================================================

class CamelModel(BaseModel):
    """Fields are snake_case in Python and camelCase on the wire; both are accepted on input."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )
