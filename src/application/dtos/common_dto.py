"""Common DTOs for API responses and error handling."""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from src.domain.errors import ErrorItem


class ErrorItemModel(BaseModel):
    """One violated rule or failure reason."""
    msg: str = Field(..., description="Human-readable message", examples=["Name is required"])
    param: Optional[str] = Field(None, description="Request field the message refers to", examples=["name"])


class ErrorResponse(BaseModel):
    """Standard error response model."""
    detail: str = Field(..., description="Error message describing what went wrong")
    errors: list[ErrorItemModel] = Field(default_factory=list, description="Every violated rule")


class MessageResponse(BaseModel):
    """Confirmation returned by delete endpoints."""
    msg: str = Field(..., description="Confirmation message", examples=["Post removed"])


class HealthResponse(BaseModel):
    """Health check response model."""
    status: str = Field(..., description="Health status", examples=["healthy"])


class RootResponse(BaseModel):
    """Root endpoint response model."""
    status: str = Field(..., description="API status", examples=["ok"])
    service: str = Field(..., description="Service name", examples=["devconnector-backend"])
    version: str = Field(..., description="API version", examples=["0.1.0"])


def is_blank(value: str | None) -> bool:
    return value is None or not str(value).strip()


def required(value: str | None, param: str, msg: str) -> list[ErrorItem]:
    return [ErrorItem(msg=msg, param=param)] if is_blank(value) else []
