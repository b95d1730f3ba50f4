"""Shared API response models for the Ticketing System."""

from typing import Any, Optional

from pydantic import BaseModel


class ResponseMessage(BaseModel):
    """Envelope for every JSON response: ``{message, data?, errors?}``."""

    message: str
    data: Optional[Any] = None
    errors: Optional[Any] = None


class HealthResponse(BaseModel):
    status: str
