"""Pydantic v2 response models for the Casino Hub API.

Content payloads reuse the models in ``casino_hub.content.models``; the
shapes here cover probes and errors.
"""

from pydantic import BaseModel


class LiveResponse(BaseModel):
    status: str = "alive"


class HealthResponse(BaseModel):
    status: str  # "healthy" or "degraded"
    version: str
    environment: str
    content_loaded: bool
    counts: dict[str, int] = {}


class ErrorResponse(BaseModel):
    """Body of every non-2xx response."""

    error: str
