"""
Bioskop API: Pydantic Request/Response Schemas
===============================================

What:  The JSON contract of the venue endpoints.
How:   FastAPI validates request bodies against `BioskopInput` and serializes
       responses through the response models below. The same models feed the
       OpenAPI docs.

Wire names are the Indonesian ones (`nama`, `lokasi`) used by existing
clients; request bodies also accept `name` / `location`.
"""

from typing import Annotated, Optional

from pydantic import AliasChoices, AllowInfNan, BaseModel, Field, Strict

# A JSON number: no numeric strings, no booleans, no NaN or Infinity
Rating = Annotated[float, Strict(), AllowInfNan(False)]


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class BioskopInput(BaseModel):
    """
    What:  Body of POST and PUT.

    Every field is optional at the schema level: a missing or null `nama` /
    `lokasi` binds as None and is rejected by the service with the
    "wajib diisi" message, while a body of the wrong shape (not an object,
    non-string name, a rating that is not a finite JSON number) fails here
    with "Invalid input".
    `id` and unknown keys are ignored.
    """
    nama: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("nama", "name"),
        description="Cinema name (required, non-empty)",
    )
    lokasi: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("lokasi", "location"),
        description="Cinema location (required, non-empty)",
    )
    rating: Optional[Rating] = Field(
        default=None,
        description="Numeric rating; 0 when omitted",
    )

    model_config = {"extra": "ignore"}


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class BioskopResponse(BaseModel):
    """
    What:  Full representation of one venue row.
    Who:   Returned by POST, GET list items and GET by id.
    """
    id: int = Field(description="Store-assigned identifier")
    nama: str = Field(description="Cinema name")
    lokasi: str = Field(description="Cinema location")
    rating: float = Field(description="Numeric rating")

    model_config = {"from_attributes": True}


class MessageResponse(BaseModel):
    """Confirmation body for PUT and DELETE."""
    message: str = Field(description="Human-readable confirmation")


class ErrorResponse(BaseModel):
    """
    What:  Error body for every 4xx/5xx the API produces.

    Example:
        {"error": "Data tidak ditemukan"}
    """
    error: str = Field(description="Human-readable error description")


class HealthResponse(BaseModel):
    """Health check response showing service and database status."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
