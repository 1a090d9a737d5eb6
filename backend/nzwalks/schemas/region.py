"""
NZWalks Backend — Region Request/Response Schemas
===================================================

What:  Pydantic models defining the wire shape of the /regions resource.
How:   JSON uses camelCase field names (`population`, `lat`, `long`);
       requests also accept the Python attribute names.

Why request fields are permissive:
    Business rules (non-empty code, area > 0, ...) are enforced by
    `nzwalks.services.validators` so every violation is reported together in
    one field-error mapping. The schemas only guarantee types: a missing
    string arrives as None and a missing number as 0, and the validator
    reports them like any other bad value.
"""

import uuid
from typing import Optional

from pydantic import BaseModel, Field

from nzwalks.schemas.common import REQUEST_MODEL_CONFIG, WIRE_MODEL_CONFIG


class RegionRequest(BaseModel):
    """Fields shared by the add and update payloads (full replace on update)."""

    code: Optional[str] = Field(default=None, description="Short region code, e.g. WGN")
    name: Optional[str] = Field(default=None, description="Region name")
    area: float = Field(default=0, description="Area in square kilometres (> 0)")
    lat: float = Field(default=0, description="Latitude of the region centre")
    long: float = Field(default=0, description="Longitude of the region centre")
    population: int = Field(default=0, description="Population (>= 0)")

    model_config = REQUEST_MODEL_CONFIG


class AddRegionRequest(RegionRequest):
    """Body of POST /regions."""


class UpdateRegionRequest(RegionRequest):
    """Body of PUT /regions/{id}. Every field overwrites the stored value."""


class RegionResponse(BaseModel):
    """Full representation of a region, returned by every /regions endpoint."""

    id: uuid.UUID = Field(description="Unique region identifier (UUID)")
    code: str
    name: str
    area: float
    lat: float
    long: float
    population: int

    model_config = WIRE_MODEL_CONFIG
