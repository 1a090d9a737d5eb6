"""
NZWalks Backend — Walk Request/Response Schemas
=================================================

Same conventions as the region schemas: camelCase on the wire, permissive
request fields, rules enforced by the validator. `regionId` and
`walkDifficultyId` must still parse as UUIDs; a missing id arrives as None
and is reported as an unresolved reference.
"""

import uuid
from typing import Optional

from pydantic import BaseModel, Field

from nzwalks.schemas.common import REQUEST_MODEL_CONFIG, WIRE_MODEL_CONFIG


class WalkRequest(BaseModel):
    name: Optional[str] = Field(default=None, description="Walk name")
    length: float = Field(default=0, description="Length in kilometres (> 0)")
    region_id: Optional[uuid.UUID] = Field(default=None, description="Existing region id")
    walk_difficulty_id: Optional[uuid.UUID] = Field(
        default=None, description="Existing walk difficulty id"
    )

    model_config = REQUEST_MODEL_CONFIG


class AddWalkRequest(WalkRequest):
    """Body of POST /walks."""


class UpdateWalkRequest(WalkRequest):
    """Body of PUT /walks/{id}. Every field overwrites the stored value."""


class WalkResponse(BaseModel):
    id: uuid.UUID
    name: str
    length: float
    region_id: uuid.UUID
    walk_difficulty_id: uuid.UUID

    model_config = WIRE_MODEL_CONFIG
