"""NZWalks Backend — WalkDifficulty response schema (read-only resource)."""

import uuid

from pydantic import BaseModel

from nzwalks.schemas.common import WIRE_MODEL_CONFIG


class WalkDifficultyResponse(BaseModel):
    id: uuid.UUID
    name: str

    model_config = WIRE_MODEL_CONFIG
