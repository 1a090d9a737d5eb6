"""NZWalks Backend — Walk Difficulty Service (read-only list/get)."""

import uuid
from typing import List

from nzwalks.exceptions import NotFoundError
from nzwalks.repositories.base import WalkDifficultyRepository
from nzwalks.schemas.walk_difficulty import WalkDifficultyResponse
from nzwalks.services.mappers import walk_difficulty_to_response


class WalkDifficultyService:

    def __init__(self, walk_difficulty_repository: WalkDifficultyRepository):
        self.walk_difficulty_repository = walk_difficulty_repository

    async def list_walk_difficulties(self) -> List[WalkDifficultyResponse]:
        difficulties = await self.walk_difficulty_repository.list()
        return [walk_difficulty_to_response(d) for d in difficulties]

    async def get_walk_difficulty(self, walk_difficulty_id: uuid.UUID) -> WalkDifficultyResponse:
        difficulty = await self.walk_difficulty_repository.get(walk_difficulty_id)
        if difficulty is None:
            raise NotFoundError(resource="walk difficulty", resource_id=str(walk_difficulty_id))
        return walk_difficulty_to_response(difficulty)
