"""NZWalks Backend — SQLAlchemy WalkDifficulty Repository (read-only)."""

import uuid
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from nzwalks.models import WalkDifficulty
from nzwalks.repositories.base import WalkDifficultyRepository


class SqlAlchemyWalkDifficultyRepository(WalkDifficultyRepository):

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list(self) -> List[WalkDifficulty]:
        result = await self.session.execute(select(WalkDifficulty))
        return list(result.scalars().all())

    async def get(self, walk_difficulty_id: uuid.UUID) -> Optional[WalkDifficulty]:
        return await self.session.get(WalkDifficulty, walk_difficulty_id)
