"""NZWalks Backend — SQLAlchemy Walk Repository (same flush/no-commit rules as regions)."""

import logging
import uuid
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from nzwalks.models import Walk
from nzwalks.repositories.base import WalkRepository

logger = logging.getLogger(__name__)


class SqlAlchemyWalkRepository(WalkRepository):

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list(self) -> List[Walk]:
        result = await self.session.execute(select(Walk))
        return list(result.scalars().all())

    async def get(self, walk_id: uuid.UUID) -> Optional[Walk]:
        return await self.session.get(Walk, walk_id)

    async def add(self, walk: Walk) -> Walk:
        walk.id = uuid.uuid4()
        self.session.add(walk)
        # Raises IntegrityError if the region/difficulty vanished after validation
        await self.session.flush()
        logger.debug("Inserted walk %s", walk.id)
        return walk

    async def update(self, walk_id: uuid.UUID, walk: Walk) -> Optional[Walk]:
        existing = await self.session.get(Walk, walk_id)
        if existing is None:
            return None

        existing.name = walk.name
        existing.length = walk.length
        existing.region_id = walk.region_id
        existing.walk_difficulty_id = walk.walk_difficulty_id

        await self.session.flush()
        return existing

    async def delete(self, walk_id: uuid.UUID) -> Optional[Walk]:
        existing = await self.session.get(Walk, walk_id)
        if existing is None:
            return None

        await self.session.delete(existing)
        await self.session.flush()
        return existing
