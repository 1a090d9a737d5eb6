"""
NZWalks Backend — SQLAlchemy Region Repository
================================================

What:  RegionRepository implementation over an async SQLAlchemy session.
How:   Every mutating call flushes (so ids and constraint errors surface
       immediately) but never commits; `get_db_session` owns the commit.

Query plan:
    get/update/delete: primary key lookup via `session.get`
    list:              SELECT * FROM regions (no ORDER BY; order is unspecified)
"""

import logging
import uuid
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from nzwalks.models import Region
from nzwalks.repositories.base import RegionRepository

logger = logging.getLogger(__name__)


class SqlAlchemyRegionRepository(RegionRepository):

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list(self) -> List[Region]:
        result = await self.session.execute(select(Region))
        return list(result.scalars().all())

    async def get(self, region_id: uuid.UUID) -> Optional[Region]:
        return await self.session.get(Region, region_id)

    async def add(self, region: Region) -> Region:
        region.id = uuid.uuid4()
        self.session.add(region)
        await self.session.flush()
        logger.debug("Inserted region %s", region.id)
        return region

    async def update(self, region_id: uuid.UUID, region: Region) -> Optional[Region]:
        existing = await self.session.get(Region, region_id)
        if existing is None:
            return None

        # Full replace: every column but the id comes from the new body
        existing.code = region.code
        existing.name = region.name
        existing.area = region.area
        existing.lat = region.lat
        existing.long = region.long
        existing.population = region.population

        await self.session.flush()
        return existing

    async def delete(self, region_id: uuid.UUID) -> Optional[Region]:
        existing = await self.session.get(Region, region_id)
        if existing is None:
            return None

        await self.session.delete(existing)
        await self.session.flush()
        return existing
