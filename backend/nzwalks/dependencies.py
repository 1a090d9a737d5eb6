"""
NZWalks Backend — Dependency Wiring
=====================================

FastAPI dependency providers that assemble the per-request object graph:

    get_db_session ──▶ repositories ──▶ services ──▶ route handlers

All repositories of one request share the same session, so validation reads
and the following write see the same transaction. Tests replace
`get_db_session` via `app.dependency_overrides` to point the whole graph at
another database.
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from nzwalks.database import get_db_session
from nzwalks.repositories import (
    RegionRepository,
    SqlAlchemyRegionRepository,
    SqlAlchemyWalkDifficultyRepository,
    SqlAlchemyWalkRepository,
    WalkDifficultyRepository,
    WalkRepository,
)
from nzwalks.services.region_service import RegionService
from nzwalks.services.walk_difficulty_service import WalkDifficultyService
from nzwalks.services.walk_service import WalkService


def get_region_repository(
    db: AsyncSession = Depends(get_db_session),
) -> RegionRepository:
    return SqlAlchemyRegionRepository(db)


def get_walk_repository(
    db: AsyncSession = Depends(get_db_session),
) -> WalkRepository:
    return SqlAlchemyWalkRepository(db)


def get_walk_difficulty_repository(
    db: AsyncSession = Depends(get_db_session),
) -> WalkDifficultyRepository:
    return SqlAlchemyWalkDifficultyRepository(db)


def get_region_service(
    region_repository: RegionRepository = Depends(get_region_repository),
) -> RegionService:
    return RegionService(region_repository)


def get_walk_service(
    walk_repository: WalkRepository = Depends(get_walk_repository),
    region_repository: RegionRepository = Depends(get_region_repository),
    walk_difficulty_repository: WalkDifficultyRepository = Depends(get_walk_difficulty_repository),
) -> WalkService:
    return WalkService(walk_repository, region_repository, walk_difficulty_repository)


def get_walk_difficulty_service(
    walk_difficulty_repository: WalkDifficultyRepository = Depends(get_walk_difficulty_repository),
) -> WalkDifficultyService:
    return WalkDifficultyService(walk_difficulty_repository)
