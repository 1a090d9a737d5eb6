"""
NZWalks Backend — Repositories
================================

What:  Persistence collaborators, one per entity type.
How:   `base` declares the abstract CRUD contracts the services depend on;
       the `*_repository` modules implement them over an AsyncSession.
"""

from nzwalks.repositories.base import (
    RegionRepository,
    WalkDifficultyRepository,
    WalkRepository,
)
from nzwalks.repositories.region_repository import SqlAlchemyRegionRepository
from nzwalks.repositories.walk_difficulty_repository import SqlAlchemyWalkDifficultyRepository
from nzwalks.repositories.walk_repository import SqlAlchemyWalkRepository

__all__ = [
    "RegionRepository",
    "WalkRepository",
    "WalkDifficultyRepository",
    "SqlAlchemyRegionRepository",
    "SqlAlchemyWalkRepository",
    "SqlAlchemyWalkDifficultyRepository",
]
