"""
NZWalks Backend — Abstract Repository Interfaces
==================================================

What:  Abstract base classes defining the persistence contract per entity type.
Why:   The services (validation + orchestration) depend only on these
       interfaces, so they can be exercised against in-memory fakes in unit
       tests and against SQLAlchemy in production without any change.
How:   Concrete implementations inherit and implement every abstract method.

Contract shared by all implementations:
    - Absence is reported by returning None, never by raising.
    - Any other failure (lost connection, constraint violation) is raised
      as-is; the services do not catch it.
    - Each call is atomic on its own. No call spans another.
"""

import uuid
from abc import ABC, abstractmethod
from typing import List, Optional

from nzwalks.models import Region, Walk, WalkDifficulty


class RegionRepository(ABC):
    """CRUD access to Region entities."""

    @abstractmethod
    async def list(self) -> List[Region]:
        """Return every region, in storage order (no ordering guarantee)."""
        ...

    @abstractmethod
    async def get(self, region_id: uuid.UUID) -> Optional[Region]:
        ...

    @abstractmethod
    async def add(self, region: Region) -> Region:
        """
        Persist a new region.

        The incoming entity has no id; the repository assigns one and returns
        the stored entity.
        """
        ...

    @abstractmethod
    async def update(self, region_id: uuid.UUID, region: Region) -> Optional[Region]:
        """
        Overwrite every field of the stored region except its id.

        Returns:
            The updated entity, or None if no region has that id (nothing is
            written in that case).
        """
        ...

    @abstractmethod
    async def delete(self, region_id: uuid.UUID) -> Optional[Region]:
        """Remove the region and return its last known state, or None if absent."""
        ...


class WalkRepository(ABC):
    """CRUD access to Walk entities. Same semantics as RegionRepository."""

    @abstractmethod
    async def list(self) -> List[Walk]:
        ...

    @abstractmethod
    async def get(self, walk_id: uuid.UUID) -> Optional[Walk]:
        ...

    @abstractmethod
    async def add(self, walk: Walk) -> Walk:
        ...

    @abstractmethod
    async def update(self, walk_id: uuid.UUID, walk: Walk) -> Optional[Walk]:
        ...

    @abstractmethod
    async def delete(self, walk_id: uuid.UUID) -> Optional[Walk]:
        ...


class WalkDifficultyRepository(ABC):
    """
    Read-only access to WalkDifficulty reference data.

    `get` is what the walk validator uses to resolve walkDifficultyId.
    """

    @abstractmethod
    async def list(self) -> List[WalkDifficulty]:
        ...

    @abstractmethod
    async def get(self, walk_difficulty_id: uuid.UUID) -> Optional[WalkDifficulty]:
        ...
