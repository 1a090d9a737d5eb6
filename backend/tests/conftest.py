"""
NZWalks Backend — Test Configuration (conftest.py)
====================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped):
    ├── In-memory fakes (no database):
    │   region_repository, walk_repository, walk_difficulty_repository
    ├── Real SQLite database (aiosqlite, in-memory, StaticPool):
    │   db_engine → db_session
    │   db_engine → difficulties (Easy/Medium/Hard committed)
    └── api_client: HTTPX AsyncClient against the app, with get_db_session
        overridden to use db_engine
"""

import os

# Override settings BEFORE any nzwalks import: config is read at import time
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["LOG_LEVEL"] = "WARNING"

import uuid
from typing import Dict, List, Optional

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from nzwalks.database import Base, get_db_session
from nzwalks.main import app
from nzwalks.models import Region, Walk, WalkDifficulty
from nzwalks.repositories.base import (
    RegionRepository,
    WalkDifficultyRepository,
    WalkRepository,
)


# ══════════════════════════════════════════════════════════════════════════
# In-Memory Repository Fakes
# ══════════════════════════════════════════════════════════════════════════

class InMemoryRegionRepository(RegionRepository):

    def __init__(self):
        self.rows: Dict[uuid.UUID, Region] = {}

    async def list(self) -> List[Region]:
        return list(self.rows.values())

    async def get(self, region_id: uuid.UUID) -> Optional[Region]:
        return self.rows.get(region_id)

    async def add(self, region: Region) -> Region:
        region.id = uuid.uuid4()
        self.rows[region.id] = region
        return region

    async def update(self, region_id: uuid.UUID, region: Region) -> Optional[Region]:
        existing = self.rows.get(region_id)
        if existing is None:
            return None
        existing.code = region.code
        existing.name = region.name
        existing.area = region.area
        existing.lat = region.lat
        existing.long = region.long
        existing.population = region.population
        return existing

    async def delete(self, region_id: uuid.UUID) -> Optional[Region]:
        return self.rows.pop(region_id, None)


class InMemoryWalkRepository(WalkRepository):

    def __init__(self):
        self.rows: Dict[uuid.UUID, Walk] = {}

    async def list(self) -> List[Walk]:
        return list(self.rows.values())

    async def get(self, walk_id: uuid.UUID) -> Optional[Walk]:
        return self.rows.get(walk_id)

    async def add(self, walk: Walk) -> Walk:
        walk.id = uuid.uuid4()
        self.rows[walk.id] = walk
        return walk

    async def update(self, walk_id: uuid.UUID, walk: Walk) -> Optional[Walk]:
        existing = self.rows.get(walk_id)
        if existing is None:
            return None
        existing.name = walk.name
        existing.length = walk.length
        existing.region_id = walk.region_id
        existing.walk_difficulty_id = walk.walk_difficulty_id
        return existing

    async def delete(self, walk_id: uuid.UUID) -> Optional[Walk]:
        return self.rows.pop(walk_id, None)


class InMemoryWalkDifficultyRepository(WalkDifficultyRepository):

    def __init__(self, names=("Easy", "Medium", "Hard")):
        self.rows: Dict[uuid.UUID, WalkDifficulty] = {}
        for name in names:
            difficulty = WalkDifficulty(id=uuid.uuid4(), name=name)
            self.rows[difficulty.id] = difficulty

    async def list(self) -> List[WalkDifficulty]:
        return list(self.rows.values())

    async def get(self, walk_difficulty_id: uuid.UUID) -> Optional[WalkDifficulty]:
        return self.rows.get(walk_difficulty_id)

    def first_id(self) -> uuid.UUID:
        return next(iter(self.rows))


@pytest.fixture
def region_repository():
    return InMemoryRegionRepository()


@pytest.fixture
def walk_repository():
    return InMemoryWalkRepository()


@pytest.fixture
def walk_difficulty_repository():
    return InMemoryWalkDifficultyRepository()


@pytest.fixture
def wellington_region_data():
    """The Wellington region used across service and API tests."""
    return {
        "code": "WGN",
        "name": "Wellington",
        "area": 100,
        "population": 200000,
        "lat": -41.3,
        "long": 174.8,
    }


# ══════════════════════════════════════════════════════════════════════════
# SQLite-Backed Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def db_engine():
    """
    Fresh in-memory database per test.

    StaticPool keeps the single in-memory connection alive across sessions;
    without it every new connection would see an empty database. SQLite only
    enforces foreign keys (and so ON DELETE CASCADE) when the pragma is on.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
    )

    @event.listens_for(engine.sync_engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(db_engine):
    factory = async_sessionmaker(db_engine, expire_on_commit=False)
    async with factory() as session:
        yield session


@pytest_asyncio.fixture
async def difficulties(db_engine) -> Dict[str, uuid.UUID]:
    """Commit the standard difficulty levels; returns name → id."""
    factory = async_sessionmaker(db_engine, expire_on_commit=False)
    rows = [WalkDifficulty(id=uuid.uuid4(), name=name) for name in ("Easy", "Medium", "Hard")]
    async with factory() as session:
        session.add_all(rows)
        await session.commit()
    return {row.name: row.id for row in rows}


@pytest_asyncio.fixture
async def api_client(db_engine):
    """
    HTTPX AsyncClient routed straight into the ASGI app.

    Each request gets its own session on the test engine, committed or
    rolled back exactly like nzwalks.database.get_db_session.
    """
    factory = async_sessionmaker(db_engine, expire_on_commit=False)

    async def override_get_db_session():
        async with factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_session] = override_get_db_session
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
