"""
NZWalks Backend — Walk Service Unit Tests
===========================================

What:  Tests for WalkService, in particular the reference checks against the
       region and difficulty repositories.
How:   All three repositories are in-memory fakes from conftest.

What we test:
    ✅ Add with valid references stores the walk
    ✅ Unknown region / difficulty rejected with the matching field key
    ✅ Update replaces name, length and both references
    ✅ Missing walk on get/update/delete raises NotFoundError
"""

import uuid

import pytest

from nzwalks.exceptions import NotFoundError, ValidationError
from nzwalks.models import Region
from nzwalks.schemas.walk import AddWalkRequest, UpdateWalkRequest
from nzwalks.services.walk_service import WalkService


def _store_region(region_repository, code="WGN", name="Wellington") -> uuid.UUID:
    region = Region(
        id=uuid.uuid4(), code=code, name=name,
        area=100, lat=-41.3, long=174.8, population=200000,
    )
    region_repository.rows[region.id] = region
    return region.id


class TestWalkService:

    @pytest.fixture(autouse=True)
    def _service(self, walk_repository, region_repository, walk_difficulty_repository):
        self.walks = walk_repository
        self.regions = region_repository
        self.difficulties = walk_difficulty_repository
        self.service = WalkService(walk_repository, region_repository, walk_difficulty_repository)
        self.region_id = _store_region(region_repository)
        self.difficulty_id = walk_difficulty_repository.first_id()

    def _add_request(self, **overrides) -> AddWalkRequest:
        data = {
            "name": "Mt Victoria Loop",
            "length": 3.5,
            "region_id": self.region_id,
            "walk_difficulty_id": self.difficulty_id,
        }
        data.update(overrides)
        return AddWalkRequest(**data)

    @pytest.mark.asyncio
    async def test_add_walk_stores_it(self):
        created = await self.service.add_walk(self._add_request())

        assert created.id in self.walks.rows
        assert created.region_id == self.region_id
        assert created.walk_difficulty_id == self.difficulty_id

    @pytest.mark.asyncio
    async def test_add_with_unknown_region_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            await self.service.add_walk(self._add_request(region_id=uuid.uuid4()))

        assert exc_info.value.errors == {"RegionId": ["RegionId is invalid"]}
        assert self.walks.rows == {}

    @pytest.mark.asyncio
    async def test_add_with_unknown_difficulty_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            await self.service.add_walk(self._add_request(walk_difficulty_id=uuid.uuid4()))

        assert exc_info.value.fields == ["WalkDifficultyId"]

    @pytest.mark.asyncio
    async def test_add_without_body_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            await self.service.add_walk(None)

        assert exc_info.value.errors == {
            "addWalkRequest": ["addWalkRequest cannot be empty"]
        }

    @pytest.mark.asyncio
    async def test_list_walks(self):
        await self.service.add_walk(self._add_request(name="A"))
        await self.service.add_walk(self._add_request(name="B"))

        names = sorted(walk.name for walk in await self.service.list_walks())

        assert names == ["A", "B"]

    @pytest.mark.asyncio
    async def test_update_moves_walk_to_another_region(self):
        walk = await self.service.add_walk(self._add_request())
        other_region_id = _store_region(self.regions, code="AKL", name="Auckland")
        hard = [d.id for d in await self.difficulties.list() if d.name == "Hard"][0]

        updated = await self.service.update_walk(
            walk.id,
            UpdateWalkRequest(
                name="Rangitoto Summit", length=7,
                region_id=other_region_id, walk_difficulty_id=hard,
            ),
        )

        assert updated.id == walk.id
        assert updated.region_id == other_region_id
        assert updated.walk_difficulty_id == hard
        assert (await self.service.get_walk(walk.id)).name == "Rangitoto Summit"

    @pytest.mark.asyncio
    async def test_update_validates_before_lookup_of_walk(self):
        """An invalid body is a 400 even when the walk id does not exist."""
        with pytest.raises(ValidationError) as exc_info:
            await self.service.update_walk(uuid.uuid4(), UpdateWalkRequest(name="x"))

        assert set(exc_info.value.fields) == {"Length", "RegionId", "WalkDifficultyId"}

    @pytest.mark.asyncio
    async def test_update_unknown_walk_raises_not_found(self):
        request = UpdateWalkRequest(**self._add_request().model_dump())

        with pytest.raises(NotFoundError):
            await self.service.update_walk(uuid.uuid4(), request)

    @pytest.mark.asyncio
    async def test_get_unknown_walk_raises_not_found(self):
        with pytest.raises(NotFoundError):
            await self.service.get_walk(uuid.uuid4())

    @pytest.mark.asyncio
    async def test_delete_returns_last_state(self):
        walk = await self.service.add_walk(self._add_request())

        deleted = await self.service.delete_walk(walk.id)

        assert deleted == walk
        with pytest.raises(NotFoundError):
            await self.service.delete_walk(walk.id)
