"""
NZWalks Backend — Region Service Unit Tests
=============================================

What:  Tests for RegionService orchestration (list, get, add, update, delete).
How:   Uses the in-memory repository fake, or a MagicMock(spec=RegionRepository) where we need
       to prove the repository was never touched.

What we test:
    ✅ Add assigns an id and returns the stored region
    ✅ Invalid add/update raises ValidationError without any repository write
    ✅ Update is a full replace of every field but the id
    ✅ Missing id on get/update/delete raises NotFoundError
    ✅ Delete returns the last known state and removes the region
"""

import uuid
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio

from nzwalks.exceptions import NotFoundError, ValidationError
from nzwalks.repositories.base import RegionRepository
from nzwalks.schemas.region import AddRegionRequest, UpdateRegionRequest
from nzwalks.services.region_service import RegionService


class TestRegionServiceAdd:

    @pytest.fixture(autouse=True)
    def _service(self, region_repository):
        self.repository = region_repository
        self.service = RegionService(region_repository)

    @pytest.mark.asyncio
    async def test_add_region_assigns_id(self, wellington_region_data):
        created = await self.service.add_region(AddRegionRequest(**wellington_region_data))

        assert created.id in self.repository.rows
        assert created.code == "WGN"
        assert created.population == 200000

    @pytest.mark.asyncio
    async def test_two_adds_get_distinct_ids(self, wellington_region_data):
        first = await self.service.add_region(AddRegionRequest(**wellington_region_data))
        second = await self.service.add_region(AddRegionRequest(**wellington_region_data))

        assert first.id != second.id
        assert len(await self.service.list_regions()) == 2

    @pytest.mark.asyncio
    async def test_invalid_add_raises_with_field_errors(self, wellington_region_data):
        request = AddRegionRequest(**{**wellington_region_data, "area": 0})

        with pytest.raises(ValidationError) as exc_info:
            await self.service.add_region(request)

        assert exc_info.value.errors == {"Area": ["Area should be greater than zero"]}
        assert self.repository.rows == {}

    @pytest.mark.asyncio
    async def test_missing_body_keyed_on_request_name(self):
        with pytest.raises(ValidationError) as exc_info:
            await self.service.add_region(None)

        assert exc_info.value.fields == ["addRegionRequest"]


class TestRegionServiceRepositoryNotCalled:
    """Validation failures must stop before the repository."""

    def setup_method(self):
        self.repository = MagicMock(spec=RegionRepository)
        self.repository.add = AsyncMock()
        self.repository.update = AsyncMock()
        self.service = RegionService(self.repository)

    @pytest.mark.asyncio
    async def test_invalid_add_never_calls_repository(self):
        with pytest.raises(ValidationError):
            await self.service.add_region(AddRegionRequest(code=" ", name="X", area=1))

        self.repository.add.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_invalid_update_never_calls_repository(self):
        with pytest.raises(ValidationError) as exc_info:
            await self.service.update_region(
                uuid.uuid4(), UpdateRegionRequest(code="WGN", name="W", area=1, population=-1)
            )

        assert exc_info.value.fields == ["Population"]
        self.repository.update.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_parse_errors_merged_and_repository_untouched(self):
        parse_errors = {"Area": ["Input should be a valid number"]}

        with pytest.raises(ValidationError) as exc_info:
            await self.service.add_region(
                AddRegionRequest(code="", name="Nelson"), parse_errors=parse_errors
            )

        assert exc_info.value.errors == {
            "Code": ["Code cannot be null, empty or white space"],
            "Area": ["Input should be a valid number"],
        }
        self.repository.add.assert_not_awaited()


@pytest_asyncio.fixture
async def seeded(region_repository, wellington_region_data):
    """A RegionService with Wellington already stored; returns (service, region)."""
    service = RegionService(region_repository)
    region = await service.add_region(AddRegionRequest(**wellington_region_data))
    return service, region


class TestRegionServiceReadUpdateDelete:

    @pytest.mark.asyncio
    async def test_get_region(self, seeded):
        service, region = seeded
        assert await service.get_region(region.id) == region

    @pytest.mark.asyncio
    async def test_get_unknown_region_raises_not_found(self, seeded):
        service, _ = seeded
        missing = uuid.uuid4()

        with pytest.raises(NotFoundError) as exc_info:
            await service.get_region(missing)

        assert exc_info.value.resource_id == str(missing)

    @pytest.mark.asyncio
    async def test_update_replaces_every_field(self, seeded):
        service, region = seeded
        request = UpdateRegionRequest(code="WLG", name="Greater Wellington", area=8049)

        updated = await service.update_region(region.id, request)

        assert updated.id == region.id
        assert updated.name == "Greater Wellington"
        assert updated.area == 8049
        # Omitted fields take the request defaults, not the stored values
        assert updated.lat == 0
        assert updated.long == 0
        assert updated.population == 0

    @pytest.mark.asyncio
    async def test_update_unknown_region_raises_not_found(self, seeded, wellington_region_data):
        service, _ = seeded
        with pytest.raises(NotFoundError):
            await service.update_region(
                uuid.uuid4(), UpdateRegionRequest(**wellington_region_data)
            )

    @pytest.mark.asyncio
    async def test_invalid_update_leaves_region_unchanged(self, seeded):
        service, region = seeded
        with pytest.raises(ValidationError):
            await service.update_region(region.id, UpdateRegionRequest(code="X"))

        assert await service.get_region(region.id) == region

    @pytest.mark.asyncio
    async def test_delete_returns_last_state(self, seeded):
        service, region = seeded

        deleted = await service.delete_region(region.id)

        assert deleted == region
        with pytest.raises(NotFoundError):
            await service.get_region(region.id)

    @pytest.mark.asyncio
    async def test_delete_twice_raises_not_found(self, seeded):
        service, region = seeded
        await service.delete_region(region.id)

        with pytest.raises(NotFoundError):
            await service.delete_region(region.id)
