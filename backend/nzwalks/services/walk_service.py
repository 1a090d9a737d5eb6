"""
NZWalks Backend — Walk Service (Resource Handler)
===================================================

What:  Orchestrates list/get/add/update/delete for walks.
How:   Same flow as RegionService, with one addition: validation resolves
       regionId and walkDifficultyId against their repositories before the
       walk repository is touched.

Concurrency note:
    The reference lookups and the write are separate operations. A region
    deleted in between is caught by the database foreign key, which surfaces
    as a persistence error (500), not as a validation failure.
"""

import logging
import uuid
from typing import List, Optional

from nzwalks.exceptions import FieldErrors, NotFoundError, ValidationError
from nzwalks.repositories.base import (
    RegionRepository,
    WalkDifficultyRepository,
    WalkRepository,
)
from nzwalks.schemas.walk import AddWalkRequest, UpdateWalkRequest, WalkResponse
from nzwalks.services.mappers import walk_from_request, walk_to_response
from nzwalks.services.validators import merge_field_errors, validate_walk_request

logger = logging.getLogger(__name__)


class WalkService:

    def __init__(
        self,
        walk_repository: WalkRepository,
        region_repository: RegionRepository,
        walk_difficulty_repository: WalkDifficultyRepository,
    ):
        self.walk_repository = walk_repository
        self.region_repository = region_repository
        self.walk_difficulty_repository = walk_difficulty_repository

    async def _validate(
        self, request, request_name: str, parse_errors: Optional[FieldErrors]
    ) -> None:
        errors = await validate_walk_request(
            request,
            region_repository=self.region_repository,
            walk_difficulty_repository=self.walk_difficulty_repository,
            request_name=request_name,
        )
        errors = merge_field_errors(errors, parse_errors)
        if errors:
            logger.info("Rejected %s: invalid fields %s", request_name, sorted(errors))
            raise ValidationError(errors)

    async def list_walks(self) -> List[WalkResponse]:
        walks = await self.walk_repository.list()
        return [walk_to_response(walk) for walk in walks]

    async def get_walk(self, walk_id: uuid.UUID) -> WalkResponse:
        walk = await self.walk_repository.get(walk_id)
        if walk is None:
            raise NotFoundError(resource="walk", resource_id=str(walk_id))
        return walk_to_response(walk)

    async def add_walk(
        self,
        request: Optional[AddWalkRequest],
        parse_errors: Optional[FieldErrors] = None,
    ) -> WalkResponse:
        """
        Validate (fields + references) and create a walk.

        Raises:
            ValidationError: Field rule failed or a reference did not resolve
        """
        await self._validate(request, "addWalkRequest", parse_errors)

        walk = await self.walk_repository.add(walk_from_request(request))
        logger.info("Walk %s created in region %s", walk.id, walk.region_id)
        return walk_to_response(walk)

    async def update_walk(
        self,
        walk_id: uuid.UUID,
        request: Optional[UpdateWalkRequest],
        parse_errors: Optional[FieldErrors] = None,
    ) -> WalkResponse:
        """
        Validate and fully replace an existing walk.

        Raises:
            ValidationError: Field rule failed or a reference did not resolve
            NotFoundError:   No walk with this id
        """
        await self._validate(request, "updateWalkRequest", parse_errors)

        walk = await self.walk_repository.update(walk_id, walk_from_request(request))
        if walk is None:
            raise NotFoundError(resource="walk", resource_id=str(walk_id))

        logger.info("Walk %s updated", walk.id)
        return walk_to_response(walk)

    async def delete_walk(self, walk_id: uuid.UUID) -> WalkResponse:
        walk = await self.walk_repository.delete(walk_id)
        if walk is None:
            raise NotFoundError(resource="walk", resource_id=str(walk_id))

        logger.info("Walk %s deleted", walk_id)
        return walk_to_response(walk)
