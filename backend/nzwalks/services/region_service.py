"""
NZWalks Backend — Region Service (Resource Handler)
=====================================================

What:  Orchestrates the five region operations: list, get, add, update, delete.
How:   validate → map request to entity → repository call → map entity to
       response. Outcomes other than success are raised as exceptions and
       turned into HTTP responses by the global handlers in main.py.

Orchestration Flow (add/update):
    ┌──────────┐    ┌─────────────┐    ┌──────────────┐    ┌──────────┐
    │ Request  │───▶│  Validate   │───▶│  Repository  │───▶│   Map    │
    │ (Route)  │    │  (rules)    │    │  add/update  │    │ response │
    └──────────┘    └─────────────┘    └──────────────┘    └──────────┘
                          │                   │
                          ▼                   ▼
                   ValidationError      NotFoundError
                   (repository never    (update only, when the
                    called)              repository reports absence)

The service holds no state besides its repository, so one instance per
request (built in nzwalks.dependencies) is cheap.
"""

import logging
import uuid
from typing import List, Optional

from nzwalks.exceptions import FieldErrors, NotFoundError, ValidationError
from nzwalks.repositories.base import RegionRepository
from nzwalks.schemas.region import AddRegionRequest, RegionResponse, UpdateRegionRequest
from nzwalks.services.mappers import region_from_request, region_to_response
from nzwalks.services.validators import merge_field_errors, validate_region_request

logger = logging.getLogger(__name__)


class RegionService:
    """
    Business logic layer for region operations.

    Error Handling Strategy:
        - Validation failures raise ValidationError before any repository call
        - A None from the repository raises NotFoundError
        - Anything the repository raises propagates untouched
    """

    def __init__(self, region_repository: RegionRepository):
        self.region_repository = region_repository

    async def list_regions(self) -> List[RegionResponse]:
        regions = await self.region_repository.list()
        return [region_to_response(region) for region in regions]

    async def get_region(self, region_id: uuid.UUID) -> RegionResponse:
        region = await self.region_repository.get(region_id)
        if region is None:
            raise NotFoundError(resource="region", resource_id=str(region_id))
        return region_to_response(region)

    async def add_region(
        self,
        request: Optional[AddRegionRequest],
        parse_errors: Optional[FieldErrors] = None,
    ) -> RegionResponse:
        """
        Validate and create a region.

        Returns:
            The stored region, including the id assigned by the repository.

        Raises:
            ValidationError: One or more field rules failed (→ 400)
        """
        errors = merge_field_errors(
            validate_region_request(request, request_name="addRegionRequest"), parse_errors
        )
        if errors:
            logger.info("Rejected region create: invalid fields %s", sorted(errors))
            raise ValidationError(errors)

        region = await self.region_repository.add(region_from_request(request))
        logger.info("Region %s created (code=%s)", region.id, region.code)
        return region_to_response(region)

    async def update_region(
        self,
        region_id: uuid.UUID,
        request: Optional[UpdateRegionRequest],
        parse_errors: Optional[FieldErrors] = None,
    ) -> RegionResponse:
        """
        Validate and fully replace an existing region.

        Fields absent from the request are not carried over from the stored
        region; the request body is the complete new state.

        Raises:
            ValidationError: One or more field rules failed (→ 400)
            NotFoundError:   No region with this id (→ 404)
        """
        errors = merge_field_errors(
            validate_region_request(request, request_name="updateRegionRequest"), parse_errors
        )
        if errors:
            logger.info("Rejected region %s update: invalid fields %s", region_id, sorted(errors))
            raise ValidationError(errors)

        region = await self.region_repository.update(region_id, region_from_request(request))
        if region is None:
            raise NotFoundError(resource="region", resource_id=str(region_id))

        logger.info("Region %s updated", region.id)
        return region_to_response(region)

    async def delete_region(self, region_id: uuid.UUID) -> RegionResponse:
        """Delete a region and return its last known state."""
        region = await self.region_repository.delete(region_id)
        if region is None:
            raise NotFoundError(resource="region", resource_id=str(region_id))

        logger.info("Region %s deleted", region_id)
        return region_to_response(region)
