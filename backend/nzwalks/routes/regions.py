"""
NZWalks Backend — Region Route Handlers
=========================================

What:  HTTP surface for the /regions collection.
How:   Each handler delegates to RegionService and only adds HTTP details:
       status codes and the Location header on create. Validation and
       not-found outcomes are raised by the service and rendered by the global
       exception handlers (400 with field-error map, 404).

Endpoints:
    GET    /regions          → 200 list
    GET    /regions/{id}     → 200 | 404
    POST   /regions          → 201 + Location | 400
    PUT    /regions/{id}     → 200 | 400 | 404
    DELETE /regions/{id}     → 200 (deleted entity) | 404

Path ids are typed as UUID; anything else never reaches the handler and is
answered with 404 by the request-validation handler.
"""

from typing import Any, Dict, List, Optional
from uuid import UUID

from fastapi import APIRouter, Body, Depends, Request, Response

from nzwalks.dependencies import get_region_service
from nzwalks.schemas.common import ErrorResponse, ValidationErrorResponse, json_request_body
from nzwalks.schemas.region import AddRegionRequest, RegionResponse, UpdateRegionRequest
from nzwalks.services.region_service import RegionService
from nzwalks.services.validators import parse_request

router = APIRouter(prefix="/regions", tags=["Regions"])


@router.get(
    "",
    response_model=List[RegionResponse],
    summary="List all regions",
)
async def list_regions(
    service: RegionService = Depends(get_region_service),
) -> List[RegionResponse]:
    """Returns every region. An empty list is a normal result, not an error."""
    return await service.list_regions()


@router.get(
    "/{region_id}",
    name="get_region",
    response_model=RegionResponse,
    responses={404: {"description": "Region not found", "model": ErrorResponse}},
    summary="Get a single region by ID",
)
async def get_region(
    region_id: UUID,
    service: RegionService = Depends(get_region_service),
) -> RegionResponse:
    return await service.get_region(region_id)


@router.post(
    "",
    status_code=201,
    response_model=RegionResponse,
    responses={
        201: {"description": "Region created", "model": RegionResponse},
        400: {"description": "One or more fields are invalid", "model": ValidationErrorResponse},
    },
    summary="Create a region",
    openapi_extra=json_request_body(AddRegionRequest),
)
async def add_region(
    http_request: Request,
    response: Response,
    add_region_request: Optional[Dict[str, Any]] = Body(default=None),
    service: RegionService = Depends(get_region_service),
) -> RegionResponse:
    """
    Create a region and point the client at it.

    The Location header carries the absolute URL of GET /regions/{id} for the
    id the repository assigned.
    """
    request, parse_errors = parse_request(AddRegionRequest, add_region_request)
    region = await service.add_region(request, parse_errors)
    response.headers["Location"] = str(
        http_request.url_for("get_region", region_id=str(region.id))
    )
    return region


@router.put(
    "/{region_id}",
    response_model=RegionResponse,
    responses={
        400: {"description": "One or more fields are invalid", "model": ValidationErrorResponse},
        404: {"description": "Region not found", "model": ErrorResponse},
    },
    summary="Replace a region",
    description="Full replace: every field of the stored region is overwritten from the body.",
    openapi_extra=json_request_body(UpdateRegionRequest),
)
async def update_region(
    region_id: UUID,
    update_region_request: Optional[Dict[str, Any]] = Body(default=None),
    service: RegionService = Depends(get_region_service),
) -> RegionResponse:
    request, parse_errors = parse_request(UpdateRegionRequest, update_region_request)
    return await service.update_region(region_id, request, parse_errors)


@router.delete(
    "/{region_id}",
    response_model=RegionResponse,
    responses={404: {"description": "Region not found", "model": ErrorResponse}},
    summary="Delete a region",
    description="Returns the deleted region's last known state.",
)
async def delete_region(
    region_id: UUID,
    service: RegionService = Depends(get_region_service),
) -> RegionResponse:
    return await service.delete_region(region_id)
