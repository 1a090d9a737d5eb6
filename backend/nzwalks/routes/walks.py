"""
NZWalks Backend — Walk Route Handlers
=======================================

Mirrors the /regions surface. A POST or PUT also answers 400 when regionId or
walkDifficultyId does not reference an existing row.
"""

from typing import Any, Dict, List, Optional
from uuid import UUID

from fastapi import APIRouter, Body, Depends, Request, Response

from nzwalks.dependencies import get_walk_service
from nzwalks.schemas.common import ErrorResponse, ValidationErrorResponse, json_request_body
from nzwalks.schemas.walk import AddWalkRequest, UpdateWalkRequest, WalkResponse
from nzwalks.services.validators import parse_request
from nzwalks.services.walk_service import WalkService

router = APIRouter(prefix="/walks", tags=["Walks"])

_VALIDATION_RESPONSE = {
    "description": "Invalid fields or unknown regionId / walkDifficultyId",
    "model": ValidationErrorResponse,
}
_NOT_FOUND_RESPONSE = {"description": "Walk not found", "model": ErrorResponse}


@router.get("", response_model=List[WalkResponse], summary="List all walks")
async def list_walks(
    service: WalkService = Depends(get_walk_service),
) -> List[WalkResponse]:
    return await service.list_walks()


@router.get(
    "/{walk_id}",
    name="get_walk",
    response_model=WalkResponse,
    responses={404: _NOT_FOUND_RESPONSE},
    summary="Get a single walk by ID",
)
async def get_walk(
    walk_id: UUID,
    service: WalkService = Depends(get_walk_service),
) -> WalkResponse:
    return await service.get_walk(walk_id)


@router.post(
    "",
    status_code=201,
    response_model=WalkResponse,
    responses={400: _VALIDATION_RESPONSE},
    summary="Create a walk",
    openapi_extra=json_request_body(AddWalkRequest),
)
async def add_walk(
    http_request: Request,
    response: Response,
    add_walk_request: Optional[Dict[str, Any]] = Body(default=None),
    service: WalkService = Depends(get_walk_service),
) -> WalkResponse:
    request, parse_errors = parse_request(AddWalkRequest, add_walk_request)
    walk = await service.add_walk(request, parse_errors)
    response.headers["Location"] = str(
        http_request.url_for("get_walk", walk_id=str(walk.id))
    )
    return walk


@router.put(
    "/{walk_id}",
    response_model=WalkResponse,
    responses={400: _VALIDATION_RESPONSE, 404: _NOT_FOUND_RESPONSE},
    summary="Replace a walk",
    openapi_extra=json_request_body(UpdateWalkRequest),
)
async def update_walk(
    walk_id: UUID,
    update_walk_request: Optional[Dict[str, Any]] = Body(default=None),
    service: WalkService = Depends(get_walk_service),
) -> WalkResponse:
    request, parse_errors = parse_request(UpdateWalkRequest, update_walk_request)
    return await service.update_walk(walk_id, request, parse_errors)


@router.delete(
    "/{walk_id}",
    response_model=WalkResponse,
    responses={404: _NOT_FOUND_RESPONSE},
    summary="Delete a walk",
)
async def delete_walk(
    walk_id: UUID,
    service: WalkService = Depends(get_walk_service),
) -> WalkResponse:
    return await service.delete_walk(walk_id)
