"""NZWalks Backend — Walk Difficulty Route Handlers (read-only reference data)."""

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends

from nzwalks.dependencies import get_walk_difficulty_service
from nzwalks.schemas.common import ErrorResponse
from nzwalks.schemas.walk_difficulty import WalkDifficultyResponse
from nzwalks.services.walk_difficulty_service import WalkDifficultyService

router = APIRouter(prefix="/walkdifficulties", tags=["Walk Difficulties"])


@router.get("", response_model=List[WalkDifficultyResponse], summary="List difficulty levels")
async def list_walk_difficulties(
    service: WalkDifficultyService = Depends(get_walk_difficulty_service),
) -> List[WalkDifficultyResponse]:
    return await service.list_walk_difficulties()


@router.get(
    "/{walk_difficulty_id}",
    response_model=WalkDifficultyResponse,
    responses={404: {"description": "Difficulty not found", "model": ErrorResponse}},
    summary="Get a difficulty level by ID",
)
async def get_walk_difficulty(
    walk_difficulty_id: UUID,
    service: WalkDifficultyService = Depends(get_walk_difficulty_service),
) -> WalkDifficultyResponse:
    return await service.get_walk_difficulty(walk_difficulty_id)
