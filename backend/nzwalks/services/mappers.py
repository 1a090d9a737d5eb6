"""
NZWalks Backend — Wire ↔ Entity Mappers
=========================================

Plain structural conversions between the Pydantic wire schemas and the ORM
entities. Request → entity leaves the id unset (the repository assigns it);
entity → response copies every field verbatim.
"""

from nzwalks.models import Region, Walk, WalkDifficulty
from nzwalks.schemas.region import RegionRequest, RegionResponse
from nzwalks.schemas.walk import WalkRequest, WalkResponse
from nzwalks.schemas.walk_difficulty import WalkDifficultyResponse


def region_from_request(request: RegionRequest) -> Region:
    return Region(
        code=request.code,
        name=request.name,
        area=request.area,
        lat=request.lat,
        long=request.long,
        population=request.population,
    )


def region_to_response(region: Region) -> RegionResponse:
    return RegionResponse(
        id=region.id,
        code=region.code,
        name=region.name,
        area=region.area,
        lat=region.lat,
        long=region.long,
        population=region.population,
    )


def walk_from_request(request: WalkRequest) -> Walk:
    return Walk(
        name=request.name,
        length=request.length,
        region_id=request.region_id,
        walk_difficulty_id=request.walk_difficulty_id,
    )


def walk_to_response(walk: Walk) -> WalkResponse:
    return WalkResponse(
        id=walk.id,
        name=walk.name,
        length=walk.length,
        region_id=walk.region_id,
        walk_difficulty_id=walk.walk_difficulty_id,
    )


def walk_difficulty_to_response(walk_difficulty: WalkDifficulty) -> WalkDifficultyResponse:
    return WalkDifficultyResponse(id=walk_difficulty.id, name=walk_difficulty.name)
