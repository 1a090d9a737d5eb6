"""
NZWalks Backend — Request Validators
======================================

What:  Business-rule validation of region and walk create/update requests.
How:   Each validator returns a field-error mapping (field name → messages).
       An empty mapping means the request is valid.
Who:   Called by RegionService / WalkService before any repository write.

Rule evaluation:
    0. parse_request turns the raw JSON object into a request model. Values
       of the wrong type become parse errors instead of failing the request.
    1. A missing request short-circuits with a single error keyed on the
       request name; nothing else is checked.
    2. Every field rule then runs independently and accumulates, so one
       response lists every problem rather than only the first.
    3. merge_field_errors folds the parse errors from step 0 into the result.

Referential checks (walks only):
    The region and difficulty repositories are passed in by the caller and
    only read from. The lookups take no lock; a referenced row can still be
    deleted between this check and the subsequent write.
"""

from collections import defaultdict
from typing import Any, Dict, Optional, Tuple, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from nzwalks.exceptions import FieldErrors
from nzwalks.repositories.base import RegionRepository, WalkDifficultyRepository
from nzwalks.schemas.region import RegionRequest
from nzwalks.schemas.walk import WalkRequest

RequestT = TypeVar("RequestT", bound=BaseModel)


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def _missing_request(request_name: str) -> FieldErrors:
    return {request_name: [f"{request_name} cannot be empty"]}


def field_error_key(field: str) -> str:
    """Capitalize a field alias: "regionId" → "RegionId"."""
    return field[:1].upper() + field[1:]


def parse_request(
    model: Type[RequestT],
    payload: Optional[Dict[str, Any]],
) -> Tuple[Optional[RequestT], FieldErrors]:
    """
    Build a request model from a decoded JSON object, keeping whatever parses.

    A field that fails type coercion (a string for `area`, a non-UUID
    `regionId`, NaN) is reported in the returned mapping and dropped from the
    payload; the model is then built from the remaining fields, with the
    dropped ones at their defaults. This lets the field rules still run over
    everything the client got right.

    Returns:
        (request, parse_errors). `request` is None only when `payload` is None.
    """
    if payload is None:
        return None, {}

    try:
        return model.model_validate(payload), {}
    except PydanticValidationError as exc:
        # Clients may send either the camelCase alias or the attribute name
        aliases: Dict[str, str] = {}
        for name, field in model.model_fields.items():
            alias = field.alias or name
            aliases[name] = alias
            aliases[alias] = alias

        errors: FieldErrors = defaultdict(list)
        rejected = set()
        for error in exc.errors():
            loc = error.get("loc") or ("body",)
            alias = aliases.get(str(loc[0]), str(loc[0]))
            rejected.add(alias)
            errors[field_error_key(alias)].append(error.get("msg", "Invalid value"))

        remaining = {
            key: value
            for key, value in payload.items()
            if aliases.get(key, key) not in rejected
        }
        return model.model_validate(remaining), dict(errors)


def merge_field_errors(
    rule_errors: FieldErrors,
    parse_errors: Optional[FieldErrors],
) -> FieldErrors:
    """
    Combine rule and parse errors into one mapping.

    A field that could not be parsed was validated at its default value, so its
    rule messages are replaced by the parse messages.
    """
    merged = dict(rule_errors)
    merged.update(parse_errors or {})
    return merged


def validate_region_request(
    request: Optional[RegionRequest],
    request_name: str = "regionRequest",
) -> FieldErrors:
    """
    Validate an add/update region request.

    Rules:
        Code, Name:   must not be null, empty, or whitespace-only
        Area:         must be > 0
        Population:   must be >= 0
        Lat, Long:    unconstrained

    Args:
        request:      Parsed request body, or None when the body was absent
        request_name: Key used for the error when the request is missing
                      (e.g. "addRegionRequest")
    """
    if request is None:
        return _missing_request(request_name)

    errors: FieldErrors = defaultdict(list)

    if _is_blank(request.code):
        errors["Code"].append("Code cannot be null, empty or white space")

    if _is_blank(request.name):
        errors["Name"].append("Name cannot be null, empty or white space")

    if request.area <= 0:
        errors["Area"].append("Area should be greater than zero")

    if request.population < 0:
        errors["Population"].append("Population cannot be less than zero")

    return dict(errors)


async def validate_walk_request(
    request: Optional[WalkRequest],
    region_repository: RegionRepository,
    walk_difficulty_repository: WalkDifficultyRepository,
    request_name: str = "walkRequest",
) -> FieldErrors:
    """
    Validate an add/update walk request, including both foreign keys.

    Rules:
        Name:             must not be null or empty
        Length:           must be > 0
        RegionId:         must resolve via region_repository.get
        WalkDifficultyId: must resolve via walk_difficulty_repository.get

    A missing RegionId/WalkDifficultyId is reported the same way as one that
    does not resolve, without a repository call.
    """
    if request is None:
        return _missing_request(request_name)

    errors: FieldErrors = defaultdict(list)

    if not request.name:
        errors["Name"].append("Name cannot be empty")

    if request.length <= 0:
        errors["Length"].append("Length should be greater than zero")

    region = None
    if request.region_id is not None:
        region = await region_repository.get(request.region_id)
    if region is None:
        errors["RegionId"].append("RegionId is invalid")

    walk_difficulty = None
    if request.walk_difficulty_id is not None:
        walk_difficulty = await walk_difficulty_repository.get(request.walk_difficulty_id)
    if walk_difficulty is None:
        errors["WalkDifficultyId"].append("WalkDifficultyId is invalid")

    return dict(errors)
