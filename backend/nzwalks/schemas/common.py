"""
NZWalks Backend — Error and Health Schemas
============================================

What:  Response models shared by every router: the error envelopes produced by
       the global exception handlers, and the health check payload.
Why:   Declared on each route's `responses=` so the OpenAPI docs describe the
       failure shapes as well as the success shape.
"""

from typing import Any, Dict, List, Optional, Type

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# Resource schemas serialize camelCase (regionId, walkDifficultyId) and accept
# either camelCase or the Python attribute names on input.
WIRE_MODEL_CONFIG = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
    from_attributes=True,
)

# Request bodies also reject NaN and Infinity, which the JSON parser accepts.
REQUEST_MODEL_CONFIG = ConfigDict(**WIRE_MODEL_CONFIG, allow_inf_nan=False)


class ErrorResponse(BaseModel):
    """
    Standardized error response format (404, 500).

    Example:
        {
            "error": "not_found",
            "message": "region with ID '...' was not found",
            "request_id": "a1b2c3d4"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class ValidationErrorResponse(ErrorResponse):
    """
    400 response carrying the field-error mapping.

    Example:
        {
            "error": "validation_error",
            "message": "One or more validation errors occurred.",
            "errors": {"Area": ["Area should be greater than zero"]},
            "request_id": "a1b2c3d4"
        }
    """
    errors: Dict[str, List[str]] = Field(
        description="Field name → list of messages for every rule that failed"
    )


class HealthResponse(BaseModel):
    """Health check response showing service and database status."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")


def json_request_body(model: Type[BaseModel]) -> Dict[str, Any]:
    """
    `openapi_extra` documenting `model` as the JSON request body.

    Create/update routes accept the body as a plain JSON object and build the
    model themselves (see nzwalks.services.validators.parse_request), so
    FastAPI cannot derive the schema on its own.
    """
    return {
        "requestBody": {
            "content": {"application/json": {"schema": model.model_json_schema()}},
        }
    }
