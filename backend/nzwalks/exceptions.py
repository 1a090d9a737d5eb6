"""
NZWalks Backend — Custom Exception Hierarchy
==============================================

What:  Application-specific exceptions for the two failures a resource
       handler can signal.
How:   Services raise these; global handlers registered in main.py turn them
       into structured JSON responses with the right HTTP status code.

Exception Hierarchy:
    NZWalksError (base)
    ├── ValidationError   → 400 Bad Request (carries field-error mapping)
    └── NotFoundError     → 404 Not Found

Persistence failures (SQLAlchemy errors, lost connections) are deliberately
absent from this hierarchy. They propagate unchanged to the catch-all handler
and become a 500.
"""

from typing import Any, Dict, List, Optional

FieldErrors = Dict[str, List[str]]


class NZWalksError(Exception):
    """
    Base exception for all NZWalks application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(NZWalksError):
    """
    Raised when a create/update request breaks one or more field rules.

    HTTP:    400 Bad Request

    The `errors` mapping associates each invalid field name with every
    message produced for it, so the client can fix all problems at once.

    Example response:
        {
            "error": "validation_error",
            "message": "One or more validation errors occurred.",
            "errors": {"Name": ["Name cannot be empty"]},
            "request_id": "a1b2c3d4"
        }
    """

    def __init__(
        self,
        errors: FieldErrors,
        message: str = "One or more validation errors occurred.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
        self.errors = errors

    @property
    def fields(self) -> List[str]:
        return sorted(self.errors)


class NotFoundError(NZWalksError):
    """
    Raised when the repository reports no entity for the requested id.

    HTTP:    404 Not Found
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id:
            message = f"{resource} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)
        self.resource = resource
        self.resource_id = resource_id
