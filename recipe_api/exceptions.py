"""
Recipe API - Custom Exception Hierarchy
=========================================

What:  Application-specific exceptions for the three ways a request can fail.
Why:   Handlers raise; global exception handlers (registered in main.py) turn
       each type into a JSON body `{"error": "<message>"}` with the right status.
How:   Each exception carries a client-safe message, a status code and an
       optional context dict that is logged but never returned.

Exception Hierarchy:
    RecipeAPIError (base)
    ├── ValidationError   → 400 Bad Request (client can fix)
    ├── NotFoundError     → 404 Not Found (meal plans raise it with 400)
    └── ServerError       → 500 Internal Server Error
"""

from typing import Any, Dict, Optional


class RecipeAPIError(Exception):
    """
    Base exception for all Recipe API errors.

    Attributes:
        message:      User-facing error description (safe to return in API response)
        status_code:  HTTP status the global handler responds with
        context:      Additional debug info (logged but NOT returned to client)
    """

    status_code: int = 500

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        status_code: Optional[int] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(RecipeAPIError):
    """
    Raised when client input fails validation.

    When:    Non-numeric ids, missing required body fields, malformed recipe_ids.
    HTTP:    400 Bad Request
    """

    status_code = 400

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class NotFoundError(RecipeAPIError):
    """
    Raised when no row matches the requested id.

    HTTP:    404 by default. Meal-plan deletion reports a missing row with 400,
             so callers may pass `status_code` explicitly.
    """

    status_code = 404

    def __init__(
        self,
        message: str = "Resource not found",
        resource_id: Optional[int] = None,
        status_code: Optional[int] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, status_code=status_code, context=ctx)


class ServerError(RecipeAPIError):
    """
    Raised when a persistence call fails.

    What:    A query, insert or delete raised (connection lost, constraint
             violation, locked database...).
    HTTP:    500 Internal Server Error

    Security Note:
        The message is resource-specific but generic ("Server error while
        fetching recipes"). The driver's error text goes into the log only.
    """

    status_code = 500

    def __init__(
        self,
        message: str = "Server error",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
