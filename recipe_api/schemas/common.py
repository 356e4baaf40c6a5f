"""
Recipe API - Shared Response Schemas
======================================

What:  Response shapes used by more than one route: plain messages, errors and
       the health check. Also the value range of the INTEGER columns, shared by
       request validation and the id lookups.
"""

from pydantic import BaseModel, Field

# Range of the INTEGER columns (4 bytes on PostgreSQL)
INTEGER_MIN = -(2**31)
INTEGER_MAX = 2**31 - 1


def fits_integer_column(value: int) -> bool:
    """True when `value` can be bound to an INTEGER column without overflow."""
    return INTEGER_MIN <= value <= INTEGER_MAX


class MessageResponse(BaseModel):
    """A bare confirmation, e.g. `{"message": "Ok"}`."""

    message: str


class ErrorResponse(BaseModel):
    """
    What:  The single error format of the API.
    Why:   Clients read one string field regardless of what went wrong.

    Example:
        {"error": "Recipe not found"}
    """

    error: str = Field(description="Human-readable error description")


class HealthResponse(BaseModel):
    """
    What:  Health check response showing service and database status.
    Who:   Returned by GET /health for monitoring and load balancer probes.
    """

    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
