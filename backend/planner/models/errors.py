"""Error and warning models returned by the API."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class ErrorCode(str, Enum):
    """Machine-readable error codes."""

    VALIDATION_ERROR = "VALIDATION_ERROR"
    NO_POIS_FOUND = "NO_POIS_FOUND"
    PROVIDER_ERROR = "PROVIDER_ERROR"
    API_ERROR = "API_ERROR"


class AppError(BaseModel):
    """Error payload shared by every endpoint."""

    code: ErrorCode
    message: str = Field(..., description="Technical message for logs and debugging")
    user_message: str = Field(..., description="Message safe to show to the traveler")


class PlanWarning(BaseModel):
    """Non-fatal problem encountered while building an itinerary."""

    code: ErrorCode
    message: str
    city: Optional[str] = None
