"""
Common Output Schemas
The discriminated result returned by every service operation.

A result is either a success (ok=True, optional payload field set) or a
failure (ok=False, error message and ErrorCode set). Services never raise to
their callers; the API layer turns failures into HTTP errors.
"""

import enum
from typing import Optional, TypeVar

from pydantic import BaseModel, ConfigDict


OutputT = TypeVar("OutputT", bound="CoreOutput")


class ErrorCode(str, enum.Enum):
    """Closed set of failure kinds."""
    CONFLICT = "conflict"
    NOT_FOUND = "not_found"
    INVALID_CREDENTIALS = "invalid_credentials"
    INVALID_RATING = "invalid_rating"
    COULD_NOT_CREATE = "could_not_create"
    COULD_NOT_UPDATE = "could_not_update"
    INTERNAL_ERROR = "internal_error"


class CoreOutput(BaseModel):
    """
    Base result shape.

    Example:
        CoreOutput(ok=True)
        CoreOutput.fail(ErrorCode.NOT_FOUND, "Podcast with id 1 not found")
    """
    # Payload fields hold ORM instances
    model_config = ConfigDict(arbitrary_types_allowed=True)

    ok: bool
    error: Optional[str] = None
    code: Optional[ErrorCode] = None

    @classmethod
    def fail(cls: type[OutputT], code: ErrorCode, error: str) -> OutputT:
        return cls(ok=False, error=error, code=code)

    @classmethod
    def from_failure(cls: type[OutputT], result: "CoreOutput") -> OutputT:
        """Forward an upstream failure as this output type, message and code untouched."""
        return cls(ok=False, error=result.error, code=result.code)
