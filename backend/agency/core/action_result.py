"""Action Result — the success/failure envelope every server action returns.

Invariants:
    - ActionResult is exactly ActionSuccess | ActionFailure (closed union)
    - ActionFailure.code is one of FailureCode — callers branch on it, never on message text
    - to_dict() is the wire shape: {"success": true, "data"} | {"success": false, "error", "code", "details"?}

Design Decisions:
    - Frozen dataclasses consumed with `match` at each call site instead of
      exception-based control flow
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class FailureCode(str, Enum):
    """Distinct failure shapes — inline field errors, conflict toast, 404, generic toast."""
    VALIDATION_ERROR = "VALIDATION_ERROR"
    CONFLICT = "CONFLICT"
    NOT_FOUND = "NOT_FOUND"
    UNAUTHORIZED = "UNAUTHORIZED"
    FORBIDDEN = "FORBIDDEN"
    INTERNAL_ERROR = "INTERNAL_ERROR"


FAILURE_HTTP_STATUS: dict[FailureCode, int] = {
    FailureCode.VALIDATION_ERROR: 400,
    FailureCode.UNAUTHORIZED: 401,
    FailureCode.FORBIDDEN: 403,
    FailureCode.NOT_FOUND: 404,
    FailureCode.CONFLICT: 409,
    FailureCode.INTERNAL_ERROR: 500,
}


@dataclass(frozen=True)
class ActionSuccess(Generic[T]):
    data: T

    def to_dict(self) -> dict:
        return {"success": True, "data": self.data}


@dataclass(frozen=True)
class ActionFailure:
    error: str
    code: FailureCode
    details: dict[str, Any] | None = None

    @property
    def http_status(self) -> int:
        return FAILURE_HTTP_STATUS[self.code]

    def to_dict(self) -> dict:
        body: dict[str, Any] = {
            "success": False,
            "error": self.error,
            "code": self.code.value,
        }
        if self.details is not None:
            body["details"] = self.details
        return body


ActionResult = ActionSuccess[T] | ActionFailure


def validation_failure(
    field_errors: dict[str, list[str]], message: str = "Validation failed",
) -> ActionFailure:
    return ActionFailure(
        error=message,
        code=FailureCode.VALIDATION_ERROR,
        details={"validation_errors": field_errors},
    )
