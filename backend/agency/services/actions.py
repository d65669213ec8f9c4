"""Action Runner — the single classification point for server action failures.

Invariants:
    - run_action never raises: every exception becomes an ActionFailure
    - Input rejected by parse_input -> VALIDATION_ERROR with field details;
      a pydantic error raised anywhere else (output serialization) is INTERNAL_ERROR
    - ConflictError -> CONFLICT, NotFoundError -> NOT_FOUND,
      AuthenticationError -> UNAUTHORIZED, PermissionDeniedError -> FORBIDDEN
    - Anything else -> INTERNAL_ERROR with a generic message; the raw error
      is logged with its traceback and never returned to the caller

Design Decisions:
    - Actions wrap their body in a zero-argument coroutine function so input
      parsing, the repository call and revalidation share one guard
"""

import logging
from typing import Any, Awaitable, Callable, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from agency.core.action_result import (
    ActionFailure, ActionResult, ActionSuccess, FailureCode, validation_failure,
)
from agency.core.errors import (
    AgencyError, AuthenticationError, ConflictError, NotFoundError,
    PermissionDeniedError, ValidationError, format_validation_errors,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")
M = TypeVar("M", bound=BaseModel)


def parse_input(schema: type[M], raw: Any) -> M:
    """Validate untrusted input; rejection raises the domain ValidationError."""
    if isinstance(raw, schema):
        return raw
    try:
        return schema.model_validate(raw if raw is not None else {})
    except PydanticValidationError as e:
        raise ValidationError(
            "Validation failed", format_validation_errors(e.errors()),
        ) from e


async def run_action(
    name: str,
    operation: Callable[[], Awaitable[T]],
    failure_message: str,
    **log_context: Any,
) -> ActionResult:
    try:
        return ActionSuccess(await operation())
    except ValidationError as e:
        logger.info(f"{name}: {e.message}", extra={"action": name, **log_context})
        return validation_failure(e.field_errors, e.message)
    except ConflictError as e:
        logger.info(f"{name}: {e.message}", extra={"action": name, **log_context})
        return ActionFailure(e.message, FailureCode.CONFLICT)
    except NotFoundError as e:
        return ActionFailure(e.message, FailureCode.NOT_FOUND)
    except AuthenticationError as e:
        logger.warning(f"{name}: {e.message}", extra={"action": name, **log_context})
        return ActionFailure(e.message, FailureCode.UNAUTHORIZED)
    except PermissionDeniedError as e:
        logger.warning(f"{name}: {e.message}", extra={"action": name, **log_context})
        return ActionFailure(e.message, FailureCode.FORBIDDEN)
    except AgencyError as e:
        logger.error(
            f"{name} failed: {e.message}",
            extra={"action": name, "error_code": e.code, **log_context},
        )
        return ActionFailure(failure_message, FailureCode.INTERNAL_ERROR)
    except Exception as e:
        logger.error(
            f"{name} failed: {e}",
            exc_info=True,
            extra={"action": name, "error_code": "INTERNAL_ERROR", **log_context},
        )
        return ActionFailure(failure_message, FailureCode.INTERNAL_ERROR)
