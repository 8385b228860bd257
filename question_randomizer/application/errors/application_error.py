"""Application layer error types.

Domain errors are mapped to ApplicationError at the presentation edge, and
the error response builder turns those into HTTP problem responses.

Exports:
    ApplicationErrorCode: Application-level error code enum
    ApplicationError: Application layer error dataclass
"""

from dataclasses import dataclass
from enum import Enum

from question_randomizer.core.errors import (
    AuthenticationError,
    DomainError,
    NotFoundError,
    RequestValidationError,
    ValidationError,
)


class ApplicationErrorCode(Enum):
    """Application-level error codes.

    Examples:
        >>> error = ApplicationError(
        ...     code=ApplicationErrorCode.NOT_FOUND,
        ...     message="Category not found",
        ... )
    """

    COMMAND_VALIDATION_FAILED = "command_validation_failed"
    UNAUTHORIZED = "unauthorized"
    NOT_FOUND = "not_found"
    COMMAND_EXECUTION_FAILED = "command_execution_failed"


@dataclass(frozen=True, slots=True, kw_only=True)
class ApplicationError:
    """Application layer error.

    Attributes:
        code: Application error code (from ApplicationErrorCode enum)
        message: Human-readable error message
        domain_error: Original domain error (if error originated from domain layer)
        details: Additional context as key-value pairs
    """

    code: ApplicationErrorCode
    message: str
    domain_error: DomainError | None = None
    details: dict[str, str] | None = None

    @classmethod
    def from_domain_error(cls, error: DomainError) -> "ApplicationError":
        """Classify a handler failure.

        Validation failures (single or aggregated) become
        COMMAND_VALIDATION_FAILED, missing identity UNAUTHORIZED, and
        missing or foreign records NOT_FOUND.
        """
        match error:
            case RequestValidationError() | ValidationError():
                code = ApplicationErrorCode.COMMAND_VALIDATION_FAILED
            case AuthenticationError():
                code = ApplicationErrorCode.UNAUTHORIZED
            case NotFoundError():
                code = ApplicationErrorCode.NOT_FOUND
            case _:
                code = ApplicationErrorCode.COMMAND_EXECUTION_FAILED

        return cls(code=code, message=error.message, domain_error=error)
