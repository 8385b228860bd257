"""Common error classes used across all layers.

Error Types:
- ValidationError: A single field rule violation
- RequestValidationError: Every violation found for one command/query
- NotFoundError: Resource missing, or owned by a different user
- AuthenticationError: No resolvable current user

Usage:
    return Failure(
        error=NotFoundError(
            code=ErrorCode.CATEGORY_NOT_FOUND,
            message="Category not found",
            resource_type="Category",
            resource_id=category_id,
        )
    )
"""

from dataclasses import dataclass, field

from question_randomizer.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure for one field.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        field: Field path that failed validation (``names[3]`` for elements).
        rule: Name of the rule that rejected the value.
        details: Additional context.
    """

    field: str | None = None
    rule: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class RequestValidationError(DomainError):
    """Aggregate of every rule violation found on a request.

    Attributes:
        code: ErrorCode enum (always VALIDATION_FAILED).
        message: Summary message.
        violations: Ordered field-level violations.
        details: Additional context.
    """

    violations: list[ValidationError] = field(default_factory=list)


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """Resource not found.

    Ownership failures are reported through this type too, so callers
    cannot tell a foreign record from a missing one.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        resource_type: Type of resource (Category, Question, etc.).
        resource_id: ID of the resource that was not found.
        details: Additional context.
    """

    resource_type: str
    resource_id: str


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthenticationError(DomainError):
    """No authenticated user could be resolved for the request.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        details: Additional context.
    """

    pass
