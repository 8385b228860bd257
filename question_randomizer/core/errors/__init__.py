"""Core errors package.

Usage:
    from question_randomizer.core.errors import DomainError, NotFoundError
"""

from question_randomizer.core.errors.common_errors import (
    AuthenticationError,
    NotFoundError,
    RequestValidationError,
    ValidationError,
)
from question_randomizer.core.errors.configuration_error import ConfigurationError
from question_randomizer.core.errors.domain_error import DomainError

__all__ = [
    "AuthenticationError",
    "ConfigurationError",
    "DomainError",
    "NotFoundError",
    "RequestValidationError",
    "ValidationError",
]
