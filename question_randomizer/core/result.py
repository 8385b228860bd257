"""Result types for railway-oriented programming.

Handlers never raise for expected failures (not found, validation,
missing identity). They return a Result and the caller pattern-matches:

Usage:
    result = await mediator.send(GetCategoryById(category_id=category_id))
    match result:
        case Success(value=category):
            ...
        case Failure(error=error):
            ...

Both variants are keyword-only dataclasses, so patterns must name the
attribute (``Success(value=...)``, ``Failure(error=...)``).
"""

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


Result: TypeAlias = Success[T] | Failure[E]
