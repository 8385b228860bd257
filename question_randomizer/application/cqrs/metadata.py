"""CQRS Metadata Types.

Dataclasses and enums for CQRS registry metadata.
These types define the structure of command and query registry entries.

Design Principles:
- Immutable (frozen=True) - registry entries never change at runtime
- Type-safe (kw_only=True) - explicit field assignment
- Self-documenting - clear field names and docstrings
"""

from dataclasses import dataclass
from enum import Enum


class CQRSCategory(str, Enum):
    """Functional area a command or query belongs to."""

    CATEGORY = "category"
    QUALIFICATION = "qualification"
    QUESTION = "question"
    CONVERSATION = "conversation"
    RANDOMIZATION = "randomization"


@dataclass(frozen=True, kw_only=True)
class CommandMetadata:
    """Metadata for a command in the CQRS registry.

    Attributes:
        command_class: The command dataclass (e.g., CreateCategory).
        handler_class: The handler class (e.g., CreateCategoryHandler).
        category: Functional category for organization.
        validator_class: Validator run by the dispatcher before the handler.
        has_result_dto: Whether handler returns a result DTO (vs None/int).
        result_dto_class: The DTO class if has_result_dto is True.
        emits_events: Whether this command publishes domain events.
        description: Human-readable description for documentation.

    Example:
        >>> CommandMetadata(
        ...     command_class=DeleteCategory,
        ...     handler_class=DeleteCategoryHandler,
        ...     category=CQRSCategory.CATEGORY,
        ...     emits_events=True,
        ...     description="Soft-delete a category and clear question references",
        ... )
    """

    command_class: type
    handler_class: type
    category: CQRSCategory
    validator_class: type | None = None
    has_result_dto: bool = False
    result_dto_class: type | None = None
    emits_events: bool = False
    description: str = ""

    def __post_init__(self) -> None:
        """Validate metadata consistency."""
        if self.has_result_dto and self.result_dto_class is None:
            raise ValueError(
                f"Command {self.command_class.__name__} has has_result_dto=True "
                f"but no result_dto_class specified"
            )
        if not self.has_result_dto and self.result_dto_class is not None:
            raise ValueError(
                f"Command {self.command_class.__name__} has result_dto_class "
                f"but has_result_dto=False"
            )

    @property
    def request_class(self) -> type:
        return self.command_class


@dataclass(frozen=True, kw_only=True)
class QueryMetadata:
    """Metadata for a query in the CQRS registry.

    Queries never change state.

    Attributes:
        query_class: The query dataclass (e.g., GetCategories).
        handler_class: The handler class (e.g., GetCategoriesHandler).
        category: Functional category for organization.
        validator_class: Optional validator run before the handler.
        description: Human-readable description for documentation.
    """

    query_class: type
    handler_class: type
    category: CQRSCategory
    validator_class: type | None = None
    description: str = ""

    @property
    def request_class(self) -> type:
        return self.query_class
