"""Category commands.

Commands are immutable value objects representing user intent. None of
them carries a user ID: handlers resolve the acting user themselves.
"""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class CreateCategory:
    """Create one category.

    Attributes:
        name: Display name (required, ≤100 chars).
        description: Optional free text.
    """

    name: str
    description: str | None = None


@dataclass(frozen=True, kw_only=True)
class CreateCategoriesBatch:
    """Create up to 100 categories atomically from a list of names."""

    names: list[str]


@dataclass(frozen=True, kw_only=True)
class UpdateCategory:
    """Overwrite an owned category.

    Attributes:
        category_id: Category to update.
        name: New display name.
        description: New description (None clears it).
        is_active: New activity flag.
    """

    category_id: str
    name: str
    description: str | None = None
    is_active: bool = True


@dataclass(frozen=True, kw_only=True)
class DeleteCategory:
    """Soft-delete an owned category and notify dependants."""

    category_id: str
