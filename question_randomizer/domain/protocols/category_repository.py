"""CategoryRepository protocol for category persistence.

Port (interface) for hexagonal architecture.
Infrastructure layer implements this protocol.

Every lookup is scoped by ``user_id``. A record owned by another user is
indistinguishable from a missing one: reads return None, writes return False.
"""

from typing import Protocol

from question_randomizer.domain.entities.category import Category


class CategoryRepository(Protocol):
    """Category repository protocol (port).

    Methods:
        get_by_id: Retrieve an owned category
        get_by_user_id: List a user's categories
        create: Persist a new category
        create_many: Persist several categories atomically
        update: Overwrite an owned category
        delete: Soft-delete an owned category
    """

    async def get_by_id(self, category_id: str, user_id: str) -> Category | None:
        """Find a category owned by ``user_id``.

        Args:
            category_id: Category identifier.
            user_id: Acting user.

        Returns:
            Category if found and owned, None otherwise.
        """
        ...

    async def get_by_user_id(
        self, user_id: str, is_active: bool | None = None
    ) -> list[Category]:
        """List the user's categories ordered by name.

        Args:
            user_id: Owning user.
            is_active: When set, only categories with this flag.

        Returns:
            List of categories (empty if none found).
        """
        ...

    async def create(self, category: Category) -> Category:
        """Insert a category and return it with its assigned ID."""
        ...

    async def create_many(self, categories: list[Category]) -> list[Category]:
        """Insert all categories in one transaction (all or nothing)."""
        ...

    async def update(self, category: Category) -> bool:
        """Overwrite a category. False if missing or not owned."""
        ...

    async def delete(self, category_id: str, user_id: str) -> bool:
        """Soft-delete a category. False if missing or not owned."""
        ...
