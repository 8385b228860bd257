"""CategoryRepository - SQLAlchemy implementation of CategoryRepository protocol.

Adapter for hexagonal architecture.
Maps between domain Category entities and the categories table.

Every write commits immediately, so a successful ``delete`` is durable
before the caller publishes CategoryDeletedEvent.
"""

from datetime import UTC, datetime

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from question_randomizer.domain.entities.category import Category
from question_randomizer.infrastructure.persistence.base import ensure_utc
from question_randomizer.infrastructure.persistence.models.category import (
    Category as CategoryModel,
)


class CategoryRepository:
    """SQLAlchemy implementation of CategoryRepository protocol.

    This class does NOT inherit from the protocol (Protocol uses structural typing).

    Attributes:
        session: SQLAlchemy async session for database operations.

    Example:
        >>> async with database.get_session() as session:
        ...     repo = CategoryRepository(session)
        ...     category = await repo.get_by_id(category_id, user_id)
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def get_by_id(self, category_id: str, user_id: str) -> Category | None:
        """Find a category owned by ``user_id``.

        Args:
            category_id: Category identifier.
            user_id: Acting user.

        Returns:
            Domain Category if found and owned, None otherwise.
        """
        model = await self._find_owned(category_id, user_id)
        if model is None:
            return None
        return self._to_domain(model)

    async def get_by_user_id(
        self, user_id: str, is_active: bool | None = None
    ) -> list[Category]:
        """List the user's categories ordered by name.

        Args:
            user_id: Owning user.
            is_active: Optional activity filter.

        Returns:
            List of categories (empty if none found).
        """
        stmt = select(CategoryModel).where(CategoryModel.user_id == user_id)
        if is_active is not None:
            stmt = stmt.where(CategoryModel.is_active == is_active)
        stmt = stmt.order_by(CategoryModel.name, CategoryModel.id)

        result = await self.session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def create(self, category: Category) -> Category:
        """Insert a category.

        Args:
            category: Category to persist (``id`` is ignored).

        Returns:
            The persisted category with its assigned ID.
        """
        model = self._to_model(category)
        self.session.add(model)
        await self.session.commit()
        return self._to_domain(model)

    async def create_many(self, categories: list[Category]) -> list[Category]:
        """Insert several categories in a single commit.

        Either every row is written or, if the flush fails, none is.

        Args:
            categories: Categories to persist.

        Returns:
            Persisted categories in input order.
        """
        models = [self._to_model(category) for category in categories]
        self.session.add_all(models)
        await self.session.commit()
        return [self._to_domain(model) for model in models]

    async def update(self, category: Category) -> bool:
        """Overwrite the mutable fields of an owned category.

        Args:
            category: Category carrying its ID, owner and new values.

        Returns:
            True if updated, False if missing or not owned.
        """
        if category.id is None:
            return False
        model = await self._find_owned(category.id, category.user_id)
        if model is None:
            return False

        model.name = category.name
        model.description = category.description
        model.is_active = category.is_active
        model.updated_at = category.updated_at or datetime.now(UTC)
        await self.session.commit()
        return True

    async def delete(self, category_id: str, user_id: str) -> bool:
        """Soft-delete an owned category (``is_active=False``).

        Args:
            category_id: Category identifier.
            user_id: Acting user.

        Returns:
            True if deleted, False if missing or not owned.
        """
        model = await self._find_owned(category_id, user_id)
        if model is None:
            return False

        model.is_active = False
        model.updated_at = datetime.now(UTC)
        await self.session.commit()
        return True

    async def _find_owned(self, category_id: str, user_id: str) -> CategoryModel | None:
        stmt = select(CategoryModel).where(
            CategoryModel.id == category_id,
            CategoryModel.user_id == user_id,
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    # =========================================================================
    # Entity ↔ Model Mapping (Private Methods)
    # =========================================================================

    def _to_domain(self, model: CategoryModel) -> Category:
        """Convert database model to domain entity."""
        return Category(
            id=model.id,
            name=model.name,
            description=model.description,
            is_active=model.is_active,
            user_id=model.user_id,
            created_at=ensure_utc(model.created_at),
            updated_at=ensure_utc(model.updated_at),
        )

    def _to_model(self, entity: Category) -> CategoryModel:
        """Convert domain entity to database model (ID left to the store)."""
        return CategoryModel(
            name=entity.name,
            description=entity.description,
            is_active=entity.is_active,
            user_id=entity.user_id,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )
