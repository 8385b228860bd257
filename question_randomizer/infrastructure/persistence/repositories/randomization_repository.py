"""Randomization repositories (SQLAlchemy adapters).

RandomizationRepository persists sessions. The three item repositories
persist the per-session lists and filter every statement by both
``randomization_id`` and ``user_id``.
"""

from datetime import UTC, datetime

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from question_randomizer.domain.entities.randomization import (
    PostponedQuestion,
    Randomization,
    SelectedCategory,
    UsedQuestion,
)
from question_randomizer.infrastructure.persistence.base import ensure_utc
from question_randomizer.infrastructure.persistence.models.randomization import (
    PostponedQuestion as PostponedQuestionModel,
)
from question_randomizer.infrastructure.persistence.models.randomization import (
    Randomization as RandomizationModel,
)
from question_randomizer.infrastructure.persistence.models.randomization import (
    SelectedCategory as SelectedCategoryModel,
)
from question_randomizer.infrastructure.persistence.models.randomization import (
    UsedQuestion as UsedQuestionModel,
)


class RandomizationRepository:
    """SQLAlchemy implementation of RandomizationRepository protocol.

    Attributes:
        session: SQLAlchemy async session for database operations.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def get_by_id(
        self, randomization_id: str, user_id: str
    ) -> Randomization | None:
        """Find a randomization owned by ``user_id``."""
        model = await self._find_owned(randomization_id, user_id)
        if model is None:
            return None
        return self._to_domain(model)

    async def get_active_by_user_id(self, user_id: str) -> Randomization | None:
        """Return the user's most recently created active randomization."""
        stmt = (
            select(RandomizationModel)
            .where(
                RandomizationModel.user_id == user_id,
                RandomizationModel.is_active == True,  # noqa: E712
            )
            .order_by(RandomizationModel.created_at.desc(), RandomizationModel.id.desc())
            .limit(1)
        )
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        if model is None:
            return None
        return self._to_domain(model)

    async def get_by_user_id(self, user_id: str) -> list[Randomization]:
        """List the user's randomizations, newest first."""
        stmt = (
            select(RandomizationModel)
            .where(RandomizationModel.user_id == user_id)
            .order_by(RandomizationModel.created_at.desc(), RandomizationModel.id.desc())
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def create(self, randomization: Randomization) -> Randomization:
        """Insert a randomization and return it with its assigned ID."""
        model = RandomizationModel(
            user_id=randomization.user_id,
            is_active=randomization.is_active,
            show_answer=randomization.show_answer,
            status=randomization.status,
            current_question_id=randomization.current_question_id,
            created_at=randomization.created_at,
            updated_at=randomization.updated_at,
        )
        self.session.add(model)
        await self.session.commit()
        return self._to_domain(model)

    async def update(self, randomization: Randomization) -> bool:
        """Overwrite an owned randomization. False if missing or not owned."""
        if randomization.id is None:
            return False
        model = await self._find_owned(randomization.id, randomization.user_id)
        if model is None:
            return False

        model.is_active = randomization.is_active
        model.show_answer = randomization.show_answer
        model.status = randomization.status
        model.current_question_id = randomization.current_question_id
        model.updated_at = randomization.updated_at or datetime.now(UTC)
        await self.session.commit()
        return True

    async def clear_current_question(self, randomization_id: str, user_id: str) -> bool:
        """Unset ``current_question_id``. False if missing or not owned."""
        model = await self._find_owned(randomization_id, user_id)
        if model is None:
            return False

        model.current_question_id = None
        model.updated_at = datetime.now(UTC)
        await self.session.commit()
        return True

    async def delete(self, randomization_id: str, user_id: str) -> bool:
        """Hard-delete an owned randomization and its item lists.

        Returns:
            True if deleted, False if missing or not owned.
        """
        model = await self._find_owned(randomization_id, user_id)
        if model is None:
            return False

        for item_model in (
            SelectedCategoryModel,
            UsedQuestionModel,
            PostponedQuestionModel,
        ):
            await self.session.execute(
                delete(item_model).where(item_model.randomization_id == randomization_id)
            )
        await self.session.delete(model)
        await self.session.commit()
        return True

    async def _find_owned(
        self, randomization_id: str, user_id: str
    ) -> RandomizationModel | None:
        stmt = select(RandomizationModel).where(
            RandomizationModel.id == randomization_id,
            RandomizationModel.user_id == user_id,
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    def _to_domain(self, model: RandomizationModel) -> Randomization:
        return Randomization(
            id=model.id,
            user_id=model.user_id,
            is_active=model.is_active,
            show_answer=model.show_answer,
            status=model.status,
            current_question_id=model.current_question_id,
            created_at=ensure_utc(model.created_at),
            updated_at=ensure_utc(model.updated_at),
        )


class SelectedCategoryRepository:
    """Selected categories of a randomization."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get_by_randomization_id(
        self, randomization_id: str, user_id: str
    ) -> list[SelectedCategory]:
        stmt = (
            select(SelectedCategoryModel)
            .where(
                SelectedCategoryModel.randomization_id == randomization_id,
                SelectedCategoryModel.user_id == user_id,
            )
            .order_by(SelectedCategoryModel.created_at, SelectedCategoryModel.id)
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def create(self, item: SelectedCategory) -> SelectedCategory:
        model = SelectedCategoryModel(
            randomization_id=item.randomization_id,
            user_id=item.user_id,
            category_id=item.category_id,
            category_name=item.category_name,
            created_at=item.created_at,
        )
        self.session.add(model)
        await self.session.commit()
        return self._to_domain(model)

    async def delete_by_category_id(
        self, randomization_id: str, user_id: str, category_id: str
    ) -> bool:
        """Delete the oldest item for ``category_id``. False when none matched."""
        stmt = (
            select(SelectedCategoryModel)
            .where(
                SelectedCategoryModel.randomization_id == randomization_id,
                SelectedCategoryModel.user_id == user_id,
                SelectedCategoryModel.category_id == category_id,
            )
            .order_by(SelectedCategoryModel.created_at, SelectedCategoryModel.id)
            .limit(1)
        )
        model = (await self.session.execute(stmt)).scalar_one_or_none()
        if model is None:
            return False

        await self.session.delete(model)
        await self.session.commit()
        return True

    def _to_domain(self, model: SelectedCategoryModel) -> SelectedCategory:
        return SelectedCategory(
            id=model.id,
            randomization_id=model.randomization_id,
            user_id=model.user_id,
            category_id=model.category_id,
            category_name=model.category_name,
            created_at=ensure_utc(model.created_at),
        )


class UsedQuestionRepository:
    """Used questions of a randomization."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get_by_randomization_id(
        self, randomization_id: str, user_id: str
    ) -> list[UsedQuestion]:
        stmt = (
            select(UsedQuestionModel)
            .where(
                UsedQuestionModel.randomization_id == randomization_id,
                UsedQuestionModel.user_id == user_id,
            )
            .order_by(UsedQuestionModel.created_at, UsedQuestionModel.id)
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def create(self, item: UsedQuestion) -> UsedQuestion:
        model = UsedQuestionModel(
            randomization_id=item.randomization_id,
            user_id=item.user_id,
            question_id=item.question_id,
            category_id=item.category_id,
            category_name=item.category_name,
            created_at=item.created_at,
        )
        self.session.add(model)
        await self.session.commit()
        return self._to_domain(model)

    async def delete_by_question_id(
        self, randomization_id: str, user_id: str, question_id: str
    ) -> bool:
        """Delete the oldest item for ``question_id``. False when none matched."""
        stmt = (
            select(UsedQuestionModel)
            .where(
                UsedQuestionModel.randomization_id == randomization_id,
                UsedQuestionModel.user_id == user_id,
                UsedQuestionModel.question_id == question_id,
            )
            .order_by(UsedQuestionModel.created_at, UsedQuestionModel.id)
            .limit(1)
        )
        model = (await self.session.execute(stmt)).scalar_one_or_none()
        if model is None:
            return False

        await self.session.delete(model)
        await self.session.commit()
        return True

    async def update_category(
        self,
        randomization_id: str,
        user_id: str,
        category_id: str,
        category_name: str,
    ) -> int:
        """Rename the category snapshot on every matching used question."""
        stmt = (
            update(UsedQuestionModel)
            .where(
                UsedQuestionModel.randomization_id == randomization_id,
                UsedQuestionModel.user_id == user_id,
                UsedQuestionModel.category_id == category_id,
            )
            .values(category_name=category_name)
        )
        result = await self.session.execute(stmt)
        await self.session.commit()
        return result.rowcount  # type: ignore[attr-defined]

    def _to_domain(self, model: UsedQuestionModel) -> UsedQuestion:
        return UsedQuestion(
            id=model.id,
            randomization_id=model.randomization_id,
            user_id=model.user_id,
            question_id=model.question_id,
            category_id=model.category_id,
            category_name=model.category_name,
            created_at=ensure_utc(model.created_at),
        )


class PostponedQuestionRepository:
    """Postponed questions of a randomization."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get_by_randomization_id(
        self, randomization_id: str, user_id: str
    ) -> list[PostponedQuestion]:
        stmt = (
            select(PostponedQuestionModel)
            .where(
                PostponedQuestionModel.randomization_id == randomization_id,
                PostponedQuestionModel.user_id == user_id,
            )
            .order_by(PostponedQuestionModel.timestamp, PostponedQuestionModel.id)
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def create(self, item: PostponedQuestion) -> PostponedQuestion:
        model = PostponedQuestionModel(
            randomization_id=item.randomization_id,
            user_id=item.user_id,
            question_id=item.question_id,
            timestamp=item.timestamp,
            created_at=item.timestamp,
        )
        self.session.add(model)
        await self.session.commit()
        return self._to_domain(model)

    async def delete_by_question_id(
        self, randomization_id: str, user_id: str, question_id: str
    ) -> bool:
        """Delete the oldest item for ``question_id``. False when none matched."""
        model = await self._find_first(randomization_id, user_id, question_id)
        if model is None:
            return False

        await self.session.delete(model)
        await self.session.commit()
        return True

    async def update_timestamp(
        self,
        randomization_id: str,
        user_id: str,
        question_id: str,
        timestamp: datetime,
    ) -> bool:
        """Move the first matching postponed question to ``timestamp``."""
        model = await self._find_first(randomization_id, user_id, question_id)
        if model is None:
            return False

        model.timestamp = timestamp
        await self.session.commit()
        return True

    async def _find_first(
        self, randomization_id: str, user_id: str, question_id: str
    ) -> PostponedQuestionModel | None:
        stmt = (
            select(PostponedQuestionModel)
            .where(
                PostponedQuestionModel.randomization_id == randomization_id,
                PostponedQuestionModel.user_id == user_id,
                PostponedQuestionModel.question_id == question_id,
            )
            .order_by(PostponedQuestionModel.timestamp, PostponedQuestionModel.id)
            .limit(1)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    def _to_domain(self, model: PostponedQuestionModel) -> PostponedQuestion:
        return PostponedQuestion(
            id=model.id,
            randomization_id=model.randomization_id,
            user_id=model.user_id,
            question_id=model.question_id,
            timestamp=ensure_utc(model.timestamp),  # type: ignore[arg-type]
        )
