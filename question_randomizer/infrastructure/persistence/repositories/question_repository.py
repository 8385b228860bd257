"""QuestionRepository - SQLAlchemy implementation of QuestionRepository protocol.

Adapter for hexagonal architecture.
Maps between domain Question entities and the questions table.

Reference clean-up (``remove_category_id``/``remove_qualification_id``)
runs as a single UPDATE statement. It clears the ID column only; the name
snapshot column is intentionally left untouched.
"""

from datetime import UTC, datetime

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from question_randomizer.domain.entities.question import Question
from question_randomizer.infrastructure.persistence.base import ensure_utc
from question_randomizer.infrastructure.persistence.models.question import (
    Question as QuestionModel,
)


class QuestionRepository:
    """SQLAlchemy implementation of QuestionRepository protocol.

    Attributes:
        session: SQLAlchemy async session for database operations.

    Example:
        >>> repo = QuestionRepository(session)
        >>> questions = await repo.get_by_category_id(category_id, user_id)
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def get_by_id(self, question_id: str, user_id: str) -> Question | None:
        """Find a question owned by ``user_id``.

        Returns:
            Domain Question if found and owned, None otherwise.
        """
        model = await self._find_owned(question_id, user_id)
        if model is None:
            return None
        return self._to_domain(model)

    async def get_by_user_id(
        self, user_id: str, is_active: bool | None = None
    ) -> list[Question]:
        """List the user's questions, oldest first."""
        stmt = select(QuestionModel).where(QuestionModel.user_id == user_id)
        if is_active is not None:
            stmt = stmt.where(QuestionModel.is_active == is_active)
        stmt = stmt.order_by(QuestionModel.created_at, QuestionModel.id)

        result = await self.session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def get_by_category_id(
        self, category_id: str, user_id: str, is_active: bool | None = None
    ) -> list[Question]:
        """List the user's questions in one category, oldest first."""
        stmt = select(QuestionModel).where(
            QuestionModel.user_id == user_id,
            QuestionModel.category_id == category_id,
        )
        if is_active is not None:
            stmt = stmt.where(QuestionModel.is_active == is_active)
        stmt = stmt.order_by(QuestionModel.created_at, QuestionModel.id)

        result = await self.session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def create(self, question: Question) -> Question:
        """Insert a question and return it with its assigned ID."""
        model = self._to_model(question)
        self.session.add(model)
        await self.session.commit()
        return self._to_domain(model)

    async def create_many(self, questions: list[Question]) -> list[Question]:
        """Insert several questions in a single commit (all or nothing)."""
        models = [self._to_model(question) for question in questions]
        self.session.add_all(models)
        await self.session.commit()
        return [self._to_domain(model) for model in models]

    async def update(self, question: Question) -> bool:
        """Overwrite an owned question.

        Returns:
            True if updated, False if missing or not owned.
        """
        if question.id is None:
            return False
        model = await self._find_owned(question.id, question.user_id)
        if model is None:
            return False

        self._apply(model, question)
        await self.session.commit()
        return True

    async def update_many(self, questions: list[Question]) -> bool:
        """Overwrite several questions in a single commit.

        All targets are loaded first. If any of them is missing or belongs
        to someone else nothing is written.

        Returns:
            True if every question was updated, False otherwise.
        """
        models: list[QuestionModel] = []
        for question in questions:
            if question.id is None:
                return False
            model = await self._find_owned(question.id, question.user_id)
            if model is None:
                return False
            models.append(model)

        for model, question in zip(models, questions, strict=True):
            self._apply(model, question)
        await self.session.commit()
        return True

    async def delete(self, question_id: str, user_id: str) -> bool:
        """Soft-delete an owned question. False if missing or not owned."""
        model = await self._find_owned(question_id, user_id)
        if model is None:
            return False

        model.is_active = False
        model.updated_at = datetime.now(UTC)
        await self.session.commit()
        return True

    async def remove_category_id(self, category_id: str, user_id: str) -> int:
        """Clear ``category_id`` on all of the user's questions that use it.

        Returns:
            Number of questions changed.
        """
        stmt = (
            update(QuestionModel)
            .where(
                QuestionModel.user_id == user_id,
                QuestionModel.category_id == category_id,
            )
            .values(category_id=None, updated_at=datetime.now(UTC))
        )
        result = await self.session.execute(stmt)
        await self.session.commit()
        return result.rowcount  # type: ignore[attr-defined]

    async def remove_qualification_id(
        self, qualification_id: str, user_id: str
    ) -> int:
        """Clear ``qualification_id`` on all of the user's questions that use it.

        Returns:
            Number of questions changed.
        """
        stmt = (
            update(QuestionModel)
            .where(
                QuestionModel.user_id == user_id,
                QuestionModel.qualification_id == qualification_id,
            )
            .values(qualification_id=None, updated_at=datetime.now(UTC))
        )
        result = await self.session.execute(stmt)
        await self.session.commit()
        return result.rowcount  # type: ignore[attr-defined]

    async def _find_owned(self, question_id: str, user_id: str) -> QuestionModel | None:
        stmt = select(QuestionModel).where(
            QuestionModel.id == question_id,
            QuestionModel.user_id == user_id,
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    # =========================================================================
    # Entity ↔ Model Mapping (Private Methods)
    # =========================================================================

    def _apply(self, model: QuestionModel, question: Question) -> None:
        """Copy mutable fields from the entity onto an existing row."""
        model.question_text = question.question_text
        model.answer = question.answer
        model.answer_pl = question.answer_pl
        model.category_id = question.category_id
        model.category_name = question.category_name
        model.qualification_id = question.qualification_id
        model.qualification_name = question.qualification_name
        model.is_active = question.is_active
        model.tags = list(question.tags) if question.tags is not None else None
        model.updated_at = question.updated_at or datetime.now(UTC)

    def _to_domain(self, model: QuestionModel) -> Question:
        """Convert database model to domain entity."""
        return Question(
            id=model.id,
            question_text=model.question_text,
            answer=model.answer,
            answer_pl=model.answer_pl,
            category_id=model.category_id,
            category_name=model.category_name,
            qualification_id=model.qualification_id,
            qualification_name=model.qualification_name,
            is_active=model.is_active,
            user_id=model.user_id,
            tags=list(model.tags) if model.tags is not None else None,
            created_at=ensure_utc(model.created_at),
            updated_at=ensure_utc(model.updated_at),
        )

    def _to_model(self, entity: Question) -> QuestionModel:
        """Convert domain entity to database model (ID left to the store)."""
        return QuestionModel(
            question_text=entity.question_text,
            answer=entity.answer,
            answer_pl=entity.answer_pl,
            category_id=entity.category_id,
            category_name=entity.category_name,
            qualification_id=entity.qualification_id,
            qualification_name=entity.qualification_name,
            is_active=entity.is_active,
            user_id=entity.user_id,
            tags=list(entity.tags) if entity.tags is not None else None,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )
