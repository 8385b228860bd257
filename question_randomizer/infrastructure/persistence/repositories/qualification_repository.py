"""QualificationRepository - SQLAlchemy implementation of QualificationRepository protocol.

Adapter for hexagonal architecture. Same storage rules as categories:
owner-scoped lookups, soft delete, one commit per write.
"""

from datetime import UTC, datetime

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from question_randomizer.domain.entities.qualification import Qualification
from question_randomizer.infrastructure.persistence.base import ensure_utc
from question_randomizer.infrastructure.persistence.models.qualification import (
    Qualification as QualificationModel,
)


class QualificationRepository:
    """SQLAlchemy implementation of QualificationRepository protocol.

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
        self, qualification_id: str, user_id: str
    ) -> Qualification | None:
        """Find a qualification owned by ``user_id``."""
        model = await self._find_owned(qualification_id, user_id)
        if model is None:
            return None
        return self._to_domain(model)

    async def get_by_user_id(
        self, user_id: str, is_active: bool | None = None
    ) -> list[Qualification]:
        """List the user's qualifications ordered by name."""
        stmt = select(QualificationModel).where(QualificationModel.user_id == user_id)
        if is_active is not None:
            stmt = stmt.where(QualificationModel.is_active == is_active)
        stmt = stmt.order_by(QualificationModel.name, QualificationModel.id)

        result = await self.session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def create(self, qualification: Qualification) -> Qualification:
        """Insert a qualification and return it with its assigned ID."""
        model = self._to_model(qualification)
        self.session.add(model)
        await self.session.commit()
        return self._to_domain(model)

    async def create_many(
        self, qualifications: list[Qualification]
    ) -> list[Qualification]:
        """Insert several qualifications in a single commit (all or nothing)."""
        models = [self._to_model(qualification) for qualification in qualifications]
        self.session.add_all(models)
        await self.session.commit()
        return [self._to_domain(model) for model in models]

    async def update(self, qualification: Qualification) -> bool:
        """Overwrite an owned qualification. False if missing or not owned."""
        if qualification.id is None:
            return False
        model = await self._find_owned(qualification.id, qualification.user_id)
        if model is None:
            return False

        model.name = qualification.name
        model.description = qualification.description
        model.is_active = qualification.is_active
        model.updated_at = qualification.updated_at or datetime.now(UTC)
        await self.session.commit()
        return True

    async def delete(self, qualification_id: str, user_id: str) -> bool:
        """Soft-delete an owned qualification. False if missing or not owned."""
        model = await self._find_owned(qualification_id, user_id)
        if model is None:
            return False

        model.is_active = False
        model.updated_at = datetime.now(UTC)
        await self.session.commit()
        return True

    async def _find_owned(
        self, qualification_id: str, user_id: str
    ) -> QualificationModel | None:
        stmt = select(QualificationModel).where(
            QualificationModel.id == qualification_id,
            QualificationModel.user_id == user_id,
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    def _to_domain(self, model: QualificationModel) -> Qualification:
        return Qualification(
            id=model.id,
            name=model.name,
            description=model.description,
            is_active=model.is_active,
            user_id=model.user_id,
            created_at=ensure_utc(model.created_at),
            updated_at=ensure_utc(model.updated_at),
        )

    def _to_model(self, entity: Qualification) -> QualificationModel:
        return QualificationModel(
            name=entity.name,
            description=entity.description,
            is_active=entity.is_active,
            user_id=entity.user_id,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )
