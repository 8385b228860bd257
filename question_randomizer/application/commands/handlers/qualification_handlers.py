"""Qualification command handlers.

Same flow as the category handlers. DeleteQualificationHandler publishes
QualificationDeletedEvent once the soft delete has been committed.
"""

from datetime import UTC, datetime

from question_randomizer.application.commands.qualification_commands import (
    CreateQualification,
    CreateQualificationsBatch,
    DeleteQualification,
    UpdateQualification,
)
from question_randomizer.application.dtos import QualificationResult
from question_randomizer.core.enums import ErrorCode
from question_randomizer.core.errors import DomainError, NotFoundError
from question_randomizer.core.result import Failure, Result, Success
from question_randomizer.domain.entities.qualification import Qualification
from question_randomizer.domain.events import QualificationDeletedEvent
from question_randomizer.domain.protocols import (
    CurrentUserProtocol,
    EventBusProtocol,
    QualificationRepository,
)


def qualification_not_found(qualification_id: str) -> NotFoundError:
    return NotFoundError(
        code=ErrorCode.QUALIFICATION_NOT_FOUND,
        message="Qualification not found",
        resource_type="Qualification",
        resource_id=qualification_id,
    )


class CreateQualificationHandler:
    """Handler for CreateQualification command."""

    def __init__(
        self,
        qualification_repo: QualificationRepository,
        current_user: CurrentUserProtocol,
    ) -> None:
        self._qualification_repo = qualification_repo
        self._current_user = current_user

    async def handle(
        self, cmd: CreateQualification
    ) -> Result[QualificationResult, DomainError]:
        user_result = self._current_user.get_user_id()
        if isinstance(user_result, Failure):
            return Failure(error=user_result.error)

        now = datetime.now(UTC)
        qualification = await self._qualification_repo.create(
            Qualification(
                name=cmd.name,
                description=cmd.description,
                user_id=user_result.value,
                created_at=now,
                updated_at=now,
            )
        )
        return Success(value=QualificationResult.from_entity(qualification))


class CreateQualificationsBatchHandler:
    """Handler for CreateQualificationsBatch command (single commit)."""

    def __init__(
        self,
        qualification_repo: QualificationRepository,
        current_user: CurrentUserProtocol,
    ) -> None:
        self._qualification_repo = qualification_repo
        self._current_user = current_user

    async def handle(
        self, cmd: CreateQualificationsBatch
    ) -> Result[list[QualificationResult], DomainError]:
        user_result = self._current_user.get_user_id()
        if isinstance(user_result, Failure):
            return Failure(error=user_result.error)

        now = datetime.now(UTC)
        qualifications = await self._qualification_repo.create_many(
            [
                Qualification(
                    name=name,
                    user_id=user_result.value,
                    created_at=now,
                    updated_at=now,
                )
                for name in cmd.names
            ]
        )
        return Success(
            value=[QualificationResult.from_entity(q) for q in qualifications]
        )


class UpdateQualificationHandler:
    """Handler for UpdateQualification command."""

    def __init__(
        self,
        qualification_repo: QualificationRepository,
        current_user: CurrentUserProtocol,
    ) -> None:
        self._qualification_repo = qualification_repo
        self._current_user = current_user

    async def handle(
        self, cmd: UpdateQualification
    ) -> Result[QualificationResult, DomainError]:
        user_result = self._current_user.get_user_id()
        if isinstance(user_result, Failure):
            return Failure(error=user_result.error)

        qualification = await self._qualification_repo.get_by_id(
            cmd.qualification_id, user_result.value
        )
        if qualification is None:
            return Failure(error=qualification_not_found(cmd.qualification_id))

        qualification.name = cmd.name
        qualification.description = cmd.description
        qualification.is_active = cmd.is_active
        qualification.updated_at = datetime.now(UTC)

        if not await self._qualification_repo.update(qualification):
            return Failure(error=qualification_not_found(cmd.qualification_id))

        return Success(value=QualificationResult.from_entity(qualification))


class DeleteQualificationHandler:
    """Handler for DeleteQualification command.

    Side Effects:
        - Soft-deletes the qualification.
        - Publishes QualificationDeletedEvent after the commit.
    """

    def __init__(
        self,
        qualification_repo: QualificationRepository,
        current_user: CurrentUserProtocol,
        event_bus: EventBusProtocol,
    ) -> None:
        self._qualification_repo = qualification_repo
        self._current_user = current_user
        self._event_bus = event_bus

    async def handle(self, cmd: DeleteQualification) -> Result[None, DomainError]:
        user_result = self._current_user.get_user_id()
        if isinstance(user_result, Failure):
            return Failure(error=user_result.error)
        user_id = user_result.value

        if not await self._qualification_repo.delete(cmd.qualification_id, user_id):
            return Failure(error=qualification_not_found(cmd.qualification_id))

        await self._event_bus.publish(
            QualificationDeletedEvent(
                qualification_id=cmd.qualification_id, user_id=user_id
            )
        )
        return Success(value=None)
