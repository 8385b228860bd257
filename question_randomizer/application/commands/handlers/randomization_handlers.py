"""Randomization session command handlers.

Item handlers (selected categories, used and postponed questions) first
check that the parent session belongs to the acting user. A missing or
foreign session is RANDOMIZATION_NOT_FOUND; a delete that matches no item
is reported with the item's own not-found code.
"""

from datetime import UTC, datetime

from question_randomizer.application.commands.randomization_commands import (
    AddPostponedQuestion,
    AddSelectedCategory,
    AddUsedQuestion,
    ClearCurrentQuestion,
    CreateRandomization,
    DeletePostponedQuestion,
    DeleteRandomization,
    DeleteSelectedCategory,
    DeleteUsedQuestion,
    UpdatePostponedQuestionTimestamp,
    UpdateRandomization,
    UpdateUsedQuestionCategory,
)
from question_randomizer.application.dtos import (
    PostponedQuestionResult,
    RandomizationResult,
    SelectedCategoryResult,
    UsedQuestionResult,
)
from question_randomizer.core.enums import ErrorCode
from question_randomizer.core.errors import DomainError, NotFoundError
from question_randomizer.core.result import Failure, Result, Success
from question_randomizer.domain.entities.randomization import (
    STATUS_ONGOING,
    PostponedQuestion,
    Randomization,
    SelectedCategory,
    UsedQuestion,
)
from question_randomizer.domain.protocols import (
    CurrentUserProtocol,
    PostponedQuestionRepository,
    RandomizationRepository,
    SelectedCategoryRepository,
    UsedQuestionRepository,
)


def randomization_not_found(randomization_id: str) -> NotFoundError:
    return NotFoundError(
        code=ErrorCode.RANDOMIZATION_NOT_FOUND,
        message="Randomization not found",
        resource_type="Randomization",
        resource_id=randomization_id,
    )


def _item_not_found(code: ErrorCode, resource_type: str, item_id: str) -> NotFoundError:
    return NotFoundError(
        code=code,
        message=f"{resource_type} not found",
        resource_type=resource_type,
        resource_id=item_id,
    )


async def resolve_owned_randomization(
    current_user: CurrentUserProtocol,
    randomization_repo: RandomizationRepository,
    randomization_id: str,
) -> Result[Randomization, DomainError]:
    """Resolve the acting user and load one of their sessions.

    Returns:
        Success(Randomization) when the session exists and is owned.
        Failure(AuthenticationError) when there is no user.
        Failure(NotFoundError) when the session is missing or foreign.
    """
    user_result = current_user.get_user_id()
    if isinstance(user_result, Failure):
        return Failure(error=user_result.error)

    randomization = await randomization_repo.get_by_id(
        randomization_id, user_result.value
    )
    if randomization is None:
        return Failure(error=randomization_not_found(randomization_id))
    return Success(value=randomization)


class CreateRandomizationHandler:
    """Handler for CreateRandomization command.

    New sessions start active, with answers hidden, status "Ongoing" and
    no current question.
    """

    def __init__(
        self,
        randomization_repo: RandomizationRepository,
        current_user: CurrentUserProtocol,
    ) -> None:
        self._randomization_repo = randomization_repo
        self._current_user = current_user

    async def handle(
        self, cmd: CreateRandomization
    ) -> Result[RandomizationResult, DomainError]:
        user_result = self._current_user.get_user_id()
        if isinstance(user_result, Failure):
            return Failure(error=user_result.error)

        now = datetime.now(UTC)
        randomization = await self._randomization_repo.create(
            Randomization(
                user_id=user_result.value,
                is_active=True,
                show_answer=False,
                status=STATUS_ONGOING,
                current_question_id=None,
                created_at=now,
                updated_at=now,
            )
        )
        return Success(value=RandomizationResult.from_entity(randomization))


class UpdateRandomizationHandler:
    """Handler for UpdateRandomization command."""

    def __init__(
        self,
        randomization_repo: RandomizationRepository,
        current_user: CurrentUserProtocol,
    ) -> None:
        self._randomization_repo = randomization_repo
        self._current_user = current_user

    async def handle(
        self, cmd: UpdateRandomization
    ) -> Result[RandomizationResult, DomainError]:
        owned = await resolve_owned_randomization(
            self._current_user, self._randomization_repo, cmd.randomization_id
        )
        if isinstance(owned, Failure):
            return owned
        randomization = owned.value

        randomization.show_answer = cmd.show_answer
        randomization.status = cmd.status
        randomization.current_question_id = cmd.current_question_id
        randomization.updated_at = datetime.now(UTC)

        if not await self._randomization_repo.update(randomization):
            return Failure(error=randomization_not_found(cmd.randomization_id))
        return Success(value=RandomizationResult.from_entity(randomization))


class ClearCurrentQuestionHandler:
    """Handler for ClearCurrentQuestion command."""

    def __init__(
        self,
        randomization_repo: RandomizationRepository,
        current_user: CurrentUserProtocol,
    ) -> None:
        self._randomization_repo = randomization_repo
        self._current_user = current_user

    async def handle(self, cmd: ClearCurrentQuestion) -> Result[None, DomainError]:
        user_result = self._current_user.get_user_id()
        if isinstance(user_result, Failure):
            return Failure(error=user_result.error)

        if not await self._randomization_repo.clear_current_question(
            cmd.randomization_id, user_result.value
        ):
            return Failure(error=randomization_not_found(cmd.randomization_id))
        return Success(value=None)


class DeleteRandomizationHandler:
    """Handler for DeleteRandomization command (hard delete, items included)."""

    def __init__(
        self,
        randomization_repo: RandomizationRepository,
        current_user: CurrentUserProtocol,
    ) -> None:
        self._randomization_repo = randomization_repo
        self._current_user = current_user

    async def handle(self, cmd: DeleteRandomization) -> Result[None, DomainError]:
        user_result = self._current_user.get_user_id()
        if isinstance(user_result, Failure):
            return Failure(error=user_result.error)

        if not await self._randomization_repo.delete(
            cmd.randomization_id, user_result.value
        ):
            return Failure(error=randomization_not_found(cmd.randomization_id))
        return Success(value=None)


# =============================================================================
# Selected categories
# =============================================================================


class AddSelectedCategoryHandler:
    """Handler for AddSelectedCategory command."""

    def __init__(
        self,
        randomization_repo: RandomizationRepository,
        selected_category_repo: SelectedCategoryRepository,
        current_user: CurrentUserProtocol,
    ) -> None:
        self._randomization_repo = randomization_repo
        self._selected_category_repo = selected_category_repo
        self._current_user = current_user

    async def handle(
        self, cmd: AddSelectedCategory
    ) -> Result[SelectedCategoryResult, DomainError]:
        owned = await resolve_owned_randomization(
            self._current_user, self._randomization_repo, cmd.randomization_id
        )
        if isinstance(owned, Failure):
            return owned

        item = await self._selected_category_repo.create(
            SelectedCategory(
                randomization_id=cmd.randomization_id,
                user_id=owned.value.user_id,
                category_id=cmd.category_id,
                category_name=cmd.category_name,
                created_at=datetime.now(UTC),
            )
        )
        return Success(value=SelectedCategoryResult.from_entity(item))


class DeleteSelectedCategoryHandler:
    """Handler for DeleteSelectedCategory command."""

    def __init__(
        self,
        randomization_repo: RandomizationRepository,
        selected_category_repo: SelectedCategoryRepository,
        current_user: CurrentUserProtocol,
    ) -> None:
        self._randomization_repo = randomization_repo
        self._selected_category_repo = selected_category_repo
        self._current_user = current_user

    async def handle(self, cmd: DeleteSelectedCategory) -> Result[None, DomainError]:
        owned = await resolve_owned_randomization(
            self._current_user, self._randomization_repo, cmd.randomization_id
        )
        if isinstance(owned, Failure):
            return owned

        if not await self._selected_category_repo.delete_by_category_id(
            cmd.randomization_id, owned.value.user_id, cmd.category_id
        ):
            return Failure(
                error=_item_not_found(
                    ErrorCode.SELECTED_CATEGORY_NOT_FOUND,
                    "SelectedCategory",
                    cmd.category_id,
                )
            )
        return Success(value=None)


# =============================================================================
# Used questions
# =============================================================================


class AddUsedQuestionHandler:
    """Handler for AddUsedQuestion command."""

    def __init__(
        self,
        randomization_repo: RandomizationRepository,
        used_question_repo: UsedQuestionRepository,
        current_user: CurrentUserProtocol,
    ) -> None:
        self._randomization_repo = randomization_repo
        self._used_question_repo = used_question_repo
        self._current_user = current_user

    async def handle(
        self, cmd: AddUsedQuestion
    ) -> Result[UsedQuestionResult, DomainError]:
        owned = await resolve_owned_randomization(
            self._current_user, self._randomization_repo, cmd.randomization_id
        )
        if isinstance(owned, Failure):
            return owned

        item = await self._used_question_repo.create(
            UsedQuestion(
                randomization_id=cmd.randomization_id,
                user_id=owned.value.user_id,
                question_id=cmd.question_id,
                category_id=cmd.category_id,
                category_name=cmd.category_name,
                created_at=datetime.now(UTC),
            )
        )
        return Success(value=UsedQuestionResult.from_entity(item))


class DeleteUsedQuestionHandler:
    """Handler for DeleteUsedQuestion command."""

    def __init__(
        self,
        randomization_repo: RandomizationRepository,
        used_question_repo: UsedQuestionRepository,
        current_user: CurrentUserProtocol,
    ) -> None:
        self._randomization_repo = randomization_repo
        self._used_question_repo = used_question_repo
        self._current_user = current_user

    async def handle(self, cmd: DeleteUsedQuestion) -> Result[None, DomainError]:
        owned = await resolve_owned_randomization(
            self._current_user, self._randomization_repo, cmd.randomization_id
        )
        if isinstance(owned, Failure):
            return owned

        if not await self._used_question_repo.delete_by_question_id(
            cmd.randomization_id, owned.value.user_id, cmd.question_id
        ):
            return Failure(
                error=_item_not_found(
                    ErrorCode.USED_QUESTION_NOT_FOUND, "UsedQuestion", cmd.question_id
                )
            )
        return Success(value=None)


class UpdateUsedQuestionCategoryHandler:
    """Handler for UpdateUsedQuestionCategory command.

    Returns:
        Number of used questions whose category name was rewritten.
    """

    def __init__(
        self,
        randomization_repo: RandomizationRepository,
        used_question_repo: UsedQuestionRepository,
        current_user: CurrentUserProtocol,
    ) -> None:
        self._randomization_repo = randomization_repo
        self._used_question_repo = used_question_repo
        self._current_user = current_user

    async def handle(self, cmd: UpdateUsedQuestionCategory) -> Result[int, DomainError]:
        owned = await resolve_owned_randomization(
            self._current_user, self._randomization_repo, cmd.randomization_id
        )
        if isinstance(owned, Failure):
            return owned

        updated = await self._used_question_repo.update_category(
            cmd.randomization_id,
            owned.value.user_id,
            cmd.category_id,
            cmd.category_name,
        )
        return Success(value=updated)


# =============================================================================
# Postponed questions
# =============================================================================


class AddPostponedQuestionHandler:
    """Handler for AddPostponedQuestion command."""

    def __init__(
        self,
        randomization_repo: RandomizationRepository,
        postponed_question_repo: PostponedQuestionRepository,
        current_user: CurrentUserProtocol,
    ) -> None:
        self._randomization_repo = randomization_repo
        self._postponed_question_repo = postponed_question_repo
        self._current_user = current_user

    async def handle(
        self, cmd: AddPostponedQuestion
    ) -> Result[PostponedQuestionResult, DomainError]:
        owned = await resolve_owned_randomization(
            self._current_user, self._randomization_repo, cmd.randomization_id
        )
        if isinstance(owned, Failure):
            return owned

        item = await self._postponed_question_repo.create(
            PostponedQuestion(
                randomization_id=cmd.randomization_id,
                user_id=owned.value.user_id,
                question_id=cmd.question_id,
                timestamp=datetime.now(UTC),
            )
        )
        return Success(value=PostponedQuestionResult.from_entity(item))


class DeletePostponedQuestionHandler:
    """Handler for DeletePostponedQuestion command."""

    def __init__(
        self,
        randomization_repo: RandomizationRepository,
        postponed_question_repo: PostponedQuestionRepository,
        current_user: CurrentUserProtocol,
    ) -> None:
        self._randomization_repo = randomization_repo
        self._postponed_question_repo = postponed_question_repo
        self._current_user = current_user

    async def handle(self, cmd: DeletePostponedQuestion) -> Result[None, DomainError]:
        owned = await resolve_owned_randomization(
            self._current_user, self._randomization_repo, cmd.randomization_id
        )
        if isinstance(owned, Failure):
            return owned

        if not await self._postponed_question_repo.delete_by_question_id(
            cmd.randomization_id, owned.value.user_id, cmd.question_id
        ):
            return Failure(
                error=_item_not_found(
                    ErrorCode.POSTPONED_QUESTION_NOT_FOUND,
                    "PostponedQuestion",
                    cmd.question_id,
                )
            )
        return Success(value=None)


class UpdatePostponedQuestionTimestampHandler:
    """Handler for UpdatePostponedQuestionTimestamp command."""

    def __init__(
        self,
        randomization_repo: RandomizationRepository,
        postponed_question_repo: PostponedQuestionRepository,
        current_user: CurrentUserProtocol,
    ) -> None:
        self._randomization_repo = randomization_repo
        self._postponed_question_repo = postponed_question_repo
        self._current_user = current_user

    async def handle(
        self, cmd: UpdatePostponedQuestionTimestamp
    ) -> Result[None, DomainError]:
        owned = await resolve_owned_randomization(
            self._current_user, self._randomization_repo, cmd.randomization_id
        )
        if isinstance(owned, Failure):
            return owned

        if not await self._postponed_question_repo.update_timestamp(
            cmd.randomization_id,
            owned.value.user_id,
            cmd.question_id,
            datetime.now(UTC),
        ):
            return Failure(
                error=_item_not_found(
                    ErrorCode.POSTPONED_QUESTION_NOT_FOUND,
                    "PostponedQuestion",
                    cmd.question_id,
                )
            )
        return Success(value=None)
