"""Randomization repository protocols.

RandomizationRepository stores the sessions themselves. The three item
repositories store the per-session bookkeeping lists. Item repositories
scope every call by ``randomization_id`` AND ``user_id``; handlers verify
ownership of the parent session before calling them.
"""

from datetime import datetime
from typing import Protocol

from question_randomizer.domain.entities.randomization import (
    PostponedQuestion,
    Randomization,
    SelectedCategory,
    UsedQuestion,
)


class RandomizationRepository(Protocol):
    """Randomization repository protocol (port)."""

    async def get_by_id(
        self, randomization_id: str, user_id: str
    ) -> Randomization | None:
        """Find a randomization owned by ``user_id``."""
        ...

    async def get_active_by_user_id(self, user_id: str) -> Randomization | None:
        """Return the user's first active randomization, if any."""
        ...

    async def get_by_user_id(self, user_id: str) -> list[Randomization]:
        """List the user's randomizations, newest first."""
        ...

    async def create(self, randomization: Randomization) -> Randomization:
        """Insert a randomization and return it with its assigned ID."""
        ...

    async def update(self, randomization: Randomization) -> bool:
        """Overwrite a randomization. False if missing or not owned."""
        ...

    async def clear_current_question(self, randomization_id: str, user_id: str) -> bool:
        """Set ``current_question_id`` to None. False if missing or not owned."""
        ...

    async def delete(self, randomization_id: str, user_id: str) -> bool:
        """Hard-delete a randomization. False if missing or not owned."""
        ...


class SelectedCategoryRepository(Protocol):
    """Selected-category list of a randomization."""

    async def get_by_randomization_id(
        self, randomization_id: str, user_id: str
    ) -> list[SelectedCategory]:
        """List selected categories in insertion order."""
        ...

    async def create(self, item: SelectedCategory) -> SelectedCategory:
        """Insert an item and return it with its assigned ID."""
        ...

    async def delete_by_category_id(
        self, randomization_id: str, user_id: str, category_id: str
    ) -> bool:
        """Delete the first item for ``category_id``. False when none matched."""
        ...


class UsedQuestionRepository(Protocol):
    """Used-question list of a randomization."""

    async def get_by_randomization_id(
        self, randomization_id: str, user_id: str
    ) -> list[UsedQuestion]:
        """List used questions in insertion order."""
        ...

    async def create(self, item: UsedQuestion) -> UsedQuestion:
        """Insert an item and return it with its assigned ID."""
        ...

    async def delete_by_question_id(
        self, randomization_id: str, user_id: str, question_id: str
    ) -> bool:
        """Delete the first item for ``question_id``. False when none matched."""
        ...

    async def update_category(
        self,
        randomization_id: str,
        user_id: str,
        category_id: str,
        category_name: str,
    ) -> int:
        """Rewrite ``category_name`` on every item with ``category_id``.

        Returns:
            Number of items changed.
        """
        ...


class PostponedQuestionRepository(Protocol):
    """Postponed-question list of a randomization."""

    async def get_by_randomization_id(
        self, randomization_id: str, user_id: str
    ) -> list[PostponedQuestion]:
        """List postponed questions, oldest timestamp first."""
        ...

    async def create(self, item: PostponedQuestion) -> PostponedQuestion:
        """Insert an item and return it with its assigned ID."""
        ...

    async def delete_by_question_id(
        self, randomization_id: str, user_id: str, question_id: str
    ) -> bool:
        """Delete the first item for ``question_id``. False when none matched."""
        ...

    async def update_timestamp(
        self,
        randomization_id: str,
        user_id: str,
        question_id: str,
        timestamp: datetime,
    ) -> bool:
        """Move a postponed question to ``timestamp``. False when none matched."""
        ...
