"""QuestionRepository protocol for question persistence.

Port (interface) for hexagonal architecture.

Besides plain CRUD the repository exposes the bulk reference clean-up used
when a category or qualification is deleted. Clean-up only clears the ID;
the name snapshot stays as it was.
"""

from typing import Protocol

from question_randomizer.domain.entities.question import Question


class QuestionRepository(Protocol):
    """Question repository protocol (port).

    Methods:
        get_by_id: Retrieve an owned question
        get_by_user_id: List a user's questions
        get_by_category_id: List a user's questions in one category
        create / create_many: Insert one / many (atomic)
        update / update_many: Overwrite one / many (atomic)
        delete: Soft-delete
        remove_category_id: Clear a category reference on all questions
        remove_qualification_id: Clear a qualification reference on all questions
    """

    async def get_by_id(self, question_id: str, user_id: str) -> Question | None:
        """Find a question owned by ``user_id``.

        Returns:
            Question if found and owned, None otherwise.
        """
        ...

    async def get_by_user_id(
        self, user_id: str, is_active: bool | None = None
    ) -> list[Question]:
        """List the user's questions, optionally filtered by activity."""
        ...

    async def get_by_category_id(
        self, category_id: str, user_id: str, is_active: bool | None = None
    ) -> list[Question]:
        """List the user's questions that reference ``category_id``."""
        ...

    async def create(self, question: Question) -> Question:
        """Insert a question and return it with its assigned ID."""
        ...

    async def create_many(self, questions: list[Question]) -> list[Question]:
        """Insert all questions in one transaction (all or nothing)."""
        ...

    async def update(self, question: Question) -> bool:
        """Overwrite a question. False if missing or not owned."""
        ...

    async def update_many(self, questions: list[Question]) -> bool:
        """Overwrite several questions in one transaction.

        Returns:
            False (and writes nothing) if any question is missing or not
            owned by its ``user_id``.
        """
        ...

    async def delete(self, question_id: str, user_id: str) -> bool:
        """Soft-delete a question. False if missing or not owned."""
        ...

    async def remove_category_id(self, category_id: str, user_id: str) -> int:
        """Set ``category_id`` to None on every matching question.

        Returns:
            Number of questions changed.
        """
        ...

    async def remove_qualification_id(
        self, qualification_id: str, user_id: str
    ) -> int:
        """Set ``qualification_id`` to None on every matching question.

        Returns:
            Number of questions changed.
        """
        ...
