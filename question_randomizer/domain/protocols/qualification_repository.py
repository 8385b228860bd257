"""QualificationRepository protocol for qualification persistence.

Same contract as CategoryRepository: user-scoped, soft delete, None/False
instead of exceptions for missing or foreign records.
"""

from typing import Protocol

from question_randomizer.domain.entities.qualification import Qualification


class QualificationRepository(Protocol):
    """Qualification repository protocol (port)."""

    async def get_by_id(
        self, qualification_id: str, user_id: str
    ) -> Qualification | None:
        """Find a qualification owned by ``user_id``."""
        ...

    async def get_by_user_id(
        self, user_id: str, is_active: bool | None = None
    ) -> list[Qualification]:
        """List the user's qualifications, optionally filtered by activity."""
        ...

    async def create(self, qualification: Qualification) -> Qualification:
        """Insert a qualification and return it with its assigned ID."""
        ...

    async def create_many(
        self, qualifications: list[Qualification]
    ) -> list[Qualification]:
        """Insert all qualifications in one transaction (all or nothing)."""
        ...

    async def update(self, qualification: Qualification) -> bool:
        """Overwrite a qualification. False if missing or not owned."""
        ...

    async def delete(self, qualification_id: str, user_id: str) -> bool:
        """Soft-delete a qualification. False if missing or not owned."""
        ...
