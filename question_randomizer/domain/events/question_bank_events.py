"""Events raised when question-bank reference data is removed.

Both events are published only after the delete is committed. Their
subscribers strip the dangling reference from the owner's questions.
"""

from dataclasses import dataclass

from question_randomizer.domain.events.base_event import DomainEvent


@dataclass(frozen=True, kw_only=True, slots=True)
class CategoryDeletedEvent(DomainEvent):
    """A category was (soft-)deleted.

    Attributes:
        category_id: Deleted category.
        user_id: Owner of the category and of the questions to clean up.
    """

    category_id: str
    user_id: str


@dataclass(frozen=True, kw_only=True, slots=True)
class QualificationDeletedEvent(DomainEvent):
    """A qualification was (soft-)deleted.

    Attributes:
        qualification_id: Deleted qualification.
        user_id: Owner of the qualification and of the questions to clean up.
    """

    qualification_id: str
    user_id: str
