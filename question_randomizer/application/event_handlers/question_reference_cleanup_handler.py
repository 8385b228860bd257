"""Question reference clean-up on category/qualification deletion.

Architecture:
    - Application layer (reacts to domain events)
    - App-scoped singleton, subscribed at container startup
    - Opens its own database session per event

Pattern:
    1. Listens to CategoryDeletedEvent and QualificationDeletedEvent
    2. Clears the matching ID on every question of the event's user
    3. Leaves the name snapshot untouched

Errors are not caught here: the event bus stops delivery and the
exception reaches the request that published the event.
"""

from question_randomizer.domain.events import (
    CategoryDeletedEvent,
    QualificationDeletedEvent,
)
from question_randomizer.domain.protocols import LoggerProtocol
from question_randomizer.infrastructure.persistence.database import Database
from question_randomizer.infrastructure.persistence.repositories import (
    QuestionRepository,
)


class QuestionReferenceCleanupHandler:
    """Strips dangling category/qualification IDs from questions.

    Example:
        >>> handler = QuestionReferenceCleanupHandler(
        ...     database=get_database(),
        ...     logger=get_logger(),
        ... )
        >>> event_bus.subscribe(CategoryDeletedEvent, handler.handle_category_deleted)
    """

    def __init__(self, database: Database, logger: LoggerProtocol) -> None:
        """Initialize handler with dependencies.

        Args:
            database: Database instance for creating sessions on-demand.
            logger: Logger protocol implementation from container.
        """
        self._database = database
        self._logger = logger

    async def handle_category_deleted(self, event: CategoryDeletedEvent) -> None:
        """Clear ``category_id`` on the user's questions."""
        async with self._database.get_session() as session:
            cleared = await QuestionRepository(session).remove_category_id(
                event.category_id, event.user_id
            )

        self._logger.info(
            "question_references_cleared",
            reference="category_id",
            reference_id=event.category_id,
            user_id=event.user_id,
            questions_updated=cleared,
        )

    async def handle_qualification_deleted(
        self, event: QualificationDeletedEvent
    ) -> None:
        """Clear ``qualification_id`` on the user's questions."""
        async with self._database.get_session() as session:
            cleared = await QuestionRepository(session).remove_qualification_id(
                event.qualification_id, event.user_id
            )

        self._logger.info(
            "question_references_cleared",
            reference="qualification_id",
            reference_id=event.qualification_id,
            user_id=event.user_id,
            questions_updated=cleared,
        )
