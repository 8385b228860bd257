"""Unit tests for InMemoryEventBus.

Tests cover:
- Delivery in subscription order
- Exact-type matching (no delivery to other event types)
- Fail-fast: the first handler exception stops delivery and propagates
- No-op publish when nothing is subscribed
"""

from unittest.mock import MagicMock

import pytest

from question_randomizer.domain.events import (
    CategoryDeletedEvent,
    QualificationDeletedEvent,
)
from question_randomizer.infrastructure.events.in_memory_event_bus import (
    InMemoryEventBus,
)


@pytest.fixture
def event_bus(mock_logger: MagicMock) -> InMemoryEventBus:
    return InMemoryEventBus(logger=mock_logger)


@pytest.fixture
def category_deleted() -> CategoryDeletedEvent:
    return CategoryDeletedEvent(category_id="cat-1", user_id="user-1")


@pytest.mark.unit
class TestEventBusDelivery:
    """Test ordered delivery to subscribed handlers."""

    async def test_handlers_run_in_subscription_order(
        self, event_bus: InMemoryEventBus, category_deleted: CategoryDeletedEvent
    ) -> None:
        calls: list[str] = []

        async def first(event: CategoryDeletedEvent) -> None:
            calls.append(f"first:{event.category_id}")

        async def second(event: CategoryDeletedEvent) -> None:
            calls.append(f"second:{event.category_id}")

        event_bus.subscribe(CategoryDeletedEvent, first)
        event_bus.subscribe(CategoryDeletedEvent, second)

        await event_bus.publish(category_deleted)

        assert calls == ["first:cat-1", "second:cat-1"]
        assert event_bus.handlers_for(CategoryDeletedEvent) == [first, second]

    async def test_only_matching_event_type_is_delivered(
        self, event_bus: InMemoryEventBus
    ) -> None:
        received: list[object] = []

        async def on_qualification(event: QualificationDeletedEvent) -> None:
            received.append(event)

        event_bus.subscribe(QualificationDeletedEvent, on_qualification)

        await event_bus.publish(CategoryDeletedEvent(category_id="c", user_id="u"))

        assert received == []

    async def test_publish_without_handlers_is_noop(
        self,
        event_bus: InMemoryEventBus,
        category_deleted: CategoryDeletedEvent,
        mock_logger: MagicMock,
    ) -> None:
        await event_bus.publish(category_deleted)

        mock_logger.debug.assert_not_called()
        assert event_bus.handlers_for(CategoryDeletedEvent) == []


@pytest.mark.unit
class TestEventBusFailFast:
    """Test that the first handler failure stops delivery."""

    async def test_first_failure_propagates_and_skips_rest(
        self,
        event_bus: InMemoryEventBus,
        category_deleted: CategoryDeletedEvent,
        mock_logger: MagicMock,
    ) -> None:
        calls: list[str] = []

        async def failing(event: CategoryDeletedEvent) -> None:
            calls.append("failing")
            raise RuntimeError("database unavailable")

        async def never_called(event: CategoryDeletedEvent) -> None:
            calls.append("never_called")

        event_bus.subscribe(CategoryDeletedEvent, failing)
        event_bus.subscribe(CategoryDeletedEvent, never_called)

        with pytest.raises(RuntimeError, match="database unavailable"):
            await event_bus.publish(category_deleted)

        assert calls == ["failing"]
        mock_logger.error.assert_called_once()
        _, kwargs = mock_logger.error.call_args
        assert kwargs["event_type"] == "CategoryDeletedEvent"
        assert kwargs["skipped_handlers"] == 1
