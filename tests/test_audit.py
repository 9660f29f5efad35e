"""
Tests for the audit logger and in-memory audit storage
"""

import pytest
from decimal import Decimal
from uuid import uuid4

from expense_tracker.audit import AuditLogger, create_correlation_id
from expense_tracker.models.audit import AuditEvent, AuditEventBuilder, AuditEventType
from expense_tracker.services.storage import AuditStorageInterface, InMemoryAuditStorage


class FailingAuditStorage(AuditStorageInterface):
    """Storage that fails every write."""

    def append_event(self, event: AuditEvent) -> bool:
        raise RuntimeError("audit backend down")

    def get_events_by_correlation_id(self, correlation_id):
        return []

    def get_events_by_expense(self, expense_id):
        return []

    def get_recent_events(self, limit=None):
        return []


class TestInMemoryAuditStorage:
    """Tests for InMemoryAuditStorage."""

    def test_events_by_correlation_id(self):
        """Test lookup of one session's events in order."""
        storage = InMemoryAuditStorage()
        session_a, session_b = uuid4(), uuid4()

        storage.append_event(AuditEventBuilder.session_started(session_a))
        storage.append_event(AuditEventBuilder.session_started(session_b))
        storage.append_event(AuditEventBuilder.expense_removed(1, session_a))

        events = storage.get_events_by_correlation_id(session_a)
        assert [e.event_type for e in events] == [
            AuditEventType.SESSION_STARTED,
            AuditEventType.EXPENSE_REMOVED,
        ]

    def test_events_by_expense(self):
        """Test lookup of events about one expense."""
        storage = InMemoryAuditStorage()
        storage.append_event(AuditEventBuilder.expense_added(1, "FOOD", Decimal("2")))
        storage.append_event(AuditEventBuilder.expense_added(2, "FOOD", Decimal("3")))
        storage.append_event(AuditEventBuilder.expense_removed(1))

        events = storage.get_events_by_expense(1)
        assert [e.event_type for e in events] == [
            AuditEventType.EXPENSE_ADDED,
            AuditEventType.EXPENSE_REMOVED,
        ]

    def test_recent_events_newest_first(self):
        """Test recent events are returned newest first and limited."""
        storage = InMemoryAuditStorage()
        for expense_id in (1, 2, 3):
            storage.append_event(AuditEventBuilder.expense_removed(expense_id))

        recent = storage.get_recent_events(limit=2)
        assert [e.expense_id for e in recent] == [3, 2]
        assert storage.get_recent_events(limit=0) == []
        assert len(storage) == 3

    def test_recent_events_default_limit(self):
        """Test the configured default limit applies when none is given."""
        storage = InMemoryAuditStorage(default_limit=2)
        for expense_id in (1, 2, 3):
            storage.append_event(AuditEventBuilder.expense_removed(expense_id))

        assert [e.expense_id for e in storage.get_recent_events()] == [3, 2]
        assert len(storage.get_recent_events(limit=10)) == 3


class TestAuditLogger:
    """Tests for AuditLogger."""

    def test_log_persists_to_storage(self):
        """Test events reach the storage backend."""
        storage = InMemoryAuditStorage()
        logger = AuditLogger(storage)
        correlation_id = create_correlation_id()

        logger.log_expense_added(1, "FOOD", Decimal("25.50"), correlation_id)

        events = storage.get_events_by_correlation_id(correlation_id)
        assert len(events) == 1
        assert events[0].details["amount"] == "25.50"

    def test_log_without_storage(self):
        """Test local-only logging reports success."""
        logger = AuditLogger()
        event = AuditEventBuilder.session_started(uuid4())
        assert logger.log(event) is True

    def test_storage_failure_does_not_raise(self):
        """Test a failing backend is reported, not raised."""
        logger = AuditLogger(FailingAuditStorage())
        event = AuditEventBuilder.expense_removed(1)
        assert logger.log(event) is False

    def test_event_that_fails_to_build_is_dropped(self):
        """Test an invalid event is reported locally, not raised."""
        storage = InMemoryAuditStorage()
        logger = AuditLogger(storage)

        # expense ids start at 1, so this event cannot be built
        logger.log_expense_removed(0)

        assert len(storage) == 0

    def test_long_category_label_is_recorded(self):
        """Test a very long filter label still produces an event."""
        storage = InMemoryAuditStorage()
        logger = AuditLogger(storage)
        label = "X" * 600

        logger.log_category_listed(label, 0)

        event = storage.get_recent_events()[0]
        assert event.details["category"] == label
        assert len(event.description) <= 500

    def test_correlation_ids_are_unique(self):
        """Test each session gets a fresh correlation id."""
        assert create_correlation_id() != create_correlation_id()


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
