"""
Audit Models for the Expense Tracker

Every change to the store, and every rejected attempt at one, is recorded
as an audit event. This provides:
1. Traceability of a session's mutations
2. Debugging information when input is rejected
3. The ability to reconstruct what happened during a run

DESIGN DECISION: Audit logs are append-only. We never delete or modify them.
"""

from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import Any, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, Field


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class AuditEventType(str, Enum):
    """Types of events we audit."""
    # Session
    SESSION_STARTED = "session_started"
    SESSION_ENDED = "session_ended"

    # Mutations
    EXPENSE_ADDED = "expense_added"
    EXPENSE_REMOVED = "expense_removed"
    EXPENSE_REJECTED = "expense_rejected"
    EXPENSE_NOT_FOUND = "expense_not_found"

    # Reads worth tracing
    CATEGORY_LISTED = "category_listed"
    REPORT_GENERATED = "report_generated"


class AuditSeverity(str, Enum):
    """Severity level for audit events."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class AuditEvent(BaseModel):
    """
    A single audit event.

    This is the core unit of our audit trail.
    """

    # Identity
    event_id: UUID = Field(
        default_factory=uuid4,
        description="Unique event identifier"
    )
    timestamp: datetime = Field(
        default_factory=_utcnow,
        description="When the event occurred (UTC)"
    )

    # Event classification
    event_type: AuditEventType = Field(
        ...,
        description="Type of event"
    )
    severity: AuditSeverity = Field(
        default=AuditSeverity.INFO,
        description="Event severity"
    )

    # Context - which record is this about?
    expense_id: Optional[int] = Field(
        default=None,
        ge=1,
        description="ID of the expense this event relates to"
    )

    # Correlation - ties together all events of one session
    correlation_id: Optional[UUID] = Field(
        default=None,
        description="ID to correlate related events (e.g., one CLI session)"
    )

    description: str = Field(
        ...,
        max_length=500,
        description="Human-readable description of what happened"
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional event-specific data"
    )

    # Error information (if applicable)
    error_code: Optional[str] = None
    error_message: Optional[str] = None

    def to_log_dict(self) -> dict:
        """
        Convert to a dictionary suitable for structured logging.
        """
        return {
            "event_id": str(self.event_id),
            "timestamp": self.timestamp.isoformat(),
            "event_type": self.event_type.value,
            "severity": self.severity.value,
            "expense_id": self.expense_id,
            "correlation_id": str(self.correlation_id) if self.correlation_id else None,
            "description": self.description,
            "details": self.details,
            "error_code": self.error_code,
            "error_message": self.error_message,
        }


class AuditEventBuilder:
    """
    Helper class to build audit events with common patterns.

    Usage:
        event = AuditEventBuilder.expense_added(expense_id, category, amount, correlation_id)
        event = AuditEventBuilder.expense_not_found(expense_id, correlation_id)
    """

    @staticmethod
    def session_started(correlation_id: UUID) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.SESSION_STARTED,
            correlation_id=correlation_id,
            description="Session started",
        )

    @staticmethod
    def session_ended(correlation_id: UUID, expense_count: int) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.SESSION_ENDED,
            correlation_id=correlation_id,
            description=f"Session ended with {expense_count} expenses in memory",
            details={
                "expense_count": expense_count,
            },
        )

    @staticmethod
    def expense_added(
        expense_id: int,
        category: str,
        amount: Decimal,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.EXPENSE_ADDED,
            expense_id=expense_id,
            correlation_id=correlation_id,
            description=f"Expense {expense_id} added to {category}",
            details={
                "category": category,
                "amount": str(amount),
            },
        )

    @staticmethod
    def expense_removed(
        expense_id: int,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.EXPENSE_REMOVED,
            expense_id=expense_id,
            correlation_id=correlation_id,
            description=f"Expense {expense_id} removed",
        )

    @staticmethod
    def expense_rejected(
        error_code: str,
        error_message: str,
        details: Optional[dict] = None,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.EXPENSE_REJECTED,
            severity=AuditSeverity.WARNING,
            correlation_id=correlation_id,
            description=f"Expense rejected: {error_code}",
            details=details or {},
            error_code=error_code,
            error_message=error_message,
        )

    @staticmethod
    def expense_not_found(
        expense_id: int,
        error_message: str,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.EXPENSE_NOT_FOUND,
            severity=AuditSeverity.WARNING,
            correlation_id=correlation_id,
            description="Remove failed: expense not found",
            details={
                "requested_id": expense_id,
            },
            error_code="NotFound",
            error_message=error_message,
        )

    @staticmethod
    def category_listed(
        category: str,
        result_count: int,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.CATEGORY_LISTED,
            severity=AuditSeverity.DEBUG,
            correlation_id=correlation_id,
            description=f"Category listed with {result_count} expenses",
            details={
                "category": category,
                "result_count": result_count,
            },
        )

    @staticmethod
    def report_generated(
        expense_count: int,
        grand_total: Decimal,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.REPORT_GENERATED,
            severity=AuditSeverity.DEBUG,
            correlation_id=correlation_id,
            description=f"Report generated over {expense_count} expenses",
            details={
                "expense_count": expense_count,
                "grand_total": str(grand_total),
            },
        )
