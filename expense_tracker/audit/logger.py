"""
Audit Logger

DESIGN DECISION: Every change to the store is logged.
This provides:
1. Traceability of a session
2. Debugging capability when input is rejected
3. A history the user can inspect before exiting

The audit logger:
- Always logs locally through structlog
- Gracefully handles storage failures (never breaks a store operation)
- Supports correlation IDs to tie a session's events together
"""

import logging
import sys
from decimal import Decimal
from typing import Callable, Optional
from uuid import UUID, uuid4

import structlog
from pydantic import ValidationError

from expense_tracker.models.audit import AuditEvent, AuditEventBuilder, AuditSeverity
from expense_tracker.services.storage import AuditStorageInterface


def configure_logging(level: str = "WARNING", json_logs: bool = True) -> None:
    """
    Configure structlog on top of the standard library logger.

    Log lines go to stderr so they never mix with the menu on stdout.
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, level.upper(), logging.WARNING),
        force=True,
    )

    renderer = (
        structlog.processors.JSONRenderer()
        if json_logs
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


class AuditLogger:
    """
    Central audit logging service.

    Logs events both to:
    1. Structured local log (for debugging)
    2. An audit storage backend (for in-session inspection)
    """

    def __init__(
        self,
        storage: Optional[AuditStorageInterface] = None,
    ):
        """
        Initialize audit logger.

        Args:
            storage: Storage backend for the event trail.
                    If None, only logs locally.
        """
        self._storage = storage
        self._logger = structlog.get_logger("expense_tracker.audit")

    @property
    def storage(self) -> Optional[AuditStorageInterface]:
        return self._storage

    def log(self, event: AuditEvent) -> bool:
        """
        Log an audit event.

        Always logs locally. Appends to storage if available.

        Returns True if storage write succeeded (or no storage configured).
        """
        log_dict = event.to_log_dict()

        if event.severity == AuditSeverity.ERROR:
            self._logger.error("audit_event", **log_dict)
        elif event.severity == AuditSeverity.WARNING:
            self._logger.warning("audit_event", **log_dict)
        elif event.severity == AuditSeverity.DEBUG:
            self._logger.debug("audit_event", **log_dict)
        else:
            self._logger.info("audit_event", **log_dict)

        if self._storage:
            try:
                return self._storage.append_event(event)
            except Exception as e:
                # Log failure but don't raise
                self._logger.error(
                    "audit_storage_failed",
                    error=str(e),
                    event_id=str(event.event_id),
                )
                return False

        return True

    def _log_built(self, build: Callable[..., AuditEvent], **kwargs) -> bool:
        """
        Build an event and log it.

        An event that fails to build is reported locally and dropped,
        so auditing never breaks the operation being audited.
        """
        try:
            event = build(**kwargs)
        except ValidationError as e:
            self._logger.error(
                "audit_event_invalid",
                builder=build.__name__,
                error=str(e),
            )
            return False
        return self.log(event)

    def log_session_started(self, correlation_id: UUID) -> None:
        """Log the start of a session."""
        self._log_built(AuditEventBuilder.session_started, correlation_id=correlation_id)

    def log_session_ended(self, correlation_id: UUID, expense_count: int) -> None:
        """Log the end of a session."""
        self._log_built(
            AuditEventBuilder.session_ended,
            correlation_id=correlation_id,
            expense_count=expense_count,
        )

    def log_expense_added(
        self,
        expense_id: int,
        category: str,
        amount: Decimal,
        correlation_id: Optional[UUID] = None,
    ) -> None:
        """Log a successful add."""
        self._log_built(
            AuditEventBuilder.expense_added,
            expense_id=expense_id,
            category=category,
            amount=amount,
            correlation_id=correlation_id,
        )

    def log_expense_removed(
        self,
        expense_id: int,
        correlation_id: Optional[UUID] = None,
    ) -> None:
        """Log a successful removal."""
        self._log_built(
            AuditEventBuilder.expense_removed,
            expense_id=expense_id,
            correlation_id=correlation_id,
        )

    def log_expense_rejected(
        self,
        error_code: str,
        error_message: str,
        details: Optional[dict] = None,
        correlation_id: Optional[UUID] = None,
    ) -> None:
        """Log an add rejected by validation."""
        self._log_built(
            AuditEventBuilder.expense_rejected,
            error_code=error_code,
            error_message=error_message,
            details=details,
            correlation_id=correlation_id,
        )

    def log_expense_not_found(
        self,
        expense_id: int,
        error_message: str,
        correlation_id: Optional[UUID] = None,
    ) -> None:
        """Log a removal that found nothing."""
        self._log_built(
            AuditEventBuilder.expense_not_found,
            expense_id=expense_id,
            error_message=error_message,
            correlation_id=correlation_id,
        )

    def log_category_listed(
        self,
        category: str,
        result_count: int,
        correlation_id: Optional[UUID] = None,
    ) -> None:
        """Log a category listing."""
        self._log_built(
            AuditEventBuilder.category_listed,
            category=category,
            result_count=result_count,
            correlation_id=correlation_id,
        )

    def log_report_generated(
        self,
        expense_count: int,
        grand_total: Decimal,
        correlation_id: Optional[UUID] = None,
    ) -> None:
        """Log summary report generation."""
        self._log_built(
            AuditEventBuilder.report_generated,
            expense_count=expense_count,
            grand_total=grand_total,
            correlation_id=correlation_id,
        )


def create_correlation_id() -> UUID:
    """
    Create a new correlation ID for tracking related events.

    Use this at the start of a session and pass it through
    all subsequent operations.
    """
    return uuid4()
