"""
Audit Models for Spark Budget

Every change the bill workflow makes to stored data is recorded:
payments, rollovers, bulk processing and purges. Rejected payday
settings are recorded too, so "why is my budget not showing" can be
answered from the log.

DESIGN DECISION: Audit logs are append-only. We never delete or modify them.
"""

from datetime import date, datetime
from enum import Enum
from typing import Any, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, Field


class AuditEventType(str, Enum):
    """Types of events we audit."""
    # Bill lifecycle
    BILL_CREATED = "bill_created"
    BILL_PAID = "bill_paid"
    BILL_ROLLED_FORWARD = "bill_rolled_forward"

    # Bulk operations
    RECURRING_BILLS_PROCESSED = "recurring_bills_processed"
    PAID_BILLS_PURGED = "paid_bills_purged"

    # Configuration
    SCHEDULE_REJECTED = "schedule_rejected"

    # System events
    SYSTEM_ERROR = "system_error"


class AuditSeverity(str, Enum):
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class AuditEvent(BaseModel):
    """
    One entry in the bill audit trail.

    `entity_type`/`entity_id` point at the record the event is about
    ("bill" or "settings"); bulk operations leave them empty and carry
    their counts in `details`.
    """

    event_id: UUID = Field(default_factory=uuid4)
    timestamp: datetime = Field(default_factory=datetime.utcnow)

    event_type: AuditEventType
    severity: AuditSeverity = AuditSeverity.INFO

    entity_type: Optional[str] = None
    entity_id: Optional[UUID] = None
    # Shared by every event one user action produces
    correlation_id: Optional[UUID] = None

    description: str = Field(..., max_length=500)
    details: dict[str, Any] = Field(default_factory=dict)
    error_message: Optional[str] = None

    def to_log_dict(self) -> dict:
        """Flatten to JSON-safe values for structlog."""
        return self.model_dump(mode="json")


class AuditEventBuilder:
    """
    Helper class to build audit events with common patterns.

    Usage:
        event = AuditEventBuilder.bill_paid(bill_id, title, amount, paid_on, correlation_id)
    """

    @staticmethod
    def bill_created(
        bill_id: UUID,
        title: str,
        amount: str,
        due_date: date,
        recurrence: str,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.BILL_CREATED,
            entity_type="bill",
            entity_id=bill_id,
            description=f"Bill created: {title} - {amount}",
            details={
                "title": title,
                "amount": amount,
                "due_date": due_date.isoformat(),
                "recurrence": recurrence,
            },
        )

    @staticmethod
    def bill_paid(
        bill_id: UUID,
        title: str,
        amount: str,
        paid_on: date,
        correlation_id: UUID,
        transaction_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.BILL_PAID,
            entity_type="bill",
            entity_id=bill_id,
            correlation_id=correlation_id,
            description=f"Bill paid: {title} - {amount}",
            details={
                "amount": amount,
                "paid_on": paid_on.isoformat(),
                "transaction_id": str(transaction_id) if transaction_id else None,
            },
        )

    @staticmethod
    def bill_rolled_forward(
        bill_id: UUID,
        previous_due_date: date,
        new_due_date: date,
        recurrence: str,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.BILL_ROLLED_FORWARD,
            entity_type="bill",
            entity_id=bill_id,
            correlation_id=correlation_id,
            description=f"Bill rolled forward to {new_due_date.isoformat()}",
            details={
                "previous_due_date": previous_due_date.isoformat(),
                "new_due_date": new_due_date.isoformat(),
                "recurrence": recurrence,
            },
        )

    @staticmethod
    def recurring_bills_processed(
        processed_count: int,
        as_of: date,
        correlation_id: UUID,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.RECURRING_BILLS_PROCESSED,
            correlation_id=correlation_id,
            description=f"Recurring bills processed: {processed_count} rolled forward",
            details={
                "processed_count": processed_count,
                "as_of": as_of.isoformat(),
            },
        )

    @staticmethod
    def paid_bills_purged(
        deleted_count: int,
        cutoff: date,
        correlation_id: UUID,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.PAID_BILLS_PURGED,
            correlation_id=correlation_id,
            description=f"Old paid bills deleted: {deleted_count}",
            details={
                "deleted_count": deleted_count,
                "cutoff": cutoff.isoformat(),
            },
        )

    @staticmethod
    def schedule_rejected(
        frequency: str,
        issues: list[dict],
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.SCHEDULE_REJECTED,
            severity=AuditSeverity.WARNING,
            entity_type="settings",
            description=f"Payday settings rejected ({frequency}) with {len(issues)} issues",
            details={
                "frequency": frequency,
                "issues": issues,
            },
        )

    @staticmethod
    def system_error(
        error_type: str,
        error_message: str,
        details: Optional[dict] = None,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.SYSTEM_ERROR,
            severity=AuditSeverity.ERROR,
            description=f"System error: {error_type}",
            error_message=error_message,
            details=details or {},
            correlation_id=correlation_id,
        )
