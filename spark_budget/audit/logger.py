"""
Bill audit trail.

Payments, rollovers, bulk processing and purges all leave an AuditEvent
behind. Events go to the structured log first and then, when a store is
wired in, to audit storage. A failed audit write is logged and reported
as False; it never fails the bill operation that produced it.

Related events (a payment and the rollover it triggers) share a
correlation ID from create_correlation_id().
"""

import logging
import sys
from typing import Optional
from uuid import UUID, uuid4

import structlog

from spark_budget.config import get_settings
from spark_budget.models.audit import AuditEvent, AuditEventBuilder, AuditSeverity
from spark_budget.services.storage import AuditStorageInterface, StorageError


def _configure_structlog(json_output: bool = True) -> None:
    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
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


def configure_logging(level: Optional[str] = None, json_output: Optional[bool] = None) -> None:
    """
    Configure stdlib logging and structlog for an application entry point.

    Library imports only set up structlog; the root logger is left alone
    until the host application calls this. Arguments default to the
    values in LoggingSettings.
    """
    log_settings = get_settings().logging
    level = level or log_settings.level
    if json_output is None:
        json_output = log_settings.json_output

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level.upper()),
    )
    _configure_structlog(json_output)


# Structlog only; stdlib handlers belong to the host application
_configure_structlog()


_SEVERITY_METHODS = {
    AuditSeverity.DEBUG: "debug",
    AuditSeverity.INFO: "info",
    AuditSeverity.WARNING: "warning",
    AuditSeverity.ERROR: "error",
    AuditSeverity.CRITICAL: "critical",
}


class AuditLogger:
    """
    Writes audit events to the structured log and, optionally, to storage.
    """

    def __init__(self, storage: Optional[AuditStorageInterface] = None):
        self._storage = storage
        self._logger = structlog.get_logger(__name__)

    async def log(self, event: AuditEvent) -> bool:
        """
        Record one event.

        Returns False only when the storage write failed.
        """
        emit = getattr(self._logger, _SEVERITY_METHODS[event.severity])
        emit("audit_event", **event.to_log_dict())

        if self._storage is None:
            return True

        try:
            return await self._storage.append_event(event)
        except StorageError as e:
            self._logger.error(
                "audit_storage_failed",
                event_id=str(event.event_id),
                event_type=event.event_type.value,
                error=str(e),
            )
            return False

    async def log_schedule_rejected(self, frequency: str, issues: list[dict]) -> None:
        """Record payday settings that could not be turned into a schedule."""
        await self.log(AuditEventBuilder.schedule_rejected(frequency=frequency, issues=issues))

    async def log_error(
        self,
        error_type: str,
        error_message: str,
        details: Optional[dict] = None,
        correlation_id: Optional[UUID] = None,
    ) -> None:
        await self.log(AuditEventBuilder.system_error(
            error_type=error_type,
            error_message=error_message,
            details=details,
            correlation_id=correlation_id,
        ))


def create_correlation_id() -> UUID:
    """New ID shared by every event a single user action produces."""
    return uuid4()
