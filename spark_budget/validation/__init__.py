"""Validation package."""

from spark_budget.validation.validator import (
    ScheduleConfigurationError,
    ScheduleValidator,
    resolve_schedule,
)

__all__ = [
    "ScheduleConfigurationError",
    "ScheduleValidator",
    "resolve_schedule",
]
