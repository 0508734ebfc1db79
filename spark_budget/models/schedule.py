"""
Payday Schedule Models

A payday schedule describes how often and on which day(s) income arrives.

DESIGN DECISION: Each frequency has its own frozen schedule type carrying
exactly the fields it needs. A weekly schedule without a weekday, or a
semi-monthly schedule with its days reversed, cannot be constructed.

The raw fields as the settings surface stores them live on PaydaySettings.
Converting those raw fields into a schedule is the only place where the
"weekday missing" case is tolerated, and it produces an explicit
IntervalSchedule rather than a silently defaulted weekly one.
"""

from datetime import date
from enum import Enum
from typing import Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

from spark_budget.utils.dates import WEEKDAY_NAMES, day_of_week


class PaydayFrequency(str, Enum):
    """How often payday comes around."""
    WEEKLY = "weekly"
    BIWEEKLY = "biweekly"
    SEMI_MONTHLY = "semi_monthly"
    MONTHLY = "monthly"


DEFAULT_SEMI_MONTHLY_FIRST_DAY = 1
DEFAULT_SEMI_MONTHLY_SECOND_DAY = 15


class WeeklySchedule(BaseModel):
    """Paid every week on the same weekday."""
    model_config = ConfigDict(frozen=True)

    frequency: Literal[PaydayFrequency.WEEKLY] = PaydayFrequency.WEEKLY
    weekday: int = Field(
        ...,
        ge=1,
        le=7,
        description="Day of week, 1 = Sunday through 7 = Saturday"
    )
    reference_date: Optional[date] = Field(
        default=None,
        description="First known payday (informational for weekly pay)"
    )


class BiweeklySchedule(BaseModel):
    """
    Paid every other week.

    The reference date pins which of the two alternating weeks is the
    pay week, so it must fall on the configured weekday.
    """
    model_config = ConfigDict(frozen=True)

    frequency: Literal[PaydayFrequency.BIWEEKLY] = PaydayFrequency.BIWEEKLY
    weekday: int = Field(
        ...,
        ge=1,
        le=7,
        description="Day of week, 1 = Sunday through 7 = Saturday"
    )
    reference_date: date = Field(
        ...,
        description="A known payday anchoring the 14-day cycle"
    )

    @model_validator(mode='after')
    def validate_reference_weekday(self) -> 'BiweeklySchedule':
        actual = day_of_week(self.reference_date)
        if actual != self.weekday:
            raise ValueError(
                f"Reference date {self.reference_date} is a "
                f"{WEEKDAY_NAMES[actual - 1]}, not a {WEEKDAY_NAMES[self.weekday - 1]}"
            )
        return self


class SemiMonthlySchedule(BaseModel):
    """Paid on two fixed days of every month."""
    model_config = ConfigDict(frozen=True)

    frequency: Literal[PaydayFrequency.SEMI_MONTHLY] = PaydayFrequency.SEMI_MONTHLY
    first_day: int = Field(
        default=DEFAULT_SEMI_MONTHLY_FIRST_DAY,
        ge=1,
        le=28,
        description="First payday of the month"
    )
    second_day: int = Field(
        default=DEFAULT_SEMI_MONTHLY_SECOND_DAY,
        ge=1,
        le=28,
        description="Second payday of the month"
    )

    @model_validator(mode='after')
    def validate_day_order(self) -> 'SemiMonthlySchedule':
        if self.first_day >= self.second_day:
            raise ValueError(
                f"First payday ({self.first_day}) must come before "
                f"second payday ({self.second_day})"
            )
        return self


class MonthlySchedule(BaseModel):
    """Paid once a month on the reference date's day of month."""
    model_config = ConfigDict(frozen=True)

    frequency: Literal[PaydayFrequency.MONTHLY] = PaydayFrequency.MONTHLY
    reference_date: date = Field(
        ...,
        description="Payday anchor; its day of month is the payday"
    )


class IntervalSchedule(BaseModel):
    """
    Flat 7- or 14-day increments for weekly/biweekly pay with no weekday.

    Kept for settings saved before a weekday was recorded. It can step
    forward but never claims a particular day is a payday.
    """
    model_config = ConfigDict(frozen=True)

    frequency: Literal[PaydayFrequency.WEEKLY, PaydayFrequency.BIWEEKLY]
    reference_date: Optional[date] = None

    @property
    def interval_days(self) -> int:
        return 7 if self.frequency == PaydayFrequency.WEEKLY else 14


PaydaySchedule = Union[
    WeeklySchedule,
    BiweeklySchedule,
    SemiMonthlySchedule,
    MonthlySchedule,
    IntervalSchedule,
]


class PaydaySettings(BaseModel):
    """
    Payday configuration as stored by the settings surface.

    These are raw fields: optional values may be missing or out of range.
    Run them through ScheduleValidator (or resolve_schedule) before use.
    """
    model_config = ConfigDict(validate_assignment=True)

    payday: date = Field(
        ...,
        description="Reference payday chosen by the user"
    )
    frequency: PaydayFrequency = Field(
        default=PaydayFrequency.BIWEEKLY,
        description="Pay frequency"
    )
    weekday: Optional[int] = Field(
        default=None,
        description="Weekday for weekly/biweekly pay (1 = Sunday)"
    )
    semi_monthly_first_day: Optional[int] = None
    semi_monthly_second_day: Optional[int] = None

    def to_schedule(self) -> PaydaySchedule:
        """
        Build the schedule for the configured frequency.

        Raises pydantic.ValidationError if the fields describe an
        impossible schedule.
        """
        if self.frequency in (PaydayFrequency.WEEKLY, PaydayFrequency.BIWEEKLY):
            if self.weekday is None:
                return IntervalSchedule(
                    frequency=self.frequency,
                    reference_date=self.payday,
                )
            if self.frequency == PaydayFrequency.WEEKLY:
                return WeeklySchedule(
                    weekday=self.weekday,
                    reference_date=self.payday,
                )
            return BiweeklySchedule(
                weekday=self.weekday,
                reference_date=self.payday,
            )

        if self.frequency == PaydayFrequency.SEMI_MONTHLY:
            first = self.semi_monthly_first_day
            second = self.semi_monthly_second_day
            return SemiMonthlySchedule(
                first_day=DEFAULT_SEMI_MONTHLY_FIRST_DAY if first is None else first,
                second_day=DEFAULT_SEMI_MONTHLY_SECOND_DAY if second is None else second,
            )

        return MonthlySchedule(reference_date=self.payday)


# =============================================================================
# VALIDATION MODELS
# =============================================================================

class ValidationIssue(BaseModel):
    """A single problem found in payday settings."""

    field: str = Field(
        ...,
        description="Field with the issue"
    )
    issue_type: str = Field(
        ...,
        description="Type of issue (e.g., 'missing', 'out_of_range', 'inconsistent')"
    )
    message: str = Field(
        ...,
        description="Human-readable description of the issue"
    )
    severity: str = Field(
        ...,
        pattern="^(error|warning|info)$",
        description="Issue severity"
    )
    suggested_fix: Optional[str] = Field(
        default=None,
        description="Suggested fix if available"
    )


class ScheduleValidationResult(BaseModel):
    """
    Outcome of checking payday settings.

    When valid, `schedule` holds the resolved schedule. When not,
    `schedule` is None and `issues` explains why.
    """

    is_valid: bool
    schedule: Optional[PaydaySchedule] = None
    issues: list[ValidationIssue] = Field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        return any(issue.severity == "error" for issue in self.issues)

    @property
    def error_messages(self) -> list[str]:
        return [issue.message for issue in self.issues if issue.severity == "error"]
