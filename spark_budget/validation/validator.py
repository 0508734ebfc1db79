"""
Payday Settings Validation

DESIGN DECISION: Raw payday settings are checked in two stages.

STAGE 1 - FIELD VALIDATION:
- Weekday present and within 1-7 for weekly/biweekly pay
- Semi-monthly days within 1-28
- Semi-monthly days in order

STAGE 2 - SCHEDULE CONSTRUCTION:
- Build the frequency-specific schedule
- Catches cross-field rules the schedule types enforce
  (e.g., a biweekly reference date on the wrong weekday)

Validation NEVER silently fixes issues. The one tolerated gap is a
missing weekday on weekly/biweekly pay: it is reported as a warning and
resolves to a flat 7-/14-day interval schedule.
"""

from typing import Optional

from pydantic import ValidationError

from spark_budget.models.schedule import (
    DEFAULT_SEMI_MONTHLY_FIRST_DAY,
    DEFAULT_SEMI_MONTHLY_SECOND_DAY,
    PaydayFrequency,
    PaydaySchedule,
    PaydaySettings,
    ScheduleValidationResult,
    ValidationIssue,
)


class ScheduleConfigurationError(Exception):
    """Payday settings do not describe a usable schedule."""

    def __init__(self, issues: list[ValidationIssue]):
        self.issues = issues
        messages = "; ".join(
            issue.message for issue in issues if issue.severity == "error"
        )
        super().__init__(f"Invalid payday settings: {messages}")


class ScheduleValidator:
    """
    Validates raw PaydaySettings and resolves them to a schedule.
    """

    def _validate_fields(
        self,
        settings: PaydaySettings,
    ) -> tuple[bool, list[ValidationIssue]]:
        """
        Stage 1: Field validation.

        Returns: (is_valid, list_of_issues)
        """
        issues = []

        if settings.frequency in (PaydayFrequency.WEEKLY, PaydayFrequency.BIWEEKLY):
            if settings.weekday is None:
                interval = 7 if settings.frequency == PaydayFrequency.WEEKLY else 14
                issues.append(ValidationIssue(
                    field="weekday",
                    issue_type="missing",
                    message=f"No payday weekday set; paydays will be counted every {interval} days",
                    severity="warning",
                    suggested_fix="Choose the weekday you are paid on",
                ))
            elif not 1 <= settings.weekday <= 7:
                issues.append(ValidationIssue(
                    field="weekday",
                    issue_type="out_of_range",
                    message=f"Weekday must be between 1 (Sunday) and 7 (Saturday), got {settings.weekday}",
                    severity="error",
                ))

        if settings.frequency == PaydayFrequency.SEMI_MONTHLY:
            for field_name in ("semi_monthly_first_day", "semi_monthly_second_day"):
                value = getattr(settings, field_name)
                if value is not None and not 1 <= value <= 28:
                    issues.append(ValidationIssue(
                        field=field_name,
                        issue_type="out_of_range",
                        message=f"Semi-monthly payday must be between 1 and 28, got {value}",
                        severity="error",
                        suggested_fix="Pick a day that exists in every month",
                    ))

            first = settings.semi_monthly_first_day
            second = settings.semi_monthly_second_day
            if first is None:
                first = DEFAULT_SEMI_MONTHLY_FIRST_DAY
            if second is None:
                second = DEFAULT_SEMI_MONTHLY_SECOND_DAY
            if first >= second:
                issues.append(ValidationIssue(
                    field="semi_monthly_second_day",
                    issue_type="inconsistent",
                    message=f"First payday ({first}) must come before second payday ({second})",
                    severity="error",
                    suggested_fix="Swap the two days",
                ))

        is_valid = not any(issue.severity == "error" for issue in issues)
        return is_valid, issues

    def _build_schedule(
        self,
        settings: PaydaySettings,
    ) -> tuple[Optional[PaydaySchedule], list[ValidationIssue]]:
        """
        Stage 2: Schedule construction.

        Returns: (schedule_or_none, list_of_issues)
        """
        try:
            return settings.to_schedule(), []
        except ValidationError as e:
            issues = [
                ValidationIssue(
                    field=".".join(str(part) for part in error["loc"]) or "schedule",
                    issue_type="inconsistent",
                    message=error["msg"].removeprefix("Value error, "),
                    severity="error",
                )
                for error in e.errors()
            ]
            return None, issues

    def validate(self, settings: PaydaySettings) -> ScheduleValidationResult:
        """
        Run both stages.

        Args:
            settings: Raw payday settings

        Returns:
            ScheduleValidationResult holding the schedule when valid
        """
        fields_valid, issues = self._validate_fields(settings)

        schedule = None
        if fields_valid:
            schedule, build_issues = self._build_schedule(settings)
            issues.extend(build_issues)

        return ScheduleValidationResult(
            is_valid=schedule is not None,
            schedule=schedule,
            issues=issues,
        )


def resolve_schedule(settings: PaydaySettings) -> PaydaySchedule:
    """
    Resolve raw settings to a schedule or raise.

    Raises:
        ScheduleConfigurationError: If the settings are not usable
    """
    result = ScheduleValidator().validate(settings)
    if result.schedule is None:
        raise ScheduleConfigurationError(result.issues)
    return result.schedule
