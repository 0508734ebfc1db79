"""
Bill Models for Spark Budget

Bills carry a due date and a recurrence rule. When a recurring bill is
paid, its due date rolls forward one period and it becomes unpaid again.

DESIGN DECISION: These models hold data only. Every date computation
(status, days until due, next occurrence) lives in spark_budget.engine
and takes an explicit "today" so results never depend on a hidden clock.
"""

from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Annotated, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field, model_validator


# =============================================================================
# ENUMS - Finite set of valid values
# =============================================================================

class BillRecurrence(str, Enum):
    """
    How a bill's due date advances after payment.

    ONE_TIME bills never advance.
    """
    ONE_TIME = "one_time"
    WEEKLY = "weekly"
    BIWEEKLY = "biweekly"
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    YEARLY = "yearly"


class BillStatus(str, Enum):
    """
    Urgency classification of a bill on a given day.

    Exactly one applies to any (is_paid, days_until_due) pair.
    """
    PAID = "paid"
    OVERDUE = "overdue"
    DUE_SOON = "due_soon"    # 0-7 days out
    UPCOMING = "upcoming"    # more than 7 days out


# =============================================================================
# CORE BILL MODEL
# =============================================================================

class Bill(BaseModel):
    """
    A bill the user has to pay, once or on a schedule.
    """
    model_config = ConfigDict(str_strip_whitespace=True, validate_assignment=True)

    id: UUID = Field(
        default_factory=uuid4,
        description="Unique bill ID"
    )
    title: str = Field(
        ...,
        min_length=1,
        max_length=200,
        description="What the bill is for"
    )
    category: str = Field(
        ...,
        min_length=1,
        max_length=100,
        description="Spending category"
    )
    amount: Annotated[
        Decimal,
        Field(ge=0, decimal_places=2, description="Amount due")
    ]
    due_date: date = Field(
        ...,
        description="Date the current cycle is due"
    )
    recurrence: BillRecurrence = Field(
        default=BillRecurrence.MONTHLY,
        description="How the due date advances after payment"
    )
    is_paid: bool = False
    last_paid_date: Optional[date] = None
    notes: Optional[str] = Field(
        default=None,
        max_length=1000,
    )
    account_id: Optional[UUID] = Field(
        default=None,
        description="Account the bill is paid from"
    )

    created_at: datetime = Field(default_factory=datetime.utcnow)
    modified_at: datetime = Field(default_factory=datetime.utcnow)

    @property
    def is_recurring(self) -> bool:
        return self.recurrence != BillRecurrence.ONE_TIME


class BillRollover(BaseModel):
    """
    Where a bill stands after a payment is applied.

    For recurring bills the due date has advanced one period and the bill
    is unpaid again. One-time bills keep their due date and stay paid.
    """
    model_config = ConfigDict(frozen=True)

    due_date: date
    is_paid: bool
    rolled_forward: bool

    @model_validator(mode='after')
    def validate_state(self) -> 'BillRollover':
        if self.rolled_forward and self.is_paid:
            raise ValueError("A rolled-forward bill starts its new cycle unpaid")
        return self
