"""Daily budget summary shown on the dashboard."""

from datetime import date
from decimal import Decimal
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field


class DailyBudgetSummary(BaseModel):
    """
    How much can be spent per day until the next payday.

    When no primary account or no usable payday settings exist,
    `is_configured` is False and `setup_message` says what is missing.
    """

    is_configured: bool
    setup_message: Optional[str] = None

    account_id: Optional[UUID] = None
    account_name: Optional[str] = None
    balance: Optional[Decimal] = None

    next_payday: Optional[date] = None
    days_until_payday: Optional[int] = Field(default=None, ge=1)
    daily_budget: Optional[Decimal] = None
    cycle_progress: Optional[float] = Field(default=None, ge=0.0, le=1.0)

    currency_code: Optional[str] = None
