"""
Account and Transaction Models

Balances are plain Decimal bookkeeping: an expense debits the account it
is drawn from. Only the pieces the bill workflow touches live here.
"""

from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field


class AccountType(str, Enum):
    CHECKING = "checking"
    SAVINGS = "savings"
    CREDIT_CARD = "credit_card"
    LOAN = "loan"
    CASH = "cash"


class TransactionType(str, Enum):
    INCOME = "income"
    EXPENSE = "expense"
    TRANSFER = "transfer"


class Account(BaseModel):
    """
    A money account. The primary account funds the daily budget.
    """
    model_config = ConfigDict(str_strip_whitespace=True, validate_assignment=True)

    id: UUID = Field(default_factory=uuid4)
    name: str = Field(
        ...,
        min_length=1,
        max_length=100,
    )
    account_type: AccountType = AccountType.CHECKING
    balance: Decimal = Field(
        default=Decimal("0"),
        description="Current balance (may be negative)"
    )
    is_primary: bool = False

    created_at: datetime = Field(default_factory=datetime.utcnow)
    modified_at: datetime = Field(default_factory=datetime.utcnow)


class Transaction(BaseModel):
    """A single movement of money on an account."""
    model_config = ConfigDict(str_strip_whitespace=True)

    id: UUID = Field(default_factory=uuid4)
    amount: Decimal = Field(..., ge=0)
    transaction_date: date
    description: str = Field(..., min_length=1, max_length=200)
    category: str = Field(..., min_length=1, max_length=100)
    type: TransactionType = TransactionType.EXPENSE
    notes: Optional[str] = Field(default=None, max_length=1000)
    account_id: UUID

    created_at: datetime = Field(default_factory=datetime.utcnow)
