# -*- coding: utf-8 -*-
"""
NDIS budget entity models.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional
from datetime import date

from utils.helpers import format_amount, parse_amount, parse_date, round_half_up


def percent_used(amount, used) -> int:
    """
    Share of a budget already spent, as a whole percentage.

    Halves round up; a zero budget reports 0.
    """
    amount = parse_amount(amount)
    used = parse_amount(used)
    if amount <= 0:
        return 0
    return round_half_up(used / amount * Decimal("100"))


@dataclass
class BudgetCategory:
    """One funding category of an NDIS plan."""

    category: str
    amount: Decimal = Decimal("0")
    used: Decimal = Decimal("0")

    def __post_init__(self):
        self.amount = parse_amount(self.amount)
        self.used = parse_amount(self.used)

    @property
    def remaining(self) -> Decimal:
        return self.amount - self.used

    @property
    def percent_used(self) -> int:
        return percent_used(self.amount, self.used)

    def to_dict(self) -> dict:
        """Display row: money as two-decimal strings."""
        return {
            "category": self.category,
            "amount": format_amount(self.amount),
            "used": format_amount(self.used),
            "remaining": format_amount(self.remaining),
            "percent_used": self.percent_used,
        }

    def to_funding_entry(self) -> dict:
        """Entry of the plan's ``funding_categories`` column."""
        return {
            "category": self.category,
            "amount": str(self.amount),
            "used": str(self.used),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "BudgetCategory":
        """Create BudgetCategory from a funding category entry."""
        return cls(
            category=data.get("category", ""),
            amount=data.get("amount"),
            used=data.get("used"),
        )


@dataclass
class Transaction:
    """A claim against a funding category."""

    id: Optional[str] = None
    user_id: Optional[str] = None
    date: Optional[date] = None
    provider: str = ""
    service: str = ""
    category: str = ""
    amount: Decimal = Decimal("0")
    status: str = "pending"  # pending, processed, cancelled
    notes: Optional[str] = None

    def to_dict(self) -> dict:
        """Convert to a store row."""
        return {
            "id": self.id,
            "user_id": self.user_id,
            "date": self.date.isoformat() if self.date else None,
            "provider": self.provider,
            "service": self.service,
            "category": self.category,
            "amount": float(self.amount),
            "status": self.status,
            "notes": self.notes,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Transaction":
        """Create Transaction from a store row."""
        data = dict(data)
        data["date"] = parse_date(data.get("date"))
        data["amount"] = parse_amount(data.get("amount"))
        return cls(**{k: v for k, v in data.items() if k in cls.__dataclass_fields__})
