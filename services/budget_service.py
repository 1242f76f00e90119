# -*- coding: utf-8 -*-
"""
Budget Service - NDIS plan funding and spending.

The user's newest NDIS plan (an insurance policy row of type 'ndis')
holds a ``funding_categories`` list of {category, amount, used}.
Recording a transaction inserts it and adds its amount to the matching
category's ``used`` with one plan update.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Dict, List, Optional

from app.config import Config
from models.budget import BudgetCategory, Transaction, percent_used
from services.data_store import DataStore
from services.exceptions import StoreError, ValidationError
from utils.helpers import format_amount, parse_amount
from utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class BudgetSummary:
    """Totals across all funding categories."""
    total: Decimal
    used: Decimal
    remaining: Decimal
    percent_used: int

    def to_dict(self) -> dict:
        return {
            "total": format_amount(self.total),
            "used": format_amount(self.used),
            "remaining": format_amount(self.remaining),
            "percent_used": self.percent_used,
        }


def summarize(categories: List[BudgetCategory]) -> BudgetSummary:
    """Aggregate categories into plan totals."""
    total = sum((c.amount for c in categories), Decimal("0"))
    used = sum((c.used for c in categories), Decimal("0"))
    return BudgetSummary(
        total=total,
        used=used,
        remaining=total - used,
        percent_used=percent_used(total, used),
    )


def validate_transaction(transaction: Transaction) -> List[str]:
    """Required: provider, service, category and a non-zero amount."""
    if (not (transaction.provider or "").strip()
            or not (transaction.service or "").strip()
            or not (transaction.category or "").strip()
            or not transaction.amount):
        return ["Please fill in all required fields"]
    return []


class BudgetService:
    """Reads plan funding and records spending against it."""

    def __init__(self, store: DataStore):
        self.store = store

    def load_plan(self, user_id: str) -> Optional[Dict[str, Any]]:
        """Newest NDIS plan of the user, or None."""
        rows = self.store.select(
            Config.INSURANCE_POLICIES_TABLE,
            filters={"user_id": user_id, "type": "ndis"},
            order_by="created_at",
            descending=True,
            limit=1,
        )
        return rows[0] if rows else None

    def load_categories(self, user_id: str) -> List[BudgetCategory]:
        """Funding categories of the newest plan; empty without a plan."""
        plan = self.load_plan(user_id)
        if plan is None:
            logger.info(f"No NDIS plan found for user {user_id}")
            return []
        return categories_of(plan)

    def load_transactions(self, user_id: str) -> List[Transaction]:
        """All transactions of the user, newest first."""
        rows = self.store.select(
            Config.TRANSACTIONS_TABLE,
            filters={"user_id": user_id},
            order_by="date",
            descending=True,
        )
        return [Transaction.from_dict(row) for row in rows]

    def record_transaction(self, user_id: str, transaction: Transaction) -> Transaction:
        """
        Insert a transaction and charge it to the plan.

        Raises:
            ValidationError: a required field is missing
            StoreError: no NDIS plan, or a store call failed
        """
        errors = validate_transaction(transaction)
        if errors:
            raise ValidationError(errors[0], errors=errors)

        plan = self.load_plan(user_id)
        if plan is None:
            raise StoreError("No NDIS plan found to charge this transaction to",
                             status_code=404, context="transaction")

        row = transaction.to_dict()
        row.pop("id", None)
        row["user_id"] = user_id
        stored = Transaction.from_dict(self.store.insert(Config.TRANSACTIONS_TABLE, row))
        logger.info(
            f"Recorded transaction {stored.id}: {stored.category} {format_amount(stored.amount)}"
        )

        funding = charge(plan.get("funding_categories") or [], stored.category, stored.amount)
        self.store.update(
            Config.INSURANCE_POLICIES_TABLE, plan["id"], {"funding_categories": funding},
            user_id=user_id,
        )
        return stored


def categories_of(plan: Dict[str, Any]) -> List[BudgetCategory]:
    return [BudgetCategory.from_dict(entry) for entry in plan.get("funding_categories") or []]


def charge(funding: List[Dict[str, Any]], category: str, amount) -> List[Dict[str, Any]]:
    """
    New ``funding_categories`` list with ``amount`` added to ``category``.

    Entries of other categories are passed through unchanged.
    """
    updated = []
    found = False
    for entry in funding:
        if entry.get("category") == category:
            found = True
            entry = dict(entry)
            entry["used"] = str(parse_amount(entry.get("used")) + parse_amount(amount))
        updated.append(entry)
    if not found:
        logger.warning(f"Funding category {category!r} not in plan; plan left unchanged")
    return updated
