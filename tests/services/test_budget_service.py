# -*- coding: utf-8 -*-
"""
Unit tests for NDIS budget calculations and the budget service.

Tests cover:
- Percentage used with half-up rounding, zero budgets and non-finite amounts
- Plan totals
- Charging a transaction to a funding category
- Recording transactions against the newest plan
"""

from datetime import date
from decimal import Decimal

import pytest

from app.config import Config
from models.budget import BudgetCategory, Transaction, percent_used
from models.participant import Participant
from services.budget_service import BudgetService, charge, summarize, validate_transaction
from services.exceptions import StoreError, ValidationError


@pytest.fixture
def service(memory_store):
    return BudgetService(memory_store)


@pytest.fixture
def plan(memory_store, user_id):
    row = Participant(name="Sam Taylor", ndis_number="430000001").to_policy_row(user_id)
    return memory_store.insert(Config.INSURANCE_POLICIES_TABLE, row)


def _transaction(**overrides):
    values = dict(
        date=date(2024, 5, 1),
        provider="Allied Health Co",
        service="Physiotherapy",
        category="Core",
        amount=Decimal("150.50"),
    )
    values.update(overrides)
    return Transaction(**values)


class TestPercentUsed:
    """Tests for percent_used()."""

    def test_typical(self):
        """Test 8500 of 25000 is 34%."""
        assert percent_used("25000", "8500") == 34

    def test_zero_budget(self):
        """Test a zero budget reports 0 instead of dividing by zero."""
        assert percent_used(0, 100) == 0

    def test_half_rounds_up(self):
        """Test 1 of 8 (12.5%) rounds to 13."""
        assert percent_used(8, 1) == 13

    def test_category_property(self):
        """Test BudgetCategory exposes remaining and percent used."""
        category = BudgetCategory("Capital", "8500", "4250")
        assert category.remaining == Decimal("4250")
        assert category.percent_used == 50

    @pytest.mark.parametrize("value", ["NaN", "Infinity", "-Infinity", Decimal("NaN")])
    def test_non_finite_amounts_count_as_zero(self, value):
        """Test NaN and infinite amounts are read as zero instead of failing."""
        category = BudgetCategory("Core", "25000", value)
        assert category.used == Decimal("0")
        assert category.percent_used == 0
        assert percent_used(value, "100") == 0


class TestSummarize:
    """Tests for plan totals."""

    def test_totals(self):
        """Test totals add up across categories."""
        summary = summarize([
            BudgetCategory("Core", "25000", "8500"),
            BudgetCategory("Capital", "5000", "1500"),
        ])
        assert summary.total == Decimal("30000")
        assert summary.used == Decimal("10000")
        assert summary.remaining == Decimal("20000")
        assert summary.percent_used == 33

    def test_empty(self):
        """Test an empty plan sums to zero."""
        summary = summarize([])
        assert summary.total == Decimal("0")
        assert summary.percent_used == 0


class TestCharge:
    """Tests for charge()."""

    def test_adds_to_matching_category(self):
        """Test only the matching category's used amount grows."""
        funding = [
            {"category": "Core", "amount": "25000", "used": "100"},
            {"category": "Capital", "amount": "8500", "used": "0"},
        ]
        updated = charge(funding, "Core", Decimal("50.25"))

        assert Decimal(updated[0]["used"]) == Decimal("150.25")
        assert updated[1] == funding[1]
        assert funding[0]["used"] == "100"

    def test_unknown_category_unchanged(self):
        """Test an unknown category leaves the funding list as it was."""
        funding = [{"category": "Core", "amount": "25000", "used": "0"}]
        assert charge(funding, "Travel", 10) == funding


class TestValidateTransaction:
    """Tests for transaction validation."""

    def test_valid(self):
        """Test a complete transaction has no errors."""
        assert validate_transaction(_transaction()) == []

    @pytest.mark.parametrize("field_name,value", [
        ("provider", ""), ("service", "  "), ("category", ""), ("amount", Decimal("0")),
    ])
    def test_missing_field(self, field_name, value):
        """Test each required field is checked."""
        errors = validate_transaction(_transaction(**{field_name: value}))
        assert errors == ["Please fill in all required fields"]


class TestBudgetService:
    """Tests for BudgetService."""

    def test_load_categories(self, service, plan, user_id):
        """Test categories come from the plan's funding list."""
        categories = service.load_categories(user_id)
        assert [c.category for c in categories] == ["Core", "Capacity Building", "Capital"]
        assert categories[0].amount == Decimal("25000")

    def test_load_categories_without_plan(self, service, user_id):
        """Test a user without a plan has no categories."""
        assert service.load_categories(user_id) == []

    def test_record_transaction_updates_plan(self, service, memory_store, plan, user_id):
        """Test a transaction is inserted and charged to its category."""
        stored = service.record_transaction(user_id, _transaction())

        assert stored.id is not None
        assert stored.amount == Decimal("150.5")
        rows = memory_store.select(Config.TRANSACTIONS_TABLE, filters={"user_id": user_id})
        assert len(rows) == 1

        categories = service.load_categories(user_id)
        core = next(c for c in categories if c.category == "Core")
        assert core.used == Decimal("150.5")

    def test_record_transaction_without_plan(self, service, memory_store, user_id):
        """Test recording without a plan raises 404 and inserts nothing."""
        with pytest.raises(StoreError) as exc_info:
            service.record_transaction(user_id, _transaction())
        assert exc_info.value.status_code == 404
        assert memory_store.select(Config.TRANSACTIONS_TABLE) == []

    def test_record_invalid_transaction(self, service, plan, user_id):
        """Test an incomplete transaction raises ValidationError."""
        with pytest.raises(ValidationError):
            service.record_transaction(user_id, _transaction(provider=""))

    def test_load_transactions_newest_first(self, service, plan, user_id):
        """Test transactions are returned newest first."""
        service.record_transaction(user_id, _transaction(date=date(2024, 1, 1)))
        service.record_transaction(user_id, _transaction(date=date(2024, 3, 1)))

        dates = [t.date for t in service.load_transactions(user_id)]
        assert dates == [date(2024, 3, 1), date(2024, 1, 1)]
