# -*- coding: utf-8 -*-
"""
Tests for the Wizard Controller.

Tests cover:
- Open / cancel lifecycle
- Step navigation bounds
- Draft edits through the controller
- Submit success, validation failure and store failure
- Refusing a second submit while a save is in flight
"""

import json

import pytest

from app.config import Config
from controllers.wizard_controller import WizardController, WizardState
from services.exceptions import WizardStateError
from services.persistence_adapter import PersistenceAdapter
from ui.wizards.legal import PowerOfAttorneyWizard, WillWizard


@pytest.fixture
def controller(qapp, adapter):
    return WizardController(WillWizard(), adapter)


@pytest.fixture
def active(controller, user_id):
    controller.open(user_id=user_id)
    return controller


def _walk_to_last(controller):
    while controller.next():
        pass


class TestLifecycle:
    """Test open and cancel."""

    def test_starts_idle(self, controller):
        """Test a new controller has no draft."""
        assert controller.state == WizardState.IDLE
        assert controller.draft is None

    def test_open_starts_at_first_step(self, active):
        """Test open gives step 0 and the template draft."""
        assert active.state == WizardState.ACTIVE
        assert active.current_index == 0
        assert active.step_count == 5
        assert active.draft["testator"]["name"] == ""

    def test_open_twice_refused(self, active):
        """Test opening an open wizard raises."""
        with pytest.raises(WizardStateError):
            active.open()

    def test_open_with_initial_draft(self, controller):
        """Test a supplied draft is used as-is."""
        draft = WillWizard().initial_draft()
        draft["testator"]["name"] = "Preset"
        controller.open(initial_draft=draft)
        assert controller.draft["testator"]["name"] == "Preset"

    def test_cancel_discards_draft(self, active):
        """Test cancel returns to idle with no draft."""
        active.edit("testator.name", "Jane")
        active.cancel()

        assert active.state == WizardState.IDLE
        assert active.draft is None

    def test_cancel_when_idle_is_noop(self, controller, qtbot):
        """Test cancel while idle emits nothing."""
        with qtbot.assertNotEmitted(controller.cancelled):
            controller.cancel()
        assert controller.state == WizardState.IDLE

    def test_reopen_after_cancel_uses_template(self, active, user_id):
        """Test a cancelled draft does not come back."""
        active.edit("testator.name", "Jane")
        active.cancel()
        active.open(user_id=user_id)
        assert active.draft["testator"]["name"] == ""

    def test_edit_when_idle_raises(self, controller):
        """Test edits require an open wizard."""
        with pytest.raises(WizardStateError):
            controller.edit("testator.name", "x")
        with pytest.raises(WizardStateError):
            controller.next()

    def test_variant_sets_draft_type(self, qapp, adapter):
        """Test a POA opened as medical starts with type medical."""
        controller = WizardController(PowerOfAttorneyWizard(), adapter)
        controller.open(variant="medical")
        assert controller.draft["type"] == "medical"


class TestNavigation:
    """Test next/back bounds."""

    def test_back_at_first_step_is_noop(self, active):
        """Test back at index 0 stays at 0."""
        assert active.back() is False
        assert active.current_index == 0

    def test_next_at_last_step_is_noop(self, active):
        """Test next at the last index stays there."""
        _walk_to_last(active)
        assert active.current_index == 4
        assert active.next() is False
        assert active.current_index == 4

    def test_next_then_back(self, active, qtbot):
        """Test navigation emits step_changed with old and new index."""
        with qtbot.waitSignal(active.step_changed) as blocker:
            active.next()
        assert blocker.args == [0, 1]
        active.back()
        assert active.current_index == 0

    def test_navigation_keeps_draft(self, active):
        """Test steps are not validated and the draft survives navigation."""
        active.edit("executor.name", "Sam")
        active.next()
        active.next()
        active.back()
        assert active.draft["executor"]["name"] == "Sam"

    def test_goto_out_of_range(self, active):
        """Test goto rejects invalid indexes."""
        assert active.goto(10) is False
        assert active.goto(3) is True
        assert active.current_index == 3

    def test_last_step_flag(self, active):
        """Test is_last_step only on the final step."""
        assert not active.is_last_step()
        _walk_to_last(active)
        assert active.is_last_step()


class TestEditing:
    """Test edits through the controller."""

    def test_edit_replaces_draft(self, active, qtbot):
        """Test edit installs a new draft and emits draft_changed."""
        before = active.draft
        with qtbot.waitSignal(active.draft_changed):
            active.edit("testator.name", "Jane Doe")

        assert active.draft is not before
        assert before["testator"]["name"] == ""
        assert active.draft["testator"]["name"] == "Jane Doe"

    def test_list_edits(self, active):
        """Test adding and removing list items."""
        active.append_to("beneficiaries", {"name": "B", "relationship": "", "share": ""})
        assert len(active.draft["beneficiaries"]) == 2
        active.remove_at("beneficiaries", 0)
        assert active.draft["beneficiaries"][0]["name"] == "B"

    def test_fields_reflect_draft(self, active):
        """Test the rendered fragment reads values from the draft."""
        active.edit("testator.name", "Jane Doe")
        fields = active.current_fields()
        name_field = next(f for f in fields if f.path == ("testator", "name"))
        assert name_field.value == "Jane Doe"

    def test_field_set_writes_through(self, active):
        """Test FieldSpec.set routes to the controller."""
        fields = active.current_fields()
        fields[0].set("Via Field")
        assert active.draft["testator"]["name"] == "Via Field"


class TestSubmit:
    """Test submit outcomes."""

    def test_submit_saves_will(self, active, memory_store, user_id, qtbot):
        """Test a filled will is inserted and the controller goes idle."""
        active.edit("testator.name", "Jane Doe")
        _walk_to_last(active)

        with qtbot.waitSignal(active.submitted) as blocker:
            result = active.submit()

        assert result.success
        rows = memory_store.select(Config.LEGAL_DOCUMENTS_TABLE)
        assert len(rows) == 1
        row = rows[0]
        assert blocker.args == [row["id"]]
        assert row["title"] == "Last Will and Testament - Jane Doe"
        assert row["type"] == "will"
        assert row["status"] == "draft"
        assert row["user_id"] == user_id
        assert json.loads(row["content"])["testator"]["name"] == "Jane Doe"

        assert active.state == WizardState.IDLE
        assert active.draft is None

    def test_submit_before_last_step_raises(self, active):
        """Test submit is only allowed on the last step."""
        with pytest.raises(WizardStateError):
            active.submit()

    def test_validation_failure_stays_open(self, active, memory_store):
        """Test a missing testator name blocks the save."""
        _walk_to_last(active)
        result = active.submit()

        assert not result.success
        assert "Testator name is required" in active.error
        assert active.state == WizardState.ACTIVE
        assert active.current_index == 4
        assert memory_store.select(Config.LEGAL_DOCUMENTS_TABLE) == []

    def test_store_failure_keeps_session(self, qapp, failing_store, user_id):
        """Test a failed insert keeps step, draft and sets the error."""
        controller = WizardController(WillWizard(), PersistenceAdapter(failing_store))
        controller.open(user_id=user_id)
        controller.edit("testator.name", "Jane Doe")
        _walk_to_last(controller)
        draft_before = controller.draft

        result = controller.submit()

        assert not result.success
        assert controller.state == WizardState.ACTIVE
        assert controller.current_index == 4
        assert controller.draft is draft_before
        assert controller.error
        assert not controller.is_submitting
        assert failing_store.insert_attempts == 1

    def test_retry_after_failure_clears_error(self, qapp, failing_store, user_id):
        """Test a successful retry after a failure closes the wizard."""
        controller = WizardController(WillWizard(), PersistenceAdapter(failing_store))
        controller.open(user_id=user_id)
        controller.edit("testator.name", "Jane Doe")
        _walk_to_last(controller)
        controller.submit()
        assert controller.error

        failing_store.insert = lambda table, row: {"id": "doc-1", **row}
        result = controller.submit()

        assert result.success
        assert result.data == "doc-1"
        assert controller.state == WizardState.IDLE

    def test_submit_without_user_fails(self, controller):
        """Test saving without a signed-in user is refused."""
        controller.open()
        controller.edit("testator.name", "Jane Doe")
        _walk_to_last(controller)

        result = controller.submit()

        assert not result.success
        assert "signed in" in controller.error
        assert controller.state == WizardState.ACTIVE

    def test_submit_while_saving_refused(self, active, memory_store, monkeypatch):
        """Test a submit made while the save is in flight is refused."""
        active.edit("testator.name", "Jane Doe")
        _walk_to_last(active)
        store_insert = memory_store.insert
        inner_results = []

        def insert_and_resubmit(table, row):
            assert active.is_submitting
            inner_results.append(active.submit())
            return store_insert(table, row)

        monkeypatch.setattr(memory_store, "insert", insert_and_resubmit)

        result = active.submit()

        assert result.success
        assert len(inner_results) == 1
        assert not inner_results[0].success
        assert inner_results[0].message == "A save is already in progress"
        assert len(memory_store.select(Config.LEGAL_DOCUMENTS_TABLE)) == 1
        assert not active.is_submitting
