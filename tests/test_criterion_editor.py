"""Tests for the criterion editor state machine."""

import pytest

from errors.exceptions import CriterionNotFoundError, EditorStateError
from models.criterion import EditorState, FailureCode
from services.criterion_editor import DELETE_PROMPT, CriterionEditor
from services.weights import weight_sum


def _create(editor: CriterionEditor, name: str, weight: int):
    editor.open_create()
    editor.update_form(name=name, weight=weight)
    return editor.submit()


class TestCreate:
    def test_open_create_initializes_empty_form(self, editor: CriterionEditor):
        form = editor.open_create()
        assert editor.state == EditorState.CREATING
        assert form.criterion_id is None
        assert form.name == ""
        assert form.weight == 0

    def test_submit_appends_and_returns_to_idle(self, editor: CriterionEditor):
        result = _create(editor, "Prova 1", 40)
        assert result.ok
        assert editor.state == EditorState.IDLE
        assert editor.form is None
        assert [(c.name, c.weight) for c in editor.store.snapshot()] == [("Prova 1", 40)]

    def test_untouched_form_fails_on_name(self, editor: CriterionEditor):
        editor.open_create()
        result = editor.submit()
        assert result.failure.code == FailureCode.EMPTY_NAME

    def test_failed_submit_stays_in_state_with_reason(self, editor: CriterionEditor):
        _create(editor, "A", 40)
        _create(editor, "B", 30)

        result = _create(editor, "C", 40)

        assert not result.ok
        assert editor.state == EditorState.CREATING
        assert editor.form.name == "C"
        assert "current: 70%" in editor.error
        assert "new: 40%" in editor.error
        assert weight_sum(editor.store.snapshot()) == 70

    def test_resubmit_after_correction(self, editor: CriterionEditor):
        _create(editor, "A", 70)
        _create(editor, "B", 40)
        editor.update_form(weight=30)
        result = editor.submit()
        assert result.ok
        assert editor.error == ""
        assert weight_sum(editor.store.snapshot()) == 100


class TestEdit:
    def test_open_edit_binds_current_values(self, editor: CriterionEditor):
        _create(editor, "Trabalho", 30)
        criterion = editor.store.snapshot()[0]

        form = editor.open_edit(criterion.id)

        assert editor.state == EditorState.EDITING
        assert form.criterion_id == criterion.id
        assert (form.name, form.weight) == ("Trabalho", 30)

    def test_edit_compares_against_other_criteria(self, editor: CriterionEditor):
        _create(editor, "X", 30)
        _create(editor, "Y", 60)
        x = editor.store.snapshot()[0]

        editor.open_edit(x.id)
        editor.update_form(weight=40)
        result = editor.submit()

        assert result.ok
        assert editor.store.get(x.id).weight == 40
        assert weight_sum(editor.store.snapshot()) == 100

    def test_edit_replaces_in_place(self, editor: CriterionEditor):
        _create(editor, "A", 10)
        _create(editor, "B", 20)
        a = editor.store.snapshot()[0]

        editor.open_edit(a.id)
        editor.update_form(name="A revisado")
        editor.submit()

        snapshot = editor.store.snapshot()
        assert [c.name for c in snapshot] == ["A revisado", "B"]
        assert snapshot[0].id == a.id

    def test_open_edit_unknown_id(self, editor: CriterionEditor):
        with pytest.raises(CriterionNotFoundError):
            editor.open_edit(99)
        assert editor.state == EditorState.IDLE


class TestCancel:
    def test_cancel_edit_leaves_set_identical(self, editor: CriterionEditor):
        _create(editor, "A", 40)
        _create(editor, "B", 30)
        before = [c.model_dump() for c in editor.store.snapshot()]

        editor.open_edit(before[0]["id"])
        editor.update_form(name="Changed", weight=5)
        editor.cancel()

        assert [c.model_dump() for c in editor.store.snapshot()] == before
        assert editor.state == EditorState.IDLE
        assert editor.form is None

    def test_cancel_create_does_not_append(self, editor: CriterionEditor):
        editor.open_create()
        editor.update_form(name="A", weight=10)
        editor.cancel()
        assert editor.store.snapshot() == ()


class TestDelete:
    def test_delete_requires_confirmation(self, editor: CriterionEditor):
        _create(editor, "A", 40)
        a = editor.store.snapshot()[0]

        pending = editor.request_delete(a.id)

        assert pending.prompt == DELETE_PROMPT
        assert len(editor.store) == 1

        assert editor.confirm_delete(True) is True
        assert len(editor.store) == 0
        assert editor.pending_delete is None

    def test_declined_confirmation_keeps_criterion(self, editor: CriterionEditor):
        _create(editor, "A", 40)
        a = editor.store.snapshot()[0]
        editor.request_delete(a.id)
        assert editor.confirm_delete(False) is False
        assert len(editor.store) == 1

    def test_delete_lowers_sum_by_removed_weight(self, editor: CriterionEditor):
        for name, weight in (("A", 40), ("B", 35), ("C", 25)):
            _create(editor, name, weight)
        for criterion in editor.store.snapshot():
            before = weight_sum(editor.store.snapshot())
            editor.request_delete(criterion.id)
            editor.confirm_delete()
            assert weight_sum(editor.store.snapshot()) == before - criterion.weight
            assert editor.error == ""

    def test_delete_from_open_form_discards_form(self, editor: CriterionEditor):
        _create(editor, "A", 40)
        a = editor.store.snapshot()[0]
        editor.open_edit(a.id)
        editor.request_delete(a.id)
        assert editor.state == EditorState.IDLE
        assert editor.form is None

    def test_confirm_without_request(self, editor: CriterionEditor):
        with pytest.raises(EditorStateError):
            editor.confirm_delete()


class TestInlineWeight:
    def test_inline_update_applies(self, editor: CriterionEditor):
        _create(editor, "A", 40)
        a = editor.store.snapshot()[0]
        result = editor.inline_update_weight(a.id, 60)
        assert result.ok
        assert editor.store.get(a.id).weight == 60

    def test_inline_update_excludes_own_weight(self, editor: CriterionEditor):
        _create(editor, "A", 30)
        _create(editor, "B", 60)
        a = editor.store.snapshot()[0]
        assert editor.inline_update_weight(a.id, 40).ok

    def test_inline_update_over_budget_is_rejected(self, editor: CriterionEditor):
        _create(editor, "A", 30)
        _create(editor, "B", 60)
        a = editor.store.snapshot()[0]

        result = editor.inline_update_weight(a.id, 50)

        assert result.failure.code == FailureCode.SUM_EXCEEDED
        assert editor.store.get(a.id).weight == 30
        assert editor.error == result.message

    @pytest.mark.parametrize("weight", [-1, 0, 101])
    def test_inline_out_of_range_uses_form_rules(self, editor: CriterionEditor, weight):
        _create(editor, "A", 30)
        a = editor.store.snapshot()[0]

        result = editor.inline_update_weight(a.id, weight)

        assert not result.ok
        assert editor.store.get(a.id).weight == 30

    def test_inline_update_leaves_open_form_alone(self, editor: CriterionEditor):
        _create(editor, "A", 30)
        a = editor.store.snapshot()[0]
        editor.open_create()
        editor.update_form(name="B")
        editor.inline_update_weight(a.id, 50)
        assert editor.state == EditorState.CREATING
        assert editor.form.name == "B"


class TestStateErrors:
    def test_submit_while_idle(self, editor: CriterionEditor):
        with pytest.raises(EditorStateError):
            editor.submit()

    def test_update_form_while_idle(self, editor: CriterionEditor):
        with pytest.raises(EditorStateError):
            editor.update_form(name="A")


class TestView:
    def test_view_reflects_summary(self, editor: CriterionEditor):
        _create(editor, "A", 60)
        _create(editor, "B", 40)
        view = editor.view()
        assert view.class_name == "Turma A"
        assert view.summary.is_valid is True
        assert [c.name for c in view.criteria] == ["A", "B"]

    def test_view_form_is_a_copy(self, editor: CriterionEditor):
        editor.open_create()
        view = editor.view()
        view.form.name = "mutated"
        assert editor.form.name == ""
