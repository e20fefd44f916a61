"""Criterion editor — the create/edit/delete workflow for one class's criteria.

The editor is a small state machine::

    IDLE ──open_create()──▶ CREATING ──submit() ok / cancel()──▶ IDLE
    IDLE ──open_edit(id)──▶ EDITING  ──submit() ok / cancel()──▶ IDLE

A failed ``submit()`` keeps the current state and exposes the validator's
reason in :attr:`CriterionEditor.error`.  Deletion is a two-step
request/confirm exchange that skips weight validation, since removing a
criterion can only lower the sum.  ``inline_update_weight()`` edits a
weight in place without a form and runs the same validation as
``submit()``.
"""

from __future__ import annotations

import logging

from errors.exceptions import EditorStateError
from models.criterion import (
    CriterionForm,
    EditorState,
    EditorView,
    PendingDelete,
    ValidationResult,
)
from services.criterion_store import CriterionStore
from services.weights import summarize, validate_criterion

logger = logging.getLogger(__name__)

DELETE_PROMPT = "Are you sure you want to remove this criterion?"


class CriterionEditor:
    """Orchestrates edits of a :class:`CriterionStore`.

    Every mutation of the store goes through this class; the store itself
    never sees an unvalidated weight.
    """

    def __init__(self, store: CriterionStore) -> None:
        self.store = store
        self.state = EditorState.IDLE
        self.form: CriterionForm | None = None
        self.pending_delete: PendingDelete | None = None
        self.error = ""

    # ── Form lifecycle ───────────────────────────────────────

    def open_create(self) -> CriterionForm:
        """Open an empty form for a new criterion."""
        self._reset()
        self.state = EditorState.CREATING
        self.form = CriterionForm()
        return self.form

    def open_edit(self, criterion_id: int) -> CriterionForm:
        """Open the form bound to an existing criterion's current values."""
        criterion = self.store.get(criterion_id)
        self._reset()
        self.state = EditorState.EDITING
        self.form = CriterionForm(
            criterion_id=criterion.id,
            name=criterion.name,
            weight=criterion.weight,
        )
        return self.form

    def update_form(self, name: str | None = None, weight: int | None = None) -> CriterionForm:
        """Change pending form fields.  Nothing is committed."""
        form = self._require_form("update the form")
        if name is not None:
            form.name = name
        if weight is not None:
            form.weight = weight
        return form

    def submit(self) -> ValidationResult:
        """Validate the pending form and commit it on success."""
        form = self._require_form("submit")
        self.error = ""

        result = validate_criterion(
            self.store.snapshot(),
            form.criterion_id,
            form.name,
            form.weight,
        )
        if not result.ok:
            self.error = result.message
            logger.debug("Criterion rejected for %s: %s", self.store.class_name, result.message)
            return result

        if self.state is EditorState.CREATING:
            self.store.append(form.name, form.weight)
        else:
            self.store.replace(form.criterion_id, form.name, form.weight)
        self._reset()
        return result

    def cancel(self) -> None:
        """Discard the pending form or delete request."""
        self._reset()

    # ── Deletion ─────────────────────────────────────────────

    def request_delete(self, criterion_id: int) -> PendingDelete:
        """Ask for confirmation before removing a criterion.

        Any open form is discarded.
        """
        self.store.get(criterion_id)
        self._reset()
        self.pending_delete = PendingDelete(criterion_id=criterion_id, prompt=DELETE_PROMPT)
        return self.pending_delete

    def confirm_delete(self, confirmed: bool = True) -> bool:
        """Answer the pending confirmation.  Returns True if a criterion was removed."""
        if self.pending_delete is None:
            raise EditorStateError("confirm a deletion", "without a pending deletion")
        criterion_id = self.pending_delete.criterion_id
        self._reset()
        if not confirmed:
            return False
        self.store.remove(criterion_id)
        logger.info("Criterion %d removed from %s", criterion_id, self.store.class_name)
        return True

    # ── Inline edit ──────────────────────────────────────────

    def inline_update_weight(self, criterion_id: int, weight: int) -> ValidationResult:
        """Change one criterion's weight in place, with the form's validation.

        The editor's state and pending form are left untouched.
        """
        criterion = self.store.get(criterion_id)
        result = validate_criterion(self.store.snapshot(), criterion.id, criterion.name, weight)
        if not result.ok:
            self.error = result.message
            return result
        self.store.update_weight(criterion_id, weight)
        self.error = ""
        return result

    # ── Read model ───────────────────────────────────────────

    def view(self) -> EditorView:
        criteria = self.store.snapshot()
        return EditorView(
            class_name=self.store.class_name,
            state=self.state,
            form=self.form.model_copy() if self.form else None,
            pending_delete=self.pending_delete,
            error=self.error,
            criteria=list(criteria),
            summary=summarize(criteria),
        )

    # ── Internals ────────────────────────────────────────────

    def _require_form(self, operation: str) -> CriterionForm:
        if self.state is EditorState.IDLE or self.form is None:
            raise EditorStateError(operation, self.state.value)
        return self.form

    def _reset(self) -> None:
        self.state = EditorState.IDLE
        self.form = None
        self.pending_delete = None
        self.error = ""
