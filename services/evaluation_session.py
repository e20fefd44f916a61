"""Evaluation workspaces — per-session criterion editing state.

A workspace bundles the selected class, its criterion store and the editor.
It is created for an authenticated session and passed explicitly to the
code that needs it; nothing here lives in module globals except the
registry accessor used by the HTTP layer.
"""

from __future__ import annotations

import logging
from typing import Iterable, Mapping

from errors.exceptions import NoClassSelectedError, UnknownClassError
from models.criterion import EditorView
from services.criterion_editor import CriterionEditor
from services.criterion_store import CriterionStore
from services.weights import summarize

logger = logging.getLogger(__name__)


class EvaluationWorkspace:
    """Criterion editing session for one user.

    The selection is tracked by class id, so renaming the selected class
    keeps its criteria.  When the selected class disappears from the
    directory the criteria are kept too, and the view carries a notice
    until the user selects another class.

    Args:
        owner: Session token (or any key) that owns the workspace.
        classes: Class directory snapshot (id -> name), in display order.
            The first class is selected on creation.
    """

    def __init__(self, owner: str, classes: Mapping[int, str]) -> None:
        self.owner = owner
        self.classes = dict(classes)
        self.selected_id: int | None = None
        self.notice = ""
        self._editor: CriterionEditor | None = None
        if self.classes:
            self.select_class(next(iter(self.classes.values())))

    @property
    def class_names(self) -> list[str]:
        return list(self.classes.values())

    @property
    def selected_class(self) -> str | None:
        return self._editor.store.class_name if self._editor else None

    def refresh_classes(self, classes: Mapping[int, str]) -> None:
        """Update the class directory snapshot without touching the criteria."""
        self.classes = dict(classes)
        if self._editor is None:
            if self.classes:
                self.select_class(self.class_names[0])
            return
        name = self.classes.get(self.selected_id)
        if name is None:
            self.notice = (
                f"Class '{self.selected_class}' is no longer available; "
                "select another class."
            )
            return
        if name != self.selected_class:
            logger.info("Selected class %s renamed to %s", self.selected_class, name)
            self._editor.store.class_name = name

    def select_class(self, class_name: str) -> CriterionEditor:
        """Switch to *class_name* with a fresh, empty criterion set."""
        class_id = next((i for i, n in self.classes.items() if n == class_name), None)
        if class_id is None:
            raise UnknownClassError(class_name, self.class_names)
        if self._editor and len(self._editor.store):
            logger.info(
                "Discarding %d unsaved criteria for %s",
                len(self._editor.store),
                self.selected_class,
            )
        self.selected_id = class_id
        self.notice = ""
        self._editor = CriterionEditor(CriterionStore(class_name))
        return self._editor

    @property
    def editor(self) -> CriterionEditor:
        if self._editor is None:
            raise NoClassSelectedError()
        return self._editor

    def view(self) -> EditorView:
        if self._editor is None:
            return EditorView(available_classes=self.class_names, summary=summarize(()))
        view = self._editor.view()
        view.available_classes = self.class_names
        if self.notice and not view.error:
            view.error = self.notice
        return view


class WorkspaceRegistry:
    """Maps session tokens to their workspaces."""

    def __init__(self) -> None:
        self._workspaces: dict[str, EvaluationWorkspace] = {}

    def get_or_create(self, owner: str, classes: Mapping[int, str]) -> EvaluationWorkspace:
        workspace = self._workspaces.get(owner)
        if workspace is None:
            workspace = EvaluationWorkspace(owner, classes)
            self._workspaces[owner] = workspace
            logger.debug("Workspace created for session %s", owner[:16])
        else:
            workspace.refresh_classes(classes)
        return workspace

    def discard(self, owner: str) -> None:
        self._workspaces.pop(owner, None)

    def retain(self, owners: Iterable[str]) -> int:
        """Drop every workspace whose owner is not in *owners*.  Returns count removed."""
        live = set(owners)
        stale = [owner for owner in self._workspaces if owner not in live]
        for owner in stale:
            del self._workspaces[owner]
        if stale:
            logger.info("Discarded %d workspaces of expired sessions", len(stale))
        return len(stale)

    @property
    def size(self) -> int:
        return len(self._workspaces)


# ── Module-level Singleton ───────────────────────────────────

_registry: WorkspaceRegistry | None = None


def get_workspace_registry() -> WorkspaceRegistry:
    """Get the singleton workspace registry."""
    global _registry
    if _registry is None:
        _registry = WorkspaceRegistry()
    return _registry
