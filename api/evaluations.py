"""Evaluations API — criterion weight configuration for the selected class.

Each endpoint forwards one user intent to the caller's
:class:`~services.criterion_editor.CriterionEditor` and answers with the
resulting :class:`~models.criterion.EditorView`.  A rejected submit or
inline edit is not an HTTP error: the view comes back with ``error`` set
and the criteria unchanged.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from api.deps import get_workspace
from models.criterion import EditorView
from models.request import (
    ConfirmDeleteRequest,
    FormUpdateRequest,
    InlineWeightRequest,
    SelectClassRequest,
)
from services.evaluation_session import EvaluationWorkspace

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/evaluations", tags=["evaluations"])


@router.get("", response_model=EditorView)
async def get_view(workspace: EvaluationWorkspace = Depends(get_workspace)):
    """Current criteria, totals and editor state."""
    return workspace.view()


@router.put("/class", response_model=EditorView)
async def select_class(
    req: SelectClassRequest,
    workspace: EvaluationWorkspace = Depends(get_workspace),
):
    """Select a class.  Starts a fresh, empty criterion set."""
    workspace.select_class(req.class_name)
    return workspace.view()


# ── Form (create / edit) ─────────────────────────────────────


@router.post("/form", response_model=EditorView)
async def open_create(workspace: EvaluationWorkspace = Depends(get_workspace)):
    workspace.editor.open_create()
    return workspace.view()


@router.post("/criteria/{criterion_id}/form", response_model=EditorView)
async def open_edit(
    criterion_id: int,
    workspace: EvaluationWorkspace = Depends(get_workspace),
):
    workspace.editor.open_edit(criterion_id)
    return workspace.view()


@router.patch("/form", response_model=EditorView)
async def update_form(
    req: FormUpdateRequest,
    workspace: EvaluationWorkspace = Depends(get_workspace),
):
    workspace.editor.update_form(name=req.name, weight=req.weight)
    return workspace.view()


@router.post("/form/submit", response_model=EditorView)
async def submit_form(workspace: EvaluationWorkspace = Depends(get_workspace)):
    """Validate and commit the pending form."""
    workspace.editor.submit()
    return workspace.view()


@router.post("/form/cancel", response_model=EditorView)
async def cancel_form(workspace: EvaluationWorkspace = Depends(get_workspace)):
    workspace.editor.cancel()
    return workspace.view()


# ── Inline weight edit ───────────────────────────────────────


@router.patch("/criteria/{criterion_id}/weight", response_model=EditorView)
async def inline_weight(
    criterion_id: int,
    req: InlineWeightRequest,
    workspace: EvaluationWorkspace = Depends(get_workspace),
):
    workspace.editor.inline_update_weight(criterion_id, req.weight)
    return workspace.view()


# ── Deletion ─────────────────────────────────────────────────


@router.post("/criteria/{criterion_id}/delete", response_model=EditorView)
async def request_delete(
    criterion_id: int,
    workspace: EvaluationWorkspace = Depends(get_workspace),
):
    """Ask for confirmation; nothing is removed yet."""
    workspace.editor.request_delete(criterion_id)
    return workspace.view()


@router.post("/delete/confirm", response_model=EditorView)
async def confirm_delete(
    req: ConfirmDeleteRequest,
    workspace: EvaluationWorkspace = Depends(get_workspace),
):
    workspace.editor.confirm_delete(req.confirmed)
    return workspace.view()
