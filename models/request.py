"""API request models for the evaluation-configuration endpoints."""

from __future__ import annotations

from models.base import CamelModel


class SelectClassRequest(CamelModel):
    """PUT /api/evaluations/class — request body."""

    class_name: str


class FormUpdateRequest(CamelModel):
    """PATCH /api/evaluations/form — only the fields sent are changed."""

    name: str | None = None
    weight: int | None = None


class InlineWeightRequest(CamelModel):
    """PATCH /api/evaluations/criteria/{id}/weight — request body."""

    weight: int


class ConfirmDeleteRequest(CamelModel):
    """POST /api/evaluations/delete/confirm — request body."""

    confirmed: bool = True
