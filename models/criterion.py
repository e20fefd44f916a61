"""Evaluation criterion models — weighted components of a class's grading scheme.

A class's evaluation scheme is an ordered set of named criteria whose
integer weights should add up to exactly 100.  Sums below 100 are an
incomplete (but acceptable) configuration; sums above 100 are never
committed.
"""

from __future__ import annotations

from enum import Enum

from pydantic import Field

from models.base import CamelModel, FrozenCamelModel

WEIGHT_TOTAL = 100


class Criterion(FrozenCamelModel):
    """A single weighted criterion.  Immutable; the store swaps whole values."""

    id: int
    name: str
    weight: int


class EditorState(str, Enum):
    IDLE = "idle"
    CREATING = "creating"
    EDITING = "editing"


class CriterionForm(CamelModel):
    """Pending values of the create/edit form."""

    criterion_id: int | None = None  # None while creating
    name: str = ""
    weight: int = 0


class FailureCode(str, Enum):
    EMPTY_NAME = "empty_name"
    NON_POSITIVE_WEIGHT = "non_positive_weight"
    WEIGHT_OUT_OF_RANGE = "weight_out_of_range"
    SUM_EXCEEDED = "sum_exceeded"


class ValidationFailure(FrozenCamelModel):
    """Why a proposed criterion was rejected.

    ``current_total`` is the sum of the *other* criteria (the edited one is
    excluded) and ``attempted_weight`` the weight that was proposed.
    """

    code: FailureCode
    message: str
    current_total: int
    attempted_weight: int


class ValidationResult(FrozenCamelModel):
    failure: ValidationFailure | None = None

    @property
    def ok(self) -> bool:
        return self.failure is None

    @property
    def message(self) -> str:
        return self.failure.message if self.failure else ""


class WeightState(str, Enum):
    EMPTY = "empty"
    INCOMPLETE = "incomplete"
    COMPLETE = "complete"
    EXCEEDED = "exceeded"


class WeightSummary(CamelModel):
    """Derived totals shown under the criteria table."""

    total: int
    remaining: int
    is_valid: bool
    state: WeightState
    status_message: str


class PendingDelete(CamelModel):
    criterion_id: int
    prompt: str


class EditorView(CamelModel):
    """Read model handed to the presentation layer after every intent."""

    class_name: str | None = None
    available_classes: list[str] = Field(default_factory=list)
    state: EditorState = EditorState.IDLE
    form: CriterionForm | None = None
    pending_delete: PendingDelete | None = None
    error: str = ""
    criteria: list[Criterion] = Field(default_factory=list)
    summary: WeightSummary
