"""Weight validation — pure functions over a class's criteria.

Nothing here mutates state or raises for bad input: callers get a
:class:`ValidationResult` and decide what to show.  The one subtle rule is
in :func:`can_accept`: when an existing criterion is being edited, its
*current* weight is left out of the base sum before the proposed weight is
added, so changing X from 30 to 40 next to 60 worth of other criteria is
60 + 40, not 60 + 30 + 40.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from models.criterion import (
    WEIGHT_TOTAL,
    Criterion,
    FailureCode,
    ValidationFailure,
    ValidationResult,
    WeightState,
    WeightSummary,
)

_OK = ValidationResult()


def weight_sum(criteria: Iterable[Criterion]) -> int:
    """Total weight of *criteria*; 0 for an empty set."""
    return sum(c.weight for c in criteria)


def remaining(criteria: Iterable[Criterion]) -> int:
    """Weight still to allocate.  Negative when over-allocated."""
    return WEIGHT_TOTAL - weight_sum(criteria)


def base_sum(criteria: Iterable[Criterion], candidate_id: int | None) -> int:
    """Sum of every criterion except ``candidate_id`` (all of them when None)."""
    return sum(c.weight for c in criteria if candidate_id is None or c.id != candidate_id)


def can_accept(
    criteria: Iterable[Criterion],
    candidate_id: int | None,
    candidate_weight: int,
) -> bool:
    """Whether the set stays within 100 after placing ``candidate_weight``."""
    return base_sum(criteria, candidate_id) + candidate_weight <= WEIGHT_TOTAL


def _fail(code: FailureCode, message: str, current: int, attempted: int) -> ValidationResult:
    return ValidationResult(
        failure=ValidationFailure(
            code=code,
            message=message,
            current_total=current,
            attempted_weight=attempted,
        )
    )


def validate_criterion(
    criteria: Sequence[Criterion],
    candidate_id: int | None,
    name: str,
    weight: int,
) -> ValidationResult:
    """Check a proposed criterion against the rest of the set.

    Checks run in order and the first failure is reported:

    1. name must not be blank
    2. weight must be positive
    3. weight must not exceed 100 on its own
    4. the resulting sum must not exceed 100

    Args:
        criteria: Current committed criteria of the class.
        candidate_id: Id of the criterion being edited, or None when creating.
        name: Proposed name.
        weight: Proposed weight (integer percentage).
    """
    current = base_sum(criteria, candidate_id)

    if not name or not name.strip():
        return _fail(
            FailureCode.EMPTY_NAME,
            "Criterion name is required.",
            current,
            weight,
        )
    if weight <= 0:
        return _fail(
            FailureCode.NON_POSITIVE_WEIGHT,
            "Weight must be greater than zero.",
            current,
            weight,
        )
    if weight > WEIGHT_TOTAL:
        return _fail(
            FailureCode.WEIGHT_OUT_OF_RANGE,
            f"Weight cannot be greater than {WEIGHT_TOTAL}%.",
            current,
            weight,
        )
    if not can_accept(criteria, candidate_id, weight):
        return _fail(
            FailureCode.SUM_EXCEEDED,
            f"The sum of weights cannot exceed {WEIGHT_TOTAL}%! "
            f"(current: {current}%, new: {weight}%)",
            current,
            weight,
        )
    return _OK


def summarize(criteria: Sequence[Criterion]) -> WeightSummary:
    """Derive the totals line shown below the criteria table."""
    total = weight_sum(criteria)
    left = WEIGHT_TOTAL - total

    if not criteria:
        state = WeightState.EMPTY
        message = "No criteria configured. Add criteria to get started."
    elif left == 0:
        state = WeightState.COMPLETE
        message = f"Valid configuration! The weights add up to {WEIGHT_TOTAL}%."
    elif left > 0:
        state = WeightState.INCOMPLETE
        message = f"Missing {left}%"
    else:
        state = WeightState.EXCEEDED
        message = f"Exceeded {abs(left)}%"

    return WeightSummary(
        total=total,
        remaining=left,
        is_valid=left == 0,
        state=state,
        status_message=message,
    )
