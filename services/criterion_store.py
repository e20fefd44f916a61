"""Criterion store — ordered, in-memory criteria for one class.

Ids come from a per-store monotonic counter, so they are unique within the
store and deterministic in tests.  The store performs no weight checks;
the editor validates before it commits anything here.
"""

from __future__ import annotations

import itertools
import logging

from errors.exceptions import CriterionNotFoundError
from models.criterion import Criterion

logger = logging.getLogger(__name__)


class CriterionStore:
    """Insertion-ordered criteria with replace-by-id semantics."""

    def __init__(self, class_name: str | None = None) -> None:
        self.class_name = class_name
        self._criteria: list[Criterion] = []
        self._ids = itertools.count(1)

    def __len__(self) -> int:
        return len(self._criteria)

    def snapshot(self) -> tuple[Criterion, ...]:
        """Current criteria in display order.  Values are frozen models."""
        return tuple(self._criteria)

    def get(self, criterion_id: int) -> Criterion:
        return self._criteria[self._index(criterion_id)]

    def append(self, name: str, weight: int) -> Criterion:
        criterion = Criterion(id=next(self._ids), name=name.strip(), weight=weight)
        self._criteria.append(criterion)
        logger.debug("Criterion %d added to %s (weight=%d)", criterion.id, self.class_name, weight)
        return criterion

    def replace(self, criterion_id: int, name: str, weight: int) -> Criterion:
        index = self._index(criterion_id)
        criterion = Criterion(id=criterion_id, name=name.strip(), weight=weight)
        self._criteria[index] = criterion
        return criterion

    def update_weight(self, criterion_id: int, weight: int) -> Criterion:
        index = self._index(criterion_id)
        criterion = self._criteria[index].model_copy(update={"weight": weight})
        self._criteria[index] = criterion
        return criterion

    def remove(self, criterion_id: int) -> Criterion:
        index = self._index(criterion_id)
        removed = self._criteria.pop(index)
        logger.debug("Criterion %d removed from %s", criterion_id, self.class_name)
        return removed

    def clear(self) -> None:
        self._criteria.clear()

    def _index(self, criterion_id: int) -> int:
        for index, criterion in enumerate(self._criteria):
            if criterion.id == criterion_id:
                return index
        raise CriterionNotFoundError(criterion_id)
