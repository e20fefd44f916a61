"""Student directory — in-memory mock with simulated latency.

Stands in for a real student API: every call is async and waits the
configured latency before touching the in-memory list.
"""

from __future__ import annotations

import itertools
import logging

from errors.exceptions import StudentNotFoundError
from models.data import Student, StudentCreate, StudentStatus, StudentUpdate
from services import mock_data
from services.latency import simulate_delay

logger = logging.getLogger(__name__)


class StudentStore:
    """Insertion-ordered student list with a monotonic id counter."""

    def __init__(self, seed: list[dict] | None = None, delay: float = 0.0) -> None:
        rows = mock_data.STUDENTS if seed is None else seed
        self._students: list[Student] = [Student(**row) for row in rows]
        start = max((s.id for s in self._students), default=0) + 1
        self._ids = itertools.count(start)
        self._delay = delay

    def __len__(self) -> int:
        return len(self._students)

    async def list_students(
        self,
        search: str = "",
        class_name: str = "",
        status: StudentStatus | str = "all",
    ) -> list[Student]:
        """List students, optionally filtered.

        Args:
            search: Case-insensitive substring matched against name or e-mail.
            class_name: Exact class name; "" means any class.
            status: A :class:`StudentStatus` value, or "all".
        """
        await simulate_delay(self._delay)
        result = list(self._students)

        term = search.strip().lower()
        if term:
            result = [
                s for s in result
                if term in s.name.lower() or term in s.email.lower()
            ]
        if class_name:
            result = [s for s in result if s.class_name == class_name]
        if status and status != "all":
            wanted = StudentStatus(status)
            result = [s for s in result if s.status == wanted]

        return [s.model_copy() for s in result]

    async def get(self, student_id: int) -> Student:
        await simulate_delay(self._delay)
        return self._students[self._index(student_id)].model_copy()

    async def create(self, data: StudentCreate) -> Student:
        await simulate_delay(self._delay)
        student = Student(id=next(self._ids), **data.model_dump())
        self._students.append(student)
        logger.info("Student %d created (%s)", student.id, student.email)
        return student.model_copy()

    async def update(self, student_id: int, data: StudentUpdate) -> Student:
        """Merge the fields set on *data* into the stored student."""
        await simulate_delay(self._delay)
        index = self._index(student_id)
        changes = data.model_dump(exclude_unset=True, exclude_none=True)
        student = self._students[index].model_copy(update=changes)
        self._students[index] = student
        logger.info("Student %d updated: %s", student_id, sorted(changes))
        return student.model_copy()

    async def delete(self, student_id: int) -> None:
        """Remove a student.  Unknown ids are ignored."""
        await simulate_delay(self._delay)
        before = len(self._students)
        self._students = [s for s in self._students if s.id != student_id]
        if len(self._students) < before:
            logger.info("Student %d deleted", student_id)

    def _index(self, student_id: int) -> int:
        for index, student in enumerate(self._students):
            if student.id == student_id:
                return index
        raise StudentNotFoundError(student_id)


# ── Module-level Singleton ───────────────────────────────────

_store: StudentStore | None = None


def get_student_store() -> StudentStore:
    """Get the singleton student directory."""
    global _store
    if _store is None:
        from config.settings import get_settings

        settings = get_settings()
        _store = StudentStore(delay=settings.latency_seconds(settings.student_latency_ms))
        logger.info("Initialized StudentStore (%d students)", len(_store))
    return _store
