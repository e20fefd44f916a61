"""Class directory — in-memory mock with simulated latency.

Class membership is recorded on the student (``Student.class_name``);
the ``student_count`` of each class is an aggregate recomputed from the
student directory whenever classes are read.
"""

from __future__ import annotations

import itertools
import logging

from errors.exceptions import ClassNotFoundError
from models.data import (
    ClassRoster,
    Classroom,
    ClassroomCreate,
    ClassroomUpdate,
    StudentUpdate,
)
from services import mock_data
from services.latency import simulate_delay
from services.student_store import StudentStore, get_student_store

logger = logging.getLogger(__name__)


class ClassStore:
    """Insertion-ordered class list backed by a :class:`StudentStore`."""

    def __init__(
        self,
        students: StudentStore,
        seed: list[dict] | None = None,
        delay: float = 0.0,
    ) -> None:
        rows = mock_data.CLASSES if seed is None else seed
        self.students = students
        self._classes: list[Classroom] = [Classroom(**row) for row in rows]
        start = max((c.id for c in self._classes), default=0) + 1
        self._ids = itertools.count(start)
        self._delay = delay

    def __len__(self) -> int:
        return len(self._classes)

    async def list_classes(self) -> list[Classroom]:
        """All classes with freshly recomputed student counts."""
        await simulate_delay(self._delay)
        await self._recount()
        return [c.model_copy() for c in self._classes]

    def directory(self) -> dict[int, str]:
        """Class id -> name in display order.

        Reads the in-process list directly: no simulated latency and no
        student recount, so editor requests stay local.
        """
        return {c.id: c.name for c in self._classes}

    async def get(self, class_id: int) -> Classroom:
        await simulate_delay(self._delay)
        await self._recount()
        return self._classes[self._index(class_id)].model_copy()

    async def create(self, data: ClassroomCreate) -> Classroom:
        await simulate_delay(self._delay)
        classroom = Classroom(id=next(self._ids), student_count=0, **data.model_dump())
        self._classes.append(classroom)
        logger.info("Class %d created (%s)", classroom.id, classroom.name)
        return classroom.model_copy()

    async def update(self, class_id: int, data: ClassroomUpdate) -> Classroom:
        """Merge the fields set on *data*.

        Renaming a class does not move its students: membership follows the
        name stored on each student.
        """
        await simulate_delay(self._delay)
        index = self._index(class_id)
        changes = data.model_dump(exclude_unset=True, exclude_none=True)
        classroom = self._classes[index].model_copy(update=changes)
        self._classes[index] = classroom
        logger.info("Class %d updated: %s", class_id, sorted(changes))
        return classroom.model_copy()

    async def delete(self, class_id: int) -> None:
        """Remove a class.  Unknown ids are ignored."""
        await simulate_delay(self._delay)
        before = len(self._classes)
        self._classes = [c for c in self._classes if c.id != class_id]
        if len(self._classes) < before:
            logger.info("Class %d deleted", class_id)

    async def roster(self, class_id: int) -> ClassRoster:
        """Students of a class plus the students not assigned to any class."""
        classroom = await self.get(class_id)
        everyone = await self.students.list_students()
        return ClassRoster(
            classroom=classroom,
            students=[s for s in everyone if s.class_name == classroom.name],
            unassigned=[s for s in everyone if not s.class_name],
        )

    async def assign_student(self, class_id: int, student_id: int) -> ClassRoster:
        """Move a student into the class and return the updated roster."""
        classroom = await self.get(class_id)
        await self.students.update(student_id, StudentUpdate(class_name=classroom.name))
        return await self.roster(class_id)

    async def _recount(self) -> None:
        try:
            everyone = await self.students.list_students()
        except Exception:
            logger.exception("Failed to recount students per class; keeping previous counts")
            return
        counts: dict[str, int] = {}
        for student in everyone:
            counts[student.class_name] = counts.get(student.class_name, 0) + 1
        self._classes = [
            c.model_copy(update={"student_count": counts.get(c.name, 0)})
            for c in self._classes
        ]

    def _index(self, class_id: int) -> int:
        for index, classroom in enumerate(self._classes):
            if classroom.id == class_id:
                return index
        raise ClassNotFoundError(class_id)


# ── Module-level Singleton ───────────────────────────────────

_store: ClassStore | None = None


def get_class_store() -> ClassStore:
    """Get the singleton class directory, wired to the student directory."""
    global _store
    if _store is None:
        from config.settings import get_settings

        settings = get_settings()
        _store = ClassStore(
            get_student_store(),
            delay=settings.latency_seconds(settings.class_latency_ms),
        )
        logger.info("Initialized ClassStore (%d classes)", len(_store))
    return _store
