"""Directory data models — students, classes and the dashboard summary.

These are the canonical representations used by the mock directories in
``services/`` and returned by the HTTP layer (camelCase on the wire).
"""

from __future__ import annotations

from datetime import date
from enum import Enum

from pydantic import Field, computed_field

from models.base import CamelModel


class StudentStatus(str, Enum):
    """Enrollment status, kept in the console's locale."""

    ACTIVE = "Ativo"
    INACTIVE = "Inativo"


# ---------------------------------------------------------------------------
# Students
# ---------------------------------------------------------------------------

class Student(CamelModel):
    id: int
    name: str
    email: str
    class_name: str = ""  # "" = not assigned to any class
    status: StudentStatus = StudentStatus.ACTIVE


class StudentCreate(CamelModel):
    """POST /api/students — request body."""

    name: str = Field(min_length=1)
    email: str = Field(min_length=1)
    class_name: str = ""
    status: StudentStatus = StudentStatus.ACTIVE


class StudentUpdate(CamelModel):
    """PATCH /api/students/{id} — partial update, unset fields are kept."""

    name: str | None = Field(default=None, min_length=1)
    email: str | None = Field(default=None, min_length=1)
    class_name: str | None = None
    status: StudentStatus | None = None


# ---------------------------------------------------------------------------
# Classes
# ---------------------------------------------------------------------------

class Classroom(CamelModel):
    id: int
    name: str
    capacity: int = Field(ge=0)
    student_count: int = 0  # recomputed from the student directory on list()

    @computed_field  # type: ignore[prop-decorator]
    @property
    def occupancy(self) -> int:
        """Rounded occupancy percentage; 0 for classes without capacity."""
        if self.capacity <= 0:
            return 0
        return round(self.student_count / self.capacity * 100)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def occupancy_level(self) -> str:
        if self.occupancy >= 100:
            return "full"
        if self.occupancy >= 80:
            return "high"
        return "normal"


class ClassroomCreate(CamelModel):
    """POST /api/classes — request body."""

    name: str = Field(min_length=1)
    capacity: int = Field(default=0, ge=0)


class ClassroomUpdate(CamelModel):
    """PATCH /api/classes/{id} — partial update."""

    name: str | None = Field(default=None, min_length=1)
    capacity: int | None = Field(default=None, ge=0)


class ClassRoster(CamelModel):
    """Students enrolled in a class, plus the ones that could be assigned."""

    classroom: Classroom
    students: list[Student] = Field(default_factory=list)
    unassigned: list[Student] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Dashboard
# ---------------------------------------------------------------------------

class UpcomingEvaluation(CamelModel):
    id: int
    class_name: str
    scheduled_date: date
    description: str

    @computed_field  # type: ignore[prop-decorator]
    @property
    def display_date(self) -> str:
        """Date in the console's locale (dd/mm/yyyy)."""
        return self.scheduled_date.strftime("%d/%m/%Y")


class DashboardSummary(CamelModel):
    total_students: int = 0
    total_classes: int = 0
    upcoming_evaluations: list[UpcomingEvaluation] = Field(default_factory=list)
