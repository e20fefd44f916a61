"""Dashboard summary — totals across the mock directories."""

from __future__ import annotations

import asyncio
import logging

from models.data import DashboardSummary, UpcomingEvaluation
from services import mock_data
from services.class_store import ClassStore
from services.student_store import StudentStore

logger = logging.getLogger(__name__)


async def build_summary(students: StudentStore, classes: ClassStore) -> DashboardSummary:
    """Count students and classes (fetched concurrently) and list upcoming evaluations."""
    all_students, all_classes = await asyncio.gather(
        students.list_students(),
        classes.list_classes(),
    )
    upcoming = [UpcomingEvaluation(**row) for row in mock_data.UPCOMING_EVALUATIONS]
    logger.debug(
        "Dashboard summary: %d students, %d classes",
        len(all_students),
        len(all_classes),
    )
    return DashboardSummary(
        total_students=len(all_students),
        total_classes=len(all_classes),
        upcoming_evaluations=upcoming,
    )
