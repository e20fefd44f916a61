"""Dashboard API — summary cards and upcoming evaluations."""

from fastapi import APIRouter, Depends

from api.deps import get_current_session
from models.data import DashboardSummary
from services.class_store import ClassStore, get_class_store
from services.dashboard import build_summary
from services.student_store import StudentStore, get_student_store

router = APIRouter(
    prefix="/api",
    tags=["dashboard"],
    dependencies=[Depends(get_current_session)],
)


@router.get("/dashboard", response_model=DashboardSummary)
async def dashboard(
    students: StudentStore = Depends(get_student_store),
    classes: ClassStore = Depends(get_class_store),
):
    return await build_summary(students, classes)
