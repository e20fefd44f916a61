"""Classes API — CRUD over the class directory plus roster management."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Response

from api.deps import get_current_session
from models.data import ClassRoster, Classroom, ClassroomCreate, ClassroomUpdate
from services.class_store import ClassStore, get_class_store

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/classes",
    tags=["classes"],
    dependencies=[Depends(get_current_session)],
)


@router.get("", response_model=list[Classroom])
async def list_classes(store: ClassStore = Depends(get_class_store)):
    """List classes with student counts recomputed from the student directory."""
    return await store.list_classes()


@router.post("", response_model=Classroom, status_code=201)
async def create_class(req: ClassroomCreate, store: ClassStore = Depends(get_class_store)):
    return await store.create(req)


@router.get("/{class_id}", response_model=Classroom)
async def get_class(class_id: int, store: ClassStore = Depends(get_class_store)):
    return await store.get(class_id)


@router.patch("/{class_id}", response_model=Classroom)
async def update_class(
    class_id: int,
    req: ClassroomUpdate,
    store: ClassStore = Depends(get_class_store),
):
    return await store.update(class_id, req)


@router.delete("/{class_id}", status_code=204)
async def delete_class(class_id: int, store: ClassStore = Depends(get_class_store)):
    await store.delete(class_id)
    return Response(status_code=204)


@router.get("/{class_id}/roster", response_model=ClassRoster)
async def get_roster(class_id: int, store: ClassStore = Depends(get_class_store)):
    """Students in the class and the students without a class."""
    return await store.roster(class_id)


@router.post("/{class_id}/students/{student_id}", response_model=ClassRoster)
async def assign_student(
    class_id: int,
    student_id: int,
    store: ClassStore = Depends(get_class_store),
):
    """Associate a student with the class."""
    roster = await store.assign_student(class_id, student_id)
    logger.info("Student %d assigned to class %d", student_id, class_id)
    return roster
