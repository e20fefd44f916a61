"""Students API — CRUD over the student directory."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Query, Response

from api.deps import get_current_session
from models.data import Student, StudentCreate, StudentUpdate
from services.student_store import StudentStore, get_student_store

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/students",
    tags=["students"],
    dependencies=[Depends(get_current_session)],
)


@router.get("", response_model=list[Student])
async def list_students(
    search: str = "",
    class_name: str = Query("", alias="className"),
    status: str = Query("all", pattern="^(all|Ativo|Inativo)$"),
    store: StudentStore = Depends(get_student_store),
):
    """List students filtered by name/e-mail search, class and status."""
    return await store.list_students(search=search, class_name=class_name, status=status)


@router.post("", response_model=Student, status_code=201)
async def create_student(req: StudentCreate, store: StudentStore = Depends(get_student_store)):
    return await store.create(req)


@router.get("/{student_id}", response_model=Student)
async def get_student(student_id: int, store: StudentStore = Depends(get_student_store)):
    return await store.get(student_id)


@router.patch("/{student_id}", response_model=Student)
async def update_student(
    student_id: int,
    req: StudentUpdate,
    store: StudentStore = Depends(get_student_store),
):
    return await store.update(student_id, req)


@router.delete("/{student_id}", status_code=204)
async def delete_student(student_id: int, store: StudentStore = Depends(get_student_store)):
    await store.delete(student_id)
    return Response(status_code=204)
