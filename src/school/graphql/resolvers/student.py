from __future__ import annotations

import strawberry
from sqlalchemy import select

from ...dbmodels import Students
from ...logging import get_logger
from ..context import get_database, get_loaders
from ..types.department import Department
from ..types.student import Student

logger = get_logger(__name__)


# Query resolvers
async def resolve_student_by_id(info: strawberry.Info, id: int) -> Student | None:
    """Resolve a student by ID; a missing student is null, not an error."""
    async with get_database(info).session() as session:
        stmt = select(Students).where(Students.id == id)
        result = await session.execute(stmt)
        student = result.scalars().first()

        if not student:
            logger.info("Student not found", student_id=id)
            return None

        return Student.from_model(student)


async def resolve_students(info: strawberry.Info) -> list[Student]:
    async with get_database(info).session() as session:
        result = await session.execute(select(Students).order_by(Students.id))
        return [Student.from_model(student) for student in result.scalars().all()]


async def resolve_enrollment(info: strawberry.Info) -> list[Student]:
    """Resolve the students that are currently enrolled."""
    async with get_database(info).session() as session:
        stmt = select(Students).where(Students.enrolled.is_(True)).order_by(Students.id)
        result = await session.execute(stmt)
        return [Student.from_model(student) for student in result.scalars().all()]


# Mutation resolvers
async def register_student(
    info: strawberry.Info, email: str, full_name: str | None, dept_id: int
) -> Student:
    """
    Register a new student in a department.

    The department reference is enforced by the database; an unknown
    ``dept_id`` surfaces as an integrity error and nothing is stored.
    """
    async with get_database(info).session() as session:
        new_student = Students(email=email, full_name=full_name, dept_id=dept_id)

        session.add(new_student)
        await session.commit()
        await session.refresh(new_student)

        logger.info(
            "Student registered",
            student_id=new_student.id,
            dept_id=dept_id,
        )

        return Student.from_model(new_student)


async def enroll_student(info: strawberry.Info, id: int) -> Student:
    """Mark an existing student as enrolled."""
    async with get_database(info).session() as session:
        stmt = select(Students).where(Students.id == id)
        result = await session.execute(stmt)
        student = result.scalar_one_or_none()

        if not student:
            raise RuntimeError("Student not found")

        student.enrolled = True
        await session.commit()
        await session.refresh(student)

        logger.info("Student enrolled", student_id=student.id)

        return Student.from_model(student)


# Student field resolvers
async def resolve_student_dept(student: Student, info: strawberry.Info) -> Department:
    dept = await get_loaders(info).department_loader.load(student.dept_id)
    if dept is None:
        raise RuntimeError("Student department not found")
    return Department.from_model(dept)
