from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry
from sqlalchemy import select

from ...dbmodels import Courses, Teachers, TeacherType
from ...logging import get_logger
from ..context import get_database
from ..types.course import Course
from ..types.teacher import Teacher

if TYPE_CHECKING:
    from ..mutations.root import TeacherCreateInput

logger = get_logger(__name__)


# Query resolvers
async def resolve_teacher_by_id(info: strawberry.Info, id: int) -> Teacher | None:
    async with get_database(info).session() as session:
        stmt = select(Teachers).where(Teachers.id == id)
        result = await session.execute(stmt)
        teacher = result.scalars().first()

        if not teacher:
            logger.info("Teacher not found", teacher_id=id)
            return None

        return Teacher.from_model(teacher)


async def resolve_teachers(info: strawberry.Info) -> list[Teacher]:
    async with get_database(info).session() as session:
        result = await session.execute(select(Teachers).order_by(Teachers.id))
        return [Teacher.from_model(teacher) for teacher in result.scalars().all()]


# Mutation resolvers
async def create_teacher(info: strawberry.Info, data: TeacherCreateInput) -> Teacher:
    """
    Create a teacher together with any courses listed in ``data.courses``.

    The teacher and its courses are written in a single commit; every nested
    course is linked to the new teacher through the relationship.
    """
    async with get_database(info).session() as session:
        new_teacher = Teachers(
            email=data.email,
            full_name=data.full_name,
            type=TeacherType(data.type.value),
            courses=[
                Courses(code=course.code, title=course.title, description=course.description)
                for course in data.courses or []
            ],
        )

        session.add(new_teacher)
        await session.commit()
        await session.refresh(new_teacher)

        logger.info(
            "Teacher created",
            teacher_id=new_teacher.id,
            course_count=len(data.courses or []),
        )

        return Teacher.from_model(new_teacher)


# Teacher field resolvers
async def resolve_teacher_courses(teacher: Teacher, info: strawberry.Info) -> list[Course]:
    async with get_database(info).session() as session:
        stmt = select(Courses).where(Courses.teacher_id == teacher.id).order_by(Courses.id)
        result = await session.execute(stmt)
        return [Course.from_model(course) for course in result.scalars().all()]
