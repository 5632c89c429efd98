from __future__ import annotations

import strawberry
from sqlalchemy import select

from ...dbmodels import Courses, Teachers
from ...logging import get_logger
from ..context import get_database, get_loaders
from ..types.course import Course
from ..types.department import Department
from ..types.teacher import Teacher

logger = get_logger(__name__)


# Query resolvers
async def resolve_course_by_id(info: strawberry.Info, id: int) -> Course | None:
    async with get_database(info).session() as session:
        stmt = select(Courses).where(Courses.id == id)
        result = await session.execute(stmt)
        course = result.scalars().first()

        if not course:
            logger.info("Course not found", course_id=id)
            return None

        return Course.from_model(course)


async def resolve_courses(info: strawberry.Info) -> list[Course]:
    async with get_database(info).session() as session:
        result = await session.execute(select(Courses).order_by(Courses.id))
        return [Course.from_model(course) for course in result.scalars().all()]


# Mutation resolvers
async def create_course(
    info: strawberry.Info, code: str, title: str, teacher_email: str | None
) -> Course:
    """
    Create a course, optionally taught by the teacher with ``teacher_email``.

    Naming a teacher that does not exist is an error.
    """
    async with get_database(info).session() as session:
        teacher_id = None
        if teacher_email is not None:
            stmt = select(Teachers).where(Teachers.email == teacher_email)
            result = await session.execute(stmt)
            teacher = result.scalar_one_or_none()

            if not teacher:
                raise RuntimeError("Teacher not found")
            teacher_id = teacher.id

        new_course = Courses(code=code, title=title, teacher_id=teacher_id)

        session.add(new_course)
        await session.commit()
        await session.refresh(new_course)

        logger.info("Course created", course_id=new_course.id, code=code, teacher_id=teacher_id)

        return Course.from_model(new_course)


# Course field resolvers
async def resolve_course_teacher(course: Course, info: strawberry.Info) -> Teacher | None:
    if course.teacher_id is None:
        return None
    teacher = await get_loaders(info).teacher_loader.load(course.teacher_id)
    return Teacher.from_model(teacher) if teacher else None


async def resolve_course_dept(course: Course, info: strawberry.Info) -> Department | None:
    if course.dept_id is None:
        return None
    dept = await get_loaders(info).department_loader.load(course.dept_id)
    return Department.from_model(dept) if dept else None
