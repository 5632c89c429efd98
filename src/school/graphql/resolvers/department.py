from __future__ import annotations

import strawberry
from sqlalchemy import select

from ...dbmodels import Courses, Departments, Students
from ...logging import get_logger
from ..context import get_database
from ..types.course import Course
from ..types.department import Department
from ..types.student import Student

logger = get_logger(__name__)


# Query resolvers
async def resolve_department_by_id(info: strawberry.Info, id: int) -> Department | None:
    async with get_database(info).session() as session:
        stmt = select(Departments).where(Departments.id == id)
        result = await session.execute(stmt)
        dept = result.scalars().first()

        if not dept:
            logger.info("Department not found", dept_id=id)
            return None

        return Department.from_model(dept)


async def resolve_departments(info: strawberry.Info) -> list[Department]:
    async with get_database(info).session() as session:
        result = await session.execute(select(Departments).order_by(Departments.id))
        return [Department.from_model(dept) for dept in result.scalars().all()]


# Mutation resolvers
async def create_department(
    info: strawberry.Info, name: str, description: str | None
) -> Department:
    async with get_database(info).session() as session:
        new_dept = Departments(name=name, description=description)

        session.add(new_dept)
        await session.commit()
        await session.refresh(new_dept)

        logger.info("Department created", dept_id=new_dept.id, name=new_dept.name)

        return Department.from_model(new_dept)


# Department field resolvers
async def resolve_department_students(dept: Department, info: strawberry.Info) -> list[Student]:
    async with get_database(info).session() as session:
        stmt = select(Students).where(Students.dept_id == dept.id).order_by(Students.id)
        result = await session.execute(stmt)
        return [Student.from_model(student) for student in result.scalars().all()]


async def resolve_department_courses(dept: Department, info: strawberry.Info) -> list[Course]:
    async with get_database(info).session() as session:
        stmt = select(Courses).where(Courses.dept_id == dept.id).order_by(Courses.id)
        result = await session.execute(stmt)
        return [Course.from_model(course) for course in result.scalars().all()]
