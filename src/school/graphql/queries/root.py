"""
Root GraphQL query definitions
"""

import strawberry

from ..types.course import Course
from ..types.department import Department
from ..types.student import Student
from ..types.teacher import Teacher


@strawberry.type
class Query:
    """Root GraphQL query type."""

    @strawberry.field
    async def enrollment(self, info: strawberry.Info) -> list[Student]:
        """Get all enrolled students."""
        from ..resolvers.student import resolve_enrollment

        return await resolve_enrollment(info)

    @strawberry.field
    async def students(self, info: strawberry.Info) -> list[Student]:
        """Get all students."""
        from ..resolvers.student import resolve_students

        return await resolve_students(info)

    @strawberry.field
    async def student(self, info: strawberry.Info, id: int) -> Student | None:
        """Get a student by ID."""
        from ..resolvers.student import resolve_student_by_id

        return await resolve_student_by_id(info, id)

    @strawberry.field
    async def departments(self, info: strawberry.Info) -> list[Department]:
        """Get all departments."""
        from ..resolvers.department import resolve_departments

        return await resolve_departments(info)

    @strawberry.field
    async def department(self, info: strawberry.Info, id: int) -> Department | None:
        """Get a department by ID."""
        from ..resolvers.department import resolve_department_by_id

        return await resolve_department_by_id(info, id)

    @strawberry.field
    async def courses(self, info: strawberry.Info) -> list[Course]:
        """Get all courses."""
        from ..resolvers.course import resolve_courses

        return await resolve_courses(info)

    @strawberry.field
    async def course(self, info: strawberry.Info, id: int) -> Course | None:
        """Get a course by ID."""
        from ..resolvers.course import resolve_course_by_id

        return await resolve_course_by_id(info, id)

    @strawberry.field
    async def teachers(self, info: strawberry.Info) -> list[Teacher]:
        """Get all teachers."""
        from ..resolvers.teacher import resolve_teachers

        return await resolve_teachers(info)

    @strawberry.field
    async def teacher(self, info: strawberry.Info, id: int) -> Teacher | None:
        """Get a teacher by ID."""
        from ..resolvers.teacher import resolve_teacher_by_id

        return await resolve_teacher_by_id(info, id)
