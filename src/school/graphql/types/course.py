"""
Course GraphQL type definitions
"""

from datetime import datetime
from typing import TYPE_CHECKING, Annotated

import strawberry

from ...dbmodels import Courses

if TYPE_CHECKING:
    from .department import Department
    from .teacher import Teacher


@strawberry.type
class Course:
    """Course type for GraphQL API."""

    id: int
    code: str
    title: str
    description: str | None
    created_at: datetime
    updated_at: datetime
    teacher_id: strawberry.Private[int | None]
    dept_id: strawberry.Private[int | None]

    @classmethod
    def from_model(cls, row: Courses) -> "Course":
        return cls(
            id=row.id,
            code=row.code,
            title=row.title,
            description=row.description,
            created_at=row.created_at,
            updated_at=row.updated_at,
            teacher_id=row.teacher_id,
            dept_id=row.dept_id,
        )

    @strawberry.field
    async def teacher(
        self, info: strawberry.Info
    ) -> Annotated["Teacher", strawberry.lazy(".teacher")] | None:
        """Get the teacher of this course, if one is assigned."""
        if self.teacher_id is None:
            return None
        from ..resolvers.course import resolve_course_teacher

        return await resolve_course_teacher(self, info)

    @strawberry.field
    async def dept(
        self, info: strawberry.Info
    ) -> Annotated["Department", strawberry.lazy(".department")] | None:
        """Get the department offering this course, if any."""
        if self.dept_id is None:
            return None
        from ..resolvers.course import resolve_course_dept

        return await resolve_course_dept(self, info)
