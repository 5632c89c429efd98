"""
Teacher GraphQL type definitions
"""

from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING, Annotated

import strawberry

from ...dbmodels import Teachers

if TYPE_CHECKING:
    from .course import Course


@strawberry.enum
class TeacherType(Enum):
    """Teacher employment type enumeration."""

    FULLTIME = "FULLTIME"
    PARTTIME = "PARTTIME"


@strawberry.type
class Teacher:
    """Teacher type for GraphQL API."""

    id: int
    email: str
    full_name: str | None
    type: TeacherType
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_model(cls, row: Teachers) -> "Teacher":
        return cls(
            id=row.id,
            email=row.email,
            full_name=row.full_name,
            type=TeacherType(row.type.value),
            created_at=row.created_at,
            updated_at=row.updated_at,
        )

    @strawberry.field
    async def courses(
        self, info: strawberry.Info
    ) -> list[Annotated["Course", strawberry.lazy(".course")]]:
        """Get courses taught by this teacher."""
        from ..resolvers.teacher import resolve_teacher_courses

        return await resolve_teacher_courses(self, info)
