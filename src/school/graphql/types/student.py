"""
Student GraphQL type definitions
"""

from datetime import datetime
from typing import TYPE_CHECKING, Annotated

import strawberry

from ...dbmodels import Students

if TYPE_CHECKING:
    from .department import Department


@strawberry.type
class Student:
    """Student type for GraphQL API."""

    id: int
    email: str
    full_name: str | None
    enrolled: bool
    created_at: datetime
    updated_at: datetime
    dept_id: strawberry.Private[int]

    @classmethod
    def from_model(cls, row: Students) -> "Student":
        return cls(
            id=row.id,
            email=row.email,
            full_name=row.full_name,
            enrolled=row.enrolled,
            created_at=row.created_at,
            updated_at=row.updated_at,
            dept_id=row.dept_id,
        )

    @strawberry.field
    async def dept(
        self, info: strawberry.Info
    ) -> Annotated["Department", strawberry.lazy(".department")]:
        """Get the department this student belongs to."""
        from ..resolvers.student import resolve_student_dept

        return await resolve_student_dept(self, info)
