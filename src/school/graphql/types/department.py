"""
Department GraphQL type definitions
"""

from datetime import datetime
from typing import TYPE_CHECKING, Annotated

import strawberry

from ...dbmodels import Departments

if TYPE_CHECKING:
    from .course import Course
    from .student import Student


@strawberry.type
class Department:
    """Department type for GraphQL API."""

    id: int
    name: str
    description: str | None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_model(cls, row: Departments) -> "Department":
        return cls(
            id=row.id,
            name=row.name,
            description=row.description,
            created_at=row.created_at,
            updated_at=row.updated_at,
        )

    @strawberry.field
    async def students(
        self, info: strawberry.Info
    ) -> list[Annotated["Student", strawberry.lazy(".student")]]:
        """Get students of this department."""
        from ..resolvers.department import resolve_department_students

        return await resolve_department_students(self, info)

    @strawberry.field
    async def courses(
        self, info: strawberry.Info
    ) -> list[Annotated["Course", strawberry.lazy(".course")]]:
        """Get courses offered by this department."""
        from ..resolvers.department import resolve_department_courses

        return await resolve_department_courses(self, info)
