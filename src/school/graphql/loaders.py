from functools import partial

from sqlalchemy import select
from strawberry.dataloader import DataLoader

from ..database import Database
from ..dbmodels import Departments, Teachers


async def load_departments(database: Database, keys: list[int]) -> list[Departments | None]:
    """Batch load departments by ID."""
    async with database.session() as session:
        stmt = select(Departments).where(Departments.id.in_(keys))
        result = await session.execute(stmt)
        departments_map = {dept.id: dept for dept in result.scalars().all()}
        return [departments_map.get(key) for key in keys]


async def load_teachers(database: Database, keys: list[int]) -> list[Teachers | None]:
    """Batch load teachers by ID."""
    async with database.session() as session:
        stmt = select(Teachers).where(Teachers.id.in_(keys))
        result = await session.execute(stmt)
        teachers_map = {teacher.id: teacher for teacher in result.scalars().all()}
        return [teachers_map.get(key) for key in keys]


class Loaders:
    """Per-request loaders for many-to-one relation fields."""

    def __init__(self, database: Database):
        self.department_loader = DataLoader(load_fn=partial(load_departments, database))
        self.teacher_loader = DataLoader(load_fn=partial(load_teachers, database))
