"""
Database models for the School API (authoritative ORM definitions).

This module defines the SQLAlchemy Base with a naming convention for stable
Alembic autogenerate diffs, and exposes `target_metadata` for Alembic.
"""

import enum
from datetime import datetime

from sqlalchemy import (
    Boolean,
    DateTime,
    Enum,
    ForeignKeyConstraint,
    Integer,
    MetaData,
    PrimaryKeyConstraint,
    String,
    Text,
    UniqueConstraint,
    func,
    text,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship

# Naming convention for deterministic constraint/index names in Alembic diffs
naming_convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


class Base(DeclarativeBase):
    """Base class for all database models with type checking support."""

    metadata = MetaData(naming_convention=naming_convention)


class TeacherType(str, enum.Enum):
    FULLTIME = "FULLTIME"
    PARTTIME = "PARTTIME"


class Departments(Base):
    __tablename__ = "departments"
    __table_args__ = (
        PrimaryKeyConstraint("id", name="departments_pkey"),
        UniqueConstraint("name", name="departments_name_key"),
    )

    id: Mapped[int] = mapped_column(Integer, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(True), server_default=func.now(), onupdate=func.now(), nullable=False
    )

    students: Mapped[list["Students"]] = relationship(
        "Students", uselist=True, back_populates="dept"
    )
    courses: Mapped[list["Courses"]] = relationship("Courses", uselist=True, back_populates="dept")


class Students(Base):
    __tablename__ = "students"
    __table_args__ = (
        ForeignKeyConstraint(
            ["dept_id"],
            ["departments.id"],
            name="students_dept_id_fkey",
        ),
        PrimaryKeyConstraint("id", name="students_pkey"),
        UniqueConstraint("email", name="students_email_key"),
    )

    id: Mapped[int] = mapped_column(Integer, autoincrement=True)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    full_name: Mapped[str | None] = mapped_column(String(255))
    enrolled: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default=text("false")
    )
    dept_id: Mapped[int] = mapped_column(Integer, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(True), server_default=func.now(), onupdate=func.now(), nullable=False
    )

    dept: Mapped["Departments"] = relationship("Departments", back_populates="students")


class Teachers(Base):
    __tablename__ = "teachers"
    __table_args__ = (
        PrimaryKeyConstraint("id", name="teachers_pkey"),
        UniqueConstraint("email", name="teachers_email_key"),
    )

    id: Mapped[int] = mapped_column(Integer, autoincrement=True)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    full_name: Mapped[str | None] = mapped_column(String(255))
    type: Mapped[TeacherType] = mapped_column(
        Enum(TeacherType, name="teacher_type"),
        nullable=False,
        default=TeacherType.FULLTIME,
        server_default=TeacherType.FULLTIME.value,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(True), server_default=func.now(), onupdate=func.now(), nullable=False
    )

    courses: Mapped[list["Courses"]] = relationship(
        "Courses", uselist=True, back_populates="teacher"
    )


class Courses(Base):
    __tablename__ = "courses"
    __table_args__ = (
        ForeignKeyConstraint(
            ["teacher_id"],
            ["teachers.id"],
            name="courses_teacher_id_fkey",
        ),
        ForeignKeyConstraint(
            ["dept_id"],
            ["departments.id"],
            name="courses_dept_id_fkey",
        ),
        PrimaryKeyConstraint("id", name="courses_pkey"),
        UniqueConstraint("code", name="courses_code_key"),
    )

    id: Mapped[int] = mapped_column(Integer, autoincrement=True)
    code: Mapped[str] = mapped_column(String(64), nullable=False)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text)
    teacher_id: Mapped[int | None] = mapped_column(Integer)
    dept_id: Mapped[int | None] = mapped_column(Integer)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(True), server_default=func.now(), onupdate=func.now(), nullable=False
    )

    teacher: Mapped["Teachers | None"] = relationship("Teachers", back_populates="courses")
    dept: Mapped["Departments | None"] = relationship("Departments", back_populates="courses")


target_metadata = Base.metadata

__all__ = [
    "Base",
    "Courses",
    "Departments",
    "Students",
    "TeacherType",
    "Teachers",
    "target_metadata",
]
