"""
Initial schema: departments, students, teachers, courses.

Revision ID: 20250101_000000_initial_schema
Revises:
Create Date: 2025-01-01 00:00:00
"""

import sqlalchemy as sa

from alembic import op  # type: ignore[reportMissingImports]

# revision identifiers, used by Alembic.
revision = "20250101_000000_initial_schema"
down_revision = None
branch_labels = None
depends_on = None

teacher_type = sa.Enum("FULLTIME", "PARTTIME", name="teacher_type")


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
    ]


def upgrade() -> None:
    op.create_table(
        "departments",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id", name="departments_pkey"),
        sa.UniqueConstraint("name", name="departments_name_key"),
    )

    op.create_table(
        "students",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("full_name", sa.String(length=255), nullable=True),
        sa.Column("enrolled", sa.Boolean(), server_default=sa.text("false"), nullable=False),
        sa.Column("dept_id", sa.Integer(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(
            ["dept_id"], ["departments.id"], name="students_dept_id_fkey"
        ),
        sa.PrimaryKeyConstraint("id", name="students_pkey"),
        sa.UniqueConstraint("email", name="students_email_key"),
    )

    op.create_table(
        "teachers",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("full_name", sa.String(length=255), nullable=True),
        sa.Column("type", teacher_type, server_default="FULLTIME", nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id", name="teachers_pkey"),
        sa.UniqueConstraint("email", name="teachers_email_key"),
    )

    op.create_table(
        "courses",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("code", sa.String(length=64), nullable=False),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("teacher_id", sa.Integer(), nullable=True),
        sa.Column("dept_id", sa.Integer(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(
            ["teacher_id"], ["teachers.id"], name="courses_teacher_id_fkey"
        ),
        sa.ForeignKeyConstraint(["dept_id"], ["departments.id"], name="courses_dept_id_fkey"),
        sa.PrimaryKeyConstraint("id", name="courses_pkey"),
        sa.UniqueConstraint("code", name="courses_code_key"),
    )


def downgrade() -> None:
    op.drop_table("courses")
    op.drop_table("teachers")
    op.drop_table("students")
    op.drop_table("departments")
    teacher_type.drop(op.get_bind(), checkfirst=True)
