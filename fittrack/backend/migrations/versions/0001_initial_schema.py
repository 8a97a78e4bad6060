"""Initial schema: family members, equipment, workouts, exercise logs

Revision ID: 0001
Revises:
Create Date: 2024-03-18 09:00:00
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "0001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
    ]


def upgrade() -> None:
    op.create_table(
        "family_members",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("email", sa.Text(), nullable=True),
        sa.Column("age", sa.Integer(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_family_members_name", "family_members", ["name"])

    op.create_table(
        "equipment",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("category", sa.Text(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_equipment_name", "equipment", ["name"])

    op.create_table(
        "workouts",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("family_member_id", sa.Integer(), nullable=False),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("duration_minutes", sa.Integer(), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("workout_date", sa.Date(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(["family_member_id"], ["family_members.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_workouts_family_member_id", "workouts", ["family_member_id"])
    op.create_index("ix_workouts_workout_date", "workouts", ["workout_date"])

    op.create_table(
        "exercise_logs",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("workout_id", sa.Integer(), nullable=False),
        sa.Column("equipment_id", sa.Integer(), nullable=True),
        sa.Column("exercise_name", sa.Text(), nullable=False),
        sa.Column("sets", sa.Integer(), nullable=False),
        sa.Column("repetitions", sa.Integer(), nullable=False),
        sa.Column("weight_lbs", sa.Numeric(precision=6, scale=2), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(["equipment_id"], ["equipment.id"]),
        sa.ForeignKeyConstraint(["workout_id"], ["workouts.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_exercise_logs_workout_id", "exercise_logs", ["workout_id"])


def downgrade() -> None:
    op.drop_index("ix_exercise_logs_workout_id", table_name="exercise_logs")
    op.drop_table("exercise_logs")
    op.drop_index("ix_workouts_workout_date", table_name="workouts")
    op.drop_index("ix_workouts_family_member_id", table_name="workouts")
    op.drop_table("workouts")
    op.drop_index("ix_equipment_name", table_name="equipment")
    op.drop_table("equipment")
    op.drop_index("ix_family_members_name", table_name="family_members")
    op.drop_table("family_members")
