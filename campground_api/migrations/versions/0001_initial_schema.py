"""initial schema

Revision ID: 0001
Revises:
Create Date: 2025-11-01 09:00:00
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
        "users",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("telephone", sa.String(length=20), nullable=True),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("hashed_password", sa.String(length=255), nullable=False),
        sa.Column(
            "role",
            sa.Enum("user", "admin", name="userrole", native_enum=False),
            nullable=False,
        ),
        *_timestamps(),
    )
    op.create_index("ix_users_email", "users", ["email"], unique=True)

    op.create_table(
        "campgrounds",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("name", sa.String(length=50), nullable=False),
        sa.Column("address", sa.Text(), nullable=False),
        sa.Column("telephone", sa.String(length=10), nullable=False, unique=True),
        sa.Column("daily_capacity", sa.Integer(), nullable=False),
        *_timestamps(),
        sa.CheckConstraint("daily_capacity >= 1", name="ck_campgrounds_daily_capacity"),
    )
    op.create_index("ix_campgrounds_name", "campgrounds", ["name"], unique=True)

    op.create_table(
        "appointments",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column(
            "user_id",
            sa.String(),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "campground_id",
            sa.String(),
            sa.ForeignKey("campgrounds.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("appt_date", sa.DateTime(), nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_appointments_user_id", "appointments", ["user_id"])
    op.create_index("ix_appointments_campground_id", "appointments", ["campground_id"])
    op.create_index("ix_appointments_appt_date", "appointments", ["appt_date"])

    op.create_table(
        "favorites",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column(
            "user_id",
            sa.String(),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "campground_id",
            sa.String(),
            sa.ForeignKey("campgrounds.id", ondelete="CASCADE"),
            nullable=False,
        ),
        *_timestamps(),
        sa.UniqueConstraint("user_id", "campground_id", name="uq_favorites_user_campground"),
    )
    op.create_index("ix_favorites_user_id", "favorites", ["user_id"])


def downgrade() -> None:
    op.drop_table("favorites")
    op.drop_table("appointments")
    op.drop_table("campgrounds")
    op.drop_table("users")
