"""initial schema

Revision ID: 0001
Revises:
Create Date: 2026-10-19
"""

from alembic import op
import sqlalchemy as sa


revision = "0001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "units",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(100), nullable=False, unique=True),
    )
    op.create_table(
        "unit_and_shifts",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("unit_id", sa.Integer(), sa.ForeignKey("units.id", ondelete="CASCADE"), nullable=False),
        sa.Column("shift", sa.String(20), nullable=False),
        sa.Column("year", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("holiday", sa.Integer(), nullable=True),
        sa.UniqueConstraint("unit_id", "shift", name="unit_and_shifts_unique"),
        sa.CheckConstraint("year >= 0", name="unit_and_shifts_year_check"),
        sa.CheckConstraint("holiday IS NULL OR holiday >= 0", name="unit_and_shifts_holiday_check"),
    )
    op.create_table(
        "additional_months",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "unit_and_shift_id",
            sa.Integer(),
            sa.ForeignKey("unit_and_shifts.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("month", sa.Integer(), nullable=False),
        sa.CheckConstraint("month >= 0 AND month <= 11", name="additional_months_month_check"),
    )
    op.create_table(
        "nurses",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("shift", sa.String(20), nullable=False),
        sa.Column("unit_id", sa.Integer(), sa.ForeignKey("units.id", ondelete="CASCADE"), nullable=False),
        sa.Column("seniority", sa.Integer(), nullable=True),
        sa.Column("num_weeks_off", sa.Integer(), nullable=False, server_default="0"),
        sa.CheckConstraint("num_weeks_off >= 0", name="nurses_num_weeks_off_check"),
    )
    op.create_table(
        "events",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("nurse_id", sa.Integer(), sa.ForeignKey("nurses.id", ondelete="CASCADE"), nullable=False),
        sa.Column("start_at", sa.Date(), nullable=False),
        sa.Column("end_at", sa.Date(), nullable=False),
        sa.Column("pto", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("created_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_events_nurse_id", "events", ["nurse_id"])
    op.create_index("ix_events_start_at", "events", ["start_at"])
    op.create_table(
        "current_years",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("year", sa.Integer(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.CheckConstraint("id = 1", name="current_years_singleton"),
    )


def downgrade() -> None:
    op.drop_table("current_years")
    op.drop_index("ix_events_start_at", table_name="events")
    op.drop_index("ix_events_nurse_id", table_name="events")
    op.drop_table("events")
    op.drop_table("nurses")
    op.drop_table("additional_months")
    op.drop_table("unit_and_shifts")
    op.drop_table("units")
