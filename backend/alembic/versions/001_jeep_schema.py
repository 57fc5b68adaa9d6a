"""Jeep schema — models table.

Revision ID: 001_jeep_schema
Revises: None
Create Date: 2026-10-18

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_jeep_schema"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "models",
        sa.Column("model_pk", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("model_id", sa.String(20), nullable=False),
        sa.Column("trim_level", sa.String(30), nullable=False),
        sa.Column("num_doors", sa.Integer, nullable=False),
        sa.Column("wheel_size", sa.Integer, nullable=False),
        sa.Column("base_price", sa.Numeric(7, 2), nullable=False),
        sa.UniqueConstraint(
            "model_id", "trim_level", "num_doors", "wheel_size",
            name="uq_models_configuration",
        ),
    )
    op.create_index(
        "ix_models_model_id_trim_level", "models", ["model_id", "trim_level"],
    )


def downgrade() -> None:
    op.drop_index("ix_models_model_id_trim_level", table_name="models")
    op.drop_table("models")
