"""Jeep data — catalog seed rows for the models table.

Revision ID: 002_jeep_data
Revises: 001_jeep_schema
Create Date: 2026-10-18

"""
from decimal import Decimal
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "002_jeep_data"
down_revision: Union[str, None] = "001_jeep_schema"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

# (model_id, trim_level, num_doors, wheel_size, base_price)
JEEPS = [
    ("WRANGLER", "Sport", 2, 17, "28475.00"),
    ("WRANGLER", "Sport", 4, 17, "31975.00"),
    ("WRANGLER", "Sport Altitude", 4, 18, "41165.00"),
    ("WRANGLER", "Sport S", 2, 17, "31475.00"),
    ("WRANGLER", "Sport S", 4, 17, "34975.00"),
    ("WRANGLER", "Willys", 2, 17, "34060.00"),
    ("WRANGLER", "Willys", 4, 17, "37560.00"),
    ("WRANGLER", "Sahara", 4, 18, "40625.00"),
    ("WRANGLER", "Rubicon", 2, 17, "40325.00"),
    ("WRANGLER", "Rubicon", 4, 17, "43825.00"),
    ("GLADIATOR", "Sport", 4, 17, "35040.00"),
    ("GLADIATOR", "Sport S", 4, 17, "38280.00"),
    ("GLADIATOR", "Overland", 4, 18, "42715.00"),
    ("GLADIATOR", "Mojave", 4, 17, "46410.00"),
    ("GLADIATOR", "Rubicon", 4, 17, "46590.00"),
    ("CHEROKEE", "Latitude", 4, 17, "26985.00"),
    ("CHEROKEE", "Latitude Plus", 4, 17, "30195.00"),
    ("CHEROKEE", "Trailhawk", 4, 17, "35580.00"),
    ("CHEROKEE", "Limited", 4, 18, "35765.00"),
    ("GRAND_CHEROKEE", "Laredo", 4, 17, "36490.00"),
    ("GRAND_CHEROKEE", "Limited", 4, 18, "43400.00"),
    ("GRAND_CHEROKEE", "Overland", 4, 20, "51165.00"),
    ("GRAND_CHEROKEE", "Summit", 4, 21, "58195.00"),
    ("COMPASS", "Sport", 4, 16, "24240.00"),
    ("COMPASS", "Latitude", 4, 17, "27535.00"),
    ("COMPASS", "Trailhawk", 4, 17, "31805.00"),
    ("RENEGADE", "Sport", 4, 16, "22560.00"),
    ("RENEGADE", "Latitude", 4, 17, "24525.00"),
    ("RENEGADE", "Trailhawk", 4, 17, "28605.00"),
]


def upgrade() -> None:
    models = sa.table(
        "models",
        sa.column("model_id", sa.String),
        sa.column("trim_level", sa.String),
        sa.column("num_doors", sa.Integer),
        sa.column("wheel_size", sa.Integer),
        sa.column("base_price", sa.Numeric(7, 2)),
    )
    op.bulk_insert(
        models,
        [
            {
                "model_id": model_id,
                "trim_level": trim_level,
                "num_doors": num_doors,
                "wheel_size": wheel_size,
                "base_price": Decimal(base_price),
            }
            for model_id, trim_level, num_doors, wheel_size, base_price in JEEPS
        ],
    )


def downgrade() -> None:
    op.execute("DELETE FROM models")
