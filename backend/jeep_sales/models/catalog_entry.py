"""Catalog Entry ORM — one row of the `models` table.

Invariants:
    - model_pk is an integer surrogate key, never exposed through the API
    - (model_id, trim_level, num_doors, wheel_size) is unique
    - base_price is NUMERIC(7, 2); read back as Decimal
"""

from decimal import Decimal

from sqlalchemy import Integer, Numeric, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from jeep_sales.db.base import Base


class CatalogEntry(Base):
    """Persisted Jeep model/trim configuration with its base price."""
    __tablename__ = "models"
    __table_args__ = (
        UniqueConstraint(
            "model_id", "trim_level", "num_doors", "wheel_size",
            name="uq_models_configuration",
        ),
    )

    model_pk: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    model_id: Mapped[str] = mapped_column(String(20), nullable=False)
    trim_level: Mapped[str] = mapped_column(String(30), nullable=False)
    num_doors: Mapped[int] = mapped_column(Integer, nullable=False)
    wheel_size: Mapped[int] = mapped_column(Integer, nullable=False)
    base_price: Mapped[Decimal] = mapped_column(
        Numeric(7, 2), nullable=False,
    )
