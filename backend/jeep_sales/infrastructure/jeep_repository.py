"""SQL Jeep Repository — JeepRepository implementation over an AsyncSession.

Invariants:
    - Filters by exact (model_id, trim_level) equality
    - Always returns a list of domain Jeep objects, never ORM rows and never None
    - base_price normalized to two decimal places
    - Query failures surface as DatabaseError (500), never as raw SQLAlchemy errors
"""

from decimal import Decimal

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from jeep_sales.core.domain_types import Jeep, JeepModel
from jeep_sales.infrastructure.database import map_sqlalchemy_error
from jeep_sales.models.catalog_entry import CatalogEntry

_CENTS = Decimal("0.01")


class SqlJeepRepository:
    def __init__(self, db: AsyncSession):
        self._db = db

    async def find_by_model_and_trim(
        self, model: JeepModel, trim: str,
    ) -> list[Jeep]:
        stmt = select(CatalogEntry).where(
            CatalogEntry.model_id == model.value,
            CatalogEntry.trim_level == trim,
        )
        try:
            result = await self._db.execute(stmt)
        except SQLAlchemyError as e:
            raise map_sqlalchemy_error(e) from e
        return [_to_domain(row) for row in result.scalars().all()]


def _to_domain(row: CatalogEntry) -> Jeep:
    return Jeep(
        model_id=JeepModel(row.model_id),
        trim_level=row.trim_level,
        num_doors=row.num_doors,
        wheel_size=row.wheel_size,
        base_price=Decimal(row.base_price).quantize(_CENTS),
    )
