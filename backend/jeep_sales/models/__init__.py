"""ORM Models — SQLAlchemy declarative models for persisted catalog data.

Invariants:
    - All models inherit from Base (db/base.py)
    - All models imported here so Base.metadata is complete for create_all/alembic
"""

from jeep_sales.models.catalog_entry import CatalogEntry  # noqa: F401
