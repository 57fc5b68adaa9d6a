"""Jeep Sales Service — catalog lookup over a JeepRepository.

Invariants:
    - Every returned Jeep has model_id == query.model and trim_level == query.trim
    - Results are in catalog order (sort_jeeps) — identical input, identical output
    - Empty result raises JeepNotFoundError; nothing else is caught here
    - No retries: repository faults propagate to the route unchanged
"""

import logging

from jeep_sales.core.domain_types import Jeep, LookupQuery, sort_jeeps
from jeep_sales.core.errors import JeepNotFoundError
from jeep_sales.core.repository_protocols import JeepRepository

logger = logging.getLogger(__name__)


class DefaultJeepSalesService:
    """Implements the JeepSalesService protocol."""

    def __init__(self, repository: JeepRepository):
        self._repository = repository

    async def fetch_jeeps(self, query: LookupQuery) -> list[Jeep]:
        logger.info(
            f"Fetching Jeeps with model={query.model.value}, trim={query.trim}",
            extra={"model": query.model.value, "trim": query.trim},
        )
        jeeps = await self._repository.find_by_model_and_trim(
            query.model, query.trim,
        )
        if not jeeps:
            raise JeepNotFoundError(query.model.value, query.trim)

        result = sort_jeeps(jeeps)
        logger.debug(
            f"Found {len(result)} Jeep(s)",
            extra={"result_count": len(result)},
        )
        return result
