"""Jeep Catalog Route — GET /jeeps?model=&trim=.

Invariants:
    - Validation runs before the service is touched (validate_lookup_query)
    - Route depends on the service only through the JeepSalesService protocol,
      resolved by get_jeep_sales_service (overridable via dependency_overrides)
    - JeepSalesError propagates to the global handler with its own status
    - Any other exception from the service becomes InternalError (500);
      its text is logged, never returned

State per request:
    Received -> Validated | Rejected -> Looked-up | NotFound | Failed -> Responded
"""

import logging

from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.ext.asyncio import AsyncSession

from jeep_sales.core.errors import InternalError, JeepSalesError
from jeep_sales.core.repository_protocols import JeepSalesService
from jeep_sales.core.validate_query import validate_lookup_query
from jeep_sales.infrastructure.database import get_db
from jeep_sales.infrastructure.jeep_repository import SqlJeepRepository
from jeep_sales.schemas.jeep import ErrorResponse, JeepResponse
from jeep_sales.services.jeep_sales_service import DefaultJeepSalesService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/jeeps", tags=["jeeps"])


async def get_jeep_sales_service(
    db: AsyncSession = Depends(get_db),
) -> JeepSalesService:
    return DefaultJeepSalesService(SqlJeepRepository(db))


@router.get(
    "",
    response_model=list[JeepResponse],
    responses={
        400: {"model": ErrorResponse, "description": "Invalid model or trim"},
        404: {"model": ErrorResponse, "description": "No matching Jeeps"},
        500: {"model": ErrorResponse, "description": "Unplanned error"},
    },
)
async def fetch_jeeps(
    request: Request,
    model: str | None = Query(None, description="Jeep model, e.g. WRANGLER"),
    trim: str | None = Query(None, description="Trim level, e.g. Sport"),
    service: JeepSalesService = Depends(get_jeep_sales_service),
):
    """Return all Jeeps for a model and trim, in catalog order."""
    query = validate_lookup_query(model, trim)

    try:
        jeeps = await service.fetch_jeeps(query)
    except JeepSalesError:
        raise
    except Exception as e:
        logger.error(
            f"Unplanned error fetching Jeeps: {e}",
            exc_info=True,
            extra={"path": request.url.path, "model": model, "trim": trim},
        )
        raise InternalError() from e

    return [JeepResponse.from_domain(j) for j in jeeps]
