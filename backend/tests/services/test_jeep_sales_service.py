"""Jeep Sales Service — lookup semantics against an in-memory repository.

Invariants:
    - Results match the query's model and trim exactly
    - Results come back in catalog order regardless of repository order
    - Empty result raises JeepNotFoundError
    - Repository faults propagate unchanged and are not retried
"""

from decimal import Decimal

import pytest

from jeep_sales.core.domain_types import Jeep, JeepModel, LookupQuery
from jeep_sales.core.errors import JeepNotFoundError
from jeep_sales.services.jeep_sales_service import DefaultJeepSalesService


class _InMemoryRepository:
    def __init__(self, jeeps):
        self._jeeps = list(jeeps)
        self.calls = []

    async def find_by_model_and_trim(self, model, trim):
        self.calls.append((model, trim))
        return [
            j for j in self._jeeps
            if j.model_id == model and j.trim_level == trim
        ]


class _FailingRepository:
    def __init__(self):
        self.calls = 0

    async def find_by_model_and_trim(self, model, trim):
        self.calls += 1
        raise ConnectionError("connection refused")


def _jeep(model, trim, doors, wheels, price):
    return Jeep(
        model_id=model, trim_level=trim, num_doors=doors,
        wheel_size=wheels, base_price=Decimal(price),
    )


CATALOG = [
    _jeep(JeepModel.WRANGLER, "Sport", 4, 17, "31975.00"),
    _jeep(JeepModel.WRANGLER, "Sport S", 2, 17, "31475.00"),
    _jeep(JeepModel.WRANGLER, "Sport", 2, 17, "28475.00"),
    _jeep(JeepModel.GLADIATOR, "Sport", 4, 17, "35040.00"),
]


async def test_fetch_returns_sorted_matches():
    service = DefaultJeepSalesService(_InMemoryRepository(CATALOG))

    result = await service.fetch_jeeps(
        LookupQuery(model=JeepModel.WRANGLER, trim="Sport"),
    )

    assert result == [
        _jeep(JeepModel.WRANGLER, "Sport", 2, 17, "28475.00"),
        _jeep(JeepModel.WRANGLER, "Sport", 4, 17, "31975.00"),
    ]


@pytest.mark.parametrize("model, trim", [
    (JeepModel.WRANGLER, "Sport"),
    (JeepModel.WRANGLER, "Sport S"),
    (JeepModel.GLADIATOR, "Sport"),
])
async def test_every_result_matches_query(model, trim):
    service = DefaultJeepSalesService(_InMemoryRepository(CATALOG))

    result = await service.fetch_jeeps(LookupQuery(model=model, trim=trim))

    assert result
    assert all(j.model_id == model and j.trim_level == trim for j in result)


async def test_repeated_calls_return_identical_order():
    service = DefaultJeepSalesService(_InMemoryRepository(CATALOG))
    query = LookupQuery(model=JeepModel.WRANGLER, trim="Sport")

    first = await service.fetch_jeeps(query)
    second = await service.fetch_jeeps(query)

    assert first == second


async def test_no_match_raises_not_found():
    service = DefaultJeepSalesService(_InMemoryRepository(CATALOG))

    with pytest.raises(JeepNotFoundError) as exc_info:
        await service.fetch_jeeps(
            LookupQuery(model=JeepModel.WRANGLER, trim="Unknown Trim"),
        )

    assert exc_info.value.http_status == 404
    assert exc_info.value.trim == "Unknown Trim"


async def test_repository_fault_propagates_without_retry():
    repo = _FailingRepository()
    service = DefaultJeepSalesService(repo)

    with pytest.raises(ConnectionError):
        await service.fetch_jeeps(
            LookupQuery(model=JeepModel.WRANGLER, trim="Sport"),
        )

    assert repo.calls == 1


async def test_repository_receives_validated_values():
    repo = _InMemoryRepository(CATALOG)
    service = DefaultJeepSalesService(repo)

    await service.fetch_jeeps(LookupQuery(model=JeepModel.GLADIATOR, trim="Sport"))

    assert repo.calls == [(JeepModel.GLADIATOR, "Sport")]
