"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - Repository and service are reached only through these Protocol types
    - find_by_model_and_trim returns a list (possibly empty), never None

Design Decisions:
    - Protocol over ABC: structural subtyping, test doubles need no base class
    - Async methods: implementations do IO against an AsyncSession
"""

from typing import Protocol

from jeep_sales.core.domain_types import Jeep, JeepModel, LookupQuery


class JeepRepository(Protocol):
    """Contract for catalog persistence — implemented by shell."""
    async def find_by_model_and_trim(
        self, model: JeepModel, trim: str,
    ) -> list[Jeep]: ...


class JeepSalesService(Protocol):
    """Contract the /jeeps route depends on.

    fetch_jeeps returns records in catalog order, raises JeepNotFoundError
    when nothing matches, and lets any other fault propagate.
    """
    async def fetch_jeeps(self, query: LookupQuery) -> list[Jeep]: ...
