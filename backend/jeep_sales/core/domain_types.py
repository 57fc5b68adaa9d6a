"""Domain Types — catalog value objects that replace bare primitives.

Invariants:
    - JeepModel is closed: a model string is valid only if it is a member value
    - Jeep and LookupQuery are frozen (immutable once constructed)
    - Jeep ordering is total: (model_id, trim_level, num_doors, wheel_size, base_price),
      all ascending, model_id compared by declaration order

Design Decisions:
    - str Enum whose values equal the names: serializes to JSON as-is
    - Ordering via explicit sort_key, not dataclass(order=True): str Enum
      comparison is alphabetical
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from functools import total_ordering


class JeepModel(str, Enum):
    """Known Jeep model lines."""
    WRANGLER = "WRANGLER"
    GLADIATOR = "GLADIATOR"
    CHEROKEE = "CHEROKEE"
    GRAND_CHEROKEE = "GRAND_CHEROKEE"
    COMPASS = "COMPASS"
    RENEGADE = "RENEGADE"

    @property
    def ordinal(self) -> int:
        return _MODEL_ORDER[self]


_MODEL_ORDER: dict[JeepModel, int] = {m: i for i, m in enumerate(JeepModel)}


@dataclass(frozen=True)
class LookupQuery:
    """Validated (model, trim) pair handed to the lookup service."""
    model: JeepModel
    trim: str


@total_ordering
@dataclass(frozen=True)
class Jeep:
    """One catalog entry."""
    model_id: JeepModel
    trim_level: str
    num_doors: int
    wheel_size: int
    base_price: Decimal

    def sort_key(self) -> tuple:
        return (
            self.model_id.ordinal,
            self.trim_level,
            self.num_doors,
            self.wheel_size,
            self.base_price,
        )

    def __lt__(self, other: "Jeep") -> bool:
        if not isinstance(other, Jeep):
            return NotImplemented
        return self.sort_key() < other.sort_key()


def sort_jeeps(jeeps: list[Jeep]) -> list[Jeep]:
    """Return a new list in catalog order. Stable for equal keys."""
    return sorted(jeeps, key=Jeep.sort_key)
