"""Jeep Schemas — public JSON shape of catalog entries and error envelopes.

Invariants:
    - JeepResponse serializes with camelCase keys (modelId, trimLevel, ...)
    - basePrice serializes as a decimal string ("28475.00"), never a float
    - ErrorResponse documents the envelope built by core/errors.build_error_body
"""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_serializer
from pydantic.alias_generators import to_camel

from jeep_sales.core.domain_types import Jeep, JeepModel


class JeepResponse(BaseModel):
    """One catalog entry as returned by GET /jeeps."""
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True,
        protected_namespaces=(),
    )

    model_id: JeepModel
    trim_level: str
    num_doors: int = Field(gt=0)
    wheel_size: int = Field(gt=0)
    base_price: Decimal

    @field_serializer("base_price")
    def serialize_base_price(self, v: Decimal) -> str:
        return f"{v:.2f}"

    @classmethod
    def from_domain(cls, jeep: Jeep) -> "JeepResponse":
        return cls(
            model_id=jeep.model_id,
            trim_level=jeep.trim_level,
            num_doors=jeep.num_doors,
            wheel_size=jeep.wheel_size,
            base_price=jeep.base_price,
        )


class ErrorResponse(BaseModel):
    """Uniform error envelope for every non-2xx response."""
    model_config = ConfigDict(populate_by_name=True)

    message: str
    status_code: int = Field(alias="status code")
    uri: str
    timestamp: datetime
    reason: str
