"""Lookup Query Validation — pure checks on raw model/trim parameters.

Invariants:
    - validate_lookup_query is PURE: no IO, never touches the repository
    - Returns a LookupQuery or raises InvalidModelError / InvalidTrimError
    - TRIM_MAX_LENGTH and TRIM_PATTERN are the single source of truth for trim rules
    - Trim is normalized (outer space characters stripped) before any check;
      tabs, newlines and other whitespace are rejected like any illegal character
"""

import re

from jeep_sales.core.domain_types import JeepModel, LookupQuery
from jeep_sales.core.errors import InvalidModelError, InvalidTrimError


TRIM_MAX_LENGTH: int = 30
TRIM_PATTERN = re.compile(r"^[A-Za-z0-9 ]+$")


def validate_model(raw_model: str | None) -> JeepModel:
    if raw_model is None or raw_model == "":
        raise InvalidModelError("model: parameter is required")
    try:
        return JeepModel(raw_model)
    except ValueError:
        allowed = ", ".join(m.value for m in JeepModel)
        raise InvalidModelError(
            f"model: '{raw_model}' is not one of [{allowed}]",
        ) from None


def validate_trim(raw_trim: str | None) -> str:
    if raw_trim is None:
        raise InvalidTrimError("trim: parameter is required")
    trim = raw_trim.strip(" ")
    if not trim:
        raise InvalidTrimError("trim: must not be empty")
    if len(trim) > TRIM_MAX_LENGTH:
        raise InvalidTrimError(
            f"trim: length must be at most {TRIM_MAX_LENGTH} characters "
            f"(got {len(trim)})",
        )
    if not TRIM_PATTERN.match(trim):
        raise InvalidTrimError(
            "trim: must contain only letters, digits and spaces",
        )
    return trim


def validate_lookup_query(
    raw_model: str | None, raw_trim: str | None,
) -> LookupQuery:
    """Model is checked first, so a request with both bad reports the model."""
    model = validate_model(raw_model)
    trim = validate_trim(raw_trim)
    return LookupQuery(model=model, trim=trim)
