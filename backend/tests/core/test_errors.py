"""Error Hierarchy — verifies codes, statuses and the uniform error envelope."""

from datetime import datetime

import pytest

from jeep_sales.core.errors import (
    INTERNAL_MESSAGE,
    DatabaseError,
    ErrorCategory,
    InternalError,
    InvalidModelError,
    InvalidTrimError,
    JeepNotFoundError,
    JeepSalesError,
    build_error_body,
)


@pytest.mark.parametrize("exc, code, status", [
    (InvalidModelError("bad"), "INVALID_MODEL", 400),
    (InvalidTrimError("bad"), "INVALID_TRIM", 400),
    (JeepNotFoundError("WRANGLER", "Nope"), "JEEP_NOT_FOUND", 404),
    (InternalError(), "INTERNAL_ERROR", 500),
    (DatabaseError("boom", "query"), "DATABASE_ERROR", 500),
])
def test_error_codes_and_statuses(exc, code, status):
    assert isinstance(exc, JeepSalesError)
    assert exc.code == code
    assert exc.http_status == status


def test_validation_errors_are_categorized():
    assert InvalidModelError("x").category == ErrorCategory.VALIDATION
    assert InvalidTrimError("x").field == "trim"


def test_to_response_has_uniform_shape():
    body = InvalidTrimError("trim: too long").to_response("/jeeps")
    assert set(body) == {"message", "status code", "uri", "timestamp", "reason"}
    assert body["message"] == "trim: too long"
    assert body["status code"] == 400
    assert body["uri"] == "/jeeps"
    assert body["reason"] == "Bad Request"
    datetime.fromisoformat(body["timestamp"])


def test_not_found_message_names_model_and_trim():
    body = JeepNotFoundError("WRANGLER", "Unknown Trim").to_response("/jeeps")
    assert body["reason"] == "Not Found"
    assert "WRANGLER" in body["message"]
    assert "Unknown Trim" in body["message"]


def test_internal_errors_hide_detail():
    exc = DatabaseError("password authentication failed", "execute")
    body = exc.to_response("/jeeps")
    assert body["message"] == INTERNAL_MESSAGE
    assert "password" not in str(body)
    assert body["reason"] == "Internal Server Error"


def test_build_error_body_uses_reason_phrase():
    assert build_error_body(405, "nope", "/jeeps")["reason"] == "Method Not Allowed"
