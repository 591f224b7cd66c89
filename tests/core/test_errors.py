"""Error Hierarchy — verifies status codes, codes and response envelopes."""

from datetime import datetime, timezone

from questlines.core.errors import (
    ErrorCategory, ErrorContext, NotFoundError, QuestlinesError,
    StorageError, ValidationError,
)


def test_validation_error_is_400():
    err = ValidationError("ID mismatch between URL param and body", "id")
    assert err.http_status == 400
    assert err.category == ErrorCategory.VALIDATION
    assert err.field == "id"
    assert err.to_response() == {
        "error": "ID mismatch between URL param and body",
        "code": "VALIDATION_ERROR",
    }


def test_not_found_error_is_404_without_leaking_id():
    err = NotFoundError("Questline", "abc")
    assert err.http_status == 404
    assert err.message == "Questline not found"
    assert err.resource_id == "abc"


def test_storage_error_is_500():
    err = StorageError("Integrity constraint violated", "commit")
    assert err.http_status == 500
    assert err.code == "STORAGE_ERROR"
    assert err.message == "Database commit failed: Integrity constraint violated"


def test_all_errors_share_base():
    for err in (
        ValidationError("x"), NotFoundError("Questline", "x"), StorageError("x", "y"),
    ):
        assert isinstance(err, QuestlinesError)


def test_log_extra_carries_context():
    at = datetime(2026, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
    ctx = ErrorContext(timestamp=at, operation="update", questline_id="ql-1")
    err = NotFoundError("Questline", "ql-1", ctx)
    assert err.log_extra() == {
        "error_code": "RESOURCE_NOT_FOUND",
        "severity": "warning",
        "occurred_at": "2026-01-02T03:04:05+00:00",
        "operation": "update",
        "questline_id": "ql-1",
    }


def test_context_defaults_to_fresh_instance():
    assert ValidationError("a").context is not ValidationError("b").context


def test_storage_error_logs_as_critical():
    assert StorageError("x", "commit").log_extra()["severity"] == "critical"
