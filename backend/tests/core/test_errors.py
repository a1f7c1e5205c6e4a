"""Tests for the error hierarchy — status codes and response envelope."""

from catalog.core.errors import (
    CatalogError,
    DatabaseError,
    ErrorCategory,
    ErrorSeverity,
    InvalidProductError,
    ProductConflictError,
    ProductNotFoundError,
)


def test_not_found_is_404_with_item_id_in_context():
    err = ProductNotFoundError("999")
    assert err.http_status == 404
    body = err.to_response()["error"]
    assert body["code"] == "PRODUCT_NOT_FOUND"
    assert body["category"] == ErrorCategory.RESOURCE_NOT_FOUND.value
    assert body["context"]["item_id"] == "999"
    assert "999" in body["message"]


def test_conflict_is_409():
    err = ProductConflictError("123")
    assert err.http_status == 409
    assert err.to_response()["error"]["code"] == "PRODUCT_CONFLICT"


def test_conflict_without_item_id_has_generic_message():
    assert ProductConflictError().message == "Product already exists"


def test_invalid_product_is_400():
    err = InvalidProductError("bad", "itemId")
    assert err.http_status == 400
    assert err.code == "VALIDATION_ERROR"


def test_database_error_is_critical_500_with_operation():
    err = DatabaseError("Connection or operational error", "execute")
    assert err.http_status == 500
    assert err.severity is ErrorSeverity.CRITICAL
    assert err.to_response()["error"]["context"]["operation"] == "execute"
    assert err.message.startswith("Database execute failed")


def test_all_errors_share_base():
    for err in (
        ProductNotFoundError("1"), ProductConflictError("1"),
        InvalidProductError("x", "itemId"), DatabaseError("x", "query"),
    ):
        assert isinstance(err, CatalogError)
        assert "timestamp" in err.to_response()["error"]


def test_error_context_carries_only_envelope_fields():
    ctx = ProductNotFoundError("7").context
    assert set(vars(ctx)) == {"timestamp", "item_id", "operation"}
