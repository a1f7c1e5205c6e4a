"""Collaborator failures surface as 500 envelopes — never swallowed, never retried."""

import pytest

from catalog.core.errors import DatabaseError, ErrorCategory


@pytest.mark.parametrize("method, path, body", [
    ("GET", "/products", None),
    ("GET", "/product/123", None),
    ("POST", "/product", {"itemId": "123"}),
])
async def test_database_error_maps_to_500(fake_client, fake_service, method, path, body):
    fake_service.fail_with = DatabaseError("Connection or operational error", "execute")

    res = await fake_client.request(method, path, json=body)

    assert res.status_code == 500
    error = res.json()["error"]
    assert error["code"] == "DATABASE_ERROR"
    assert error["context"]["operation"] == "execute"


async def test_unexpected_exception_maps_to_generic_500(fake_client, fake_service):
    fake_service.fail_with = RuntimeError("driver exploded: secret=hunter2")

    res = await fake_client.get("/products")

    assert res.status_code == 500
    error = res.json()["error"]
    assert error["code"] == "INTERNAL_ERROR"
    assert error["category"] == ErrorCategory.INTERNAL.value
    assert "hunter2" not in res.text


async def test_failed_create_stores_nothing(fake_client, fake_service):
    fake_service.fail_with = DatabaseError("Integrity constraint violated", "commit")

    await fake_client.post("/product", json={"itemId": "123"})

    assert fake_service.products == {}


async def test_fake_store_preserves_its_order(fake_client, fake_service):
    for item_id in ("b", "a", "c"):
        await fake_client.post("/product", json={"itemId": item_id})

    res = await fake_client.get("/products")

    assert [p["itemId"] for p in res.json()] == ["b", "a", "c"]
