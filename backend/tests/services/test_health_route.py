"""GET /health — always 200, OK/KO from a timeout-guarded ping."""

from catalog.core.errors import DatabaseError


async def test_health_ok_with_sqlite_store(client):
    res = await client.get("/health")
    assert res.status_code == 200
    assert res.json() == {"status": "OK"}


async def test_health_ok_when_ping_is_prompt(fake_client, fake_service):
    res = await fake_client.get("/health")

    assert res.json() == {"status": "OK"}
    assert fake_service.ping_calls == 1


async def test_health_ko_when_ping_fails(fake_client, fake_service):
    fake_service.fail_with = DatabaseError("Connection or operational error", "execute")

    res = await fake_client.get("/health")

    assert res.status_code == 200
    assert res.json() == {"status": "KO"}


async def test_health_ko_when_ping_exceeds_timeout(fake_client, fake_service):
    # settings fixture: 0.1s window
    fake_service.ping_delay = 1.0

    res = await fake_client.get("/health")

    assert res.status_code == 200
    assert res.json() == {"status": "KO"}
    assert fake_service.ping_calls == 1
    assert fake_service.pings_completed == 0
