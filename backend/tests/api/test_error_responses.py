"""Error Responder over HTTP — thrown failures become the Error Envelope.

Invariants checked:
    - Status taken from the failure, else 500
    - Production: generic message, no stack key
    - Development: real message plus stack
    - Failures logged before the response
"""

import logging


# ─── production ──────────────────────────────────────────────────

async def test_production_unhandled_error_is_generic_500(prod_client):
    res = await prod_client.get("/api/test/boom")
    assert res.status_code == 500
    assert res.json() == {"success": False, "error": "Internal server error"}


async def test_production_keeps_failure_status(prod_client):
    res = await prod_client.get("/api/test/status-error")
    assert res.status_code == 404
    body = res.json()
    assert body == {"success": False, "error": "Internal server error"}
    assert "stack" not in body


async def test_production_http_exception_keeps_status(prod_client):
    res = await prod_client.get("/api/test/teapot")
    assert res.status_code == 418
    assert res.json()["error"] == "Internal server error"


# ─── development ─────────────────────────────────────────────────

async def test_development_exposes_message_and_stack(dev_client):
    res = await dev_client.get("/api/test/status-error")
    assert res.status_code == 404
    body = res.json()
    assert body["success"] is False
    assert body["error"] == "X"
    assert "StatusError: X" in body["stack"]


async def test_development_unhandled_error_message(dev_client):
    res = await dev_client.get("/api/test/boom")
    assert res.status_code == 500
    body = res.json()
    assert body["error"] == "kaboom"
    assert "RuntimeError: kaboom" in body["stack"]


async def test_development_http_exception_detail(dev_client):
    res = await dev_client.get("/api/test/teapot")
    assert res.status_code == 418
    assert res.json()["error"] == "I'm a teapot"


# ─── body parsing ────────────────────────────────────────────────

async def test_valid_json_body_is_parsed(dev_client):
    res = await dev_client.post("/api/test/items", json={"name": "pen", "quantity": 3})
    assert res.status_code == 201
    assert res.json() == {"name": "pen", "quantity": 3}


async def test_invalid_body_is_400_envelope(dev_client):
    res = await dev_client.post("/api/test/items", json={"name": "pen"})
    assert res.status_code == 400
    body = res.json()
    assert body["success"] is False
    assert body["error"] == "Invalid request data"
    assert "quantity" in body["stack"]


async def test_malformed_json_is_400_in_production(prod_client):
    res = await prod_client.post(
        "/api/test/items",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )
    assert res.status_code == 400
    assert res.json() == {"success": False, "error": "Internal server error"}


# ─── logging ─────────────────────────────────────────────────────

async def test_failure_logged_in_production(prod_client, caplog):
    with caplog.at_level(logging.ERROR):
        await prod_client.get("/api/test/boom")
    errors = [r for r in caplog.records if r.levelno == logging.ERROR]
    assert any("kaboom" in r.getMessage() for r in errors)
    assert any(r.exc_info for r in errors)


async def test_failure_log_carries_request_fields(dev_client, caplog):
    with caplog.at_level(logging.ERROR):
        await dev_client.get("/api/test/status-error")
    record = next(r for r in caplog.records if r.levelno == logging.ERROR)
    assert record.path == "/api/test/status-error"
    assert record.method == "GET"
    assert record.status_code == 404
