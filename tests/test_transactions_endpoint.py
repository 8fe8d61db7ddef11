"""
Tests for GET /transactions/{token}: verbatim pass-through and error mapping.
"""

from __future__ import annotations

from solana_relay.core.exceptions import TransportError

from conftest import TOKEN_B


def test_transactions_pass_through(client, solscan_stub):
    """Upstream JSON array comes back unmodified with 200."""
    payload = [
        {"signature": ["5h6xBEauJ3PK6SWC"], "changeAmount": -1500, "decimals": 9, "meta": None},
        {"signature": ["2Yq9nvtRgLXbq2d1"], "changeAmount": 1500, "decimals": 9, "tags": []},
    ]
    solscan_stub.payload = payload
    r = client.get(f"/transactions/{TOKEN_B}")
    assert r.status_code == 200
    assert r.json() == payload
    assert solscan_stub.calls == [TOKEN_B]


def test_transactions_token_not_validated(client, solscan_stub):
    """Token identifier is opaque; a non-address string is forwarded as-is."""
    r = client.get("/transactions/not-an-address")
    assert r.status_code == 200
    assert solscan_stub.calls == ["not-an-address"]


def test_transactions_object_body_pass_through(client, solscan_stub):
    """Non-array JSON (e.g. an upstream error object) is also relayed verbatim."""
    solscan_stub.payload = {"success": False, "message": "Unauthorized"}
    r = client.get(f"/transactions/{TOKEN_B}")
    assert r.status_code == 200
    assert r.json() == {"success": False, "message": "Unauthorized"}


def test_transactions_fetch_failure(client, solscan_stub):
    solscan_stub.error = TransportError("Failed to fetch from Solscan: ConnectError")
    r = client.get(f"/transactions/{TOKEN_B}")
    assert r.status_code == 500
    assert r.json() == {"error": "Failed to fetch from Solscan: ConnectError"}


def test_transactions_parse_failure(client, solscan_stub):
    solscan_stub.error = TransportError("Failed to parse response: Expecting value: line 1 column 1 (char 0)")
    r = client.get(f"/transactions/{TOKEN_B}")
    assert r.status_code == 500
    assert r.json()["error"].startswith("Failed to parse response: ")


def test_transactions_idempotent(client):
    r1 = client.get(f"/transactions/{TOKEN_B}")
    r2 = client.get(f"/transactions/{TOKEN_B}")
    assert r1.content == r2.content


def test_transactions_nan_body_is_json_error(app):
    """Upstream body [NaN] -> 500 JSON {error}, not a plain-text server error."""
    import httpx
    from fastapi.testclient import TestClient

    from solana_relay.api_server.routes import get_solscan
    from solana_relay.clients import SolscanClient

    transport = httpx.MockTransport(lambda request: httpx.Response(200, content=b"[NaN]"))
    solscan = SolscanClient(
        "https://public-api.solscan.io",
        http_client=httpx.AsyncClient(transport=transport),
    )
    app.dependency_overrides[get_solscan] = lambda: solscan
    r = TestClient(app).get("/transactions/abc")
    assert r.status_code == 500
    assert r.headers["content-type"] == "application/json"
    assert r.json()["error"].startswith("Failed to parse response: ")
