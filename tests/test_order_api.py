"""API tests for order submission and validation routes."""

import pytest

from schemagate.config import Settings
from schemagate.errors.exceptions import NESTING_HINT, SYNTAX_HINT
from schemagate.errors.handlers import SCHEMA_LOAD_MESSAGE

VALID_ORDER = {"title": "x", "orderInfo": {"orderId": "1", "cityName": "Beijing"}}
MISSING_CITY = {"title": "x", "orderInfo": {"orderId": "1"}}


@pytest.mark.asyncio
async def test_submit_valid_order(client):
    response = await client.post("/api/v1/order/submit", json=VALID_ORDER)
    assert response.status_code == 200
    data = response.json()
    assert data["code"] == 200
    assert data["data"] == "Order processed, orderId: 1"
    assert data["trace_id"] == response.headers["X-Trace-Id"]


@pytest.mark.asyncio
async def test_submit_invalid_order_is_rejected(client):
    response = await client.post("/api/v1/order/submit", json=MISSING_CITY)
    assert response.status_code == 400
    data = response.json()
    assert data["code"] == 400
    assert data["message"].startswith("Data validation failed: ")
    assert "orderInfo.cityName" in data["message"]
    assert data["data"] == ["field [orderInfo.cityName]: 'cityName' is a required property"]


@pytest.mark.asyncio
async def test_submit_type_mismatch(client):
    response = await client.post("/api/v1/order/submit", json={"title": 5})
    assert response.status_code == 400
    assert response.json()["message"].startswith("JSON data type mismatch")


@pytest.mark.asyncio
async def test_validate_order_check_only(client):
    response = await client.post("/api/v1/order/validate", json=VALID_ORDER)
    assert response.status_code == 200
    data = response.json()
    assert data["message"] == "Data validation passed"
    assert data["data"] == {"errors": [], "valid": True}


@pytest.mark.asyncio
async def test_validate_order_returns_result_when_invalid(client):
    response = await client.post("/api/v1/order/validate", json=MISSING_CITY)
    assert response.status_code == 400
    data = response.json()
    assert data["message"] == "Data validation failed"
    assert data["data"]["valid"] is False
    assert data["data"]["errors"][0]["field_path"] == "orderInfo.cityName"


@pytest.mark.asyncio
async def test_validate_json_enum_violation(client):
    body = '{"title":"x","orderInfo":{"orderId":"1","cityName":"Tokyo"}}'
    response = await client.post(
        "/api/v1/order/validate-json", content=body, headers={"content-type": "text/plain"}
    )
    assert response.status_code == 400
    [error] = response.json()["data"]["errors"]
    assert error["field_path"] == "orderInfo.cityName"
    assert "is not one of" in error["message"]


@pytest.mark.asyncio
async def test_validate_json_malformed(client):
    response = await client.post(
        "/api/v1/order/validate-json", content="{", headers={"content-type": "text/plain"}
    )
    assert response.status_code == 400
    data = response.json()
    assert data["message"] == SYNTAX_HINT
    assert "valid" not in (data.get("data") or {})


@pytest.mark.asyncio
async def test_trace_id_is_propagated(client):
    response = await client.post(
        "/api/v1/order/validate", json=VALID_ORDER, headers={"X-Trace-Id": "trc_test_123"}
    )
    assert response.headers["X-Trace-Id"] == "trc_test_123"
    assert response.json()["trace_id"] == "trc_test_123"


@pytest.mark.asyncio
async def test_schema_load_failure_hides_paths(tmp_path):
    from httpx import ASGITransport, AsyncClient

    from schemagate.main import create_app

    missing = str(tmp_path / "secret-location" / "order.schema.json")
    app = create_app(Settings(schema_location=missing, json_logs=False))
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        response = await ac.post("/api/v1/order/validate", json=VALID_ORDER)

    assert response.status_code == 500
    assert response.json()["message"] == SCHEMA_LOAD_MESSAGE
    assert "secret-location" not in response.text


@pytest.mark.asyncio
async def test_cache_clear_and_status(client, app_settings):
    await client.post("/api/v1/order/validate", json=VALID_ORDER)
    status = (await client.get("/api/v1/schema/cache")).json()["data"]
    assert status["entries"] == 1
    assert status["locations"][0]["location"] == app_settings.schema_location

    response = await client.post("/api/v1/schema/cache/clear")
    assert response.status_code == 200
    assert response.json()["message"] == "Schema cache cleared"
    assert (await client.get("/api/v1/schema/cache")).json()["data"]["entries"] == 0


@pytest.mark.asyncio
async def test_validate_json_deeply_nested_is_client_error(client):
    body = '{"title":' + "[" * 100000 + "]" * 100000 + "}"
    response = await client.post(
        "/api/v1/order/validate-json", content=body, headers={"content-type": "text/plain"}
    )
    assert response.status_code == 400
    assert response.json()["message"] == NESTING_HINT
