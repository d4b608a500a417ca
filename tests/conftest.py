"""Shared test fixtures."""

import json
from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient

from schemagate.config import SchemaSettings, Settings
from schemagate.schemas.cache import SchemaCache
from schemagate.schemas.validator import JsonSchemaValidator

ORDER_SCHEMA = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "type": "object",
    "required": ["title", "orderInfo"],
    "properties": {
        "title": {"type": "string", "minLength": 1},
        "orderInfo": {
            "type": "object",
            "required": ["orderId", "cityName"],
            "properties": {
                "orderId": {"type": "string", "minLength": 1},
                "cityName": {"type": "string", "enum": ["Beijing", "Shanghai", "Guangzhou"]},
                "quantity": {"type": "integer", "minimum": 1},
            },
        },
    },
}


def write_schema(path: Path, schema: dict) -> Path:
    path.write_text(json.dumps(schema), encoding="utf-8")
    return path


@pytest.fixture
def schema_file(tmp_path) -> Path:
    """Order schema written to a temporary file."""
    return write_schema(tmp_path / "order.schema.json", ORDER_SCHEMA)


@pytest.fixture
def schema_settings(schema_file) -> SchemaSettings:
    return SchemaSettings(location=str(schema_file))


@pytest.fixture
def cache(schema_settings) -> SchemaCache:
    return SchemaCache(schema_settings)


@pytest.fixture
def validator(cache, schema_settings) -> JsonSchemaValidator:
    return JsonSchemaValidator(cache, schema_settings)


@pytest.fixture
def app_settings(schema_file) -> Settings:
    return Settings(schema_location=str(schema_file), json_logs=False)


@pytest.fixture
def app(app_settings):
    """Create a test application instance bound to the temporary schema."""
    from schemagate.main import create_app

    return create_app(app_settings)


@pytest.fixture
async def client(app):
    """Async HTTP test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
