"""FastAPI dependency injection providers."""

from typing import Annotated

from fastapi import Depends, Request

from schemagate.schemas.validator import JsonSchemaValidator
from schemagate.services.order_service import OrderService


def get_validator(request: Request) -> JsonSchemaValidator:
    """Return the validator built by the application lifespan."""
    return request.app.state.validator


def get_order_service(validator: JsonSchemaValidator = Depends(get_validator)) -> OrderService:
    return OrderService(validator)


def get_trace_id(request: Request) -> str:
    """Extract trace_id from request state (set by middleware)."""
    return getattr(request.state, "trace_id", "unknown")


# Type aliases for dependency injection
Validator = Annotated[JsonSchemaValidator, Depends(get_validator)]
Orders = Annotated[OrderService, Depends(get_order_service)]
TraceId = Annotated[str, Depends(get_trace_id)]
