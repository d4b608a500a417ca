"""Order submission and validation API routes."""

import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from schemagate.dependencies import Orders, TraceId
from schemagate.models.common import ApiResponse
from schemagate.models.order import OrderRequest
from schemagate.models.validation import ValidationResult

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/order", tags=["Orders"])


def _check_only_response(result: ValidationResult, trace_id: str) -> JSONResponse:
    if result.valid:
        body = ApiResponse.success(result, message="Data validation passed")
    else:
        body = ApiResponse.error("Data validation failed", data=result)
    body.trace_id = trace_id
    return JSONResponse(status_code=body.code, content=body.model_dump(mode="json"))


@router.post("/submit")
async def submit_order(order: OrderRequest, orders: Orders, trace_id: TraceId) -> dict:
    info = order.order_info
    logger.info(
        "Order submitted: title=%s order_id=%s city=%s",
        order.title,
        info.order_id if info else None,
        info.city_name if info else None,
    )
    result = await run_in_threadpool(orders.process_order, order)
    body = ApiResponse.success(result, message="Order submitted")
    body.trace_id = trace_id
    return body.model_dump(mode="json")


@router.post("/validate")
async def validate_order(order: OrderRequest, orders: Orders, trace_id: TraceId) -> JSONResponse:
    result = await run_in_threadpool(orders.validate_order, order)
    return _check_only_response(result, trace_id)


@router.post("/validate-json")
async def validate_json(request: Request, orders: Orders, trace_id: TraceId) -> JSONResponse:
    """Validate a raw JSON body without binding it to the order model."""
    body = await request.body()
    result = await run_in_threadpool(orders.validate_json, body)
    return _check_only_response(result, trace_id)
