"""FastAPI exception handlers producing ApiResponse error envelopes."""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from schemagate.errors.exceptions import (
    TYPE_HINT,
    MalformedInputError,
    SchemaLoadError,
    SchemagateError,
    describe_parse_failure,
)
from schemagate.models.common import ApiResponse

logger = logging.getLogger(__name__)

SCHEMA_LOAD_MESSAGE = "Service configuration error, please contact the administrator"
INTERNAL_MESSAGE = "Internal server error, please retry later"


def _respond(request: Request, status_code: int, message: str, data=None) -> JSONResponse:
    body = ApiResponse.error(message, code=status_code, data=data)
    body.trace_id = getattr(request.state, "trace_id", None)
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json", exclude_none=True))


def register_exception_handlers(app: FastAPI) -> None:
    """Register all custom exception handlers on the FastAPI app."""

    @app.exception_handler(SchemaLoadError)
    async def schema_load_error_handler(request: Request, exc: SchemaLoadError):
        logger.error("Schema load failure: %s", exc.message, exc_info=exc)
        return _respond(request, 500, SCHEMA_LOAD_MESSAGE)

    @app.exception_handler(MalformedInputError)
    async def malformed_input_handler(request: Request, exc: MalformedInputError):
        logger.warning("Malformed JSON input: %s", exc.parser_message)
        return _respond(request, 400, exc.hint, data=exc.details)

    @app.exception_handler(SchemagateError)
    async def schemagate_error_handler(request: Request, exc: SchemagateError):
        logger.warning("Request rejected: %s", exc.message)
        return _respond(request, exc.status_code, exc.message, data=exc.details)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        logger.warning("Request body rejected: %s", errors)
        first = errors[0] if errors else {}
        error_type = str(first.get("type", ""))
        if error_type == "json_invalid":
            message = describe_parse_failure(str(first.get("ctx", {}).get("error", "")))
        elif error_type.endswith("_type") or error_type.endswith("_parsing"):
            message = f"{TYPE_HINT}: {first.get('msg')}"
        else:
            message = first.get("msg") or "Request parameter validation failed"
        return _respond(request, 400, message)

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.error("Unhandled error: %s", exc, exc_info=exc)
        return _respond(request, 500, INTERNAL_MESSAGE)
