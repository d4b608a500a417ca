"""Health check endpoints."""

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from schemagate import __version__
from schemagate.errors.exceptions import SchemaLoadError

router = APIRouter()


@router.get("/health")
async def health_check():
    """Return service health status."""
    return {"status": "healthy", "service": "schemagate", "version": __version__}


@router.get("/health/ready")
async def readiness(request: Request):
    """Readiness probe: the configured schema must be loadable."""
    validator = request.app.state.validator
    try:
        await run_in_threadpool(validator.cache.get, validator.location)
        checks = {"schema": "ok"}
        status_code = 200
    except SchemaLoadError:
        checks = {"schema": "error"}
        status_code = 503
    return JSONResponse(
        status_code=status_code,
        content={"status": "ready" if status_code == 200 else "not_ready", "checks": checks},
    )
