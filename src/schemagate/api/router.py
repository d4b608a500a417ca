"""Master API router mounted at /api/v1."""

from fastapi import APIRouter

from schemagate.api.routes import health, orders, schema_admin

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(health.router, tags=["Health"])
api_router.include_router(orders.router)
api_router.include_router(schema_admin.router)
