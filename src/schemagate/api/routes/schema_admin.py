"""Schema cache administration routes."""

import logging

from fastapi import APIRouter

from schemagate.dependencies import Validator
from schemagate.models.common import ApiResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/schema", tags=["Schema"])


@router.get("/cache")
async def cache_status(validator: Validator) -> dict:
    return ApiResponse.success(validator.cache.stats()).model_dump(mode="json")


@router.post("/cache/clear")
async def clear_cache(validator: Validator) -> dict:
    """Drop cached schemas; the next validation reloads from the source."""
    validator.clear_cache()
    return ApiResponse.success(message="Schema cache cleared").model_dump(mode="json")
