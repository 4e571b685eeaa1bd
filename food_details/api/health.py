"""Health check endpoint."""
import logging
from fastapi import APIRouter, Depends, Request

from food_details.core.dependencies import get_backend
from food_details.services.backend.in_memory import InMemoryBackend

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/health")
async def health_check(
    request: Request,
    backend: InMemoryBackend = Depends(get_backend),
):
    """Health check endpoint, with the size of the fake store."""
    logger.debug(
        f"[HEALTH] Health check requested - Client: {request.client.host if request.client else 'unknown'}"
    )
    return {
        "status": "healthy",
        "foods": len(backend.foods),
        "favorites": len(backend.favorites),
        "orders": len(backend.orders),
    }
