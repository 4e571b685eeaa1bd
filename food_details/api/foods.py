"""Foods API endpoints."""
import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException, Request

from food_details.core.dependencies import get_backend
from food_details.core.errors import BackendUnavailableError
from food_details.services.backend.in_memory import InMemoryBackend

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/foods/{food_id}")
async def get_food(
    food_id: int,
    request: Request,
    backend: InMemoryBackend = Depends(get_backend),
) -> Dict[str, Any]:
    """Get a food with its extras."""
    logger.info(
        f"[FOODS] Request received - food_id: {food_id}, "
        f"Client: {request.client.host if request.client else 'unknown'}"
    )
    try:
        food = await backend.get_food(food_id)
    except BackendUnavailableError as e:
        logger.error(f"[FOODS] Error fetching food {food_id} - {str(e)}")
        raise HTTPException(status_code=503, detail=f"Error fetching food: {str(e)}")

    if food is None:
        logger.warning(f"[FOODS] Food not found - food_id: {food_id}")
        raise HTTPException(status_code=404, detail=f"Food {food_id} not found")
    return food
