"""Favorites API endpoints."""
import logging
from typing import Any, Dict, List

from fastapi import APIRouter, Depends, HTTPException, Request

from food_details.core.dependencies import get_backend
from food_details.core.errors import BackendUnavailableError
from food_details.services.backend.in_memory import InMemoryBackend
from food_details.services.ordering.models import FavoriteFood

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/favorites")
async def list_favorites(
    request: Request,
    backend: InMemoryBackend = Depends(get_backend),
) -> List[Dict[str, Any]]:
    """Get all favorite foods."""
    logger.info(
        f"[FAVORITES] List requested - Client: {request.client.host if request.client else 'unknown'}"
    )
    try:
        return await backend.list_favorites()
    except BackendUnavailableError as e:
        logger.error(f"[FAVORITES] Error listing favorites - {str(e)}")
        raise HTTPException(status_code=503, detail=f"Error listing favorites: {str(e)}")


@router.post("/favorites", status_code=201)
async def add_favorite(
    favorite: FavoriteFood,
    backend: InMemoryBackend = Depends(get_backend),
) -> Dict[str, Any]:
    """Add a food to the favorites."""
    logger.info(f"[FAVORITES] Adding food {favorite.id}")
    try:
        await backend.add_favorite(favorite)
    except BackendUnavailableError as e:
        logger.error(f"[FAVORITES] Error adding food {favorite.id} - {str(e)}")
        raise HTTPException(status_code=503, detail=f"Error adding favorite: {str(e)}")
    return favorite.model_dump(mode="json")


@router.delete("/favorites/{food_id}")
async def remove_favorite(
    food_id: int,
    backend: InMemoryBackend = Depends(get_backend),
) -> Dict[str, Any]:
    """Remove a food from the favorites."""
    if not any(favorite["id"] == food_id for favorite in backend.favorites):
        logger.warning(f"[FAVORITES] Food {food_id} is not a favorite")
        raise HTTPException(status_code=404, detail=f"Favorite {food_id} not found")

    logger.info(f"[FAVORITES] Removing food {food_id}")
    try:
        await backend.remove_favorite(food_id)
    except BackendUnavailableError as e:
        logger.error(f"[FAVORITES] Error removing food {food_id} - {str(e)}")
        raise HTTPException(status_code=503, detail=f"Error removing favorite: {str(e)}")
    return {}
