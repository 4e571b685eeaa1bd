"""Orders API endpoints."""
import logging
from typing import Any, Dict, List

from fastapi import APIRouter, Depends, HTTPException

from food_details.core.dependencies import get_backend
from food_details.core.errors import BackendUnavailableError
from food_details.services.backend.in_memory import InMemoryBackend
from food_details.services.ordering.models import OrderPayload

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/orders", status_code=201)
async def create_order(
    payload: OrderPayload,
    backend: InMemoryBackend = Depends(get_backend),
) -> Dict[str, Any]:
    """Store an order."""
    logger.info(
        f"[ORDERS] Order received - product_id: {payload.product_id}, "
        f"price: {payload.price}, extras: {len(payload.extras)}"
    )
    try:
        await backend.create_order(payload)
    except BackendUnavailableError as e:
        logger.error(
            f"[ORDERS] Error storing order - product_id: {payload.product_id}, "
            f"Error: {type(e).__name__}: {str(e)}"
        )
        raise HTTPException(status_code=503, detail=f"Error storing order: {str(e)}")
    return backend.orders[-1]


@router.get("/orders")
async def list_orders(
    backend: InMemoryBackend = Depends(get_backend),
) -> List[Dict[str, Any]]:
    """Get all stored orders."""
    return backend.orders
