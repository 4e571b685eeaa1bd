"""Fake foods API for developing against the food details engine."""
from contextlib import asynccontextmanager

from fastapi import FastAPI

from food_details.core.logging import setup_logging
from food_details.api import favorites, foods, health, orders


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    setup_logging()
    yield


app = FastAPI(
    title="Food Details Fake API",
    description="In-memory foods, favorites and orders backend",
    version="0.1.0",
    lifespan=lifespan,
)

app.include_router(health.router, tags=["health"])
app.include_router(foods.router, tags=["foods"])
app.include_router(favorites.router, tags=["favorites"])
app.include_router(orders.router, tags=["orders"])
