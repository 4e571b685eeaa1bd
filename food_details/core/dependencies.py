"""FastAPI dependencies."""
from typing import Optional

from food_details.core.config import settings
from food_details.services.backend.in_memory import InMemoryBackend

_backend: Optional[InMemoryBackend] = None


def get_backend() -> InMemoryBackend:
    """Get the fake API's backend store, created on first use."""
    global _backend
    if _backend is None:
        _backend = InMemoryBackend(seed_file=settings.seed_file)
    return _backend
