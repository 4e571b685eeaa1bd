"""HTTP client for the foods backend."""
import logging
from typing import Any, Dict, List, Optional

import httpx

from food_details.core.config import settings
from food_details.core.errors import BackendUnavailableError
from food_details.services.backend.base import BackendClient
from food_details.services.ordering.models import FavoriteFood, OrderPayload

logger = logging.getLogger(__name__)


class HttpBackendClient(BackendClient):
    """Backend client speaking JSON over HTTP."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.base_url = (base_url or settings.api_base_url).rstrip("/")
        self.client = client or httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout if timeout is not None else settings.request_timeout,
        )

    async def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        try:
            response = await self.client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            logger.error(f"[BACKEND] {method} {path} failed - {type(e).__name__}: {str(e)}")
            raise BackendUnavailableError(f"{method} {path} failed: {e}") from e
        return response

    def _raise_for_status(self, method: str, path: str, response: httpx.Response) -> None:
        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(f"[BACKEND] {method} {path} returned {response.status_code}")
            raise BackendUnavailableError(
                f"{method} {path} returned {response.status_code}"
            ) from e

    def _json(self, method: str, path: str, response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError as e:
            logger.error(f"[BACKEND] {method} {path} returned a body that is not JSON")
            raise BackendUnavailableError(f"{method} {path} returned invalid JSON") from e

    async def get_food(self, food_id: int) -> Optional[Dict[str, Any]]:
        """Fetch a food with its extras."""
        path = f"/foods/{food_id}"
        response = await self._request("GET", path)
        if response.status_code == 404:
            return None
        self._raise_for_status("GET", path, response)
        if not response.content:
            return None
        return self._json("GET", path, response) or None

    async def list_favorites(self) -> List[Dict[str, Any]]:
        """Fetch the favorites collection."""
        response = await self._request("GET", "/favorites")
        self._raise_for_status("GET", "/favorites", response)
        favorites = self._json("GET", "/favorites", response) or []
        if not isinstance(favorites, list):
            logger.error("[BACKEND] GET /favorites did not return a list")
            raise BackendUnavailableError("GET /favorites did not return a list")
        return favorites

    async def add_favorite(self, favorite: FavoriteFood) -> None:
        """Store a food as favorite."""
        response = await self._request(
            "POST", "/favorites", json=favorite.model_dump(mode="json")
        )
        self._raise_for_status("POST", "/favorites", response)

    async def remove_favorite(self, food_id: int) -> None:
        """Remove a food from the favorites."""
        path = f"/favorites/{food_id}"
        response = await self._request("DELETE", path)
        self._raise_for_status("DELETE", path, response)

    async def create_order(self, payload: OrderPayload) -> None:
        """Submit an order."""
        response = await self._request(
            "POST", "/orders", json=payload.model_dump(mode="json")
        )
        self._raise_for_status("POST", "/orders", response)

    async def close(self) -> None:
        """Close the HTTP client."""
        await self.client.aclose()
