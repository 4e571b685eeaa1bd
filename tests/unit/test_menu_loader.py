"""Unit tests for loading a food."""
from decimal import Decimal

import pytest
from unittest.mock import AsyncMock

from food_details.core.errors import BackendUnavailableError, NotFoundError
from food_details.services.favorites.state import FavoriteStatus
from food_details.services.menu.loader import MenuItemLoader


class TestMenuItemLoader:
    """Test MenuItemLoader."""

    @pytest.mark.asyncio
    async def test_load_food(self, backend):
        """Test loading a food builds a fresh draft."""
        loaded = await MenuItemLoader(backend).load(1)

        assert loaded.draft.food.id == 1
        assert loaded.draft.food.name == "Cheeseburger"
        assert loaded.draft.base_quantity == 1
        assert loaded.draft.total == Decimal("10.00")
        assert loaded.favorite is FavoriteStatus.NOT_FAVORITE

    @pytest.mark.asyncio
    async def test_server_quantity_is_ignored(self, backend):
        """Test extras start at zero even when the server sends a quantity."""
        assert backend.foods[1]["extras"][0]["quantity"] == 5

        loaded = await MenuItemLoader(backend).load(1)

        assert [extra.quantity for extra in loaded.draft.extras] == [0]

    @pytest.mark.asyncio
    async def test_favorite_detected(self, backend):
        loaded = await MenuItemLoader(backend).load(3)
        assert loaded.favorite is FavoriteStatus.FAVORITE

    @pytest.mark.asyncio
    async def test_not_found(self, backend):
        """Test an unknown id raises NotFoundError."""
        with pytest.raises(NotFoundError) as exc_info:
            await MenuItemLoader(backend).load(404)

        assert exc_info.value.food_id == 404

    @pytest.mark.asyncio
    async def test_reads_only(self, backend):
        """Test loading performs no writes."""
        await MenuItemLoader(backend).load(1)
        assert backend.calls == []

    @pytest.mark.asyncio
    async def test_backend_unavailable(self, backend):
        backend.fail_reads = True
        with pytest.raises(BackendUnavailableError):
            await MenuItemLoader(backend).load(1)

    @pytest.mark.asyncio
    async def test_malformed_food(self, backend):
        """Test a food without a price surfaces as a backend error."""
        del backend.foods[2]["price"]
        with pytest.raises(BackendUnavailableError):
            await MenuItemLoader(backend).load(2)

    @pytest.mark.asyncio
    async def test_favorites_read_fails_after_food_read(self, backend):
        """Test a failing GET /favorites fails the whole load."""
        backend.get_food = AsyncMock(wraps=backend.get_food)
        backend.list_favorites = AsyncMock(
            side_effect=BackendUnavailableError("favorites unavailable")
        )

        with pytest.raises(BackendUnavailableError):
            await MenuItemLoader(backend).load(1)

        backend.get_food.assert_awaited_once_with(1)
        backend.list_favorites.assert_awaited_once()
