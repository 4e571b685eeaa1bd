"""Unit tests for the fake foods API."""


class TestFoodsAPI:
    """Test foods, favorites and orders endpoints."""

    def test_health(self, test_client):
        response = test_client.get("/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["foods"] == 3
        assert data["favorites"] == 1

    def test_get_food(self, test_client):
        """Test GET /foods/{id} returns the food with extras."""
        response = test_client.get("/foods/1")

        assert response.status_code == 200
        data = response.json()
        assert data["id"] == 1
        assert data["name"] == "Cheeseburger"
        assert data["extras"][0]["name"] == "Cheese"

    def test_get_food_not_found(self, test_client):
        response = test_client.get("/foods/999")
        assert response.status_code == 404

    def test_list_favorites(self, test_client):
        response = test_client.get("/favorites")

        assert response.status_code == 200
        assert [favorite["id"] for favorite in response.json()] == [3]

    def test_add_and_remove_favorite(self, test_client):
        favorite = {
            "id": 1,
            "name": "Cheeseburger",
            "description": "Classic burger",
            "price": 10.0,
            "category": 1,
            "image_url": "https://example.com/burger.png",
        }

        response = test_client.post("/favorites", json=favorite)
        assert response.status_code == 201
        ids = [record["id"] for record in test_client.get("/favorites").json()]
        assert 1 in ids

        response = test_client.delete("/favorites/1")
        assert response.status_code == 200
        ids = [record["id"] for record in test_client.get("/favorites").json()]
        assert 1 not in ids

    def test_remove_missing_favorite(self, test_client):
        response = test_client.delete("/favorites/1")
        assert response.status_code == 404

    def test_create_order(self, test_client):
        order = {
            "product_id": 2,
            "name": "Fries",
            "description": "Crispy fries",
            "price": 16.5,
            "category": 2,
            "thumbnail_url": "https://example.com/fries.png",
            "extras": [],
        }

        response = test_client.post("/orders", json=order)

        assert response.status_code == 201
        data = response.json()
        assert data["id"] == 1
        assert data["price"] == 16.5
        assert data["extras"] == []
        assert len(test_client.get("/orders").json()) == 1
