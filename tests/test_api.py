"""HTTP surface tests: FastAPI TestClient over the in-memory fake store."""

import pytest
from fastapi.testclient import TestClient

from catalog.config import Settings
from catalog.errors import StorageError
from catalog.main import create_app
from tests.fakes import FakeProductStore, product_payload


def _client(env: str = "development") -> tuple[TestClient, FakeProductStore]:
    store = FakeProductStore()
    app = create_app(Settings(PYTHON_ENV=env), store=store)
    return TestClient(app, raise_server_exceptions=False), store


@pytest.fixture
def client_and_store():
    return _client()


class TestProductRoutes:

    def test_list_empty(self, client_and_store):
        client, _ = client_and_store
        response = client.get("/api/products")
        assert response.status_code == 200
        assert response.json() == []

    def test_create_returns_201_with_id(self, client_and_store):
        client, _ = client_and_store
        response = client.post("/api/products", json=product_payload())
        assert response.status_code == 201
        body = response.json()
        assert body["id"]
        assert body["imageUrl"] == "https://example.com/shoes.jpg"
        assert "createdAt" in body and "updatedAt" in body

    def test_create_then_get(self, client_and_store):
        client, _ = client_and_store
        created = client.post("/api/products", json=product_payload()).json()
        response = client.get(f"/api/products/{created['id']}")
        assert response.status_code == 200
        assert response.json() == created

    def test_create_missing_field_is_400(self, client_and_store):
        client, store = client_and_store
        payload = product_payload()
        del payload["imageUrl"]
        response = client.post("/api/products", json=payload)
        assert response.status_code == 400
        assert response.json() == {"message": "Please provide all required fields"}
        assert len(store) == 0

    def test_create_with_zero_price_is_rejected(self, client_and_store):
        client, _ = client_and_store
        response = client.post("/api/products", json=product_payload(price=0))
        assert response.status_code == 400
        assert response.json()["message"] == "Please provide all required fields"

    @pytest.mark.parametrize("price_literal", ["1e999", "NaN", "Infinity"])
    def test_create_with_non_finite_price_is_400_and_nothing_stored(self, client_and_store, price_literal):
        client, store = client_and_store
        body = (
            '{"name": "Lamp", "price": %s, "description": "Desk lamp", '
            '"category": "Electronics", "stock": 1, "imageUrl": "https://example.com/lamp.jpg"}'
        ) % price_literal
        response = client.post(
            "/api/products",
            content=body.encode(),
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 400
        assert len(store) == 0
        assert client.get("/api/products").json() == []

    def test_create_with_non_object_body_is_400(self, client_and_store):
        client, _ = client_and_store
        response = client.post("/api/products", json=["not", "an", "object"])
        assert response.status_code == 400

    def test_create_with_malformed_json_is_400(self, client_and_store):
        client, _ = client_and_store
        response = client.post(
            "/api/products",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 400

    def test_get_unknown_is_404(self, client_and_store):
        client, _ = client_and_store
        response = client.get("/api/products/64b7f0000000000000000000")
        assert response.status_code == 404
        assert response.json() == {"message": "Product not found"}

    def test_put_full_overwrite(self, client_and_store):
        client, _ = client_and_store
        created = client.post("/api/products", json=product_payload()).json()
        new_fields = product_payload(name="Renamed", price=10.0, stock=3)
        response = client.put(f"/api/products/{created['id']}", json=new_fields)
        assert response.status_code == 200
        fetched = client.get(f"/api/products/{created['id']}").json()
        assert {k: fetched[k] for k in new_fields} == new_fields

    def test_put_unknown_is_404(self, client_and_store):
        client, _ = client_and_store
        response = client.put("/api/products/64b7f0000000000000000000", json=product_payload())
        assert response.status_code == 404

    def test_put_partial_body_is_400(self, client_and_store):
        client, _ = client_and_store
        created = client.post("/api/products", json=product_payload()).json()
        response = client.put(f"/api/products/{created['id']}", json={"name": "Partial"})
        assert response.status_code == 400

    def test_delete(self, client_and_store):
        client, _ = client_and_store
        created = client.post("/api/products", json=product_payload()).json()
        response = client.delete(f"/api/products/{created['id']}")
        assert response.status_code == 200
        assert response.json() == {"message": "Product deleted successfully"}
        assert client.get(f"/api/products/{created['id']}").status_code == 404

    def test_delete_unknown_is_404(self, client_and_store):
        client, _ = client_and_store
        assert client.delete("/api/products/64b7f0000000000000000000").status_code == 404


class TestErrorsAndPlatform:

    def test_unmatched_route(self, client_and_store):
        client, _ = client_and_store
        response = client.get("/api/orders")
        assert response.status_code == 404
        assert response.json() == {"message": "Route not found"}

    def test_unsupported_method_is_route_not_found(self, client_and_store):
        client, _ = client_and_store
        response = client.patch("/api/products/abc", json={})
        assert response.status_code == 404
        assert response.json() == {"message": "Route not found"}

    def test_storage_error_shows_detail_in_development(self):
        client, store = _client("development")
        store.fail_with = "connection reset"
        response = client.get("/api/products")
        assert response.status_code == 500
        assert response.json() == {"message": "Error fetching products", "error": "connection reset"}

    def test_storage_error_without_detail_falls_back_to_message(self):
        class DisconnectedStore(FakeProductStore):
            async def find_all(self):
                raise StorageError("Database is not connected")

        app = create_app(Settings(PYTHON_ENV="development"), store=DisconnectedStore())
        client = TestClient(app, raise_server_exceptions=False)
        response = client.get("/api/products")
        assert response.status_code == 500
        assert response.json() == {
            "message": "Database is not connected",
            "error": "Database is not connected",
        }

    def test_storage_error_redacted_in_production(self):
        client, store = _client("production")
        store.fail_with = "connection reset"
        response = client.get("/api/products")
        assert response.status_code == 500
        assert response.json()["error"] == "Internal Server Error"

    def test_root(self, client_and_store):
        client, _ = client_and_store
        assert client.get("/").json() == {"message": "Product Catalog API is running"}

    def test_health_without_database(self, client_and_store):
        client, _ = client_and_store
        assert client.get("/health").json()["status"] == "ok"

    def test_metrics_exposed(self, client_and_store):
        client, _ = client_and_store
        client.get("/api/products")
        response = client.get("/metrics")
        assert response.status_code == 200
        assert "catalog_http_requests_total" in response.text


def test_create_app_leaves_root_logger_alone(monkeypatch):
    calls = []
    monkeypatch.setattr("logging.basicConfig", lambda **kwargs: calls.append(kwargs))
    create_app(Settings(LOG_LEVEL="DEBUG"), store=FakeProductStore())
    assert calls == []
