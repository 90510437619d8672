"""
End-to-end tests for the product catalog and health endpoints.
"""

import xml.etree.ElementTree as ET

import pytest
from fastapi.testclient import TestClient

from api.server import create_app
from core.errors import StorageError
from core.storage import InMemoryProductRepository


class FailingProductRepository(InMemoryProductRepository):
    """Repository whose database is permanently down."""

    async def list_products(self):
        raise StorageError("Product query failed")

    async def ping(self):
        return False


@pytest.fixture
def broken_client(test_settings):
    app = create_app(
        settings=test_settings,
        product_repository=FailingProductRepository(),
    )
    with TestClient(app) as test_client:
        yield test_client


def test_products_page(client):
    response = client.get("/products")

    assert response.status_code == 200
    assert "<title>Products</title>" in response.text
    assert "Keyboard" in response.text
    assert "49.90" in response.text


def test_products_json(client):
    response = client.get("/products", headers={"Accept": "application/json"})

    assert response.status_code == 200
    products = response.json()
    assert [p["name"] for p in products] == ["Keyboard", "Mouse"]
    assert products[0]["quantity"] == 3
    assert products[0]["price"] == "49.90"


def test_products_xml(client):
    response = client.get("/products", headers={"Accept": "text/xml"})

    assert response.status_code == 200
    root = ET.fromstring(response.content)
    assert root.tag == "products"
    assert root.find("product").findtext("name") == "Keyboard"


def test_empty_catalog_xml_keeps_root_element(test_settings):
    app = create_app(settings=test_settings, product_repository=InMemoryProductRepository())

    with TestClient(app) as test_client:
        response = test_client.get("/products", headers={"Accept": "application/xml"})

    assert response.status_code == 200
    root = ET.fromstring(response.content)
    assert root.tag == "products"
    assert list(root) == []


def test_storage_error_becomes_service_unavailable(broken_client):
    response = broken_client.get("/products")

    assert response.status_code == 503
    assert "Product query failed" in response.text


def test_storage_error_json(broken_client):
    response = broken_client.get("/products", headers={"Accept": "application/json"})

    assert response.status_code == 503
    assert response.json() == {"detail": "Product query failed"}


def test_storage_error_does_not_affect_articles(broken_client):
    response = broken_client.get("/")

    assert response.status_code == 200


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_ready(client):
    response = client.get("/ready")

    assert response.status_code == 200
    assert response.json()["checks"]["products"] == "ok"


def test_ready_degraded(broken_client):
    response = broken_client.get("/ready")

    assert response.status_code == 503
    assert response.json()["status"] == "degraded"
