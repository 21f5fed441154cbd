"""Shared test fixtures"""
import pytest
from fastapi.testclient import TestClient

from app.core.config import config
from app.repositories.product import ProductRepository
from main import create_app


@pytest.fixture
def repository():
    """Empty in-memory store"""
    return ProductRepository()


@pytest.fixture
def app(repository):
    """Fresh application that owns the `repository` fixture"""
    return create_app(repository)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def api_headers():
    """Headers carrying a valid API key"""
    return {config.api_key_header: config.api_key}


@pytest.fixture
def product_payload():
    """Valid create/update body"""
    return {
        "name": "Widget",
        "description": "d",
        "price": 9.99,
        "category": "tools",
        "inStock": True,
    }


@pytest.fixture
def create_product(client, api_headers, product_payload):
    """Create a product through the API and return the response body"""
    def _create(**overrides):
        response = client.post("/api/products", json={**product_payload, **overrides}, headers=api_headers)
        assert response.status_code == 201, response.text
        return response.json()
    return _create
