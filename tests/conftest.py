import pytest
from unittest.mock import AsyncMock, MagicMock, patch
from fastapi.testclient import TestClient

from main import app
from core.dependencies import get_current_user, get_cart_service
from services.cart import CartService

TEST_USER = {"_id": "user123", "email": "user@example.com"}
TAX_RATE = 0.05


def mock_get_current_user():
    """Stand-in for the cookie/JWT auth dependency"""
    return TEST_USER


@pytest.fixture
def carts():
    """Mocked ``carts`` collection; every driver call succeeds by default"""
    collection = AsyncMock()
    collection.insert_one.return_value = MagicMock(inserted_id="cart123")
    collection.update_one.return_value = MagicMock(matched_count=1, modified_count=1)
    collection.delete_one.return_value = MagicMock(deleted_count=1)
    return collection


@pytest.fixture
def products():
    """Mocked ``products`` collection"""
    collection = AsyncMock()
    collection.bulk_write.return_value = MagicMock(modified_count=1)
    return collection


@pytest.fixture
def service(carts, products):
    return CartService(carts, products, tax_rate=TAX_RATE)


@pytest.fixture
def fixed_cart_id():
    with patch("services.cart.new_cart_id", return_value="cart123"):
        yield "cart123"


@pytest.fixture
def test_client(service):
    """
    TestClient with auth and the cart service overridden, so no MongoDB
    or token is needed.
    """
    app.dependency_overrides[get_current_user] = mock_get_current_user
    app.dependency_overrides[get_cart_service] = lambda: service

    client = TestClient(app)
    yield client

    app.dependency_overrides.clear()
