"""Pytest configuration and fixtures for deal service tests."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from app.main import create_app
from app.services.price_store import PriceRecordStore

REFERENCE_PRICE = 85000
PLACEHOLDER_IMAGE = "https://img.test/deal.png"

IPHONE_URL = (
    "https://www.flipkart.com/apple-iphone-14-starlight-128-gb/p/"
    "itm3485a56f6e676?pid=MOBGHWFHABH3G73H"
)


@pytest.fixture
def store() -> PriceRecordStore:
    """Fresh store per test."""
    return PriceRecordStore(
        reference_price=REFERENCE_PRICE, display_image=PLACEHOLDER_IMAGE
    )


@pytest.fixture
def app(store):
    return create_app(store=store)


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def product_url() -> str:
    return IPHONE_URL
