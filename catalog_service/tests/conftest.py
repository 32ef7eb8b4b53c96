"""
Pytest configuration and fixtures for Catalog Service tests.
"""

import os
from typing import Iterator

import pytest
from fastapi.testclient import TestClient

# Set up test environment variables before importing the application
os.environ.setdefault("APP_NAME", "Catalog Service Test")
os.environ.setdefault("APP_VERSION", "1.0.0")
os.environ.setdefault("DEBUG", "true")
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("LOG_LEVEL", "WARNING")
os.environ.setdefault("SEED_SAMPLE_DATA", "true")

from catalog_service.app.main import create_app
from catalog_service.app.repository.memory import (
    InMemoryCategoryRepository,
    InMemoryProductRepository,
)
from catalog_service.app.services.category_service import CategoryService
from catalog_service.app.services.product_service import ProductService


@pytest.fixture
def category_repository() -> InMemoryCategoryRepository:
    """Category store seeded with the sample catalog."""
    return InMemoryCategoryRepository()


@pytest.fixture
def product_repository() -> InMemoryProductRepository:
    """Product store seeded with the sample catalog."""
    return InMemoryProductRepository()


@pytest.fixture
def category_service(category_repository, product_repository) -> CategoryService:
    """CategoryService over real seeded stores."""
    return CategoryService(category_repository, product_repository)


@pytest.fixture
def product_service(product_repository, category_repository) -> ProductService:
    """ProductService over real seeded stores."""
    return ProductService(product_repository, category_repository)


@pytest.fixture
def client() -> Iterator[TestClient]:
    """FastAPI test client; a fresh app per test so stores start from the seed."""
    with TestClient(create_app()) as test_client:
        yield test_client
