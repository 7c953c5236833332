"""
Shared pytest fixtures for the product catalog test suite.

This module contains fixtures that are shared across all test modules:
the Flask application, its test client and generated catalog data.

Key Concepts Demonstrated:
- Fixture scopes (function, session)
- Test data factories
- Test client creation
"""

import os
import pytest
from faker import Faker

# Set testing environment before importing app
os.environ["FLASK_ENV"] = "testing"

from app import create_app
from app.catalog import Product


# Initialize Faker for generating test data
fake = Faker()


# -----------------------------------------------------------------------------
# Application Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture(scope="session")
def app():
    """
    Create application instance for the test session.

    Yields:
        Flask application instance configured for testing.
    """
    application = create_app("testing")
    yield application


@pytest.fixture(scope="function")
def client(app):
    """
    Create a test client for making HTTP requests.

    Args:
        app: Flask application fixture.

    Yields:
        Flask test client for making HTTP requests.
    """
    with app.test_client() as test_client:
        yield test_client


# -----------------------------------------------------------------------------
# Test Data Factory Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def product_factory():
    """
    Factory fixture for creating Product instances.

    Returns:
        Function that creates and returns Product instances.

    Example:
        def test_something(product_factory):
            product = product_factory(name="Phone")
            assert product.id.startswith("prod-")
    """

    def _create_product(
        product_id: str | None = None,
        name: str | None = None,
        price: str | None = None,
    ) -> Product:
        return Product(
            id=product_id or f"prod-{fake.unique.random_int(min=100, max=99999)}",
            name=name or fake.catch_phrase(),
            price=price or f"{fake.pydecimal(left_digits=3, right_digits=2, positive=True):.2f}",
        )

    return _create_product


@pytest.fixture
def two_product_catalog() -> list[Product]:
    """The two-entry catalog the application ships with."""
    return [
        Product(id="prod-1", name="Samsung Galaxy S6", price="420.00"),
        Product(id="prod-2", name="Samsung Galaxy S6 Edge", price="500.00"),
    ]
