"""Test configuration and fixtures."""

import os
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

# Set test environment variables BEFORE importing the app
os.environ["ENVIRONMENT"] = "test"

from tool_rental.catalog import ToolCatalog, default_catalog
from tool_rental.engine import CheckoutEngine
from tool_rental.main import app
from tool_rental.models.tool import Tool


@pytest.fixture
def catalog() -> ToolCatalog:
    """The standard four-tool catalog."""
    return default_catalog()


@pytest.fixture
def engine(catalog) -> CheckoutEngine:
    """Checkout engine over the standard catalog."""
    return CheckoutEngine(catalog, max_rental_days=3650)


@pytest.fixture
def everyday_tool() -> Tool:
    """A tool that bills for every class of day."""
    return Tool(
        code="TEST",
        type="Test Tool",
        brand="Acme",
        daily_charge=Decimal("10.00"),
        weekday_charge=True,
        weekend_charge=True,
        holiday_charge=True,
    )


@pytest.fixture
def client() -> TestClient:
    """Create a test client with the application lifespan running."""
    with TestClient(app) as client:
        yield client
