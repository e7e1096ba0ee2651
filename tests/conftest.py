"""Shared fixtures for nutrition-tracker-api tests."""

import pytest
import respx

from nutrition_tracker_api.api import NutritionAPI
from nutrition_tracker_api.config import API_BASE_URL, CALCULATE_PATH

CALCULATE_URL = f"{API_BASE_URL}{CALCULATE_PATH}"


@pytest.fixture
def mock_httpx():
    """Activate respx mock for HTTP requests."""
    with respx.mock(assert_all_called=False) as respx_mock:
        yield respx_mock


@pytest.fixture
def api_key():
    """RapidAPI key used by the test client."""
    return "test-rapidapi-key-12345"


@pytest.fixture
def api_client(api_key):
    """Create a fresh NutritionAPI client instance."""
    client = NutritionAPI(api_key)
    yield client
    client.close()


@pytest.fixture
def mock_chicken_response():
    """Successful response for "100g grilled chicken breast"."""
    return {
        "success": True,
        "totalNutrients": {
            "Energy": {"value": 165.0, "unit": "kcal"},
            "Protein": {"value": 31.0, "unit": "g"},
        },
    }


@pytest.fixture
def mock_meal_response():
    """Successful response for a multi-item meal."""
    return {
        "success": True,
        "query": "2 eggs, 100g oatmeal, and 1 banana",
        "totalNutrients": {
            "Energy": {"value": 622.5, "unit": "kcal"},
            "Protein": {"value": 31.2, "unit": "g"},
            "Fat": {"value": 19.8, "unit": "g"},
            "Carbohydrates": {"value": 93.1, "unit": "g"},
            "Fiber": {"value": 13.6, "unit": "g"},
            "Sodium": {"value": 142, "unit": "mg"},
        },
    }


@pytest.fixture
def mock_calculate(mock_httpx):
    """Route for the natural-language calculate endpoint."""
    return mock_httpx.post(CALCULATE_URL)
