"""Nutrition Tracker API - Python client for natural-language nutrient lookups."""

__version__ = "1.0.0"

from .api import (
    ApiError,
    ConfigurationError,
    InvalidArgumentError,
    NutritionAPI,
    NutritionAPIError,
    TransportError,
)
from .nutrients import NutrientReading, NutritionResult

__all__ = [
    "NutritionAPI",
    "NutritionAPIError",
    "ConfigurationError",
    "InvalidArgumentError",
    "ApiError",
    "TransportError",
    "NutrientReading",
    "NutritionResult",
]
