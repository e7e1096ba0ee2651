"""Nutrition Tracker API client for natural-language nutrient lookups."""

import logging

import httpx

from .config import (
    API_BASE_URL,
    API_HOST,
    API_KEY_URL,
    CALCULATE_PATH,
    DEFAULT_TIMEOUT,
    get_api_key,
)
from .nutrients import (
    NutritionResult,
    decode_body,
    encode_request_body,
    extract_json_value,
    is_success,
    parse_total_nutrients,
)

logger = logging.getLogger(__name__)


class NutritionAPIError(Exception):
    """Base exception for all Nutrition Tracker API client errors."""

    pass


class ConfigurationError(NutritionAPIError, ValueError):
    """Raised when the client is created without a usable API key."""

    pass


class InvalidArgumentError(NutritionAPIError, ValueError):
    """Raised when a request argument is missing or blank."""

    pass


class ApiError(NutritionAPIError):
    """
    Exception raised when the API reports a failure.

    ``status_code`` is the HTTP status for non-200 responses, and None when the
    failure was detected from the body of a 200 response.
    """

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    def __str__(self) -> str:
        if self.status_code is not None:
            return f"{self.message} (status {self.status_code})"
        return self.message


class TransportError(NutritionAPIError):
    """Exception raised when the request never got a response (network, timeout)."""

    pass


class NutritionAPI:
    """
    Client for the Nutrition Tracker API on RapidAPI.

    Usage:
        api = NutritionAPI("YOUR_RAPIDAPI_KEY")
        result = api.calculate("100g chicken breast")
        print(result["Protein"])
    """

    def __init__(self, api_key: str | None):
        """
        Initialize the client.

        Args:
            api_key: Your RapidAPI key

        Raises:
            ConfigurationError: If the key is missing or blank
        """
        if not isinstance(api_key, str) or not api_key.strip():
            raise ConfigurationError(f"API key is required. Get yours at: {API_KEY_URL}")

        self._api_key = api_key
        self.client = httpx.Client(
            base_url=API_BASE_URL,
            timeout=httpx.Timeout(DEFAULT_TIMEOUT),
            headers={
                "Content-Type": "application/json",
                "X-RapidAPI-Key": api_key,
                "X-RapidAPI-Host": API_HOST,
            },
        )

    @classmethod
    def from_env(cls) -> "NutritionAPI":
        """Create a client using the key from NUTRITION_API_KEY or RAPIDAPI_KEY."""
        return cls(get_api_key())

    @property
    def api_key(self) -> str:
        return self._api_key

    def calculate(self, text: str) -> NutritionResult:
        """
        Calculate nutrition for a food description.

        Args:
            text: Natural language food description, e.g. "100g chicken breast"
                  or "2 eggs and 1 cup rice"

        Returns:
            Dict of nutrient name to NutrientReading (empty if the API
            returned no nutrients)

        Raises:
            InvalidArgumentError: If text is empty
            ApiError: If the API returns an error
            TransportError: If the request fails before a response arrives
        """
        if not isinstance(text, str) or not text.strip():
            raise InvalidArgumentError("Food description text is required")

        query = text.strip()
        logger.debug("POST %s for %r", CALCULATE_PATH, query)

        try:
            response = self.client.post(
                CALCULATE_PATH,
                content=encode_request_body(query),
                timeout=DEFAULT_TIMEOUT,
            )
        except httpx.HTTPError as e:
            raise TransportError(f"Request failed: {e}") from e

        body = response.text
        logger.debug("Response %d from %s", response.status_code, CALCULATE_PATH)

        if response.status_code != 200:
            message = extract_json_value(body, "error") or "Unknown error occurred"
            raise ApiError(message, status_code=response.status_code)

        payload = decode_body(body)
        if not is_success(payload):
            message = extract_json_value(body, "error") or "Request failed"
            raise ApiError(message)

        return parse_total_nutrients(payload)

    def close(self) -> None:
        """Close the underlying HTTP connection pool."""
        self.client.close()

    def __enter__(self) -> "NutritionAPI":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
