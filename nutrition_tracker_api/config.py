"""Configuration for the Nutrition Tracker API client."""

import os

from dotenv import find_dotenv, load_dotenv

# Load environment variables from a .env file in (or above) the working directory
load_dotenv(find_dotenv(usecwd=True))

# API Configuration
API_HOST = "nutrition-tracker-api.p.rapidapi.com"
API_BASE_URL = f"https://{API_HOST}"
CALCULATE_PATH = "/v1/calculate/natural"

# Seconds, applied separately to each phase (connect, read, write, pool),
# not as a cap on the total request duration
DEFAULT_TIMEOUT = 30.0

API_KEY_URL = "https://rapidapi.com/anonymous617461746174/api/nutrition-tracker-api"

# Checked in order, first non-blank value wins
API_KEY_ENV_VARS = ("NUTRITION_API_KEY", "RAPIDAPI_KEY")


def get_api_key() -> str | None:
    """Get the RapidAPI key from the environment (or a .env file)."""
    for name in API_KEY_ENV_VARS:
        value = os.getenv(name)
        if value and value.strip():
            return value.strip()
    return None
