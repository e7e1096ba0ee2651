"""Nutrient readings and decoding of Nutrition Tracker API responses."""

import json
import logging
import re
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)

# Control characters without a short escape in JSON strings
_CONTROL_CHARS = re.compile(r"[\x00-\x1f]")


@dataclass(frozen=True)
class NutrientReading:
    """A single named nutritional measurement."""

    name: str
    value: float
    unit: str  # e.g. "g", "mg", "kcal"

    def __str__(self) -> str:
        return f"{self.value} {self.unit}"

    def to_dict(self) -> dict[str, Any]:
        return {"value": self.value, "unit": self.unit}


# Nutrient name -> reading, built fresh for every request
NutritionResult = dict[str, NutrientReading]


def escape_json(text: str) -> str:
    """
    Escape text for embedding inside a JSON string literal.

    Backslashes are escaped first so the backslashes introduced by the
    later substitutions are left alone.
    """
    escaped = (
        text.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\r", "\\r")
        .replace("\t", "\\t")
    )
    return _CONTROL_CHARS.sub(lambda m: f"\\u{ord(m.group(0)):04x}", escaped)


def encode_request_body(text: str) -> bytes:
    """Build the JSON body for a natural-language calculate request."""
    return f'{{"text": "{escape_json(text)}"}}'.encode()


def decode_body(body: str) -> dict[str, Any] | None:
    """Parse a response body, returning None unless it is a JSON object."""
    try:
        data = json.loads(body)
    except (json.JSONDecodeError, TypeError):
        return None
    return data if isinstance(data, dict) else None


def extract_json_value(body: str, key: str) -> str | None:
    """
    Extract a string field from a JSON-like response body.

    Args:
        body: Raw response text
        key: Field name to look up

    Returns:
        The first non-empty string stored under ``key``, or None if there is none.
        Bodies that are not valid JSON (e.g. truncated by a proxy) are scanned
        for a ``"key": "value"`` pair instead.
    """
    data = decode_body(body)
    if data is not None:
        value = data.get(key)
        return value if isinstance(value, str) and value else None

    if not body:
        return None
    match = re.search(rf'"{re.escape(key)}"\s*:\s*"([^"]+)"', body)
    return match.group(1) if match else None


def is_success(payload: dict[str, Any] | None) -> bool:
    """Check the body-level success flag; only a literal true counts."""
    return payload is not None and payload.get("success") is True


def _parse_reading(name: str, entry: Any) -> NutrientReading | None:
    if not isinstance(entry, dict):
        return None
    value = entry.get("value")
    unit = entry.get("unit")
    # bool is a subclass of int but never a measurement
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if not isinstance(unit, str):
        return None
    return NutrientReading(name=name, value=float(value), unit=unit)


def parse_total_nutrients(payload: dict[str, Any] | None) -> NutritionResult:
    """
    Project the ``totalNutrients`` object of a response into readings.

    A missing or non-object section yields an empty result. Entries that are
    not ``{"value": <number>, "unit": <string>}`` objects are skipped.
    """
    nutrients: NutritionResult = {}
    if payload is None:
        return nutrients

    section = payload.get("totalNutrients")
    if not isinstance(section, dict):
        return nutrients

    for name, entry in section.items():
        reading = _parse_reading(name, entry)
        if reading is None:
            logger.debug("Skipping malformed nutrient entry %r: %r", name, entry)
            continue
        nutrients[name] = reading

    return nutrients
