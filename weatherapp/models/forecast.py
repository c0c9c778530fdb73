"""Forecast data models and their JSON wire form."""

import json
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any

from weatherapp.config.defaults import MAX_TEMPERATURE_C, MIN_TEMPERATURE_C

FAHRENHEIT_DIVISOR = 0.5556


def celsius_to_fahrenheit(temperature_c: int) -> int:
    return round(32 + temperature_c / FAHRENHEIT_DIVISOR)


@dataclass(frozen=True)
class ForecastEntry:
    date: date
    temperature_c: int
    summary: str

    @property
    def temperature_f(self) -> int:
        return celsius_to_fahrenheit(self.temperature_c)

    def to_dict(self) -> dict[str, Any]:
        return {
            "date": self.date.isoformat(),
            "temperatureC": self.temperature_c,
            "temperatureF": self.temperature_f,
            "summary": self.summary,
        }

    @classmethod
    def from_dict(cls, data: Any) -> "ForecastEntry":
        """Parse one wire-form object. Raises ValueError on any schema mismatch.

        temperatureF is type-checked but not trusted; it is always recomputed.
        """
        if not isinstance(data, dict):
            raise ValueError(f"Forecast entry must be an object, got {type(data).__name__}")

        missing = [k for k in ("date", "temperatureC", "summary") if k not in data]
        if missing:
            raise ValueError(f"Forecast entry missing keys: {', '.join(missing)}")

        raw_date = data["date"]
        if not isinstance(raw_date, str):
            raise ValueError(f"date must be a string, got {raw_date!r}")
        try:
            # Accept full timestamps ("2026-10-19T00:00:00") as well as plain dates
            if "T" in raw_date:
                parsed_date = datetime.fromisoformat(raw_date).date()
            else:
                parsed_date = date.fromisoformat(raw_date)
        except ValueError as e:
            raise ValueError(f"Invalid date: {raw_date!r}") from e

        temp_c = data["temperatureC"]
        if not _is_int(temp_c):
            raise ValueError(f"temperatureC must be an integer, got {temp_c!r}")
        if not MIN_TEMPERATURE_C <= temp_c <= MAX_TEMPERATURE_C:
            raise ValueError(
                f"temperatureC out of range {MIN_TEMPERATURE_C}..{MAX_TEMPERATURE_C}: "
                f"{str(temp_c)[:20]}"
            )

        temp_f = data.get("temperatureF")
        if temp_f is not None and not _is_int(temp_f):
            raise ValueError(f"temperatureF must be an integer, got {temp_f!r}")

        summary = data["summary"]
        if not isinstance(summary, str) or not summary:
            raise ValueError(f"summary must be a non-empty string, got {summary!r}")

        return cls(date=parsed_date, temperature_c=temp_c, summary=summary)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def forecast_to_json(entries: list[ForecastEntry]) -> str:
    return json.dumps([e.to_dict() for e in entries])


def forecast_from_json(text: str) -> list[ForecastEntry]:
    """Deserialize a JSON array of forecast entries."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValueError(f"Forecast payload is not valid JSON: {e}") from e
    return forecast_from_list(data)


def forecast_from_list(data: Any) -> list[ForecastEntry]:
    if not isinstance(data, list):
        raise ValueError(f"Forecast payload must be an array, got {type(data).__name__}")
    return [ForecastEntry.from_dict(item) for item in data]
