"""Forecast generation: a fresh, randomized sequence of daily entries per call."""

import random
from collections.abc import Sequence
from datetime import date, timedelta

from weatherapp.config.defaults import (
    DEFAULT_FORECAST_DAYS,
    MAX_TEMPERATURE_C,
    MIN_TEMPERATURE_C,
    SUMMARIES,
)
from weatherapp.models.forecast import ForecastEntry


def generate_forecast(
    days: int = DEFAULT_FORECAST_DAYS,
    *,
    start: date | None = None,
    rng: random.Random | None = None,
    summaries: Sequence[str] = SUMMARIES,
    min_temp_c: int = MIN_TEMPERATURE_C,
    max_temp_c: int = MAX_TEMPERATURE_C,
) -> list[ForecastEntry]:
    """Generate `days` consecutive daily entries starting at `start` (default today).

    Each call uses its own random source unless one is passed in, so
    concurrent requests share no state.
    """
    if days < 1:
        raise ValueError(f"days must be >= 1, got {days}")
    if min_temp_c > max_temp_c:
        raise ValueError(f"Empty temperature range: {min_temp_c}..{max_temp_c}")
    if not summaries:
        raise ValueError("summaries must not be empty")

    if start is None:
        start = date.today()
    if rng is None:
        rng = random.Random()

    return [
        ForecastEntry(
            date=start + timedelta(days=offset),
            temperature_c=rng.randint(min_temp_c, max_temp_c),
            summary=rng.choice(summaries),
        )
        for offset in range(days)
    ]
