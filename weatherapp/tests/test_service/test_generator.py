"""Tests for forecast generation."""

import random
from datetime import date, timedelta

import pytest

from weatherapp.config.defaults import MAX_TEMPERATURE_C, MIN_TEMPERATURE_C, SUMMARIES
from weatherapp.service.generator import generate_forecast


class TestGenerateForecast:
    def test_default_length(self):
        assert len(generate_forecast()) == 5

    def test_custom_length(self):
        assert len(generate_forecast(14)) == 14

    def test_starts_today(self):
        entries = generate_forecast()
        assert entries[0].date == date.today()

    def test_dates_ascending_without_gaps(self):
        start = date(2026, 12, 29)
        entries = generate_forecast(7, start=start)
        assert [e.date for e in entries] == [start + timedelta(days=i) for i in range(7)]

    def test_values_within_bounds(self):
        rng = random.Random(1234)
        for _ in range(50):
            for e in generate_forecast(rng=rng):
                assert MIN_TEMPERATURE_C <= e.temperature_c <= MAX_TEMPERATURE_C
                assert e.summary in SUMMARIES
                assert e.temperature_f == round(32 + e.temperature_c / 0.5556)

    def test_seeded_rng_is_reproducible(self):
        start = date(2026, 10, 19)
        a = generate_forecast(start=start, rng=random.Random(7))
        b = generate_forecast(start=start, rng=random.Random(7))
        assert a == b

    def test_custom_range_and_labels(self):
        entries = generate_forecast(
            10, min_temp_c=12, max_temp_c=12, summaries=["Only"]
        )
        assert all(e.temperature_c == 12 and e.summary == "Only" for e in entries)

    def test_invalid_days(self):
        with pytest.raises(ValueError):
            generate_forecast(0)

    def test_invalid_range(self):
        with pytest.raises(ValueError):
            generate_forecast(min_temp_c=10, max_temp_c=0)

    def test_empty_summaries(self):
        with pytest.raises(ValueError):
            generate_forecast(summaries=[])
