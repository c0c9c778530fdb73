"""Forecast data models."""
