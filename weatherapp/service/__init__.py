"""Forecast Service: generation and HTTP interface."""
