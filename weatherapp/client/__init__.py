"""Forecast Client: upstream fetch, rendering and HTTP interface."""
