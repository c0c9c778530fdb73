"""Pure rendering functions: forecast entries -> HTML pages, text, JSON.

No side effects, no I/O beyond loading templates.
"""

import json
from pathlib import Path
from typing import Any

import jinja2

from weatherapp.client.errors import ForecastFetchError
from weatherapp.models.forecast import ForecastEntry

_TEMPLATE_DIR = Path(__file__).resolve().parent / "templates"
_jinja_env = jinja2.Environment(
    loader=jinja2.FileSystemLoader(str(_TEMPLATE_DIR)),
    autoescape=True,
)

UNAVAILABLE_TITLE = "Forecast unavailable"


def render_template(template_name: str, **kwargs: Any) -> str:
    """Render a Jinja2 template by name."""
    return _jinja_env.get_template(template_name).render(**kwargs)


def render_forecast_page(entries: list[ForecastEntry], *, service_url: str = "") -> str:
    rows = [
        {
            "date": e.date.strftime("%a %d %b %Y"),
            "iso_date": e.date.isoformat(),
            "temperature_c": e.temperature_c,
            "temperature_f": e.temperature_f,
            "summary": e.summary,
        }
        for e in entries
    ]
    return render_template("forecast.html.j2", rows=rows, service_url=service_url)


def render_error_page(
    error: ForecastFetchError, *, service_url: str = "", show_detail: bool = False
) -> str:
    """Explicit unavailable state; the underlying cause only in development."""
    return render_template(
        "unavailable.html.j2",
        title=UNAVAILABLE_TITLE,
        kind=error.kind,
        detail=str(error) if show_detail else "",
        service_url=service_url,
    )


def format_forecast_text(entries: list[ForecastEntry]) -> str:
    """Plain text table for the terminal."""
    lines = [f"{'Date':<12}{'Temp. (C)':>10}{'Temp. (F)':>10}  Summary"]
    for e in entries:
        lines.append(
            f"{e.date.isoformat():<12}{e.temperature_c:>10}{e.temperature_f:>10}  {e.summary}"
        )
    return "\n".join(lines)


def format_forecast_json(entries: list[ForecastEntry]) -> str:
    return json.dumps([e.to_dict() for e in entries], indent=2)
