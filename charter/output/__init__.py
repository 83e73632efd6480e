"""Renderers for airport suggestions, itemized quotes and the aircraft rate table.

The CLI picks one per invocation: "rich" for a terminal, "plain" when
output is piped or colour is unwanted, "json" for scripting. Every quote
rendering carries the estimate disclaimer.
"""

from __future__ import annotations

import importlib
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from charter.models import AircraftSpec, AirportRecord, QuoteResult

DISCLAIMER = "This is a tailored estimate; final pricing subject to operator confirmation."


def money(amount: float) -> str:
    """Format whole dollars with thousands separators, e.g. $44,520."""
    return f"${amount:,.0f}"


class Formatter(Protocol):
    """Renders charter search and pricing results as a string for the console."""

    def format_suggestions(self, query: str, records: list[AirportRecord]) -> str:
        """Numbered airport suggestions for a typed query."""
        ...

    def format_quote(self, result: QuoteResult) -> str:
        """Itemized charter quote with total and disclaimer."""
        ...

    def format_aircraft(self, specs: list[AircraftSpec]) -> str:
        """Aircraft classes with hourly rate, cruise speed and seat cap."""
        ...


_FORMATTERS: dict[str, tuple[str, str]] = {
    "rich": ("charter.output.rich_formatter", "RichFormatter"),
    "plain": ("charter.output.plain_formatter", "PlainFormatter"),
    "json": ("charter.output.json_formatter", "JsonFormatter"),
}


def get_formatter(name: str = "rich") -> Formatter:
    """Return the quote renderer registered under ``name``.

    The renderer module is imported on first use.

    Raises:
        ValueError: If no renderer is registered under ``name``.
    """
    try:
        module_name, class_name = _FORMATTERS[name]
    except KeyError:
        choices = ", ".join(sorted(_FORMATTERS))
        raise ValueError(
            f"Unknown formatter {name!r} for charter output; choose one of: {choices}"
        )
    return getattr(importlib.import_module(module_name), class_name)()
