"""JSON output formatter -- valid JSON suitable for piping to jq."""

from __future__ import annotations

import json

from charter.models import AircraftSpec, AirportRecord, QuoteResult


class JsonFormatter:
    """Format results as pretty-printed JSON."""

    def format_suggestions(self, query: str, records: list[AirportRecord]) -> str:
        """Format suggestions as JSON, keeping the dataset's field names."""
        data = {
            "type": "airport_suggestions",
            "query": query,
            "count": len(records),
            "results": [
                {**r.model_dump(mode="json", by_alias=True), "label": r.label} for r in records
            ],
        }
        return json.dumps(data, indent=2)

    def format_quote(self, result: QuoteResult) -> str:
        """Format a quote as JSON."""
        data = {
            "type": "charter_quote",
            **result.model_dump(mode="json"),
            "subtotal": result.subtotal,
        }
        return json.dumps(data, indent=2)

    def format_aircraft(self, specs: list[AircraftSpec]) -> str:
        """Format the rate table as JSON."""
        data = {
            "type": "aircraft_rates",
            "aircraft": [s.model_dump(mode="json") for s in specs],
        }
        return json.dumps(data, indent=2)
