"""Rich-based output formatter with colored tables and panels."""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from charter.models import AircraftSpec, AirportRecord, QuoteResult
from charter.output import DISCLAIMER, money

_ACCENT = "#c9b037"


def _render(renderable) -> str:
    """Render a Rich object to a string."""
    buf = StringIO()
    console = Console(file=buf, force_terminal=True, width=120)
    console.print(renderable)
    return buf.getvalue()


class RichFormatter:
    """Format results using Rich tables and panels."""

    def format_suggestions(self, query: str, records: list[AirportRecord]) -> str:
        """Format suggestions as a numbered table."""
        if not records:
            return _render(Text(f"No airports match {query.strip()!r}.", style="yellow"))

        table = Table(title=f"Airports matching {query.strip()!r}")
        table.add_column("#", style="dim", justify="right")
        table.add_column("IATA", style=f"bold {_ACCENT}")
        table.add_column("ICAO", style="dim")
        table.add_column("Name")
        table.add_column("City", style="cyan")

        for i, r in enumerate(records, start=1):
            table.add_row(str(i), r.iata, r.icao, r.name, r.city)

        return _render(table)

    def format_quote(self, result: QuoteResult) -> str:
        """Format a quote as a panel with itemized line items."""
        body = Text()
        for label, value in (
            ("Route", result.route),
            ("Aircraft", result.aircraft_label),
            ("Date", str(result.travel_date)),
            ("Passengers", str(result.passengers)),
            ("Distance", f"{result.distance_km:,.0f} km"),
            ("Flight Time", f"{result.flight_time_hours:.1f} hrs (inc. taxi)"),
        ):
            body.append(f"{label}: ", style=_ACCENT)
            body.append(value + "\n")

        table = Table(show_header=False, box=None, padding=(0, 1))
        table.add_column("Item")
        table.add_column("Amount", justify="right")
        table.add_row("Base Charter", money(result.base_charter))
        table.add_row("Landing & Handling", money(result.landing_fee))
        overnight_style = "" if result.has_overnight else "dim"
        table.add_row(
            Text("Crew Overnight", style=overnight_style),
            Text(money(result.overnight_fee), style=overnight_style),
        )
        table.add_row("Passenger Fees", money(result.passenger_fee))
        table.add_row("Taxes & FET", money(result.tax))
        table.add_row(
            Text("Total Investment", style=f"bold {_ACCENT}"),
            Text(money(result.total), style=f"bold {_ACCENT}"),
        )

        parts = [
            _render(Panel(body, title="Estimated Charter Investment", border_style=_ACCENT)),
            _render(table),
            _render(Text(DISCLAIMER, style="dim italic")),
        ]
        return "\n".join(parts)

    def format_aircraft(self, specs: list[AircraftSpec]) -> str:
        """Format the rate table."""
        table = Table(title="Aircraft Rates", show_lines=True)
        table.add_column("Class", style="cyan")
        table.add_column("Label")
        table.add_column("Rate/h", justify="right")
        table.add_column("Speed (km/h)", justify="right")
        table.add_column("Max Pax", justify="right")

        for s in specs:
            table.add_row(
                s.aircraft.value,
                s.display_name,
                money(s.hourly_rate),
                f"{s.cruise_speed_kmh:,.0f}",
                str(s.max_passengers),
            )

        return _render(table)
