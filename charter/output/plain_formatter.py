"""Plain text output formatter -- no ANSI escapes."""

from __future__ import annotations

from charter.models import AircraftSpec, AirportRecord, QuoteResult
from charter.output import DISCLAIMER, money


def _header(title: str) -> str:
    """Create a plain text section header."""
    return f"\n{'=' * 60}\n  {title}\n{'=' * 60}\n"


class PlainFormatter:
    """Format results as plain text without ANSI escapes."""

    def format_suggestions(self, query: str, records: list[AirportRecord]) -> str:
        """Format a numbered suggestion list."""
        if not records:
            return f"  No airports match {query.strip()!r}."
        return "\n".join(f"  {i}. {r.label}" for i, r in enumerate(records, start=1))

    def format_quote(self, result: QuoteResult) -> str:
        """Format an itemized quote."""
        lines: list[str] = []
        lines.append(_header("Estimated Charter Investment"))
        lines.append(f"  Route:              {result.route}")
        lines.append(f"  Aircraft:           {result.aircraft_label}")
        lines.append(f"  Date:               {result.travel_date}")
        lines.append(f"  Passengers:         {result.passengers}")
        lines.append(f"  Distance:           {result.distance_km:,.0f} km")
        lines.append(f"  Flight Time:        {result.flight_time_hours:.1f} hrs (inc. taxi)")
        lines.append(f"  Base Charter:       {money(result.base_charter)}")
        lines.append(f"  Landing & Handling: {money(result.landing_fee)}")
        lines.append(f"  Crew Overnight:     {money(result.overnight_fee)}")
        lines.append(f"  Passenger Fees:     {money(result.passenger_fee)}")
        lines.append(f"  Taxes & FET:        {money(result.tax)}")
        lines.append(f"  Total Investment:   {money(result.total)}")
        lines.append("")
        lines.append(f"  {DISCLAIMER}")
        return "\n".join(lines)

    def format_aircraft(self, specs: list[AircraftSpec]) -> str:
        """Format the rate table."""
        lines: list[str] = []
        lines.append(_header("Aircraft Rates"))
        lines.append(f"  {'Class':<14} {'Label':<22} {'Rate/h':>10} {'Speed':>11} {'Max Pax':>8}")
        lines.append(f"  {'-' * 14} {'-' * 22} {'-' * 10} {'-' * 11} {'-' * 8}")
        for s in specs:
            lines.append(
                f"  {s.aircraft.value:<14} {s.display_name:<22} "
                f"{money(s.hourly_rate):>10} {s.cruise_speed_kmh:>6,.0f} km/h {s.max_passengers:>8}"
            )
        return "\n".join(lines)
