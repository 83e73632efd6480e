"""Charter quote engine.

Turns a QuoteRequest into an itemized QuoteResult:

- flight time: great-circle distance / cruise speed + 0.5 h taxi, to 0.1 h
- base charter: flight time x hourly rate
- landing & handling: flat fee
- crew overnight: flat fee when flight time exceeds 3 h
- passenger fees: per head
- tax: 7.5% of the rounded subtotal

Money is rounded half-up to whole dollars line by line, and tax is taken
on the already rounded subtotal.
"""

import logging
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from charter.distance import DistanceCalculator
from charter.errors import ValidationError
from charter.models import QuoteRequest, QuoteResult
from charter.rates import RateTable, get_rate_table

logger = logging.getLogger(__name__)

# Pricing policy constants
TAXI_HOURS = 0.5
LANDING_FEE = 1000
OVERNIGHT_FEE = 1500
OVERNIGHT_THRESHOLD_HOURS = 3
PASSENGER_FEE = 5  # per head
TAX_RATE = 0.075

MISSING_FIELDS_MESSAGE = "Please select both airports and a date."


def round_half_up(value: float) -> int:
    """Round to the nearest whole unit, halves away from zero."""
    return int(Decimal(value).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def round_tenths(value: float) -> float:
    """Round to one decimal place, halves away from zero."""
    return float(Decimal(value).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


class QuoteEngine:
    """Price charter flights from a rate table and great-circle distance."""

    def __init__(self, rate_table: Optional[RateTable] = None) -> None:
        self._rates = rate_table or get_rate_table()
        self._distance_calc = DistanceCalculator()

    @property
    def rate_table(self) -> RateTable:
        return self._rates

    def compute_quote(self, request: QuoteRequest) -> QuoteResult:
        """Compute an itemized quote.

        Raises:
            ValidationError: If either airport or the travel date is missing.
            ConfigurationError: If the aircraft class has no rate table entry.
        """
        if not request.is_complete:
            raise ValidationError(MISSING_FIELDS_MESSAGE)

        spec = self._rates.lookup(request.aircraft)
        origin = request.origin
        dest = request.destination

        dist = self._distance_calc.km(origin.lat, origin.lon, dest.lat, dest.lon)
        flight_time = round_tenths(dist / spec.cruise_speed_kmh + TAXI_HOURS)

        base = round_half_up(flight_time * spec.hourly_rate)
        landing = LANDING_FEE
        overnight = OVERNIGHT_FEE if flight_time > OVERNIGHT_THRESHOLD_HOURS else 0
        passenger_fee = request.passengers * PASSENGER_FEE
        subtotal = base + landing + overnight + passenger_fee
        tax = round_half_up(subtotal * TAX_RATE)

        logger.debug(
            "Quote %s -> %s on %s: %.1f km, %.1f h, subtotal %d, tax %d",
            origin.label or f"({origin.lat}, {origin.lon})",
            dest.label or f"({dest.lat}, {dest.lon})",
            spec.aircraft.value,
            dist,
            flight_time,
            subtotal,
            tax,
        )

        return QuoteResult(
            route=f"{origin.label} to {dest.label}",
            aircraft=spec.aircraft,
            aircraft_label=spec.display_name,
            passengers=request.passengers,
            travel_date=request.travel_date,
            distance_km=dist,
            flight_time_hours=flight_time,
            base_charter=base,
            landing_fee=landing,
            overnight_fee=overnight,
            passenger_fee=passenger_fee,
            tax=tax,
            total=subtotal + tax,
        )


def compute_quote(request: QuoteRequest, rate_table: Optional[RateTable] = None) -> QuoteResult:
    """Shortcut for QuoteEngine(rate_table).compute_quote(request)."""
    return QuoteEngine(rate_table).compute_quote(request)
