"""Quote form: the input fields a quote is collected from.

Holds an origin and destination autocomplete session plus the aircraft,
passenger and date inputs, and applies the form-level rules:

- the passenger maximum follows the selected aircraft's seat cap, and a
  larger value already entered is clamped down (on change and at start)
- the travel date may not be earlier than today
"""

import logging
from datetime import date as Date
from typing import Optional, Union

from charter.airports import DEFAULT_LIMIT, AirportIndex
from charter.errors import ValidationError
from charter.models import AircraftClass, QuoteRequest, QuoteResult
from charter.quote import QuoteEngine
from charter.rates import RateTable, get_rate_table
from charter.session import SearchSession

logger = logging.getLogger(__name__)


class QuoteForm:
    """Collects a QuoteRequest field by field."""

    def __init__(
        self,
        index: AirportIndex,
        rate_table: Optional[RateTable] = None,
        aircraft: Union[AircraftClass, str] = AircraftClass.MIDSIZE,
        passengers: int = 1,
        today: Optional[Date] = None,
        suggestion_limit: int = DEFAULT_LIMIT,
    ) -> None:
        self._rates = rate_table or get_rate_table()
        self.origin = SearchSession(index, suggestion_limit, name="from")
        self.destination = SearchSession(index, suggestion_limit, name="to")
        self.min_date = today or Date.today()
        self.travel_date: Optional[Date] = None
        self.aircraft = self._parse_aircraft(aircraft)
        self.passengers = 1
        self.max_passengers = 0
        self.set_passengers(passengers)
        self._update_pax_limit()

    @staticmethod
    def _parse_aircraft(aircraft: Union[AircraftClass, str]) -> AircraftClass:
        try:
            return AircraftClass(aircraft)
        except ValueError:
            valid = ", ".join(a.value for a in AircraftClass)
            raise ValidationError(f"Invalid aircraft class: {aircraft}. Valid: {valid}")

    def _update_pax_limit(self) -> None:
        self.max_passengers = self._rates.max_passengers(self.aircraft)
        if self.passengers > self.max_passengers:
            logger.info(
                "Passengers clamped from %d to %d for %s",
                self.passengers,
                self.max_passengers,
                self.aircraft.value,
            )
            self.passengers = self.max_passengers

    def set_aircraft(self, aircraft: Union[AircraftClass, str]) -> None:
        """Change the aircraft class and re-apply the passenger cap."""
        self.aircraft = self._parse_aircraft(aircraft)
        self._update_pax_limit()

    def set_passengers(self, passengers: int) -> None:
        if passengers < 1:
            raise ValidationError(f"Passenger count must be at least 1, got {passengers}")
        self.passengers = passengers

    def set_date(self, travel_date: Union[Date, str]) -> None:
        """Set the travel date; ISO strings (YYYY-MM-DD) are accepted."""
        if isinstance(travel_date, str):
            try:
                travel_date = Date.fromisoformat(travel_date.strip())
            except ValueError:
                raise ValidationError(f"Invalid date: {travel_date!r}. Use YYYY-MM-DD.")
        if travel_date < self.min_date:
            raise ValidationError(
                f"Travel date {travel_date} is in the past (earliest: {self.min_date})"
            )
        self.travel_date = travel_date

    def dismiss_outside(self) -> None:
        """A click landed outside both fields: close their suggestion lists."""
        self.origin.dismiss()
        self.destination.dismiss()

    def build_request(self) -> QuoteRequest:
        return QuoteRequest(
            origin=self.origin.selection,
            destination=self.destination.selection,
            aircraft=self.aircraft,
            passengers=self.passengers,
            travel_date=self.travel_date,
        )

    def get_quote(self, engine: Optional[QuoteEngine] = None) -> QuoteResult:
        """Run the quote engine on the current inputs.

        Raises:
            ValidationError: If an airport or the date has not been chosen.
        """
        engine = engine or QuoteEngine(self._rates)
        return engine.compute_quote(self.build_request())
