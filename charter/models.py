"""Domain models for the charter quote engine.

Pydantic models for airport records, aircraft reference data, route
selections, quote requests and itemized quote results.
"""

from datetime import date as Date
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator


# --- Enums ---


class AircraftClass(str, Enum):
    """Charter aircraft categories."""

    TURBOPROP = "Turboprop"
    VLJ = "VLJ"  # Very light jet
    LIGHT = "Light"
    MIDSIZE = "Midsize"
    SUPER_MIDSIZE = "SuperMidsize"
    LARGE = "Large"
    ULTRA = "Ultra"  # Ultra long range
    VIP = "VIP"  # VIP airliner


# --- Reference Data Models ---


class AirportRecord(BaseModel):
    """A single airport from the static dataset."""

    name: str = Field(min_length=1)
    city: str = Field(min_length=1)
    iata: str = Field(alias="IATA", min_length=3, max_length=3, description="3-letter IATA code")
    icao: str = Field(min_length=4, max_length=4, description="4-letter ICAO code")
    lat: float = Field(ge=-90, le=90)
    lon: float = Field(ge=-180, le=180)

    model_config = {"populate_by_name": True, "frozen": True}

    @field_validator("name", "city", mode="before")
    @classmethod
    def strip_text(cls, v: str) -> str:
        return v.strip() if isinstance(v, str) else v

    @field_validator("iata", "icao", mode="before")
    @classmethod
    def uppercase_codes(cls, v: str) -> str:
        return v.strip().upper() if isinstance(v, str) else v

    @property
    def label(self) -> str:
        """Suggestion list label, e.g. "JFK - John F. Kennedy International, New York"."""
        return f"{self.iata} - {self.name}, {self.city}"

    @property
    def display_text(self) -> str:
        """Input field text once the airport is picked, e.g. "New York (JFK)"."""
        return f"{self.city} ({self.iata})"


class AircraftSpec(BaseModel):
    """Rate table entry for one aircraft class."""

    aircraft: AircraftClass
    label: str = ""
    hourly_rate: float = Field(gt=0, description="Charter rate in USD per flight hour")
    cruise_speed_kmh: float = Field(gt=0)
    max_passengers: int = Field(ge=1)

    model_config = {"frozen": True}

    @property
    def display_name(self) -> str:
        return self.label or self.aircraft.value


# --- Quote Models ---


class RouteSelection(BaseModel):
    """Coordinates of an accepted airport suggestion.

    Either the whole selection exists or the field holds None; there is
    no partially set selection.
    """

    lat: float = Field(ge=-90, le=90)
    lon: float = Field(ge=-180, le=180)
    label: str = ""
    iata: Optional[str] = None

    model_config = {"frozen": True}

    @classmethod
    def from_airport(cls, airport: AirportRecord) -> "RouteSelection":
        return cls(
            lat=airport.lat,
            lon=airport.lon,
            label=airport.display_text,
            iata=airport.iata,
        )


class QuoteRequest(BaseModel):
    """Inputs collected from the quote form."""

    origin: Optional[RouteSelection] = None
    destination: Optional[RouteSelection] = None
    aircraft: AircraftClass = AircraftClass.MIDSIZE
    passengers: int = Field(ge=1, default=1)
    travel_date: Optional[Date] = None

    @property
    def is_complete(self) -> bool:
        """Both airports and a date are present."""
        return (
            self.origin is not None
            and self.destination is not None
            and self.travel_date is not None
        )


class QuoteResult(BaseModel):
    """Itemized charter price estimate. All money in whole USD."""

    route: str
    aircraft: AircraftClass
    aircraft_label: str
    passengers: int
    travel_date: Date
    distance_km: float
    flight_time_hours: float  # includes taxi allowance
    base_charter: int
    landing_fee: int
    overnight_fee: int
    passenger_fee: int
    tax: int
    total: int

    @property
    def subtotal(self) -> int:
        """Sum of the pre-tax line items."""
        return self.base_charter + self.landing_fee + self.overnight_fee + self.passenger_fee

    @property
    def has_overnight(self) -> bool:
        return self.overnight_fee > 0
