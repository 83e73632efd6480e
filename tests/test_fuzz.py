"""Property-based tests using Hypothesis.

Random coordinates, queries and quote inputs check the invariants that
must hold for any input: distance symmetry, search bounds and
containment, and quote determinism and arithmetic.
"""

from datetime import date

import hypothesis.strategies as st
import pytest
from hypothesis import HealthCheck, given, settings

from charter.airports import search
from charter.distance import DistanceCalculator
from charter.errors import ValidationError
from charter.form import QuoteForm
from charter.models import AircraftClass, QuoteRequest, RouteSelection
from charter.quote import QuoteEngine, round_half_up
from charter.rates import get_rate_table

_calc = DistanceCalculator()
_engine = QuoteEngine()

# ---------------------------------------------------------------------------
# Custom Hypothesis strategies
# ---------------------------------------------------------------------------

latitudes = st.floats(min_value=-90, max_value=90, allow_nan=False)
longitudes = st.floats(min_value=-180, max_value=180, allow_nan=False)


@st.composite
def selections(draw):
    return RouteSelection(lat=draw(latitudes), lon=draw(longitudes))


@st.composite
def queries(draw):
    """Mostly fragments of real airport text, sometimes random noise."""
    fragment = draw(
        st.sampled_from(["par", "PAR", " paris ", "air", "lf", "k", "ny", "on", "x", "", "Kennedy"])
    )
    noise = draw(st.text(alphabet="abcdefghijklmnopqrstuvwxyz ", max_size=4))
    return draw(st.sampled_from([fragment, noise, fragment + noise]))


# ---------------------------------------------------------------------------
# Distance
# ---------------------------------------------------------------------------


@given(latitudes, longitudes, latitudes, longitudes)
def test_distance_symmetric(lat1, lon1, lat2, lon2):
    assert _calc.km(lat1, lon1, lat2, lon2) == _calc.km(lat2, lon2, lat1, lon1)


@given(latitudes, longitudes)
def test_distance_zero_to_self(lat, lon):
    assert _calc.km(lat, lon, lat, lon) == 0.0


@given(latitudes, longitudes, latitudes, longitudes)
def test_distance_bounded(lat1, lon1, lat2, lon2):
    d = _calc.km(lat1, lon1, lat2, lon2)
    assert 0.0 <= d <= 20015.1  # half the circumference of a 6371 km sphere


# ---------------------------------------------------------------------------
# Search
# ---------------------------------------------------------------------------


@settings(suppress_health_check=[HealthCheck.function_scoped_fixture])
@given(query=queries(), limit=st.integers(min_value=0, max_value=10))
def test_search_bounds(sample_airports, query, limit):
    results = search(query, sample_airports, limit)
    assert len(results) <= limit

    needle = query.strip().lower()
    if len(needle) < 2:
        assert results == []

    for r in results:
        assert (
            needle in r.city.lower()
            or needle in r.icao.lower()
            or needle in r.name.lower()
            or needle in r.iata.lower()
        )

    order = [sample_airports.index(r) for r in results]
    assert order == sorted(order)


# ---------------------------------------------------------------------------
# Quote
# ---------------------------------------------------------------------------


@settings(max_examples=200)
@given(
    origin=selections(),
    destination=selections(),
    aircraft=st.sampled_from(list(AircraftClass)),
    passengers=st.integers(min_value=1, max_value=100),
)
def test_quote_invariants(origin, destination, aircraft, passengers):
    request = QuoteRequest(
        origin=origin,
        destination=destination,
        aircraft=aircraft,
        passengers=passengers,
        travel_date=date(2030, 1, 1),
    )
    result = _engine.compute_quote(request)

    assert result == _engine.compute_quote(request)
    assert result.flight_time_hours >= 0.5
    assert result.overnight_fee == (1500 if result.flight_time_hours > 3 else 0)
    assert result.passenger_fee == passengers * 5
    assert result.tax == round_half_up(result.subtotal * 0.075)
    assert result.total == result.subtotal + result.tax


@given(
    origin=st.one_of(st.none(), selections()),
    destination=st.one_of(st.none(), selections()),
    travel_date=st.one_of(st.none(), st.just(date(2030, 1, 1))),
)
def test_incomplete_request_never_priced(origin, destination, travel_date):
    request = QuoteRequest(origin=origin, destination=destination, travel_date=travel_date)
    if request.is_complete:
        return
    with pytest.raises(ValidationError):
        _engine.compute_quote(request)


@settings(suppress_health_check=[HealthCheck.function_scoped_fixture])
@given(
    passengers=st.integers(min_value=1, max_value=150),
    aircraft=st.sampled_from(list(AircraftClass)),
)
def test_passenger_clamp(index, passengers, aircraft):
    form = QuoteForm(index, passengers=passengers, today=date(2030, 1, 1))
    form.set_aircraft(aircraft)
    cap = get_rate_table().max_passengers(aircraft)
    assert form.max_passengers == cap
    assert form.passengers <= cap
    assert form.passengers == min(passengers, 9, cap)  # starts on Midsize (9 seats)
