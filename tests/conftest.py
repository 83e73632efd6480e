"""Shared test fixtures for the charter quote engine."""

import pytest
from pathlib import Path

from charter.airports import AirportIndex, load_airports
from charter.quote import QuoteEngine
from charter.rates import RateTable

FIXTURES_DIR = Path(__file__).parent / "fixtures"
SAMPLE_AIRPORTS = FIXTURES_DIR / "airports_sample.json"


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep tests away from the real ~/.charter/config.yaml and env overrides."""
    monkeypatch.setattr("charter.config._DEFAULT_CONFIG_PATH", tmp_path / "config.yaml")
    monkeypatch.delenv("CHARTER_AIRPORTS", raising=False)
    monkeypatch.delenv("CHARTER_SUGGESTION_LIMIT", raising=False)
    return tmp_path / "config.yaml"


@pytest.fixture
def sample_airports():
    """22 airports: Paris CDG (5th), Paris ORY (13th) and 20 others."""
    return load_airports(SAMPLE_AIRPORTS)


@pytest.fixture
def index(sample_airports):
    return AirportIndex(sample_airports)


@pytest.fixture
def airport(index):
    """Return a function that fetches a sample airport by IATA code."""

    def _get(code: str):
        record = index.get(code)
        assert record is not None, f"{code} missing from sample fixture"
        return record

    return _get


@pytest.fixture
def rate_table():
    return RateTable()


@pytest.fixture
def engine(rate_table):
    return QuoteEngine(rate_table)


@pytest.fixture
def write_rates(tmp_path):
    """Return a function that writes a rate table YAML and returns its path."""

    def _write(text: str) -> Path:
        path = tmp_path / "aircraft.yaml"
        path.write_text(text, encoding="utf-8")
        return path

    return _write
