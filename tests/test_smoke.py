"""Smoke tests to verify basic project setup."""

from pathlib import Path


def test_fixtures_dir_exists():
    assert (Path(__file__).parent / "fixtures").is_dir()


def test_sample_fixture_loads(sample_airports):
    assert len(sample_airports) == 22
    assert sample_airports[0].iata == "JFK"


def test_charter_importable():
    import charter

    assert charter.__version__


def test_bundled_dataset_loads():
    from charter.airports import AirportIndex

    index = AirportIndex.from_file()
    assert len(index) >= 30
    assert index.get("CDG") is not None
