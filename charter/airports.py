"""Airport dataset loading and autocomplete search.

The dataset is a JSON list of objects with keys name, city, IATA, icao,
lat and lon. It is loaded once and never mutated; searches are a linear
scan returning the first matches in dataset order.
"""

import json
import logging
from pathlib import Path
from typing import Iterable, Optional, Sequence, Union

from pydantic import ValidationError as PydanticValidationError

from charter.errors import DataLoadError
from charter.models import AirportRecord

logger = logging.getLogger(__name__)

_DATA_DIR = Path(__file__).parent / "data"
DEFAULT_AIRPORTS_PATH = _DATA_DIR / "airports.json"

MIN_QUERY_LENGTH = 2
DEFAULT_LIMIT = 6


def matches(record: AirportRecord, needle: str) -> bool:
    """True if a lowercase needle is a substring of city, ICAO, name or IATA."""
    return (
        needle in record.city.lower()
        or needle in record.icao.lower()
        or needle in record.name.lower()
        or needle in record.iata.lower()
    )


def search(
    query: str,
    airports: Iterable[AirportRecord],
    limit: int = DEFAULT_LIMIT,
) -> list[AirportRecord]:
    """Return up to ``limit`` airports matching ``query``, in dataset order.

    The query is trimmed and lowercased. Queries shorter than two
    characters return an empty list so a single keystroke does not match
    half the dataset. Results are not ranked.
    """
    needle = (query or "").strip().lower()
    if len(needle) < MIN_QUERY_LENGTH or limit <= 0:
        return []

    results: list[AirportRecord] = []
    for record in airports:
        if matches(record, needle):
            results.append(record)
            if len(results) >= limit:
                break
    return results


def load_airports(path: Union[str, Path]) -> list[AirportRecord]:
    """Load and validate an airport dataset from a JSON file.

    Raises:
        DataLoadError: If the file is missing, unparsable, not a list, or
            contains an invalid record.
    """
    path = Path(path)
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as exc:
        raise DataLoadError(f"Cannot read airport dataset {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise DataLoadError(
            f"Invalid JSON in {path} at line {exc.lineno}, column {exc.colno}: {exc.msg}"
        ) from exc

    if not isinstance(raw, list):
        raise DataLoadError(f"Expected a JSON list in {path}, got {type(raw).__name__}")

    records: list[AirportRecord] = []
    for i, entry in enumerate(raw):
        try:
            records.append(AirportRecord.model_validate(entry))
        except PydanticValidationError as exc:
            fields = ", ".join(
                " -> ".join(str(x) for x in err["loc"]) for err in exc.errors()
            )
            raise DataLoadError(f"Invalid airport record #{i} in {path}: {fields}") from exc

    logger.debug("Loaded %d airports from %s", len(records), path)
    return records


class AirportIndex:
    """In-memory autocomplete index over a fixed list of airports."""

    def __init__(self, airports: Sequence[AirportRecord] = ()) -> None:
        self._airports: tuple[AirportRecord, ...] = tuple(airports)

    @classmethod
    def from_file(cls, path: Optional[Union[str, Path]] = None) -> "AirportIndex":
        """Build an index from a JSON dataset.

        A dataset that fails to load yields an empty index: search keeps
        working and simply finds nothing.
        """
        path = path or DEFAULT_AIRPORTS_PATH
        try:
            return cls(load_airports(path))
        except DataLoadError as exc:
            logger.error("Error loading airport data: %s", exc)
            return cls()

    def search(self, query: str, limit: int = DEFAULT_LIMIT) -> list[AirportRecord]:
        return search(query, self._airports, limit)

    def get(self, iata: str) -> Optional[AirportRecord]:
        """Exact IATA lookup, or None."""
        code = iata.strip().upper()
        for record in self._airports:
            if record.iata == code:
                return record
        return None

    @property
    def airports(self) -> tuple[AirportRecord, ...]:
        return self._airports

    def __len__(self) -> int:
        return len(self._airports)

    def __iter__(self):
        return iter(self._airports)
