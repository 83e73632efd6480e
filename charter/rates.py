"""Aircraft rate table: hourly rate, cruise speed and seat cap per class.

Data loaded from charter/data/aircraft.yaml. The file is edited by hand,
so every entry is validated on load and lookups of a class without an
entry fail loudly with ConfigurationError.
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Optional, Union

import yaml
from pydantic import ValidationError as PydanticValidationError

from charter.errors import ConfigurationError
from charter.models import AircraftClass, AircraftSpec

logger = logging.getLogger(__name__)

_DATA_DIR = Path(__file__).parent / "data"


class RateTable:
    """Read-only lookup of AircraftSpec by AircraftClass."""

    def __init__(self, path: Optional[Path] = None) -> None:
        self._path = path or (_DATA_DIR / "aircraft.yaml")
        try:
            with open(self._path, encoding="utf-8") as f:
                raw = yaml.safe_load(f)
        except (OSError, UnicodeDecodeError, yaml.YAMLError) as exc:
            raise ConfigurationError(f"Cannot read rate table {self._path}: {exc}") from exc

        if not isinstance(raw, dict):
            raise ConfigurationError(
                f"Expected a YAML mapping in {self._path}, got {type(raw).__name__}"
            )

        self._specs: dict[AircraftClass, AircraftSpec] = {}
        for key, entry in raw.items():
            try:
                aircraft = AircraftClass(key)
            except ValueError:
                valid = ", ".join(a.value for a in AircraftClass)
                raise ConfigurationError(
                    f"Unknown aircraft class {key!r} in {self._path}. Valid: {valid}"
                )
            try:
                self._specs[aircraft] = AircraftSpec(aircraft=aircraft, **(entry or {}))
            except (PydanticValidationError, TypeError) as exc:
                raise ConfigurationError(f"Invalid rate table entry {key!r}: {exc}") from exc

        missing = self.missing_classes()
        if missing:
            logger.warning(
                "Rate table %s has no entry for: %s",
                self._path,
                ", ".join(a.value for a in missing),
            )

    def lookup(self, aircraft: Union[AircraftClass, str]) -> AircraftSpec:
        """Return the rate, speed and seat cap for an aircraft class.

        Raises:
            ConfigurationError: If the class is unknown or has no table entry.
        """
        try:
            key = AircraftClass(aircraft)
        except ValueError:
            raise ConfigurationError(f"Unknown aircraft class: {aircraft!r}")

        spec = self._specs.get(key)
        if spec is None:
            raise ConfigurationError(f"No rate table entry for aircraft class {key.value}")
        return spec

    def max_passengers(self, aircraft: Union[AircraftClass, str]) -> int:
        return self.lookup(aircraft).max_passengers

    def specs(self) -> list[AircraftSpec]:
        """All entries in enum order."""
        return [self._specs[a] for a in AircraftClass if a in self._specs]

    def missing_classes(self) -> list[AircraftClass]:
        return [a for a in AircraftClass if a not in self._specs]

    def __contains__(self, aircraft: object) -> bool:
        try:
            return AircraftClass(aircraft) in self._specs
        except ValueError:
            return False


@lru_cache(maxsize=1)
def get_rate_table() -> RateTable:
    """Process-wide rate table, loaded once from the bundled YAML."""
    return RateTable()
