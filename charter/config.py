"""User settings stored at ~/.charter/config.yaml.

Environment variables override the file:
- CHARTER_AIRPORTS: path to the airport dataset JSON
- CHARTER_SUGGESTION_LIMIT: maximum suggestions per query
"""

import logging
import os
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from charter.airports import DEFAULT_AIRPORTS_PATH, DEFAULT_LIMIT
from charter.models import AircraftClass

logger = logging.getLogger(__name__)

_DEFAULT_CONFIG_PATH = Path.home() / ".charter" / "config.yaml"


class Settings(BaseModel):
    """Resolved user settings."""

    airports_path: Path = DEFAULT_AIRPORTS_PATH
    suggestion_limit: int = Field(default=DEFAULT_LIMIT, ge=1)
    default_aircraft: AircraftClass = AircraftClass.MIDSIZE


class SettingsStore:
    """Loads and saves Settings as YAML."""

    def __init__(self, config_path: Optional[Path] = None) -> None:
        self.config_path = config_path or _DEFAULT_CONFIG_PATH

    def load(self) -> Settings:
        """Read settings; a missing or corrupt file yields defaults.

        Values that fail validation fall back to their defaults one key at a
        time, so a bad environment override does not discard the file.
        """
        data: dict = {}
        if self.config_path.exists():
            try:
                with open(self.config_path, encoding="utf-8") as f:
                    raw = yaml.safe_load(f)
                if isinstance(raw, dict):
                    data = raw
                elif raw is not None:
                    logger.warning("Ignoring %s: expected a mapping", self.config_path)
            except (OSError, UnicodeDecodeError, yaml.YAMLError) as exc:
                logger.warning("Failed to read config %s: %s", self.config_path, exc)

        env_airports = os.environ.get("CHARTER_AIRPORTS")
        if env_airports:
            data["airports_path"] = env_airports
        env_limit = os.environ.get("CHARTER_SUGGESTION_LIMIT")
        if env_limit:
            data["suggestion_limit"] = env_limit

        try:
            return Settings.model_validate(data)
        except PydanticValidationError as exc:
            bad = sorted({str(err["loc"][0]) for err in exc.errors() if err["loc"]})
            logger.warning(
                "Invalid settings in %s, using defaults for %s: %s",
                self.config_path,
                ", ".join(bad) or "all keys",
                exc,
            )
            data = {k: v for k, v in data.items() if k not in bad}

        try:
            return Settings.model_validate(data)
        except PydanticValidationError:
            return Settings()

    def save(self, settings: Settings) -> None:
        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.config_path, "w", encoding="utf-8") as f:
            yaml.safe_dump(settings.model_dump(mode="json"), f, sort_keys=False)
        logger.info("Settings saved: %s", self.config_path)
