"""Autocomplete state for a single airport input field.

One SearchSession per field. Events (text change, pick, outside click)
are applied synchronously and each runs to completion before the next.
"""

import logging
from enum import Enum
from typing import Optional

from charter.airports import DEFAULT_LIMIT, AirportIndex
from charter.models import AirportRecord, RouteSelection

logger = logging.getLogger(__name__)


class SessionState(str, Enum):
    """Autocomplete field states."""

    IDLE = "idle"  # No suggestions shown
    SHOWING = "showing"  # Suggestion list populated
    SELECTED = "selected"  # A suggestion was accepted


class SearchSession:
    """Drives one input field's suggestion list and route selection.

    A new query simply replaces the previous suggestion list. An accepted
    pick survives later edits and dismissals; only another pick
    overwrites it.
    """

    def __init__(self, index: AirportIndex, limit: int = DEFAULT_LIMIT, name: str = "") -> None:
        self.index = index
        self.limit = limit
        self.name = name
        self.text = ""
        self.state = SessionState.IDLE
        self._suggestions: list[AirportRecord] = []
        self._selection: Optional[RouteSelection] = None

    @property
    def suggestions(self) -> list[AirportRecord]:
        return list(self._suggestions)

    @property
    def selection(self) -> Optional[RouteSelection]:
        return self._selection

    @property
    def has_selection(self) -> bool:
        return self._selection is not None

    def on_input(self, text: str) -> list[AirportRecord]:
        """Handle a change of the field text and return the new suggestions."""
        self.text = text
        self._suggestions = self.index.search(text, self.limit)
        self.state = SessionState.SHOWING if self._suggestions else SessionState.IDLE
        logger.debug(
            "%s: %r -> %d suggestion(s)", self.name or "field", text, len(self._suggestions)
        )
        return self.suggestions

    def accept(self, record: AirportRecord) -> RouteSelection:
        """Accept a suggestion: store its coordinates and set the field text."""
        self._selection = RouteSelection.from_airport(record)
        self.text = record.display_text
        self._suggestions = []
        self.state = SessionState.SELECTED
        logger.debug("%s: selected %s", self.name or "field", record.iata)
        return self._selection

    def accept_index(self, position: int) -> RouteSelection:
        """Accept the suggestion at a 0-based position in the current list.

        Raises:
            IndexError: If no suggestion is shown at that position.
        """
        if not 0 <= position < len(self._suggestions):
            raise IndexError(
                f"No suggestion #{position + 1} (showing {len(self._suggestions)})"
            )
        return self.accept(self._suggestions[position])

    def dismiss(self) -> None:
        """Handle an interaction outside the field and its suggestion list."""
        self._suggestions = []
        if self.state == SessionState.SHOWING:
            self.state = SessionState.IDLE
