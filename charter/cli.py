"""Charter CLI -- private jet charter quotes.

Provides commands for airport search, itemized quotes, the aircraft rate
table, an interactive quote form, and user configuration.
"""

import json as json_mod
import logging
import sys
from pathlib import Path
from typing import Annotated, Optional

import typer
import yaml

from charter.airports import AirportIndex, load_airports
from charter.config import Settings, SettingsStore
from charter.errors import CharterError, DataLoadError, ValidationError
from charter.models import AircraftClass

# ---------------------------------------------------------------------------
# App and sub-apps
# ---------------------------------------------------------------------------

app = typer.Typer(
    name="charter",
    help="Private jet charter quotes -- airport search and itemized price estimates.",
    no_args_is_help=True,
)

config_app = typer.Typer(
    name="config",
    help="Manage charter configuration.",
    no_args_is_help=True,
)

app.add_typer(config_app, name="config")


# ---------------------------------------------------------------------------
# Global option types
# ---------------------------------------------------------------------------

JsonFlag = Annotated[bool, typer.Option("--json", help="Output as JSON.")]
PlainFlag = Annotated[bool, typer.Option("--plain", help="Output as plain text (no color).")]
VerboseFlag = Annotated[bool, typer.Option("--verbose", "-v", help="Verbose output.")]
QuietFlag = Annotated[bool, typer.Option("--quiet", "-q", help="Suppress non-essential output.")]
AirportsOption = Annotated[
    Optional[Path],
    typer.Option("--airports", help="Airport dataset JSON (overrides config)."),
]


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _get_format(json_flag: bool = False, plain_flag: bool = False) -> str:
    """Determine output format: json > plain > TTY auto-detect > rich."""
    if json_flag:
        return "json"
    if plain_flag:
        return "plain"
    if sys.stdout.isatty():
        return "rich"
    return "plain"


def _setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    """Configure logging based on verbosity flags."""
    if quiet:
        logging.basicConfig(level=logging.ERROR)
    elif verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
    else:
        logging.basicConfig(level=logging.WARNING)


def _error_panel(message: str, title: str = "Error") -> None:
    """Print an error message, using Rich panel if available."""
    try:
        from rich.console import Console
        from rich.panel import Panel

        console = Console(stderr=True)
        console.print(Panel(message, title=title, border_style="red"))
    except Exception:
        typer.echo(f"{title}: {message}", err=True)


def _load_index(settings: Settings, airports: Optional[Path] = None) -> AirportIndex:
    """Build the airport index; an unreadable dataset gives an empty index."""
    return AirportIndex.from_file(airports or settings.airports_path)


def _pick(session, query: str, pick: int) -> None:
    """Type a query into a session and accept the Nth suggestion (1-based)."""
    suggestions = session.on_input(query)
    if not suggestions:
        raise ValidationError(f"No airport matches {query!r}.")
    try:
        session.accept_index(pick - 1)
    except IndexError as exc:
        raise ValidationError(f"{query!r}: {exc}") from exc


# ---------------------------------------------------------------------------
# Core commands
# ---------------------------------------------------------------------------


@app.command()
def search(
    query: str = typer.Argument(help="City, airport name, IATA or ICAO code (2+ characters)"),
    limit: Optional[int] = typer.Option(None, "--limit", "-n", min=1, help="Maximum results."),
    airports: AirportsOption = None,
    json: JsonFlag = False,
    plain: PlainFlag = False,
    verbose: VerboseFlag = False,
    quiet: QuietFlag = False,
) -> None:
    """Search airports the way the autocomplete field does."""
    _setup_logging(verbose, quiet)
    try:
        from charter.output import get_formatter

        settings = SettingsStore().load()
        index = _load_index(settings, airports)
        results = index.search(query, limit or settings.suggestion_limit)
        fmt = get_formatter(_get_format(json, plain))
        typer.echo(fmt.format_suggestions(query, results))
    except typer.Exit:
        raise
    except Exception as exc:
        _error_panel(str(exc))
        raise typer.Exit(code=2)


@app.command()
def quote(
    origin: str = typer.Option(..., "--from", help="Origin airport search text."),
    destination: str = typer.Option(..., "--to", help="Destination airport search text."),
    travel_date: str = typer.Option(..., "--date", "-d", help="Travel date (YYYY-MM-DD)."),
    aircraft: Optional[AircraftClass] = typer.Option(
        None, "--aircraft", "-a", help="Aircraft class (default from config)."
    ),
    pax: int = typer.Option(1, "--pax", "-p", min=1, help="Number of passengers."),
    from_pick: int = typer.Option(1, "--from-pick", min=1, help="Which origin suggestion to accept."),
    to_pick: int = typer.Option(1, "--to-pick", min=1, help="Which destination suggestion to accept."),
    airports: AirportsOption = None,
    json: JsonFlag = False,
    plain: PlainFlag = False,
    verbose: VerboseFlag = False,
    quiet: QuietFlag = False,
) -> None:
    """Estimate the price of a charter flight between two airports."""
    _setup_logging(verbose, quiet)
    try:
        from charter.form import QuoteForm
        from charter.output import get_formatter

        settings = SettingsStore().load()
        index = _load_index(settings, airports)
        form = QuoteForm(
            index,
            aircraft=aircraft or settings.default_aircraft,
            passengers=pax,
            suggestion_limit=settings.suggestion_limit,
        )
        if form.passengers != pax and not quiet:
            typer.echo(
                f"Passengers reduced to {form.passengers} "
                f"({form.aircraft.value} seats at most {form.max_passengers}).",
                err=True,
            )

        _pick(form.origin, origin, from_pick)
        _pick(form.destination, destination, to_pick)
        form.set_date(travel_date)

        result = form.get_quote()
        fmt = get_formatter(_get_format(json, plain))
        typer.echo(fmt.format_quote(result))
    except typer.Exit:
        raise
    except ValidationError as exc:
        _error_panel(str(exc), title="Invalid input")
        raise typer.Exit(code=1)
    except Exception as exc:
        _error_panel(str(exc))
        raise typer.Exit(code=2)


@app.command(name="aircraft")
def aircraft_table(
    json: JsonFlag = False,
    plain: PlainFlag = False,
) -> None:
    """List aircraft classes with hourly rate, cruise speed and seat cap."""
    try:
        from charter.output import get_formatter
        from charter.rates import get_rate_table

        fmt = get_formatter(_get_format(json, plain))
        typer.echo(fmt.format_aircraft(get_rate_table().specs()))
    except CharterError as exc:
        _error_panel(str(exc))
        raise typer.Exit(code=2)


@app.command()
def interactive(
    airports: AirportsOption = None,
    verbose: VerboseFlag = False,
) -> None:
    """Fill in the quote form step by step."""
    _setup_logging(verbose, False)
    from charter.form import QuoteForm
    from charter.output import get_formatter

    settings = SettingsStore().load()
    index = _load_index(settings, airports)
    if not len(index):
        _error_panel("No airport data available.")
        raise typer.Exit(code=2)

    fmt = get_formatter("plain")
    form = QuoteForm(
        index,
        aircraft=settings.default_aircraft,
        suggestion_limit=settings.suggestion_limit,
    )

    for label, session in (("From", form.origin), ("To", form.destination)):
        while not session.has_selection:
            text = typer.prompt(f"{label} airport")
            suggestions = session.on_input(text)
            typer.echo(fmt.format_suggestions(text, suggestions))
            if not suggestions:
                continue
            choice = typer.prompt("Pick #", default=1, type=int)
            try:
                session.accept_index(choice - 1)
            except IndexError as exc:
                session.dismiss()
                typer.echo(str(exc), err=True)
                continue
            typer.echo(f"  -> {session.text}")

    while True:
        try:
            form.set_aircraft(typer.prompt("Aircraft", default=form.aircraft.value))
            break
        except ValidationError as exc:
            typer.echo(str(exc), err=True)

    while True:
        pax = typer.prompt(f"Passengers (max {form.max_passengers})", default=1, type=int)
        try:
            form.set_passengers(min(pax, form.max_passengers))
            break
        except ValidationError as exc:
            typer.echo(str(exc), err=True)

    while True:
        try:
            form.set_date(typer.prompt("Date (YYYY-MM-DD)", default=form.min_date.isoformat()))
            break
        except ValidationError as exc:
            typer.echo(str(exc), err=True)

    try:
        result = form.get_quote()
    except CharterError as exc:
        _error_panel(str(exc))
        raise typer.Exit(code=2)
    typer.echo(fmt.format_quote(result))


# ---------------------------------------------------------------------------
# Config commands
# ---------------------------------------------------------------------------


@config_app.command(name="show")
def config_show(
    json: JsonFlag = False,
) -> None:
    """Show the effective configuration."""
    store = SettingsStore()
    data = store.load().model_dump(mode="json")
    if json:
        typer.echo(json_mod.dumps({"config_path": str(store.config_path), **data}, indent=2))
        return
    typer.echo(f"# {store.config_path}")
    typer.echo(yaml.safe_dump(data, sort_keys=False).rstrip())


@config_app.command(name="set-airports")
def config_set_airports(
    path: Path = typer.Argument(help="Airport dataset JSON file"),
) -> None:
    """Use a different airport dataset by default."""
    try:
        count = len(load_airports(path))
    except DataLoadError as exc:
        _error_panel(str(exc))
        raise typer.Exit(code=1)

    store = SettingsStore()
    settings = store.load().model_copy(update={"airports_path": path.resolve()})
    store.save(settings)
    typer.echo(f"Airport dataset set to {path.resolve()} ({count} airports).")
