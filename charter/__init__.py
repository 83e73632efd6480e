"""Charter flight quoting -- airport autocomplete and itemized price estimates."""

__version__ = "0.1.0"
