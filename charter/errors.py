"""Exception hierarchy for the charter quote engine."""


class CharterError(Exception):
    """Base class for all charter errors."""


class ValidationError(CharterError, ValueError):
    """A quote request is incomplete or carries an invalid field.

    Recoverable; shown to the user as an inline message.
    """


class ConfigurationError(CharterError):
    """Reference data (e.g. the aircraft rate table) is missing or inconsistent."""


class DataLoadError(CharterError):
    """The airport dataset could not be read or parsed."""
