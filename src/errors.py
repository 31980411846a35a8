"""Errors raised by the incidence pipeline."""


class IncidenceError(ValueError):
    """Base class for pipeline failures."""


class ParseError(IncidenceError):
    """Input file is unreadable or lacks required columns."""


class FormatError(IncidenceError):
    """A time identifier does not start with a 4-digit year."""


class RenderError(IncidenceError):
    """Aggregated table cannot be drawn."""
