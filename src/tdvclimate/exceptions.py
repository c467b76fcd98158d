"""Custom exception hierarchy for tdvclimate."""

from __future__ import annotations

from pathlib import Path


class ClimateError(Exception):
    """Base exception for all tdvclimate errors."""


class ClimateConfigError(ClimateError):
    """Invalid or missing configuration."""


class UsageError(ClimateError):
    """The command line did not name any input file."""


class FileOpenError(ClimateError):
    """An input file could not be opened.

    The originating :class:`OSError` is chained as ``__cause__``.
    """

    def __init__(self, message: str, *, path: str | Path) -> None:
        self.path = str(path)
        super().__init__(message)


class LineError(ClimateError):
    """A single input line could not be turned into a record.

    Line errors are recoverable: ingestion skips the line and continues
    unless strict mode is enabled.  ``source`` and ``line_number`` are
    filled in by the ingestion loop, the tokenizer and decoder only know
    about the line itself.
    """

    def __init__(
        self,
        message: str,
        *,
        source: str = "",
        line_number: int | None = None,
    ) -> None:
        self.source = source
        self.line_number = line_number
        super().__init__(message)

    def located(self, *, source: str, line_number: int) -> LineError:
        """Attach the file name and 1-based line number; returns ``self``."""
        self.source = source
        self.line_number = line_number
        return self

    def __str__(self) -> str:
        message = super().__str__()
        if self.line_number is None:
            return message
        return f"{self.source}:{self.line_number}: {message}"


class MalformedLineError(LineError):
    """The line has fewer tab-separated fields than a record needs."""

    def __init__(self, message: str, *, field_count: int, **kwargs: object) -> None:
        self.field_count = field_count
        super().__init__(message, **kwargs)  # type: ignore[arg-type]


class FieldParseError(LineError):
    """A field could not be parsed (e.g. a non-numeric humidity)."""

    def __init__(self, message: str, *, field_index: int, value: str = "", **kwargs: object) -> None:
        self.field_index = field_index
        self.value = value
        super().__init__(message, **kwargs)  # type: ignore[arg-type]
