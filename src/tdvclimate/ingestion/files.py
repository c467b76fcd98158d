"""Streaming file ingestion.

This module owns the read loop: files are opened one at a time in the
order given, each line goes through the tokenizer and decoder, and the
resulting record is handed to :meth:`StateAggregator.consume`.

Line-level problems are recoverable and only skip the line.  A file that
cannot be opened is fatal unless the configuration opts into skipping it.
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Callable, Iterable
from pathlib import Path

from tdvclimate.config import ClimateConfig
from tdvclimate.exceptions import FileOpenError, LineError
from tdvclimate.ingestion.decoder import decode_line
from tdvclimate.state.aggregator import StateAggregator

_logger = logging.getLogger(__name__)


@dataclasses.dataclass
class IngestStats:
    """Counters describing one ingestion run."""

    files_processed: int = 0
    files_failed: list[str] = dataclasses.field(default_factory=list)
    lines_read: int = 0
    records_consumed: int = 0
    lines_skipped: int = 0

    def merge(self, other: IngestStats) -> None:
        self.files_processed += other.files_processed
        self.files_failed.extend(other.files_failed)
        self.lines_read += other.lines_read
        self.records_consumed += other.records_consumed
        self.lines_skipped += other.lines_skipped


def ingest_lines(
    lines: Iterable[str],
    aggregator: StateAggregator,
    *,
    source: str = "<stream>",
    strict: bool = False,
    skip_blank_lines: bool = True,
) -> IngestStats:
    """Fold every valid line of *lines* into *aggregator*.

    Parameters
    ----------
    source
        Name used in diagnostics (usually the file path).
    strict
        Re-raise the first :class:`LineError` instead of skipping the line.
    skip_blank_lines
        Ignore empty lines without a warning.
    """
    stats = IngestStats()
    for line_number, line in enumerate(lines, start=1):
        stats.lines_read += 1
        if skip_blank_lines and not line.rstrip("\r\n"):
            continue
        try:
            record = decode_line(line)
        except LineError as exc:
            exc.located(source=source, line_number=line_number)
            if strict:
                raise
            stats.lines_skipped += 1
            _logger.warning("Skipping line: %s", exc)
            continue
        aggregator.consume(record)
        stats.records_consumed += 1
    return stats


def ingest_file(
    path: str | Path,
    aggregator: StateAggregator,
    *,
    config: ClimateConfig | None = None,
    on_open: Callable[[str], None] | None = None,
) -> IngestStats:
    """Stream one file into *aggregator*.

    *on_open* is called with the path once the file has been opened and
    before any line is read.

    Raises :class:`FileOpenError` if the file cannot be opened and
    :class:`ClimateConfigError` if the configured encoding is unknown.
    """
    config = config or ClimateConfig()
    encoding = config.encoding_name()
    try:
        handle = open(path, encoding=encoding, errors="replace")  # noqa: SIM115
    except OSError as exc:
        raise FileOpenError(f"Error in opening file: {path}", path=path) from exc

    if on_open is not None:
        on_open(str(path))
    _logger.debug("Reading %s", path)
    with handle:
        stats = ingest_lines(
            handle,
            aggregator,
            source=str(path),
            strict=config.strict,
            skip_blank_lines=config.skip_blank_lines,
        )
    stats.files_processed = 1
    _logger.debug(
        "Finished %s: lines=%d records=%d skipped=%d",
        path,
        stats.lines_read,
        stats.records_consumed,
        stats.lines_skipped,
    )
    return stats


def ingest_files(
    paths: Iterable[str | Path],
    aggregator: StateAggregator,
    *,
    config: ClimateConfig | None = None,
    on_open: Callable[[str], None] | None = None,
) -> IngestStats:
    """Stream *paths* into *aggregator* in the order given.

    Raises :class:`FileOpenError` on the first unopenable file unless
    ``config.continue_on_open_error`` is set, in which case the file is
    recorded in :attr:`IngestStats.files_failed` and skipped.
    """
    config = config or ClimateConfig()
    total = IngestStats()
    for path in paths:
        try:
            stats = ingest_file(path, aggregator, config=config, on_open=on_open)
        except FileOpenError as exc:
            if not config.continue_on_open_error:
                raise
            _logger.warning("%s (%s); continuing", exc, exc.__cause__)
            total.files_failed.append(exc.path)
            continue
        total.merge(stats)
    return total
