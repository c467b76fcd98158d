"""Command-line entry point.

Usage::

    tdv-climate data_tn.tdv data_wa.tdv
    python -m tdvclimate --json data_*.tdv
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from tdvclimate.config import ClimateConfig
from tdvclimate.exceptions import ClimateConfigError, FileOpenError, LineError, UsageError
from tdvclimate.ingestion.files import ingest_files
from tdvclimate.report import format_json, format_report
from tdvclimate.state.aggregator import StateAggregator

_logger = logging.getLogger(__name__)

PROG = "tdv-climate"
USAGE = f"Usage: {PROG} tdv_file1 tdv_file2 ... tdv_fileN"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Summarize tab-delimited climate observations per state.",
    )
    parser.add_argument("files", nargs="*", help="TDV files to analyze, processed in order")
    parser.add_argument("--json", action="store_true", dest="json_mode", help="Output machine-readable JSON")
    parser.add_argument("--strict", action="store_true", default=None, help="Abort on the first malformed line")
    parser.add_argument(
        "--continue-on-error",
        action="store_true",
        default=None,
        dest="continue_on_open_error",
        help="Skip files that cannot be opened instead of aborting",
    )
    parser.add_argument("--time-zone", help="IANA time zone for max/min dates (default: UTC)")
    parser.add_argument("--encoding", help="Input file encoding (default: utf-8)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser


def _config_from_args(args: argparse.Namespace) -> ClimateConfig:
    overrides = {
        "strict": args.strict,
        "continue_on_open_error": args.continue_on_open_error,
        "time_zone": args.time_zone,
        "encoding": args.encoding,
    }
    return ClimateConfig.from_env(**{key: value for key, value in overrides.items() if value is not None})


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI and return the process exit code."""
    args = _build_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    else:
        logging.basicConfig(level=logging.WARNING)

    try:
        if not args.files:
            raise UsageError(USAGE)
        config = _config_from_args(args)
        config.encoding_name()
        tz = config.tzinfo()
    except UsageError as exc:
        print(exc)
        return 1
    except ClimateConfigError as exc:
        print(f"{PROG}: {exc}", file=sys.stderr)
        return 1

    aggregator = StateAggregator()
    announce = None if args.json_mode else (lambda path: print(f"Opening file: {path}"))
    try:
        stats = ingest_files(args.files, aggregator, config=config, on_open=announce)
    except FileOpenError as exc:
        print(exc, file=sys.stderr)
        return 1
    except LineError as exc:
        print(f"{PROG}: {exc}", file=sys.stderr)
        return 1

    _logger.debug(
        "Processed %d file(s): %d records, %d skipped line(s), %d state(s)",
        stats.files_processed,
        stats.records_consumed,
        stats.lines_skipped,
        len(aggregator),
    )

    if args.json_mode:
        sys.stdout.write(format_json(aggregator, tz=tz))
    else:
        sys.stdout.write(format_report(aggregator, tz=tz))

    return 1 if stats.files_failed else 0


def run() -> None:
    """Console-script wrapper around :func:`main`."""
    sys.exit(main())
