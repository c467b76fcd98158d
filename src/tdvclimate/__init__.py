"""tdvclimate - per-state summaries of tab-delimited climate observations."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("tdvclimate")
except PackageNotFoundError:
    __version__ = "0+local"
from tdvclimate.config import ClimateConfig
from tdvclimate.exceptions import (
    ClimateConfigError,
    ClimateError,
    FieldParseError,
    FileOpenError,
    LineError,
    MalformedLineError,
    UsageError,
)
from tdvclimate.ingestion import (
    IngestStats,
    decode_line,
    decode_record,
    ingest_file,
    ingest_files,
    ingest_lines,
    tokenize,
)
from tdvclimate.models import Accumulator, ClimateRecord
from tdvclimate.report import format_json, format_report
from tdvclimate.state import StateAggregator

__all__ = [
    "__version__",
    "Accumulator",
    "ClimateConfig",
    "ClimateConfigError",
    "ClimateError",
    "ClimateRecord",
    "FieldParseError",
    "FileOpenError",
    "IngestStats",
    "LineError",
    "MalformedLineError",
    "StateAggregator",
    "UsageError",
    "decode_line",
    "decode_record",
    "format_json",
    "format_report",
    "ingest_file",
    "ingest_files",
    "ingest_lines",
    "tokenize",
]
