"""Ingestion layer.

Turns TDV text into :class:`~tdvclimate.models.ClimateRecord` objects and
feeds them to the state aggregator.  Only the state layer mutates
accumulators.
"""

from tdvclimate.ingestion.decoder import decode_line, decode_record
from tdvclimate.ingestion.files import IngestStats, ingest_file, ingest_files, ingest_lines
from tdvclimate.ingestion.tokenizer import tokenize

__all__ = [
    "IngestStats",
    "decode_line",
    "decode_record",
    "ingest_file",
    "ingest_files",
    "ingest_lines",
    "tokenize",
]
