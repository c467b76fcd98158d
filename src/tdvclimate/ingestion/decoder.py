"""Decode tokenized TDV fields into :class:`ClimateRecord` objects."""

from __future__ import annotations

from collections.abc import Sequence

from tdvclimate._constants import (
    FIELD_CLOUD_COVER,
    FIELD_COUNT,
    FIELD_HUMIDITY,
    FIELD_LIGHTNING,
    FIELD_PRESSURE,
    FIELD_SNOW,
    FIELD_STATE_CODE,
    FIELD_TEMPERATURE,
    FIELD_TIMESTAMP,
    STATE_CODE_LENGTH,
    kelvin_to_fahrenheit,
)
from tdvclimate.exceptions import MalformedLineError
from tdvclimate.ingestion.normalize import (
    normalize_timestamp_seconds,
    parse_flag,
    parse_float,
    parse_state_code,
)
from tdvclimate.ingestion.tokenizer import tokenize
from tdvclimate.models.record import ClimateRecord


def decode_record(fields: Sequence[str]) -> ClimateRecord:
    """Build a record from the nine raw fields of a TDV line.

    The geohash (field 2) is not used.  Temperature arrives in Kelvin and
    is stored in Fahrenheit; the timestamp arrives in milliseconds and is
    stored in whole seconds.

    Raises :class:`FieldParseError` naming the first bad field.
    """
    if len(fields) < FIELD_COUNT:
        raise MalformedLineError(
            f"expected {FIELD_COUNT} fields, got {len(fields)}",
            field_count=len(fields),
        )

    return ClimateRecord(
        state_code=parse_state_code(fields[FIELD_STATE_CODE], FIELD_STATE_CODE, STATE_CODE_LENGTH),
        timestamp=normalize_timestamp_seconds(fields[FIELD_TIMESTAMP], FIELD_TIMESTAMP),
        humidity=parse_float(fields[FIELD_HUMIDITY], FIELD_HUMIDITY),
        snow=parse_flag(fields[FIELD_SNOW], FIELD_SNOW),
        cloud_cover=parse_float(fields[FIELD_CLOUD_COVER], FIELD_CLOUD_COVER),
        lightning=parse_flag(fields[FIELD_LIGHTNING], FIELD_LIGHTNING),
        pressure=parse_float(fields[FIELD_PRESSURE], FIELD_PRESSURE),
        temperature=kelvin_to_fahrenheit(parse_float(fields[FIELD_TEMPERATURE], FIELD_TEMPERATURE)),
    )


def decode_line(line: str) -> ClimateRecord:
    """Tokenize and decode a single raw line."""
    return decode_record(tokenize(line))
