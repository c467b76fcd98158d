"""Normalization helpers.

Centralizes strict numeric parsing of raw TDV fields.  Unlike lenient
``atof``-style parsing, anything that is not a plain finite decimal number
is an error tied to the field it came from.
"""

from __future__ import annotations

import math
import re

from tdvclimate._constants import FIELD_NAMES, ms_to_seconds
from tdvclimate.exceptions import FieldParseError
from tdvclimate.models._base import epoch_to_datetime

# ASCII digits only: no underscores, no non-ASCII numerals, no nan/inf.
_DECIMAL_RE = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def _field_error(problem: str, value: str, field_index: int) -> FieldParseError:
    return FieldParseError(
        f"field {field_index} ({FIELD_NAMES[field_index]}) {problem}: {value!r}",
        field_index=field_index,
        value=value,
    )


def parse_float(value: str, field_index: int) -> float:
    """Parse *value* as a finite decimal float or raise :class:`FieldParseError`."""
    text = value.strip()
    if not _DECIMAL_RE.fullmatch(text):
        raise _field_error("is not a number", value, field_index)
    result = float(text)
    if not math.isfinite(result):
        raise _field_error("is not finite", value, field_index)
    return result


def parse_flag(value: str, field_index: int) -> bool:
    """Parse a 0/1 flag; any value truncating to non-zero is ``True``."""
    return int(parse_float(value, field_index)) != 0


def normalize_timestamp_seconds(value: str, field_index: int) -> int:
    """Parse an epoch-milliseconds field into whole epoch seconds.

    Raises :class:`FieldParseError` when the instant cannot be represented
    as a datetime.
    """
    seconds = ms_to_seconds(parse_float(value, field_index))
    try:
        epoch_to_datetime(seconds)
    except (OverflowError, OSError, ValueError):
        raise _field_error("is out of range", value, field_index) from None
    return seconds


def parse_state_code(value: str, field_index: int, length: int) -> str:
    """Take the first *length* characters of a state code, case preserved."""
    code = value.strip()[:length]
    if len(code) < length:
        raise _field_error(f"is not a {length}-character code", value, field_index)
    return code
