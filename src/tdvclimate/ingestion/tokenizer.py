"""Split one TDV line into its fields."""

from __future__ import annotations

from tdvclimate._constants import FIELD_COUNT, FIELD_SEPARATOR
from tdvclimate.exceptions import MalformedLineError


def tokenize(line: str) -> list[str]:
    """Return the first nine tab-separated fields of *line*.

    The trailing line terminator is stripped.  Extra fields past the
    ninth are ignored.

    Raises :class:`MalformedLineError` when the line has fewer than nine
    fields.
    """
    fields = line.rstrip("\r\n").split(FIELD_SEPARATOR)
    if len(fields) < FIELD_COUNT:
        raise MalformedLineError(
            f"expected {FIELD_COUNT} tab-separated fields, got {len(fields)}",
            field_count=len(fields),
        )
    return fields[:FIELD_COUNT]
