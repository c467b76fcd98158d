"""Text and JSON rendering of aggregated state statistics.

The formatters only read accumulators; they never change them.
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from datetime import UTC, tzinfo
from typing import Any

from tdvclimate.models.accumulator import Accumulator


def _format_block(acc: Accumulator, tz: tzinfo) -> list[str]:
    return [
        f"-- State: {acc.code} --",
        f"Number of Records: {acc.count}",
        f"Average Humidity: {acc.average_humidity:.1f}%",
        f"Average Temperature: {acc.average_temperature:.1f}F",
        f"Max Temperature: {acc.max_temp:.1f}F",
        f"Max Temperature on: {acc.max_temp_at(tz).ctime()}",
        f"Min Temperature: {acc.min_temp:.1f}F",
        f"Min Temperature on: {acc.min_temp_at(tz).ctime()}",
        f"Lightning Strikes: {acc.lightning_strikes}",
        f"Records with Snow Cover: {acc.snow_records}",
        f"Average Cloud Cover: {acc.average_cloud_cover:.1f}%",
    ]


def format_report(accumulators: Iterable[Accumulator], *, tz: tzinfo = UTC) -> str:
    """Render the plain-text summary report.

    The first two lines list every state code in the order given, then
    one block per state follows.  Dates use the ``ctime`` layout
    (``Mon Aug  3 11:00:00 2015``) in *tz*.
    """
    states = list(accumulators)
    lines = ["States found:", " ".join(acc.code for acc in states)]
    for acc in states:
        lines.extend(_format_block(acc, tz))
    return "\n".join(lines) + "\n"


def _state_payload(acc: Accumulator, tz: tzinfo) -> dict[str, Any]:
    payload = acc.model_dump(mode="json")
    payload["max_temp_at"] = acc.max_temp_at(tz).isoformat()
    payload["min_temp_at"] = acc.min_temp_at(tz).isoformat()
    return payload


def format_json(accumulators: Iterable[Accumulator], *, tz: tzinfo = UTC) -> str:
    """Render the summary as a JSON document ``{"states": [...]}``.

    Each entry carries the raw sums and counts, the derived averages and
    ISO-8601 max/min dates in *tz*.
    """
    states = [_state_payload(acc, tz) for acc in accumulators]
    return json.dumps({"states": states}, indent=2) + "\n"
