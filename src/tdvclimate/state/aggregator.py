"""Deterministic per-state aggregation.

This is the only component allowed to create or mutate accumulators.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from tdvclimate.models.accumulator import Accumulator
from tdvclimate.models.record import ClimateRecord

_logger = logging.getLogger(__name__)


class StateAggregator:
    """Ordered collection of accumulators keyed by state code.

    Given the same sequence of records, the aggregator always ends up in
    the same state.  Codes are kept in the order they were first seen.
    """

    def __init__(self) -> None:
        self._accumulators: dict[str, Accumulator] = {}
        self._record_count = 0

    def consume(self, record: ClimateRecord) -> Accumulator:
        """Fold *record* into the accumulator for its state code.

        Creates the accumulator on the first record of a code.
        """
        self._record_count += 1
        accumulator = self._accumulators.get(record.state_code)
        if accumulator is None:
            accumulator = Accumulator.from_record(record)
            self._accumulators[record.state_code] = accumulator
            _logger.debug("New state %s", record.state_code)
            return accumulator

        accumulator.fold(record)
        return accumulator

    def get(self, code: str) -> Accumulator | None:
        return self._accumulators.get(code)

    @property
    def codes(self) -> list[str]:
        """State codes in discovery order."""
        return list(self._accumulators)

    @property
    def record_count(self) -> int:
        """Total number of records consumed across all states."""
        return self._record_count

    def accumulators(self) -> list[Accumulator]:
        """Accumulators in discovery order."""
        return list(self._accumulators.values())

    def __contains__(self, code: object) -> bool:
        return code in self._accumulators

    def __iter__(self) -> Iterator[Accumulator]:
        return iter(self._accumulators.values())

    def __len__(self) -> int:
        return len(self._accumulators)
