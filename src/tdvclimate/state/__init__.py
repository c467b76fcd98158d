"""State layer.

The single owner of per-state accumulators.  Records decoded by the
ingestion layer are folded in here and nowhere else.
"""

from tdvclimate.state.aggregator import StateAggregator

__all__ = ["StateAggregator"]
