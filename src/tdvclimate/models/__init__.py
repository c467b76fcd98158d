"""Data models for climate observations and aggregates."""

from tdvclimate.models._base import ClimateBaseModel, epoch_to_datetime
from tdvclimate.models.accumulator import Accumulator
from tdvclimate.models.record import ClimateRecord

__all__ = [
    "Accumulator",
    "ClimateBaseModel",
    "ClimateRecord",
    "epoch_to_datetime",
]
