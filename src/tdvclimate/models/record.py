"""Decoded observation record."""

from __future__ import annotations

from datetime import datetime

from pydantic import ConfigDict, Field, field_validator

from tdvclimate._constants import STATE_CODE_LENGTH
from tdvclimate.models._base import ClimateBaseModel, epoch_to_datetime


class ClimateRecord(ClimateBaseModel):
    """One observation decoded from a TDV line.

    Records are short-lived: the aggregator folds each one into its
    state's accumulator and keeps no reference to it.

    Parameters
    ----------
    state_code : str
        Two-character state code, case as given.
    timestamp : int
        Observation time in whole seconds since the epoch.
    humidity : float
        Relative humidity in percent.  Not clamped.
    snow : bool
        Snow cover present.
    cloud_cover : float
        Cloud cover in percent.
    lightning : bool
        Lightning strike observed.
    pressure : float
        Surface pressure in Pa.
    temperature : float
        Surface temperature in degrees Fahrenheit.
    """

    model_config = ConfigDict(frozen=True)

    state_code: str = Field(..., min_length=STATE_CODE_LENGTH, max_length=STATE_CODE_LENGTH)
    timestamp: int
    humidity: float
    snow: bool = False
    cloud_cover: float
    lightning: bool = False
    pressure: float
    temperature: float

    @field_validator("snow", "lightning", mode="before")
    @classmethod
    def _coerce_flag(cls, value: object) -> object:
        # 0.0/1.0 style flags; anything that truncates to non-zero counts as set
        if isinstance(value, float):
            return int(value) != 0
        return value

    @property
    def observed_at(self) -> datetime:
        """Observation time as a UTC datetime."""
        return epoch_to_datetime(self.timestamp)
