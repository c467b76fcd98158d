"""Per-state running aggregate."""

from __future__ import annotations

from datetime import UTC, datetime, tzinfo

from pydantic import Field, computed_field

from tdvclimate.models._base import ClimateBaseModel, epoch_to_datetime
from tdvclimate.models.record import ClimateRecord


class Accumulator(ClimateBaseModel):
    """Running aggregate of every record seen for one state code.

    Only sums and counts are stored; the averages are computed from them
    on every read so they can never disagree with the sums.
    """

    code: str
    count: int = Field(..., ge=1)
    humidity_sum: float
    temperature_sum: float
    cloud_cover_sum: float
    lightning_strikes: int = 0
    snow_records: int = 0
    max_temp: float
    max_temp_date: int
    min_temp: float
    min_temp_date: int

    @classmethod
    def from_record(cls, record: ClimateRecord) -> Accumulator:
        """Start an accumulator from the first record of a state."""
        return cls(
            code=record.state_code,
            count=1,
            humidity_sum=record.humidity,
            temperature_sum=record.temperature,
            cloud_cover_sum=record.cloud_cover,
            lightning_strikes=int(record.lightning),
            snow_records=int(record.snow),
            max_temp=record.temperature,
            max_temp_date=record.timestamp,
            min_temp=record.temperature,
            min_temp_date=record.timestamp,
        )

    def fold(self, record: ClimateRecord) -> None:
        """Add *record* to the running totals.

        Ties on max/min temperature go to the later record.
        """
        self.count += 1
        self.humidity_sum += record.humidity
        self.temperature_sum += record.temperature
        self.cloud_cover_sum += record.cloud_cover
        self.lightning_strikes += int(record.lightning)
        self.snow_records += int(record.snow)

        if record.temperature >= self.max_temp:
            self.max_temp = record.temperature
            self.max_temp_date = record.timestamp

        if record.temperature <= self.min_temp:
            self.min_temp = record.temperature
            self.min_temp_date = record.timestamp

    @computed_field  # type: ignore[prop-decorator]
    @property
    def average_humidity(self) -> float:
        return self.humidity_sum / self.count

    @computed_field  # type: ignore[prop-decorator]
    @property
    def average_temperature(self) -> float:
        return self.temperature_sum / self.count

    @computed_field  # type: ignore[prop-decorator]
    @property
    def average_cloud_cover(self) -> float:
        return self.cloud_cover_sum / self.count

    def max_temp_at(self, tz: tzinfo = UTC) -> datetime:
        """When the maximum temperature was observed."""
        return epoch_to_datetime(self.max_temp_date, tz)

    def min_temp_at(self, tz: tzinfo = UTC) -> datetime:
        """When the minimum temperature was observed."""
        return epoch_to_datetime(self.min_temp_date, tz)
