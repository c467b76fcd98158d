"""Tests for the pydantic record and accumulator models."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from tdvclimate.models.accumulator import Accumulator
from tdvclimate.models.record import ClimateRecord


def _record(**overrides: object) -> ClimateRecord:
    values: dict[str, object] = {
        "state_code": "TN",
        "timestamp": 1438599600,
        "humidity": 40.0,
        "cloud_cover": 50.0,
        "pressure": 101000.0,
        "temperature": 100.0,
    }
    values.update(overrides)
    return ClimateRecord(**values)  # type: ignore[arg-type]


class TestClimateRecord:
    def test_frozen(self) -> None:
        record = _record()
        with pytest.raises(ValidationError):
            record.humidity = 10.0  # type: ignore[misc]

    def test_observed_at_is_utc(self) -> None:
        assert _record().observed_at == datetime(2015, 8, 3, 11, 0, tzinfo=UTC)

    def test_state_code_must_be_two_characters(self) -> None:
        with pytest.raises(ValidationError):
            _record(state_code="TEN")

    def test_unknown_field_rejected(self) -> None:
        with pytest.raises(ValidationError):
            _record(geohash="9prcjqk3yc80")

    def test_float_flags_coerced(self) -> None:
        record = _record(snow=1.0, lightning=0.0)
        assert record.snow is True
        assert record.lightning is False


class TestAccumulator:
    def test_from_record(self) -> None:
        acc = Accumulator.from_record(_record(snow=True))
        assert acc.code == "TN"
        assert acc.count == 1
        assert acc.snow_records == 1
        assert acc.lightning_strikes == 0
        assert acc.average_temperature == 100.0

    def test_count_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            Accumulator(
                code="TN",
                count=0,
                humidity_sum=0.0,
                temperature_sum=0.0,
                cloud_cover_sum=0.0,
                max_temp=0.0,
                max_temp_date=0,
                min_temp=0.0,
                min_temp_date=0,
            )

    def test_averages_follow_sums(self) -> None:
        acc = Accumulator.from_record(_record(humidity=30.0))
        acc.fold(_record(humidity=50.0))
        assert acc.average_humidity == 40.0
        acc.fold(_record(humidity=100.0))
        assert acc.average_humidity == pytest.approx(60.0)

    def test_dates_in_time_zone(self) -> None:
        acc = Accumulator.from_record(_record())
        eastern = timezone(timedelta(hours=-4))
        assert acc.max_temp_at() == datetime(2015, 8, 3, 11, 0, tzinfo=UTC)
        assert acc.min_temp_at(eastern).hour == 7

    def test_dump_includes_averages(self) -> None:
        acc = Accumulator.from_record(_record(cloud_cover=20.0))
        acc.fold(_record(cloud_cover=40.0))
        dumped = acc.model_dump()
        assert dumped["average_cloud_cover"] == 30.0
        assert dumped["count"] == 2


def test_base_model_config_forbids_extras_only() -> None:
    from tdvclimate.models._base import ClimateBaseModel

    assert ClimateBaseModel.model_config.get("extra") == "forbid"
    assert not ClimateBaseModel.model_config.get("populate_by_name")
