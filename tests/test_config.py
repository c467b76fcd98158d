from __future__ import annotations

from datetime import UTC

import pytest

from tdvclimate.config import ClimateConfig
from tdvclimate.exceptions import ClimateConfigError


def test_defaults() -> None:
    config = ClimateConfig()
    assert config.encoding == "utf-8"
    assert config.strict is False
    assert config.continue_on_open_error is False
    assert config.skip_blank_lines is True
    assert config.tzinfo() is UTC


def test_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CLIMATE_STRICT", "yes")
    monkeypatch.setenv("CLIMATE_CONTINUE_ON_OPEN_ERROR", "1")
    monkeypatch.setenv("CLIMATE_SKIP_BLANK_LINES", "off")
    monkeypatch.setenv("CLIMATE_ENCODING", "latin-1")

    config = ClimateConfig.from_env()

    assert config.strict is True
    assert config.continue_on_open_error is True
    assert config.skip_blank_lines is False
    assert config.encoding == "latin-1"


def test_from_env_overrides_win(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CLIMATE_STRICT", "true")
    monkeypatch.setenv("CLIMATE_TIME_ZONE", "Europe/Amsterdam")

    config = ClimateConfig.from_env(strict=False, time_zone="UTC")

    assert config.strict is False
    assert config.time_zone == "UTC"


def test_unrecognized_bool_falls_back_to_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CLIMATE_STRICT", "maybe")
    assert ClimateConfig.from_env().strict is False


def test_unknown_time_zone() -> None:
    with pytest.raises(ClimateConfigError):
        ClimateConfig(time_zone="Not/A_Zone").tzinfo()


def test_encoding_name_is_canonical() -> None:
    assert ClimateConfig(encoding="UTF8").encoding_name() == "utf-8"
    assert ClimateConfig(encoding="latin-1").encoding_name() == "iso8859-1"


def test_unknown_encoding() -> None:
    with pytest.raises(ClimateConfigError) as excinfo:
        ClimateConfig(encoding="nosuchcodec").encoding_name()
    assert isinstance(excinfo.value.__cause__, LookupError)
