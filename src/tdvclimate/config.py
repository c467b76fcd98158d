"""Run configuration for tdvclimate."""

from __future__ import annotations

import codecs
import dataclasses
import os
from datetime import UTC, tzinfo
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from tdvclimate.exceptions import ClimateConfigError


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


@dataclasses.dataclass(frozen=True)
class ClimateConfig:
    """Ingestion and report configuration.

    Parameters
    ----------
    encoding : str
        Text encoding of the input files.  Undecodable bytes are replaced,
        so a corrupt line surfaces as a field parse error instead of
        aborting the file.
    strict : bool
        Re-raise the first malformed or unparseable line instead of
        skipping it with a warning.
    continue_on_open_error : bool
        Skip input files that cannot be opened and keep going.  The
        default is to abort the whole run on the first such file.
    time_zone : str
        IANA time zone used to render max/min temperature dates.
    skip_blank_lines : bool
        Ignore empty lines silently rather than reporting them as
        malformed.
    """

    encoding: str = "utf-8"
    strict: bool = False
    continue_on_open_error: bool = False
    time_zone: str = "UTC"
    skip_blank_lines: bool = True

    def encoding_name(self) -> str:
        """Return the canonical codec name for :attr:`encoding`.

        Raises :class:`ClimateConfigError` for unknown encodings.
        """
        try:
            return codecs.lookup(self.encoding).name
        except LookupError as exc:
            raise ClimateConfigError(f"unknown encoding {self.encoding!r}") from exc

    def tzinfo(self) -> tzinfo:
        """Resolve :attr:`time_zone` to a ``tzinfo``.

        Raises :class:`ClimateConfigError` for unknown zone names.
        """
        if self.time_zone.upper() == "UTC":
            return UTC
        try:
            return ZoneInfo(self.time_zone)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ClimateConfigError(f"unknown time zone {self.time_zone!r}") from exc

    @classmethod
    def from_env(cls, **overrides: Any) -> ClimateConfig:
        """Create configuration from ``CLIMATE_*`` environment variables.

        Explicit keyword arguments override environment values.
        """
        env = os.environ
        config_kwargs: dict[str, Any] = {}

        _ENV_STR_MAP = {
            "CLIMATE_ENCODING": "encoding",
            "CLIMATE_TIME_ZONE": "time_zone",
        }
        for env_key, field_name in _ENV_STR_MAP.items():
            val = env.get(env_key)
            if val is not None:
                config_kwargs[field_name] = val

        _ENV_BOOL_MAP = {
            "CLIMATE_STRICT": ("strict", False),
            "CLIMATE_CONTINUE_ON_OPEN_ERROR": ("continue_on_open_error", False),
            "CLIMATE_SKIP_BLANK_LINES": ("skip_blank_lines", True),
        }
        for env_key, (field_name, default) in _ENV_BOOL_MAP.items():
            if field_name not in overrides:
                config_kwargs[field_name] = _env_bool(env.get(env_key), default)

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
