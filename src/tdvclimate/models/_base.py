"""Base model and timestamp helpers shared by the climate models.

Every model inherits from :class:`ClimateBaseModel`, which forbids
unknown fields so a typo in a keyword argument fails loudly instead of
being dropped.
"""

from __future__ import annotations

from datetime import UTC, datetime, tzinfo

from pydantic import BaseModel, ConfigDict


def epoch_to_datetime(seconds: int, tz: tzinfo = UTC) -> datetime:
    """Convert whole epoch seconds to an aware datetime in *tz* (UTC by default)."""
    return datetime.fromtimestamp(seconds, tz=tz)


class ClimateBaseModel(BaseModel):
    """Base for climate data models."""

    model_config = ConfigDict(extra="forbid")
