"""Internal constants shared across the library."""

# ------------------------------------------------------------------
# TDV line layout
# ------------------------------------------------------------------

FIELD_COUNT = 9
FIELD_SEPARATOR = "\t"
STATE_CODE_LENGTH = 2

FIELD_STATE_CODE = 0
FIELD_TIMESTAMP = 1
FIELD_GEOHASH = 2
FIELD_HUMIDITY = 3
FIELD_SNOW = 4
FIELD_CLOUD_COVER = 5
FIELD_LIGHTNING = 6
FIELD_PRESSURE = 7
FIELD_TEMPERATURE = 8

FIELD_NAMES: tuple[str, ...] = (
    "state_code",
    "timestamp",
    "geohash",
    "humidity",
    "snow",
    "cloud_cover",
    "lightning",
    "pressure",
    "temperature",
)

# ------------------------------------------------------------------
# Unit conversions
# ------------------------------------------------------------------

_RANKINE_OFFSET_F = 459.67
_MS_PER_SECOND = 1000


def kelvin_to_fahrenheit(kelvin: float) -> float:
    """Convert a Kelvin temperature to degrees Fahrenheit."""
    return kelvin * 9 / 5 - _RANKINE_OFFSET_F


def ms_to_seconds(milliseconds: float) -> int:
    """Convert epoch milliseconds to whole epoch seconds, truncating toward zero."""
    return int(milliseconds / _MS_PER_SECOND)
