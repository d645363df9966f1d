"""Public result types returned by the IPMA service."""

from dataclasses import asdict
from dataclasses import dataclass
from enum import Enum
from typing import Any


UNKNOWN = "Unknown"


class LocationType(str, Enum):
    """Kind of forecast location."""
    DISTRICT = "district"
    ISLAND = "island"


@dataclass(frozen=True)
class LocationFetchOptions:
    """Forecast target. ``district_id`` takes precedence over ``island_id``."""
    district_id: int | None = None
    island_id: int | None = None


class _Result:
    """Serialization helper shared by result types."""

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)  # type: ignore[call-overload]
        return {
            key: value.value if isinstance(value, Enum) else value
            for key, value in data.items()
        }


@dataclass(frozen=True)
class InitializeSummary(_Result):
    """Number of records loaded per reference collection."""
    weather_types: int
    wind_speed_classes: int
    districts: int
    islands: int


@dataclass(frozen=True)
class LocationResult(_Result):
    id: int
    name: str
    type: LocationType
    latitude: str
    longitude: str


@dataclass(frozen=True)
class ForecastResult(_Result):
    location: str
    date: str
    min_temperature: str
    max_temperature: str
    precipitation_probability: str | None
    weather_type: str
    wind_direction: str
    wind_speed: str


@dataclass(frozen=True)
class WeatherResult(_Result):
    """Current conditions at one station.

    IPMA observations carry no sunrise/sunset, so both are always None.
    """
    location: str
    temperature: str
    weather_type: str
    humidity: str
    wind_direction: str
    wind_intensity: str
    rain_intensity: str | None
    pressure: str
    updated_at: str
    sunrise: str | None = None
    sunset: str | None = None


@dataclass(frozen=True)
class WeatherTypeResult(_Result):
    id: int
    description_pt: str
    description_en: str


@dataclass(frozen=True)
class WindSpeedResult(_Result):
    id: int
    description_pt: str
    description_en: str
