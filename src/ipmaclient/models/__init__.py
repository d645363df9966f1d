"""Data models for the IPMA client."""

from ipmaclient.models.results import (
    UNKNOWN,
    ForecastResult,
    InitializeSummary,
    LocationFetchOptions,
    LocationResult,
    LocationType,
    WeatherResult,
    WeatherTypeResult,
    WindSpeedResult,
)
from ipmaclient.models.schemas import (
    ForecastRecord,
    LocationRecord,
    ObservationRecord,
    ObservationReport,
    WeatherTypeRecord,
    WindSpeedRecord,
)

__all__ = [
    'UNKNOWN',
    'ForecastRecord',
    'ForecastResult',
    'InitializeSummary',
    'LocationFetchOptions',
    'LocationRecord',
    'LocationResult',
    'LocationType',
    'ObservationRecord',
    'ObservationReport',
    'WeatherResult',
    'WeatherTypeRecord',
    'WeatherTypeResult',
    'WindSpeedRecord',
    'WindSpeedResult',
]
