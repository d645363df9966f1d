"""
Async client for the IPMA open-data weather API.
"""

__version__ = '0.1.0'

from .api import IPMAApiClient
from .config import ClientSettings, load_settings, setup_logging
from .error_codes import ErrorCode
from .exceptions import (
    ConfigError,
    InvalidResponseError,
    IPMAError,
    NetworkError,
    NotFoundError,
    ValidationError,
)
from .models import (
    ForecastResult,
    InitializeSummary,
    LocationFetchOptions,
    LocationResult,
    LocationType,
    WeatherResult,
    WeatherTypeResult,
    WindSpeedResult,
)
from .services import IPMAService

__all__ = [
    'ClientSettings',
    'ConfigError',
    'ErrorCode',
    'ForecastResult',
    'IPMAApiClient',
    'IPMAError',
    'IPMAService',
    'InitializeSummary',
    'InvalidResponseError',
    'LocationFetchOptions',
    'LocationResult',
    'LocationType',
    'NetworkError',
    'NotFoundError',
    'ValidationError',
    'WeatherResult',
    'WeatherTypeResult',
    'WindSpeedResult',
    'load_settings',
    'setup_logging',
]
