"""Pytest configuration and shared fixtures."""

import copy
from collections.abc import Callable
from unittest.mock import AsyncMock

import httpx
import pytest

from ipmaclient.api.ipma_api import IPMAApiClient
from ipmaclient.config.settings import ClientSettings
from ipmaclient.models.schemas import ForecastRecord
from ipmaclient.models.schemas import LocationRecord
from ipmaclient.models.schemas import ObservationReport
from ipmaclient.models.schemas import WeatherTypeRecord
from ipmaclient.models.schemas import WindSpeedRecord

TEST_BASE_URL = "https://ipma.test/open-data"

DISTRICTS = [
    {
        "idDistrito": 1,
        "idRegiao": 1,
        "idAreaAviso": "BGC",
        "idConcelho": 1,
        "globalIdLocal": 1010500,
        "latitude": "41.5503",
        "idTipoLocal": "D",
        "local": "Braga",
        "longitude": "-8.42"
    },
    {
        "idDistrito": 2,
        "idRegiao": 2,
        "idAreaAviso": "LSB",
        "idConcelho": 2,
        "globalIdLocal": 1110600,
        "latitude": "38.7167",
        "idTipoLocal": "D",
        "local": "Lisboa",
        "longitude": "-9.1333"
    }
]

ISLANDS = [
    {
        "idDistrito": 41,
        "idRegiao": 3,
        "idAreaAviso": "AZR",
        "globalIdLocal": 3420300,
        "latitude": "37.74",
        "idTipoLocal": "I",
        "local": "Ponta Delgada",
        "longitude": "-25.67"
    }
]

WEATHER_TYPES = [
    {
        "idWeatherType": 1,
        "descIdWeatherTypeEN": "Clear sky",
        "descIdWeatherTypePT": "Céu limpo"
    },
    {
        "idWeatherType": 2,
        "descIdWeatherTypeEN": "Partly cloudy",
        "descIdWeatherTypePT": "Céu parcialmente nublado"
    }
]

WIND_SPEED_CLASSES = [
    {
        "classWindSpeed": 1,
        "descClassWindSpeedDailyEN": "Weak",
        "descClassWindSpeedDailyPT": "Fraco"
    }
]

FORECAST = [
    {
        "precipitaProb": "0.0",
        "tMin": "10",
        "tMax": "20",
        "predWindDir": "NW",
        "idWeatherType": 1,
        "classWindSpeed": 1,
        "longitude": "-8.42",
        "globIdLocal": 1010500,
        "latitude": "41.5503",
        "forecastDate": "2023-11-15"
    }
]

OBSERVATIONS = {
    "owner": "IPMA",
    "country": "PT",
    "data": [
        {
            "idRegiao": 1,
            "idAreaAviso": "BGC",
            "idConcelho": 1,
            "globalIdLocal": 1010500,
            "latitude": "41.5503",
            "idTipoLocal": "D",
            "local": "Braga",
            "longitude": "-8.42",
            "temp": "15",
            "intensidadeVento": "Fraco",
            "idIntensidadeVento": 1,
            "intensidadePrecipita": "",
            "idIntensidadePrecipita": 0,
            "idWeatherType": 1,
            "descIdWeatherTypePT": "Céu limpo",
            "descIdWeatherTypeEN": "Clear sky",
            "dataUpdate": "2023-11-15 12:00",
            "tempAtualizacao": "12:00",
            "direcVento": "NW",
            "idDirecVento": 1,
            "humidade": "70",
            "pressao": "1020"
        }
    ]
}


@pytest.fixture
def payloads():
    """Raw upstream payloads, deep-copied so tests may mutate them."""
    return copy.deepcopy({
        "districts": DISTRICTS,
        "islands": ISLANDS,
        "weather_types": WEATHER_TYPES,
        "wind_speed_classes": WIND_SPEED_CLASSES,
        "forecast": FORECAST,
        "observations": OBSERVATIONS,
    })


@pytest.fixture
def settings():
    return ClientSettings(base_url=TEST_BASE_URL, timeout=1.0)


@pytest.fixture
def make_api_client(settings) -> Callable[[Callable[[httpx.Request], httpx.Response]], IPMAApiClient]:
    """Build an IPMAApiClient whose requests are answered by ``handler``."""
    def factory(handler: Callable[[httpx.Request], httpx.Response]) -> IPMAApiClient:
        client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        return IPMAApiClient(settings, client=client)
    return factory


@pytest.fixture
def mock_api_client(payloads):
    """Transport double returning validated records."""
    api = AsyncMock(spec=IPMAApiClient)
    api.fetch_districts.return_value = [LocationRecord.model_validate(d) for d in payloads["districts"]]
    api.fetch_islands.return_value = [LocationRecord.model_validate(i) for i in payloads["islands"]]
    api.fetch_weather_types.return_value = [
        WeatherTypeRecord.model_validate(w) for w in payloads["weather_types"]
    ]
    api.fetch_wind_speed_classes.return_value = [
        WindSpeedRecord.model_validate(w) for w in payloads["wind_speed_classes"]
    ]
    api.fetch_forecast.return_value = [ForecastRecord.model_validate(f) for f in payloads["forecast"]]
    api.fetch_current_weather_data.return_value = ObservationReport.model_validate(payloads["observations"])
    return api
