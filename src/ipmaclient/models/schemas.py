"""Schemas for raw IPMA API payloads.

Field names follow the upstream JSON keys. Unknown fields are dropped,
missing or mistyped required fields fail validation.

Source: Instituto Português do Mar e da Atmosfera (IPMA)
API Documentation: https://api.ipma.pt
"""

from typing import Any

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import StrictInt
from pydantic import StrictStr
from pydantic import TypeAdapter


class IPMARecord(BaseModel):
    """Base class for validated upstream records."""
    model_config = ConfigDict(extra="ignore", frozen=True)


class DataEnvelope(IPMARecord):
    """Envelope wrapping every collection endpoint."""
    data: list[dict[str, Any]]


class LocationRecord(IPMARecord):
    """District or island from the locations index.

    ``idDistrito`` is the public identifier, ``globalIdLocal`` is the
    identifier the forecast endpoint expects.
    """
    idDistrito: StrictInt
    idRegiao: StrictInt
    idAreaAviso: StrictStr
    idConcelho: StrictInt | None = None
    globalIdLocal: StrictInt
    latitude: StrictStr
    longitude: StrictStr
    idTipoLocal: StrictStr
    local: StrictStr


class WeatherTypeRecord(IPMARecord):
    idWeatherType: StrictInt
    descIdWeatherTypeEN: StrictStr
    descIdWeatherTypePT: StrictStr


class WindSpeedRecord(IPMARecord):
    classWindSpeed: StrictInt
    descClassWindSpeedDailyEN: StrictStr
    descClassWindSpeedDailyPT: StrictStr


class ForecastRecord(IPMARecord):
    """One forecast day for one location."""
    precipitaProb: StrictStr | None
    tMin: StrictStr
    tMax: StrictStr
    predWindDir: StrictStr
    idWeatherType: StrictInt
    classWindSpeed: StrictInt
    longitude: StrictStr
    latitude: StrictStr
    idArea: StrictInt | None = None
    globIdLocal: StrictInt
    forecastDate: StrictStr


class ObservationRecord(IPMARecord):
    """Current conditions reported by one station."""
    idRegiao: StrictInt
    idAreaAviso: StrictStr
    idConcelho: StrictInt
    globalIdLocal: StrictInt
    latitude: StrictStr
    longitude: StrictStr
    idTipoLocal: StrictStr
    local: StrictStr
    temp: StrictStr
    intensidadeVento: StrictStr
    idIntensidadeVento: StrictInt
    intensidadePrecipita: StrictStr | None = None
    idIntensidadePrecipita: StrictInt
    idWeatherType: StrictInt
    descIdWeatherTypePT: StrictStr
    descIdWeatherTypeEN: StrictStr
    idWeatherTypeHumid: StrictInt | None = None
    dataUpdate: StrictStr
    tempAtualizacao: StrictStr
    direcVento: StrictStr
    idDirecVento: StrictInt
    humidade: StrictStr
    pressao: StrictStr
    tMin5min: StrictStr | None = None
    tMax5min: StrictStr | None = None
    tMed5min: StrictStr | None = None
    precQuant: StrictStr | None = None


class ObservationReport(IPMARecord):
    owner: StrictStr
    country: StrictStr
    data: list[ObservationRecord]


LOCATION_LIST = TypeAdapter(list[LocationRecord])
WEATHER_TYPE_LIST = TypeAdapter(list[WeatherTypeRecord])
WIND_SPEED_LIST = TypeAdapter(list[WindSpeedRecord])
FORECAST_LIST = TypeAdapter(list[ForecastRecord])
