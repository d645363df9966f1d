"""IPMA open-data API client.

Source: Instituto Português do Mar e da Atmosfera (IPMA)
API Documentation: https://api.ipma.pt

Each method performs exactly one request and returns validated records.
Districts and islands share one endpoint and are told apart by
``idTipoLocal`` (``D`` or ``I``).
"""

from typing import Any

from pydantic import TypeAdapter

from ipmaclient.api.base_api import BaseAPI
from ipmaclient.exceptions import handle_errors
from ipmaclient.models.schemas import FORECAST_LIST
from ipmaclient.models.schemas import LOCATION_LIST
from ipmaclient.models.schemas import WEATHER_TYPE_LIST
from ipmaclient.models.schemas import WIND_SPEED_LIST
from ipmaclient.models.schemas import DataEnvelope
from ipmaclient.models.schemas import ForecastRecord
from ipmaclient.models.schemas import LocationRecord
from ipmaclient.models.schemas import ObservationReport
from ipmaclient.models.schemas import WeatherTypeRecord
from ipmaclient.models.schemas import WindSpeedRecord


LOCATIONS_ENDPOINT = "/distrits-islands.json"
FORECAST_ENDPOINT = "/forecast/meteorology/cities/daily/{global_id}.json"
WEATHER_TYPES_ENDPOINT = "/weather-type-classe.json"
WIND_SPEED_ENDPOINT = "/wind-speed-daily-classe.json"
OBSERVATIONS_ENDPOINT = "/observation/meteorology/stations/observations.json"

DISTRICT_TYPE = "D"
ISLAND_TYPE = "I"


class IPMAApiClient(BaseAPI):
    """Transport and validation for the IPMA endpoints."""

    def __init__(self, *args: Any, **kwargs: Any):
        super().__init__(*args, **kwargs)
        self.set_log_context(service="ipma_api")

    async def _fetch_collection(self, endpoint: str, operation: str) -> list[dict[str, Any]]:
        """Fetch an endpoint and return the raw items of its ``data`` envelope."""
        payload = await self._get(endpoint, operation)
        with handle_errors(operation):
            return DataEnvelope.model_validate(payload).data

    async def _fetch_locations(self, location_type: str, operation: str) -> list[LocationRecord]:
        items = await self._fetch_collection(LOCATIONS_ENDPOINT, operation)
        selected = [item for item in items if item.get("idTipoLocal") == location_type]
        with handle_errors(operation):
            return LOCATION_LIST.validate_python(selected)

    async def _fetch_validated(self, endpoint: str, adapter: TypeAdapter, operation: str) -> Any:
        items = await self._fetch_collection(endpoint, operation)
        with handle_errors(operation):
            return adapter.validate_python(items)

    async def fetch_districts(self) -> list[LocationRecord]:
        """Fetch all mainland districts."""
        return await self._fetch_locations(DISTRICT_TYPE, "fetch_districts")

    async def fetch_islands(self) -> list[LocationRecord]:
        """Fetch all islands."""
        return await self._fetch_locations(ISLAND_TYPE, "fetch_islands")

    async def fetch_weather_types(self) -> list[WeatherTypeRecord]:
        """Fetch weather types and their descriptions."""
        return await self._fetch_validated(WEATHER_TYPES_ENDPOINT, WEATHER_TYPE_LIST, "fetch_weather_types")

    async def fetch_wind_speed_classes(self) -> list[WindSpeedRecord]:
        """Fetch wind speed classes and their descriptions."""
        return await self._fetch_validated(WIND_SPEED_ENDPOINT, WIND_SPEED_LIST, "fetch_wind_speed_classes")

    async def fetch_forecast(self, global_id: int) -> list[ForecastRecord]:
        """Fetch the daily forecast for a location.

        Args:
            global_id: Internal API identifier (``globalIdLocal``) of the location

        Returns:
            One record per forecast day
        """
        endpoint = FORECAST_ENDPOINT.format(global_id=global_id)
        return await self._fetch_validated(endpoint, FORECAST_LIST, "fetch_forecast")

    async def fetch_current_weather_data(self) -> ObservationReport:
        """Fetch current station observations for mainland Portugal."""
        operation = "fetch_current_weather_data"
        payload = await self._get(OBSERVATIONS_ENDPOINT, operation)
        with handle_errors(operation):
            return ObservationReport.model_validate(payload)
