"""IPMA weather service.

Joins the raw IPMA endpoints into locations, forecasts, current
observations and lookup tables. Reference data (weather types, wind speed
classes, districts and islands) is fetched concurrently on first use and
kept in memory for the lifetime of the service.
"""

import asyncio
from typing import Any

from ipmaclient.api.ipma_api import IPMAApiClient
from ipmaclient.config.settings import ClientSettings
from ipmaclient.exceptions import NotFoundError
from ipmaclient.models.results import UNKNOWN
from ipmaclient.models.results import ForecastResult
from ipmaclient.models.results import InitializeSummary
from ipmaclient.models.results import LocationFetchOptions
from ipmaclient.models.results import LocationResult
from ipmaclient.models.results import LocationType
from ipmaclient.models.results import WeatherResult
from ipmaclient.models.results import WeatherTypeResult
from ipmaclient.models.results import WindSpeedResult
from ipmaclient.models.schemas import LocationRecord
from ipmaclient.models.schemas import WeatherTypeRecord
from ipmaclient.models.schemas import WindSpeedRecord
from ipmaclient.services.reference_data import ReferenceData
from ipmaclient.utils.logging_utils import EnhancedLoggerMixin
from ipmaclient.utils.logging_utils import log_execution


class IPMAService(EnhancedLoggerMixin):
    """Domain operations over the IPMA API.

    Usage:
        async with IPMAService() as ipma:
            forecast = await ipma.get_forecast(LocationFetchOptions(district_id=1))
    """

    def __init__(
        self,
        api_client: IPMAApiClient | None = None,
        settings: ClientSettings | None = None
    ):
        """Initialize service.

        Args:
            api_client: Transport to use, built from ``settings`` when omitted
            settings: Client settings, ignored when ``api_client`` is given
        """
        super().__init__()
        self.set_log_context(service="ipma")
        self.api_client = api_client or IPMAApiClient(settings)
        self._reference: ReferenceData | None = None

    async def aclose(self) -> None:
        await self.api_client.aclose()

    async def __aenter__(self) -> "IPMAService":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    @property
    def is_ready(self) -> bool:
        """Whether reference data has been loaded."""
        return self._reference is not None

    @property
    def weather_types(self) -> tuple[WeatherTypeRecord, ...] | None:
        return self._reference.weather_types if self._reference else None

    @property
    def wind_speed_classes(self) -> tuple[WindSpeedRecord, ...] | None:
        return self._reference.wind_speed_classes if self._reference else None

    @property
    def districts(self) -> tuple[LocationRecord, ...] | None:
        return self._reference.districts if self._reference else None

    @property
    def islands(self) -> tuple[LocationRecord, ...] | None:
        return self._reference.islands if self._reference else None

    @log_execution(level='DEBUG')
    async def initialize(self) -> InitializeSummary:
        """Fetch all reference data concurrently and replace the cache.

        If any fetch fails the others are cancelled, the previous cache is
        kept and the error is raised.

        Returns:
            Number of records loaded per collection
        """
        tasks = [
            asyncio.ensure_future(self.api_client.fetch_weather_types()),
            asyncio.ensure_future(self.api_client.fetch_wind_speed_classes()),
            asyncio.ensure_future(self.api_client.fetch_districts()),
            asyncio.ensure_future(self.api_client.fetch_islands()),
        ]
        try:
            weather_types, wind_speed_classes, districts, islands = await asyncio.gather(*tasks)
        except Exception as e:
            for task in tasks:
                task.cancel()
            self.error(f"Failed to initialize IPMA client: {e}")
            raise

        self._reference = ReferenceData(
            weather_types=tuple(weather_types),
            wind_speed_classes=tuple(wind_speed_classes),
            districts=tuple(districts),
            islands=tuple(islands),
        )
        summary = self._reference.summary()
        self.info("Loaded reference data", **summary.to_dict())
        return summary

    async def ensure_ready(self) -> ReferenceData:
        """Return the cached reference data, loading it on first use."""
        if self._reference is None:
            await self.initialize()
        assert self._reference is not None
        return self._reference

    @log_execution(level='DEBUG')
    async def get_locations(self) -> list[LocationResult]:
        """Get all districts followed by all islands."""
        reference = await self.ensure_ready()

        return [
            self._to_location_result(district, LocationType.DISTRICT)
            for district in reference.districts
        ] + [
            self._to_location_result(island, LocationType.ISLAND)
            for island in reference.islands
        ]

    @log_execution(level='DEBUG')
    async def get_forecast(self, options: LocationFetchOptions) -> list[ForecastResult]:
        """Get the daily forecast for a district or island.

        Args:
            options: Target location; ``district_id`` wins when both are set

        Returns:
            One result per forecast day

        Raises:
            NotFoundError: If the location is not in the cached reference data
        """
        reference = await self.ensure_ready()
        location = self._resolve_location(reference, options)

        forecast = await self.api_client.fetch_forecast(location.globalIdLocal)
        location_name = location.local or UNKNOWN

        return [
            ForecastResult(
                location=location_name,
                date=day.forecastDate,
                min_temperature=day.tMin,
                max_temperature=day.tMax,
                precipitation_probability=day.precipitaProb,
                weather_type=reference.weather_type_description(day.idWeatherType) or UNKNOWN,
                wind_direction=day.predWindDir,
                wind_speed=reference.wind_speed_description(day.classWindSpeed) or UNKNOWN,
            )
            for day in forecast
        ]

    @log_execution(level='DEBUG')
    async def get_current_weather(self) -> list[WeatherResult]:
        """Get current observations for mainland Portugal stations."""
        report = await self.api_client.fetch_current_weather_data()

        return [
            WeatherResult(
                location=station.local,
                temperature=station.temp,
                weather_type=station.descIdWeatherTypeEN,
                humidity=station.humidade,
                wind_direction=station.direcVento,
                wind_intensity=station.intensidadeVento,
                rain_intensity=station.intensidadePrecipita,
                pressure=station.pressao,
                updated_at=station.dataUpdate,
            )
            for station in report.data
        ]

    async def get_weather_types(self) -> list[WeatherTypeResult]:
        """Get the weather type lookup table."""
        await self.ensure_ready()
        if self.weather_types is None:
            return []

        return [
            WeatherTypeResult(
                id=weather_type.idWeatherType,
                description_pt=weather_type.descIdWeatherTypePT,
                description_en=weather_type.descIdWeatherTypeEN,
            )
            for weather_type in self.weather_types
        ]

    async def get_wind_speed_classes(self) -> list[WindSpeedResult]:
        """Get the wind speed class lookup table."""
        await self.ensure_ready()
        if self.wind_speed_classes is None:
            return []

        return [
            WindSpeedResult(
                id=wind_speed.classWindSpeed,
                description_pt=wind_speed.descClassWindSpeedDailyPT,
                description_en=wind_speed.descClassWindSpeedDailyEN,
            )
            for wind_speed in self.wind_speed_classes
        ]

    def _resolve_location(self, reference: ReferenceData, options: LocationFetchOptions) -> LocationRecord:
        """Look up the location targeted by a forecast request."""
        location: LocationRecord | None = None
        if options.district_id is not None:
            location = reference.find_district(options.district_id)
        elif options.island_id is not None:
            location = reference.find_island(options.island_id)

        if location is None:
            self.warning(
                "Location not found",
                district_id=options.district_id,
                island_id=options.island_id
            )
            raise NotFoundError(
                "Location not found",
                details={"district_id": options.district_id, "island_id": options.island_id}
            )
        return location

    @staticmethod
    def _to_location_result(location: LocationRecord, location_type: LocationType) -> LocationResult:
        return LocationResult(
            id=location.idDistrito,
            name=location.local,
            type=location_type,
            latitude=location.latitude,
            longitude=location.longitude,
        )
