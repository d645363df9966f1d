"""In-memory snapshot of IPMA reference data."""

from dataclasses import dataclass

from ipmaclient.models.results import InitializeSummary
from ipmaclient.models.schemas import LocationRecord
from ipmaclient.models.schemas import WeatherTypeRecord
from ipmaclient.models.schemas import WindSpeedRecord


@dataclass(frozen=True)
class ReferenceData:
    """The four reference collections, always loaded together.

    A service swaps the whole snapshot in one assignment, so readers never
    observe a partially loaded cache.
    """
    weather_types: tuple[WeatherTypeRecord, ...]
    wind_speed_classes: tuple[WindSpeedRecord, ...]
    districts: tuple[LocationRecord, ...]
    islands: tuple[LocationRecord, ...]

    def summary(self) -> InitializeSummary:
        return InitializeSummary(
            weather_types=len(self.weather_types),
            wind_speed_classes=len(self.wind_speed_classes),
            districts=len(self.districts),
            islands=len(self.islands),
        )

    def find_district(self, district_id: int) -> LocationRecord | None:
        """Find a district by its public identifier."""
        return next((d for d in self.districts if d.idDistrito == district_id), None)

    def find_island(self, island_id: int) -> LocationRecord | None:
        """Find an island by its public identifier."""
        return next((i for i in self.islands if i.idDistrito == island_id), None)

    def weather_type_description(self, weather_type_id: int) -> str | None:
        """English description for a weather type code, None on miss."""
        match = next((w for w in self.weather_types if w.idWeatherType == weather_type_id), None)
        return match.descIdWeatherTypeEN if match else None

    def wind_speed_description(self, wind_speed_class: int) -> str | None:
        """English description for a wind speed class, None on miss."""
        match = next((w for w in self.wind_speed_classes if w.classWindSpeed == wind_speed_class), None)
        return match.descClassWindSpeedDailyEN if match else None
