# ABOUTME: Pydantic BaseModels for 3-hour forecast slots, locations, and daily aggregates.
# ABOUTME: Defines structured types for OpenWeatherMap forecast data used throughout the app.

from datetime import datetime

from pydantic import BaseModel, Field

from src.date_utils import to_epoch_millis


class Location(BaseModel):
    """Coordinates of the city a forecast response was issued for."""

    latitude: float
    longitude: float


class Coord(BaseModel):
    lat: float
    lon: float


class City(BaseModel):
    """The "city" block of a forecast response. Only the coordinates are read."""

    coord: Coord

    def location(self) -> Location:
        return Location(latitude=self.coord.lat, longitude=self.coord.lon)


class MainStats(BaseModel):
    """The "main" block of a forecast slot."""

    pressure: float
    humidity: int
    temp_max: float
    temp_min: float


class WindStats(BaseModel):
    speed: float
    deg: float


class WeatherCondition(BaseModel):
    id: int


class RawForecastEntry(BaseModel):
    """One 3-hour slot from the forecast "list" array.

    Only the first weather condition is used; the provider sends one in practice.
    """

    dt_txt: str
    main: MainStats
    wind: WindStats
    weather: list[WeatherCondition] = Field(min_length=1)

    @property
    def condition(self) -> WeatherCondition:
        return self.weather[0]


class DailyAggregate(BaseModel):
    """One calendar day of forecast, built from the last slot of that day."""

    date: datetime
    humidity: int
    pressure: float
    wind_speed: float
    wind_direction: float
    max_temp: float
    min_temp: float
    weather_id: int

    def as_row(self) -> dict:
        """Flatten into weather table columns, with the date as epoch milliseconds."""
        return {
            "date": to_epoch_millis(self.date),
            "humidity": self.humidity,
            "pressure": self.pressure,
            "wind": self.wind_speed,
            "degrees": self.wind_direction,
            "max": self.max_temp,
            "min": self.min_temp,
            "weather_id": self.weather_id,
        }
