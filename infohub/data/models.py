from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Tab(str, Enum):
    """Widgets the dashboard shell can display."""

    WEATHER = "WEATHER"
    CURRENCY = "CURRENCY"
    QUOTE = "QUOTE"


class WeatherIcon(str, Enum):
    """Closed set of icon names the model may pick for a weather condition."""

    SUN = "SUN"
    CLOUD = "CLOUD"
    RAIN = "RAIN"
    STORM = "STORM"
    WIND = "WIND"
    FOG = "FOG"


class WeatherData(BaseModel):
    """
    Current weather for a position, as returned by the language model.

    Field aliases are the JSON names requested in the response schema, so
    ``model_dump(by_alias=True)`` reproduces the reply exactly.

    Attributes:
        location (str): City or area name.
        temperature_celsius (float): Temperature in Celsius.
        condition (str): Brief condition, e.g. 'Partly Cloudy'.
        icon (WeatherIcon): Icon name from the allowed list.
        humidity (float): Humidity percentage, 0-100.
        wind_speed_kph (float): Wind speed in kilometers per hour.
    """
    model_config = ConfigDict(populate_by_name=True, frozen=True, allow_inf_nan=False)

    location: str = Field(..., description="City or area name")
    temperature_celsius: float = Field(..., alias="temperatureCelsius", description="Temperature in Celsius")
    condition: str = Field(..., description="Brief weather condition, e.g., 'Partly Cloudy'")
    icon: WeatherIcon = Field(..., description="An icon name from the allowed list")
    humidity: float = Field(..., ge=0, le=100, description="Humidity percentage")
    wind_speed_kph: float = Field(..., alias="windSpeedKph", ge=0, description="Wind speed in kilometers per hour")


class CurrencyRates(BaseModel):
    """Conversion factors from 1 INR."""
    model_config = ConfigDict(populate_by_name=True, frozen=True, allow_inf_nan=False)

    usd: float = Field(..., alias="USD", gt=0, description="US dollars per 1 INR")
    eur: float = Field(..., alias="EUR", gt=0, description="Euros per 1 INR")


class QuoteData(BaseModel):
    """A short motivational quote and its author."""
    model_config = ConfigDict(frozen=True)

    quote: str = Field(..., description="The quote text")
    author: str = Field(..., description="Who said it")


class Coordinates(BaseModel):
    """A position reported by the host's location capability."""
    model_config = ConfigDict(frozen=True)

    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)
