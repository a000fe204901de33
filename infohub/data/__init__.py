"""Domain types and view models."""

from .models import (
    Coordinates,
    CurrencyRates,
    QuoteData,
    Tab,
    WeatherData,
    WeatherIcon,
)
from .views import WidgetView

__all__ = [
    "Coordinates",
    "CurrencyRates",
    "QuoteData",
    "Tab",
    "WeatherData",
    "WeatherIcon",
    "WidgetView",
]
