"""
Business layer: the external data gateway, the tri-state fetch controller,
the three widgets and the dashboard shell.
"""

from .async_result import AsyncResult, Status
from .dashboard import Dashboard
from .gateway import InfoGateway
from .location import ReportedLocationProvider, StaticLocationProvider, build_location_provider
from .widgets import CurrencyWidget, QuoteWidget, WeatherWidget

__all__ = [
    "AsyncResult",
    "Status",
    "Dashboard",
    "InfoGateway",
    "ReportedLocationProvider",
    "StaticLocationProvider",
    "build_location_provider",
    "CurrencyWidget",
    "QuoteWidget",
    "WeatherWidget",
]
