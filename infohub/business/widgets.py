"""
Widget controllers for the dashboard.

Each widget owns one AsyncResult, starts its fetch on ``mount()`` and turns
its current state into a WidgetView on ``render()``. Display values are pure
projections of the state and are recomputed on every render.
"""

import logging
import math
import re
from abc import ABC, abstractmethod
from typing import Any, Awaitable, Dict, Generic, Optional, TypeVar

from infohub.data.models import CurrencyRates, QuoteData, Tab, WeatherData
from infohub.data.views import WidgetView
from infohub.exceptions import LocationDeniedError, LocationUnavailableError
from infohub.interfaces.i_info_gateway import IInfoGateway
from infohub.interfaces.i_location_provider import ILocationProvider

from .async_result import AsyncResult, Status
from .constants import GEOLOCATION_ERROR, GEOLOCATION_UNSUPPORTED

logger = logging.getLogger(__name__)

T = TypeVar("T")

_LEADING_NUMBER = re.compile(r"^\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves rounded up (18.5 -> 19, -0.5 -> 0)."""
    return int(math.floor(value + 0.5))


def format_number(value: float) -> str:
    """Format like a plain number in the UI: 12.0 -> '12', 12.5 -> '12.5'."""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def parse_amount(text: str) -> float:
    """Parse user input leniently: the leading numeric prefix, or 0 if there is none."""
    match = _LEADING_NUMBER.match(text or "")
    if not match:
        return 0.0
    value = float(match.group(0))
    if math.isnan(value) or math.isinf(value):
        return 0.0
    return value


class Widget(ABC, Generic[T]):
    """Base class: one tab, one card, one tri-state fetch."""

    tab: Tab
    title: str

    def __init__(self, gateway: IInfoGateway):
        self.gateway = gateway
        self.state: AsyncResult[T] = AsyncResult(self.tab.value.lower())
        self.mounted = False

    async def mount(self) -> None:
        """Start the widget's initial fetch. Only the first call has an effect."""
        if self.mounted:
            return
        self.mounted = True
        logger.info(f"Mounting {self.tab.value} widget")
        await self.load()

    @abstractmethod
    async def load(self) -> None:
        pass

    def dispose(self) -> None:
        self.state.dispose()

    @abstractmethod
    def content(self) -> Dict[str, Any]:
        pass

    def actions(self) -> Dict[str, Any]:
        return {}

    def render(self) -> WidgetView:
        state = self.state
        return WidgetView(
            tab=self.tab,
            title=self.title,
            status=state.status.value,
            error=state.error if state.status is Status.ERROR else None,
            content=self.content() if state.value is not None else {},
            actions=self.actions(),
        )


class WeatherWidget(Widget[WeatherData]):
    """Current weather at the host's position."""

    tab = Tab.WEATHER
    title = "Current Weather"

    def __init__(self, gateway: IInfoGateway, location_provider: ILocationProvider):
        super().__init__(gateway)
        self.location_provider = location_provider

    async def load(self) -> None:
        try:
            position = await self.location_provider.get_current_position()
        except LocationDeniedError as e:
            logger.warning(f"Location denied: {e}")
            self.state.fail(GEOLOCATION_ERROR.format(reason=e))
            return
        except LocationUnavailableError as e:
            logger.warning(f"Location unavailable: {e}")
            self.state.fail(GEOLOCATION_UNSUPPORTED)
            return

        await self.state.run(lambda: self.gateway.fetch_weather(position.latitude, position.longitude))

    def content(self) -> Dict[str, Any]:
        weather = self.state.value
        return {
            "location": weather.location,
            "temperature": f"{round_half_up(weather.temperature_celsius)}°C",
            "condition": weather.condition,
            "icon": weather.icon.value,
            "humidity": f"{format_number(weather.humidity)}%",
            "wind_speed": f"{format_number(weather.wind_speed_kph)} km/h",
        }


class CurrencyWidget(Widget[CurrencyRates]):
    """Converts an amount in INR to USD and EUR."""

    tab = Tab.CURRENCY
    title = "Currency Converter"
    default_amount = "1000"

    def __init__(self, gateway: IInfoGateway):
        super().__init__(gateway)
        self.amount = self.default_amount

    async def load(self) -> None:
        await self.state.run(self.gateway.fetch_currency_rates)

    def set_amount(self, amount: str) -> None:
        self.amount = amount

    def converted(self) -> Dict[str, str]:
        rates = self.state.value
        if rates is None:
            return {"usd": "...", "eur": "..."}
        principal = parse_amount(self.amount)
        return {
            "usd": f"{principal * rates.usd:.2f}",
            "eur": f"{principal * rates.eur:.2f}",
        }

    def content(self) -> Dict[str, Any]:
        rates = self.state.value
        converted = self.converted()
        return {
            "amount_inr": self.amount,
            "usd": converted["usd"],
            "eur": converted["eur"],
            "rates": f"1 INR = ${rates.usd:.5f} USD / €{rates.eur:.5f} EUR",
        }


class QuoteWidget(Widget[QuoteData]):
    """A motivational quote with a manual refresh action."""

    tab = Tab.QUOTE
    title = "Motivational Quote"

    async def load(self) -> None:
        await self.state.run(self.gateway.fetch_quote)

    def start_refresh(self) -> Optional[Awaitable[None]]:
        """
        Enter LOADING for a new quote and return the awaitable that completes
        the fetch, or None if a fetch is already in flight.
        """
        if not self.mounted or self.state.is_loading or self.state.disposed:
            logger.info("Quote refresh ignored: fetch already in flight")
            return None
        generation = self.state.begin()
        return self.state.resolve(generation, self.gateway.fetch_quote)

    async def refresh(self) -> bool:
        pending = self.start_refresh()
        if pending is None:
            return False
        await pending
        return True

    def content(self) -> Dict[str, Any]:
        quote: Optional[QuoteData] = self.state.value
        return {"quote": quote.quote, "author": quote.author}

    def actions(self) -> Dict[str, Any]:
        loading = self.state.is_loading
        return {
            "refresh": {
                "label": "Generating..." if loading else "New Quote",
                "enabled": not loading,
            }
        }
