import asyncio
import logging
from typing import Awaitable, Dict, List, Optional, Set

from infohub.data.models import Tab
from infohub.data.views import TabInfo, TabsResponse, WidgetView
from infohub.interfaces.i_info_gateway import IInfoGateway
from infohub.interfaces.i_location_provider import ILocationProvider

from .widgets import CurrencyWidget, QuoteWidget, WeatherWidget, Widget

logger = logging.getLogger(__name__)

TAB_LABELS = {
    Tab.WEATHER: "Weather",
    Tab.CURRENCY: "Currency",
    Tab.QUOTE: "Quote",
}


class Dashboard:
    """
    Dashboard shell.

    Holds the selected tab and renders exactly one widget at a time. A widget
    is mounted (its fetch started in the background) the first time its tab
    is shown; hidden widgets keep their state and are never refetched by tab
    switches.

    Must be used from within a running event loop.
    """

    def __init__(
        self,
        gateway: IInfoGateway,
        location_provider: ILocationProvider,
        initial_tab: Tab = Tab.WEATHER,
        shutdown_grace_seconds: float = 5.0,
    ):
        self.widgets: Dict[Tab, Widget] = {
            Tab.WEATHER: WeatherWidget(gateway, location_provider),
            Tab.CURRENCY: CurrencyWidget(gateway),
            Tab.QUOTE: QuoteWidget(gateway),
        }
        self.active_tab = initial_tab
        self.shutdown_grace_seconds = shutdown_grace_seconds
        self._tasks: Set[asyncio.Task] = set()
        self._closed = False

    @property
    def weather(self) -> WeatherWidget:
        return self.widgets[Tab.WEATHER]

    @property
    def currency(self) -> CurrencyWidget:
        return self.widgets[Tab.CURRENCY]

    @property
    def quote(self) -> QuoteWidget:
        return self.widgets[Tab.QUOTE]

    def start(self) -> WidgetView:
        """Show the initial tab."""
        return self.select_tab(self.active_tab)

    def select_tab(self, tab: Tab) -> WidgetView:
        if self._closed:
            raise RuntimeError("Dashboard is closed")
        self.active_tab = tab
        widget = self.widgets[tab]
        if not widget.mounted:
            self._spawn(widget.mount(), name=f"mount-{tab.value.lower()}")
        return widget.render()

    def render(self) -> WidgetView:
        return self.widgets[self.active_tab].render()

    def tabs(self) -> TabsResponse:
        return TabsResponse(
            active=self.active_tab,
            tabs=[TabInfo(id=tab, label=label, active=tab is self.active_tab) for tab, label in TAB_LABELS.items()],
        )

    def set_currency_amount(self, amount: str) -> WidgetView:
        self.currency.set_amount(amount)
        return self.currency.render()

    def refresh_quote(self) -> bool:
        """Start a quote refresh in the background; False if one is already running."""
        pending = self.quote.start_refresh()
        if pending is None:
            return False
        self._spawn(pending, name="refresh-quote")
        return True

    def _spawn(self, coro: Awaitable[None], name: str) -> None:
        task = asyncio.ensure_future(coro)
        task.set_name(name)
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    @property
    def pending(self) -> List[asyncio.Task]:
        return [task for task in self._tasks if not task.done()]

    async def wait_idle(self, timeout: Optional[float] = None) -> bool:
        """Wait for background fetches; True if none is left running."""
        pending = self.pending
        if not pending:
            return True
        _, still_pending = await asyncio.wait(pending, timeout=timeout)
        return not still_pending

    async def close(self) -> None:
        """Tear down all widgets; late results are discarded."""
        if self._closed:
            return
        self._closed = True
        for widget in self.widgets.values():
            widget.dispose()
        if not await self.wait_idle(self.shutdown_grace_seconds):
            leftover = self.pending
            for task in leftover:
                logger.warning(f"Cancelling {task.get_name()} still running at shutdown")
                task.cancel()
            await asyncio.gather(*leftover, return_exceptions=True)
