import asyncio
import logging
from typing import Optional

from infohub.data.models import Coordinates
from infohub.exceptions import LocationDeniedError, LocationUnavailableError
from infohub.interfaces.i_location_provider import ILocationProvider

logger = logging.getLogger(__name__)


class StaticLocationProvider(ILocationProvider):
    """Location capability with a fixed, configured position.

    With no position configured it behaves like a host without geolocation.
    """

    def __init__(self, coordinates: Optional[Coordinates] = None):
        self.coordinates = coordinates

    async def get_current_position(self) -> Coordinates:
        if self.coordinates is None:
            raise LocationUnavailableError("No position configured")
        return self.coordinates


class ReportedLocationProvider(ILocationProvider):
    """
    Location capability fed by the host.

    ``get_current_position()`` waits until the host reports a position, a
    failure, or that it has no location capability. The first report wins;
    later ones are ignored.
    """

    def __init__(self):
        self._outcome: Optional[asyncio.Future] = None

    def _future(self) -> asyncio.Future:
        if self._outcome is None:
            self._outcome = asyncio.get_running_loop().create_future()
        return self._outcome

    @property
    def reported(self) -> bool:
        return self._outcome is not None and self._outcome.done()

    def report_position(self, coordinates: Coordinates) -> bool:
        return self._settle(result=coordinates)

    def report_error(self, reason: str) -> bool:
        return self._settle(error=LocationDeniedError(reason))

    def report_unsupported(self) -> bool:
        return self._settle(error=LocationUnavailableError("Host has no location capability"))

    def _settle(self, result: Optional[Coordinates] = None, error: Optional[Exception] = None) -> bool:
        future = self._future()
        if future.done():
            logger.warning("Location already reported; ignoring new report")
            return False
        if error is not None:
            future.set_exception(error)
        else:
            future.set_result(result)
        return True

    async def get_current_position(self) -> Coordinates:
        return await self._future()


def build_location_provider(latitude: Optional[float] = None, longitude: Optional[float] = None) -> ILocationProvider:
    """Use the configured position when both coordinates are set, otherwise wait for the host."""
    if latitude is not None and longitude is not None:
        return StaticLocationProvider(Coordinates(latitude=latitude, longitude=longitude))
    return ReportedLocationProvider()
