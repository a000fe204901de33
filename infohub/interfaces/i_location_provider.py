from abc import ABC, abstractmethod

from infohub.data.models import Coordinates


class ILocationProvider(ABC):
    """Interface for the host's location capability."""

    @abstractmethod
    async def get_current_position(self) -> Coordinates:
        """
        Return the current position.

        Raises:
            LocationUnavailableError: If there is no location capability.
            LocationDeniedError: If the host refused or failed to locate.
        """
        pass
