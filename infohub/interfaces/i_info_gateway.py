from abc import ABC, abstractmethod

from infohub.data.models import CurrencyRates, QuoteData, WeatherData


class IInfoGateway(ABC):
    """
    Interface for the dashboard's external data gateway.

    Each operation issues one request to an external content service and
    returns a typed domain object. Implementations must not retry or cache.
    """

    @abstractmethod
    async def fetch_weather(self, lat: float, lon: float) -> WeatherData:
        """
        Retrieve the current weather for a position.

        Args:
            lat (float): Latitude in degrees.
            lon (float): Longitude in degrees.

        Returns:
            WeatherData: The parsed weather report.

        Raises:
            GatewayError: If the request fails or the reply cannot be parsed.
            MalformedResponseError: If the reply does not match the schema.
        """
        pass

    @abstractmethod
    async def fetch_currency_rates(self) -> CurrencyRates:
        """
        Retrieve conversion factors from 1 INR to USD and EUR.

        Raises:
            GatewayError: If the request fails or the reply cannot be parsed.
        """
        pass

    @abstractmethod
    async def fetch_quote(self) -> QuoteData:
        """
        Retrieve a short motivational quote.

        Raises:
            GatewayError: If the request fails or the reply cannot be parsed.
        """
        pass
