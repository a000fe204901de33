import json
import logging
import time
from typing import Any, Dict, Type, TypeVar

from prometheus_client import Counter, Histogram
from pydantic import BaseModel, ValidationError

from infohub.data.models import CurrencyRates, QuoteData, WeatherData
from infohub.exceptions import GatewayError, MalformedResponseError
from infohub.infrastructure.gemini_client import IContentGenerator
from infohub.interfaces.i_info_gateway import IInfoGateway

from .constants import (
    CURRENCY_ERROR,
    CURRENCY_PROMPT,
    CURRENCY_SCHEMA,
    DEFAULT_MODEL,
    QUOTE_ERROR,
    QUOTE_PROMPT,
    QUOTE_SCHEMA,
    WEATHER_ERROR,
    WEATHER_ICON_NAMES,
    WEATHER_PROMPT,
    WEATHER_SCHEMA,
)

logger = logging.getLogger(__name__)

# ============================================================================
# METRICS
# ============================================================================

GATEWAY_REQUESTS = Counter('infohub_gateway_requests_total', 'Gateway fetches', ['domain', 'outcome'])
GATEWAY_DURATION = Histogram('infohub_gateway_request_duration_seconds', 'Gateway fetch duration', ['domain'],
                             buckets=[0.5, 1, 2, 5, 10, 30, 60])

ModelT = TypeVar("ModelT", bound=BaseModel)


def _reject_constant(token: str) -> float:
    """Refuse NaN and Infinity, which json.loads accepts but JSON does not."""
    raise ValueError(f"Non-standard JSON constant: {token}")


class InfoGateway(IInfoGateway):
    """
    External data gateway backed by a generative-content service.

    Every operation sends one prompt with a response schema, parses the reply
    text as JSON and validates it into the domain model. Failures are logged
    with their original detail and re-raised as GatewayError with a generic
    message for the domain.

    Attributes:
        client (IContentGenerator): The content-generation client.
        model (str): Model identifier used for every request.
    """

    def __init__(self, client: IContentGenerator, model: str = DEFAULT_MODEL):
        self.client = client
        self.model = model

    async def fetch_weather(self, lat: float, lon: float) -> WeatherData:
        prompt = WEATHER_PROMPT.format(lat=lat, lon=lon, icons=WEATHER_ICON_NAMES)
        data = await self._generate_json("weather", prompt, WEATHER_SCHEMA, WEATHER_ERROR)
        return self._validate("weather", WeatherData, data, WEATHER_ERROR)

    async def fetch_currency_rates(self) -> CurrencyRates:
        data = await self._generate_json("currency", CURRENCY_PROMPT, CURRENCY_SCHEMA, CURRENCY_ERROR)
        rates = data.get("rates")
        if not isinstance(rates, dict):
            logger.error(f"Currency reply has no 'rates' object: {data!r}")
            GATEWAY_REQUESTS.labels(domain="currency", outcome="malformed").inc()
            raise MalformedResponseError(CURRENCY_ERROR, domain="currency")
        return self._validate("currency", CurrencyRates, rates, CURRENCY_ERROR)

    async def fetch_quote(self) -> QuoteData:
        data = await self._generate_json("quote", QUOTE_PROMPT, QUOTE_SCHEMA, QUOTE_ERROR)
        return self._validate("quote", QuoteData, data, QUOTE_ERROR)

    async def _generate_json(
        self,
        domain: str,
        prompt: str,
        schema: Dict[str, Any],
        error_message: str,
    ) -> Dict[str, Any]:
        """Call the service once and parse the reply text as a JSON object."""
        start = time.perf_counter()
        try:
            text = await self.client.generate_content(self.model, prompt, schema)
            data = json.loads(text, parse_constant=_reject_constant)
        except Exception as e:
            logger.error(f"Error fetching {domain} data from {self.model}: {e}")
            GATEWAY_REQUESTS.labels(domain=domain, outcome="error").inc()
            raise GatewayError(error_message, domain=domain) from e
        finally:
            GATEWAY_DURATION.labels(domain=domain).observe(time.perf_counter() - start)

        if not isinstance(data, dict):
            logger.error(f"Expected a JSON object for {domain}, got {type(data).__name__}")
            GATEWAY_REQUESTS.labels(domain=domain, outcome="malformed").inc()
            raise MalformedResponseError(error_message, domain=domain)
        return data

    def _validate(self, domain: str, model: Type[ModelT], data: Dict[str, Any], error_message: str) -> ModelT:
        try:
            value = model.model_validate(data)
        except ValidationError as e:
            logger.error(f"Malformed {domain} reply: {e.error_count()} error(s): {e}")
            GATEWAY_REQUESTS.labels(domain=domain, outcome="malformed").inc()
            raise MalformedResponseError(error_message, domain=domain) from e
        GATEWAY_REQUESTS.labels(domain=domain, outcome="success").inc()
        return value
