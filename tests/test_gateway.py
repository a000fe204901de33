"""Tests for the external data gateway.

The content-generation client is replaced by FakeContentGenerator, so these
tests cover prompt/schema construction, parsing, validation and the failure
policy without any network access.
"""

import asyncio
import json

import pytest

from infohub.business.constants import CURRENCY_SCHEMA, QUOTE_SCHEMA, WEATHER_SCHEMA
from infohub.business.gateway import InfoGateway
from infohub.data.models import CurrencyRates, QuoteData, WeatherData
from infohub.exceptions import ContentGenerationError, GatewayError, MalformedResponseError
from infohub.interfaces.i_info_gateway import IInfoGateway
from fakes import SAN_FRANCISCO, FakeContentGenerator

WEATHER_MESSAGE = "Failed to fetch weather data. Please try again."
CURRENCY_MESSAGE = "Failed to fetch currency rates. Please try again."
QUOTE_MESSAGE = "Failed to fetch a quote. Please try again."


def make_gateway(*replies):
    client = FakeContentGenerator(*replies)
    return InfoGateway(client, model="gemini-test"), client


class TestWellFormedReplies:
    """Schema-conforming replies come back with identical field values."""

    def test_implements_interface(self):
        gateway, _ = make_gateway()
        assert isinstance(gateway, IInfoGateway)

    def test_fetch_weather(self):
        gateway, client = make_gateway(json.dumps(SAN_FRANCISCO))

        weather = asyncio.run(gateway.fetch_weather(37.77, -122.42))

        assert isinstance(weather, WeatherData)
        assert weather.model_dump(by_alias=True, mode="json") == SAN_FRANCISCO
        model, prompt, schema = client.calls[0]
        assert model == "gemini-test"
        assert "latitude 37.77" in prompt
        assert "longitude -122.42" in prompt
        assert "['SUN', 'CLOUD', 'RAIN', 'STORM', 'WIND', 'FOG']" in prompt
        assert schema == WEATHER_SCHEMA

    def test_fetch_currency_rates_returns_nested_rates(self):
        gateway, client = make_gateway('{"rates": {"USD": 0.012, "EUR": 0.011}}')

        rates = asyncio.run(gateway.fetch_currency_rates())

        assert isinstance(rates, CurrencyRates)
        assert rates.model_dump(by_alias=True) == {"USD": 0.012, "EUR": 0.011}
        assert client.calls[0][2] == CURRENCY_SCHEMA
        assert "1 INR to USD and EUR" in client.calls[0][1]

    def test_fetch_quote(self):
        gateway, client = make_gateway('{"quote": "A", "author": "B"}')

        quote = asyncio.run(gateway.fetch_quote())

        assert quote == QuoteData(quote="A", author="B")
        assert client.calls[0][2] == QUOTE_SCHEMA

    def test_one_request_per_call(self):
        gateway, client = make_gateway('{"quote": "A", "author": "B"}', '{"quote": "C", "author": "D"}')

        async def run():
            return await asyncio.gather(gateway.fetch_quote(), gateway.fetch_quote())

        first, second = asyncio.run(run())
        assert len(client.calls) == 2
        assert {first.quote, second.quote} == {"A", "C"}


class TestFailures:
    """Every failure surfaces only the generic per-domain message."""

    @pytest.mark.parametrize("operation, args, message", [
        ("fetch_weather", (1.0, 2.0), WEATHER_MESSAGE),
        ("fetch_currency_rates", (), CURRENCY_MESSAGE),
        ("fetch_quote", (), QUOTE_MESSAGE),
    ])
    def test_network_failure(self, operation, args, message):
        gateway, _ = make_gateway(ContentGenerationError("HTTP 500: secret upstream detail", status_code=500))

        with pytest.raises(GatewayError) as exc_info:
            asyncio.run(getattr(gateway, operation)(*args))

        assert str(exc_info.value) == message
        assert "secret upstream detail" not in str(exc_info.value)
        assert not isinstance(exc_info.value, MalformedResponseError)
        assert isinstance(exc_info.value.__cause__, ContentGenerationError)

    @pytest.mark.parametrize("operation, args, message", [
        ("fetch_weather", (1.0, 2.0), WEATHER_MESSAGE),
        ("fetch_currency_rates", (), CURRENCY_MESSAGE),
        ("fetch_quote", (), QUOTE_MESSAGE),
    ])
    def test_invalid_json(self, operation, args, message):
        gateway, _ = make_gateway("Sure! Here is your data: {oops")

        with pytest.raises(GatewayError) as exc_info:
            asyncio.run(getattr(gateway, operation)(*args))

        assert str(exc_info.value) == message
        assert "oops" not in str(exc_info.value)

    def test_unexpected_client_exception_is_wrapped(self):
        gateway, _ = make_gateway(RuntimeError("boom"))

        with pytest.raises(GatewayError) as exc_info:
            asyncio.run(gateway.fetch_quote())

        assert str(exc_info.value) == QUOTE_MESSAGE
        assert exc_info.value.domain == "quote"

    def test_weather_icon_outside_enumeration(self):
        gateway, _ = make_gateway(json.dumps({**SAN_FRANCISCO, "icon": "SNOW"}))

        with pytest.raises(MalformedResponseError) as exc_info:
            asyncio.run(gateway.fetch_weather(37.77, -122.42))

        assert str(exc_info.value) == WEATHER_MESSAGE

    def test_weather_missing_field(self):
        reply = {k: v for k, v in SAN_FRANCISCO.items() if k != "condition"}
        gateway, _ = make_gateway(json.dumps(reply))

        with pytest.raises(MalformedResponseError):
            asyncio.run(gateway.fetch_weather(37.77, -122.42))

    def test_currency_without_rates_object(self):
        gateway, _ = make_gateway('{"USD": 0.012, "EUR": 0.011}')

        with pytest.raises(MalformedResponseError) as exc_info:
            asyncio.run(gateway.fetch_currency_rates())

        assert str(exc_info.value) == CURRENCY_MESSAGE

    def test_currency_negative_rate(self):
        gateway, _ = make_gateway('{"rates": {"USD": -0.012, "EUR": 0.011}}')

        with pytest.raises(MalformedResponseError):
            asyncio.run(gateway.fetch_currency_rates())

    def test_json_array_is_malformed(self):
        gateway, _ = make_gateway('[{"quote": "A", "author": "B"}]')

        with pytest.raises(MalformedResponseError):
            asyncio.run(gateway.fetch_quote())

    @pytest.mark.parametrize("token", ["NaN", "Infinity", "-Infinity"])
    def test_non_standard_json_constant_in_weather(self, token):
        gateway, _ = make_gateway(json.dumps(SAN_FRANCISCO).replace("18.5", token))

        with pytest.raises(GatewayError) as exc_info:
            asyncio.run(gateway.fetch_weather(37.77, -122.42))

        assert str(exc_info.value) == WEATHER_MESSAGE
        assert isinstance(exc_info.value.__cause__, ValueError)

    @pytest.mark.parametrize("token", ["NaN", "Infinity"])
    def test_non_standard_json_constant_in_rates(self, token):
        gateway, _ = make_gateway('{"rates": {"USD": %s, "EUR": 0.011}}' % token)

        with pytest.raises(GatewayError) as exc_info:
            asyncio.run(gateway.fetch_currency_rates())

        assert str(exc_info.value) == CURRENCY_MESSAGE
