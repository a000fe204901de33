import unittest

from pydantic import ValidationError

from infohub.data.models import Coordinates, CurrencyRates, QuoteData, Tab, WeatherData, WeatherIcon
from fakes import SAN_FRANCISCO


class TestWeatherData(unittest.TestCase):
    """
    Test suite for the WeatherData model.

    Covers parsing from the JSON field names, round-tripping back to them and
    the bounds enforced on the numeric fields.
    """

    def test_parse_from_reply_fields(self):
        weather = WeatherData.model_validate(SAN_FRANCISCO)

        self.assertEqual(weather.location, "San Francisco")
        self.assertEqual(weather.temperature_celsius, 18.5)
        self.assertEqual(weather.condition, "Partly Cloudy")
        self.assertIs(weather.icon, WeatherIcon.CLOUD)
        self.assertEqual(weather.humidity, 65)
        self.assertEqual(weather.wind_speed_kph, 12)

    def test_dump_by_alias_reproduces_reply(self):
        weather = WeatherData.model_validate(SAN_FRANCISCO)
        self.assertEqual(weather.model_dump(by_alias=True, mode="json"), SAN_FRANCISCO)

    def test_populate_by_field_name(self):
        weather = WeatherData(
            location="Oslo",
            temperature_celsius=-3.0,
            condition="Snow",
            icon=WeatherIcon.FOG,
            humidity=90,
            wind_speed_kph=0,
        )
        self.assertEqual(weather.temperature_celsius, -3.0)

    def test_unknown_icon_rejected(self):
        with self.assertRaises(ValidationError) as context:
            WeatherData.model_validate({**SAN_FRANCISCO, "icon": "TORNADO"})
        self.assertIn("icon", str(context.exception))

    def test_humidity_out_of_range_rejected(self):
        with self.assertRaises(ValidationError):
            WeatherData.model_validate({**SAN_FRANCISCO, "humidity": 120})

    def test_negative_wind_rejected(self):
        with self.assertRaises(ValidationError):
            WeatherData.model_validate({**SAN_FRANCISCO, "windSpeedKph": -1})

    def test_non_finite_numbers_rejected(self):
        for field in ("temperatureCelsius", "windSpeedKph", "humidity"):
            for bad in (float("nan"), float("inf")):
                with self.assertRaises(ValidationError):
                    WeatherData.model_validate({**SAN_FRANCISCO, field: bad})

    def test_missing_required_field_rejected(self):
        reply = dict(SAN_FRANCISCO)
        del reply["temperatureCelsius"]
        with self.assertRaises(ValidationError) as context:
            WeatherData.model_validate(reply)
        self.assertIn("temperatureCelsius", str(context.exception))


class TestCurrencyRates(unittest.TestCase):

    def test_parse_and_dump(self):
        rates = CurrencyRates.model_validate({"USD": 0.012, "EUR": 0.011})
        self.assertEqual(rates.usd, 0.012)
        self.assertEqual(rates.eur, 0.011)
        self.assertEqual(rates.model_dump(by_alias=True), {"USD": 0.012, "EUR": 0.011})

    def test_non_positive_rate_rejected(self):
        with self.assertRaises(ValidationError):
            CurrencyRates.model_validate({"USD": 0, "EUR": 0.011})

    def test_non_numeric_rate_rejected(self):
        with self.assertRaises(ValidationError):
            CurrencyRates.model_validate({"USD": "a lot", "EUR": 0.011})

    def test_non_finite_rate_rejected(self):
        with self.assertRaises(ValidationError):
            CurrencyRates.model_validate({"USD": float("inf"), "EUR": 0.011})
        with self.assertRaises(ValidationError):
            CurrencyRates.model_validate({"USD": 0.012, "EUR": float("nan")})


class TestQuoteData(unittest.TestCase):

    def test_requires_both_fields(self):
        with self.assertRaises(ValidationError):
            QuoteData.model_validate({"quote": "Keep going."})

    def test_round_trip(self):
        reply = {"quote": "Keep going.", "author": "Anonymous"}
        self.assertEqual(QuoteData.model_validate(reply).model_dump(), reply)


class TestSmallTypes(unittest.TestCase):

    def test_tab_values(self):
        self.assertEqual([tab.value for tab in Tab], ["WEATHER", "CURRENCY", "QUOTE"])

    def test_coordinates_bounds(self):
        Coordinates(latitude=37.77, longitude=-122.42)
        with self.assertRaises(ValidationError):
            Coordinates(latitude=91, longitude=0)
        with self.assertRaises(ValidationError):
            Coordinates(latitude=0, longitude=-181)


if __name__ == '__main__':
    unittest.main()
