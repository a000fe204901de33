"""Prompts, response schemas and user-facing messages for the gateway."""

from infohub.data.models import WeatherIcon

DEFAULT_MODEL = "gemini-2.5-flash"

WEATHER_ICON_NAMES = [icon.value for icon in WeatherIcon]

WEATHER_PROMPT = (
    "Provide the current weather for latitude {lat} and longitude {lon}. "
    "Also provide a suitable icon name from this list: {icons}. "
    "Respond in JSON format with the schema provided."
)
CURRENCY_PROMPT = (
    "Provide the current conversion rates from 1 INR to USD and EUR. "
    "Respond in JSON format with the schema provided."
)
QUOTE_PROMPT = (
    "Generate a short, impactful motivational quote. "
    "Respond in JSON format with the schema provided."
)

WEATHER_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        "location": {"type": "STRING", "description": "City or area name"},
        "temperatureCelsius": {"type": "NUMBER", "description": "Temperature in Celsius"},
        "condition": {"type": "STRING", "description": "Brief weather condition, e.g., 'Partly Cloudy'"},
        "icon": {"type": "STRING", "description": "An icon name from the allowed list"},
        "humidity": {"type": "NUMBER", "description": "Humidity percentage"},
        "windSpeedKph": {"type": "NUMBER", "description": "Wind speed in kilometers per hour"},
    },
    "required": ["location", "temperatureCelsius", "condition", "icon", "humidity", "windSpeedKph"],
}

CURRENCY_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        "rates": {
            "type": "OBJECT",
            "properties": {
                "USD": {"type": "NUMBER"},
                "EUR": {"type": "NUMBER"},
            },
            "required": ["USD", "EUR"],
        },
    },
    "required": ["rates"],
}

QUOTE_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        "quote": {"type": "STRING"},
        "author": {"type": "STRING"},
    },
    "required": ["quote", "author"],
}

WEATHER_ERROR = "Failed to fetch weather data. Please try again."
CURRENCY_ERROR = "Failed to fetch currency rates. Please try again."
QUOTE_ERROR = "Failed to fetch a quote. Please try again."
UNKNOWN_ERROR = "An unknown error occurred."

GEOLOCATION_UNSUPPORTED = "Geolocation is not supported by your browser."
GEOLOCATION_ERROR = "Geolocation error: {reason}. Please enable location services."
