"""
Runtime configuration.

Values come from the environment; a ``.env`` file in the working directory is
loaded first. The API key is the only required setting: without it the
application is not built at all.
"""

import os
from typing import Mapping, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from infohub.business.constants import DEFAULT_MODEL
from infohub.exceptions import ConfigurationError
from infohub.infrastructure.gemini_client.client import DEFAULT_BASE_URL


class Settings(BaseModel):
    """
    InfoHub settings.

    Attributes:
        api_key (str): Credential for the content-generation service.
        model (str): Model identifier used for every request.
        base_url (str): Base URL of the generateContent API.
        request_timeout (Optional[float]): Per-request timeout in seconds; None waits forever.
        latitude (Optional[float]): Fixed position; when unset the host must report one.
        longitude (Optional[float]): Fixed position; when unset the host must report one.
        log_dir (str): Directory for log files.
        log_level (str): Logging level name.
        host (str): Bind address for the HTTP server.
        port (int): Bind port for the HTTP server.
    """
    api_key: str = Field(..., min_length=1)
    model: str = DEFAULT_MODEL
    base_url: str = DEFAULT_BASE_URL
    request_timeout: Optional[float] = Field(None, gt=0)
    latitude: Optional[float] = Field(None, ge=-90, le=90)
    longitude: Optional[float] = Field(None, ge=-180, le=180)
    log_dir: str = "logs"
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8000


ENV_VARS = {
    "api_key": "API_KEY",
    "model": "INFOHUB_MODEL",
    "base_url": "INFOHUB_GEMINI_BASE_URL",
    "request_timeout": "INFOHUB_REQUEST_TIMEOUT",
    "latitude": "INFOHUB_LATITUDE",
    "longitude": "INFOHUB_LONGITUDE",
    "log_dir": "INFOHUB_LOG_DIR",
    "log_level": "INFOHUB_LOG_LEVEL",
    "host": "HOST",
    "port": "PORT",
}


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Build Settings from the environment.

    Args:
        environ (Optional[Mapping[str, str]]): Variables to read instead of
            ``os.environ``; ``.env`` is only loaded when this is omitted.

    Returns:
        Settings: The validated settings.

    Raises:
        ConfigurationError: If API_KEY is missing or a value is invalid.
    """
    if environ is None:
        load_dotenv()
        environ = os.environ

    if not environ.get("API_KEY"):
        raise ConfigurationError("API_KEY environment variable is not set.")

    values = {}
    for field, var in ENV_VARS.items():
        raw = environ.get(var)
        if raw is not None and raw.strip() != "":
            values[field] = raw.strip()

    try:
        return Settings(**values)
    except ValueError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e
