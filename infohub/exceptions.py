"""Exceptions raised across the InfoHub layers."""

from typing import Optional


class InfoHubError(Exception):
    """Base class for all InfoHub errors."""


class ConfigurationError(InfoHubError):
    """Required configuration (e.g. the API key) is missing or invalid.

    Fatal at startup: the application is never built.
    """


class LocationUnavailableError(InfoHubError):
    """The host has no location capability."""


class LocationDeniedError(LocationUnavailableError):
    """The host has a location capability but refused or failed to use it."""


class ContentGenerationError(InfoHubError):
    """The content-generation service could not produce reply text.

    Carries technical detail; it is logged, never shown to the user.
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class GatewayError(InfoHubError):
    """A widget's data could not be fetched.

    The message is the user-facing text for the failed domain; the original
    cause is chained as ``__cause__``.
    """

    def __init__(self, message: str, domain: str):
        super().__init__(message)
        self.domain = domain


class MalformedResponseError(GatewayError):
    """The reply was valid JSON but did not match the requested schema."""
