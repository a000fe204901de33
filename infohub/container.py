import httpx
from dependency_injector import containers, providers

from infohub.business.dashboard import Dashboard
from infohub.business.gateway import InfoGateway
from infohub.business.location import build_location_provider
from infohub.infrastructure.gemini_client import GeminiClient


class Container(containers.DeclarativeContainer):
    """DI Container for the dashboard's dependencies.

    ``config`` is filled from Settings; tests override ``gateway`` or
    ``location_provider`` with fakes.
    """

    config = providers.Configuration()

    http_client = providers.Singleton(
        httpx.AsyncClient,
        timeout=config.request_timeout,
    )

    content_client = providers.Singleton(
        GeminiClient,
        api_key=config.api_key,
        base_url=config.base_url,
        http_client=http_client,
    )

    gateway = providers.Singleton(
        InfoGateway,
        client=content_client,
        model=config.model,
    )

    location_provider = providers.Singleton(
        build_location_provider,
        latitude=config.latitude,
        longitude=config.longitude,
    )

    dashboard = providers.Singleton(
        Dashboard,
        gateway=gateway,
        location_provider=location_provider,
    )
