"""
InfoHub dashboard server.

Hosts the dashboard shell on an asyncio event loop and exposes it over HTTP:
the host selects tabs, reports its location, types the currency amount and
asks for new quotes; every call returns the rendered view of a widget.

The app is built by ``create_app()``, which loads settings first: a missing
API key aborts startup before any widget exists.
"""

import logging
from contextlib import asynccontextmanager
from datetime import datetime
from typing import Optional

import uvicorn
from fastapi import FastAPI, HTTPException, Request, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from infohub import __version__
from infohub.business.dashboard import Dashboard
from infohub.business.location import ReportedLocationProvider
from infohub.config import Settings, load_settings
from infohub.container import Container
from infohub.data.models import Coordinates, Tab
from infohub.data.views import (
    CurrencyAmountRequest,
    LocationErrorReport,
    LocationReport,
    SelectTabRequest,
    TabsResponse,
    WidgetView,
)
from infohub.logging_config import setup_logging

logger = logging.getLogger(__name__)

SERVICE_NAME = "InfoHub"


def create_app(settings: Optional[Settings] = None, container: Optional[Container] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings (Optional[Settings]): Settings to use; loaded from the environment when omitted.
        container (Optional[Container]): Pre-built container, e.g. with overridden providers.

    Returns:
        FastAPI: The configured application.

    Raises:
        ConfigurationError: If the settings cannot be loaded (e.g. no API key).
    """
    if settings is None:
        settings = load_settings()

    if container is None:
        container = Container()
    container.config.from_dict(settings.model_dump())

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Lifecycle manager"""
        dashboard = container.dashboard()
        app.state.dashboard = dashboard
        dashboard.start()
        logger.info(f"{SERVICE_NAME} started (model: {settings.model})")
        yield
        await dashboard.close()
        await container.http_client().aclose()
        logger.info(f"{SERVICE_NAME} stopped")

    app = FastAPI(
        title="InfoHub",
        description="Daily information dashboard: weather, currency conversion and a motivational quote",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.container = container
    app.state.settings = settings

    def get_dashboard(request: Request) -> Dashboard:
        return request.app.state.dashboard

    def get_reported_location(request: Request) -> ReportedLocationProvider:
        provider = request.app.state.container.location_provider()
        if not isinstance(provider, ReportedLocationProvider):
            raise HTTPException(status_code=409, detail="Location is configured on the server")
        return provider

    # ========================================================================
    # SHELL
    # ========================================================================

    @app.get("/api/tabs", response_model=TabsResponse)
    async def list_tabs(request: Request):
        return get_dashboard(request).tabs()

    @app.put("/api/tab", response_model=WidgetView)
    async def select_tab(body: SelectTabRequest, request: Request):
        """Show another widget; mounts it the first time it is shown."""
        return get_dashboard(request).select_tab(body.tab)

    @app.get("/api/view", response_model=WidgetView)
    async def current_view(request: Request):
        """Rendered view of the selected widget"""
        return get_dashboard(request).render()

    # ========================================================================
    # WIDGET INPUTS
    # ========================================================================

    @app.post("/api/location", status_code=202)
    async def report_location(body: LocationReport, request: Request):
        provider = get_reported_location(request)
        accepted = provider.report_position(Coordinates(latitude=body.latitude, longitude=body.longitude))
        if not accepted:
            raise HTTPException(status_code=409, detail="Location already reported")
        return {"accepted": True}

    @app.post("/api/location/error", status_code=202)
    async def report_location_error(body: LocationErrorReport, request: Request):
        provider = get_reported_location(request)
        if not provider.report_error(body.message):
            raise HTTPException(status_code=409, detail="Location already reported")
        return {"accepted": True}

    @app.post("/api/location/unsupported", status_code=202)
    async def report_location_unsupported(request: Request):
        provider = get_reported_location(request)
        if not provider.report_unsupported():
            raise HTTPException(status_code=409, detail="Location already reported")
        return {"accepted": True}

    @app.put("/api/currency/amount", response_model=WidgetView)
    async def set_currency_amount(body: CurrencyAmountRequest, request: Request):
        return get_dashboard(request).set_currency_amount(body.amount)

    @app.post("/api/quote/refresh", response_model=WidgetView, status_code=202)
    async def refresh_quote(request: Request):
        """Fetch a new quote in the background"""
        dashboard = get_dashboard(request)
        if not dashboard.quote.mounted:
            raise HTTPException(status_code=409, detail="The quote widget has not been shown yet")
        if not dashboard.refresh_quote():
            raise HTTPException(status_code=409, detail="A quote is already being generated")
        return dashboard.quote.render()

    # ========================================================================
    # SERVICE
    # ========================================================================

    @app.get("/health")
    async def health_check():
        """Health check"""
        return {
            "status": "healthy",
            "service": "infohub",
            "version": __version__,
            "timestamp": datetime.now().isoformat(),
        }

    @app.get("/metrics")
    async def metrics():
        """Prometheus metrics"""
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    @app.get("/")
    async def root():
        """Root endpoint"""
        return {
            "service": SERVICE_NAME,
            "version": __version__,
            "description": "Your daily information dashboard.",
            "widgets": [tab.value for tab in Tab],
            "endpoints": {
                "tabs": "GET /api/tabs",
                "select_tab": "PUT /api/tab",
                "view": "GET /api/view",
                "location": "POST /api/location | /api/location/error | /api/location/unsupported",
                "currency_amount": "PUT /api/currency/amount",
                "quote_refresh": "POST /api/quote/refresh",
                "health": "GET /health",
                "metrics": "GET /metrics",
            },
        }

    return app


def main() -> None:
    settings = load_settings()
    setup_logging("infohub", settings.log_dir, settings.log_level)
    app = create_app(settings)
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level="info",
    )


if __name__ == "__main__":
    main()
