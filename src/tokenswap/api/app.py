"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tokenswap import __version__
from tokenswap.catalog.factory import create_price_feed
from tokenswap.config import get_settings
from tokenswap.widget.widget import SwapWidget

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup: the one and only price fetch
    widget: SwapWidget = app.state.widget
    if not widget.catalog.is_loaded:
        await widget.load_catalog()
    yield
    # Shutdown
    await widget.close()


def create_app(widget: Optional[SwapWidget] = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        widget: Widget to serve; built from settings when omitted
    """
    settings = get_settings()

    app = FastAPI(
        title="tokenswap API",
        description="Token swap calculator backed by a price feed",
        version=__version__,
        lifespan=lifespan,
        debug=settings.debug,
    )
    app.state.widget = widget or SwapWidget(
        feed=create_price_feed(settings),
        decimals=settings.display_decimals,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if settings.debug else [],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register routes
    from tokenswap.api.routes import health
    from tokenswap.web.controllers import quotes_router, tokens_router, widget_router

    app.include_router(health.router, tags=["Health"])
    app.include_router(tokens_router, prefix="/api/v1")
    app.include_router(quotes_router, prefix="/api/v1")
    app.include_router(widget_router, prefix="/api/v1")

    return app
