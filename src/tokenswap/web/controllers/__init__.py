"""HTTP controllers for web API endpoints."""

from tokenswap.web.controllers.quotes import router as quotes_router
from tokenswap.web.controllers.tokens import router as tokens_router
from tokenswap.web.controllers.widget import router as widget_router

__all__ = [
    "quotes_router",
    "tokens_router",
    "widget_router",
]
