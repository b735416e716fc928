"""Shared FastAPI dependencies."""

from fastapi import Request

from tokenswap.web.services.quote_service import QuoteService
from tokenswap.web.services.widget_service import WidgetService
from tokenswap.widget.widget import SwapWidget


def get_widget(request: Request) -> SwapWidget:
    """The widget instance owned by the running application."""
    return request.app.state.widget


def get_widget_service(request: Request) -> WidgetService:
    return WidgetService(get_widget(request))


def get_quote_service(request: Request) -> QuoteService:
    return QuoteService(get_widget(request))
