"""Services backing the web controllers."""

from tokenswap.web.services.quote_service import QuoteService
from tokenswap.web.services.widget_service import WidgetService

__all__ = [
    "QuoteService",
    "WidgetService",
]
