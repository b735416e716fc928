"""Quote service for one-off conversions.

Runs the same validation pass as the widget against the widget's current
catalog, without touching the widget's own selection or display.
"""

import logging

from tokenswap.web.contracts.quotes import QuoteRequest, QuoteResponse
from tokenswap.widget.selection import SelectionState, Slot
from tokenswap.widget.validation import ValidationPipeline
from tokenswap.widget.widget import SwapWidget

logger = logging.getLogger(__name__)


class QuoteService:
    """Service for pricing a conversion without changing widget state."""

    def __init__(self, widget: SwapWidget):
        self.widget = widget

    def get_quote(self, request: QuoteRequest) -> QuoteResponse:
        """Convert ``request.amount`` of ``from_asset`` into ``to_asset``.

        Args:
            request: Quote request parameters

        Returns:
            QuoteResponse with the converted amount or the validation error
        """
        selection = SelectionState()
        # Unlisted symbols are left for the pipeline to report
        selection[Slot.FROM].symbol = request.from_asset
        selection[Slot.TO].symbol = request.to_asset

        pipeline = ValidationPipeline(self.widget.catalog, decimals=self.widget.decimals)
        result = pipeline.run(request.amount, selection)

        if not result.ok:
            logger.info(
                f"Quote rejected for {request.amount!r} {request.from_asset} -> "
                f"{request.to_asset}: {result.message}"
            )
            return QuoteResponse(
                success=False,
                from_asset=request.from_asset,
                to_asset=request.to_asset,
                from_amount=request.amount,
                error=result.message,
                error_kind=result.error.value,
            )

        return QuoteResponse(
            success=True,
            from_asset=request.from_asset,
            to_asset=request.to_asset,
            from_amount=request.amount,
            to_amount=result.display,
            rate=result.rate,
        )
