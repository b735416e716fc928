"""Service translating widget state to and from web contracts."""

import logging

from tokenswap.errors import ErrorKind
from tokenswap.web.contracts.tokens import TokenInfo, TokenListResponse
from tokenswap.web.contracts.widget import (
    SelectorState,
    SwapConfirmationInfo,
    SwapResponse,
    TokenOptionInfo,
    WidgetStateResponse,
)
from tokenswap.widget.commands import ConfirmSwap, EditAmount, SelectToken, ToggleOptions
from tokenswap.widget.selection import Slot
from tokenswap.widget.widget import SwapWidget

logger = logging.getLogger(__name__)


class WidgetService:
    """Applies web requests to the single widget instance."""

    def __init__(self, widget: SwapWidget):
        self.widget = widget

    def get_state(self) -> WidgetStateResponse:
        snap = self.widget.snapshot()
        return WidgetStateResponse(
            phase=snap.phase.value,
            from_selector=SelectorState(
                selected=snap.from_symbol,
                options_visible=snap.from_options_visible,
                options=[TokenOptionInfo(**o.to_dict()) for o in snap.from_options],
            ),
            to_selector=SelectorState(
                selected=snap.to_symbol,
                options_visible=snap.to_options_visible,
                options=[TokenOptionInfo(**o.to_dict()) for o in snap.to_options],
            ),
            amount_from=snap.amount_from,
            amount_to=snap.amount_to,
            error=snap.error_message,
            error_kind=snap.error.value if snap.error else None,
            swap_enabled=snap.swap_enabled,
        )

    def list_tokens(self) -> TokenListResponse:
        catalog = self.widget.catalog
        error = self.widget.error
        return TokenListResponse(
            success=catalog.is_loaded,
            tokens=[TokenInfo(symbol=t.symbol, price=t.price, logo=t.logo) for t in catalog],
            total=len(catalog),
            loaded=catalog.is_loaded,
            error=error.message if error is ErrorKind.FETCH_FAILED else None,
        )

    def update_amount(self, value: str) -> WidgetStateResponse:
        self.widget.dispatch(EditAmount(value))
        return self.get_state()

    def select_token(self, slot: Slot, symbol: str) -> WidgetStateResponse:
        """Select a token.

        Raises:
            TokenNotListedError: if the symbol is not in the catalog
        """
        self.widget.dispatch(SelectToken(slot, symbol))
        return self.get_state()

    def toggle_options(self, slot: Slot) -> WidgetStateResponse:
        self.widget.dispatch(ToggleOptions(slot))
        return self.get_state()

    def swap(self) -> SwapResponse:
        confirmation = self.widget.dispatch(ConfirmSwap())
        state = self.get_state()

        if confirmation is None:
            return SwapResponse(
                success=False,
                message=state.error or "",
                error_kind=state.error_kind,
                state=state,
            )

        return SwapResponse(
            success=True,
            message=confirmation.text,
            confirmation=SwapConfirmationInfo(**confirmation.to_dict()),
            state=state,
        )

    async def reload(self) -> TokenListResponse:
        """Fetch prices again and return the new listing."""
        if not await self.widget.load_catalog():
            logger.warning("Price reload failed - keeping previous catalog")
        return self.list_tokens()
