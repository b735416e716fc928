"""Request and response contracts for the web layer.

These Pydantic models define the API interface for web clients.
"""

from tokenswap.web.contracts.quotes import QuoteRequest, QuoteResponse
from tokenswap.web.contracts.tokens import TokenInfo, TokenListResponse
from tokenswap.web.contracts.widget import (
    AmountUpdate,
    SelectorState,
    SlotToggle,
    SwapConfirmationInfo,
    SwapResponse,
    TokenOptionInfo,
    TokenSelection,
    WidgetStateResponse,
)

__all__ = [
    # Quote contracts
    "QuoteRequest",
    "QuoteResponse",
    # Token contracts
    "TokenInfo",
    "TokenListResponse",
    # Widget contracts
    "AmountUpdate",
    "TokenSelection",
    "SlotToggle",
    "TokenOptionInfo",
    "SelectorState",
    "WidgetStateResponse",
    "SwapConfirmationInfo",
    "SwapResponse",
]
