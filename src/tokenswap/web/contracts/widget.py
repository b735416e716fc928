"""Widget command and state contracts."""

from typing import Optional

from pydantic import BaseModel, Field

from tokenswap.widget.selection import Slot


class AmountUpdate(BaseModel):
    """New contents of the source amount field."""

    value: str = Field(..., description="Amount text exactly as typed")


class TokenSelection(BaseModel):
    """An option picked in one of the selectors."""

    slot: Slot = Field(..., description="Selector role: from or to")
    symbol: str = Field(..., description="Token symbol")


class SlotToggle(BaseModel):
    """Open or close a selector's option list."""

    slot: Slot = Field(..., description="Selector role: from or to")


class TokenOptionInfo(BaseModel):
    """One selector option."""

    symbol: str
    logo: str = ""


class SelectorState(BaseModel):
    """Displayed state of one token selector."""

    selected: Optional[str] = Field(None, description="Chosen symbol (None = unselected)")
    options_visible: bool = False
    options: list[TokenOptionInfo] = Field(default_factory=list)


class WidgetStateResponse(BaseModel):
    """Everything the swap form displays."""

    phase: str
    from_selector: SelectorState
    to_selector: SelectorState
    amount_from: str = ""
    amount_to: str = ""
    error: Optional[str] = Field(None, description="Visible error message (None = hidden)")
    error_kind: Optional[str] = None
    swap_enabled: bool = False


class SwapConfirmationInfo(BaseModel):
    """Summary of a confirmed swap."""

    amount_from: str
    token_from: str
    amount_to: str
    token_to: str


class SwapResponse(BaseModel):
    """Result of pressing the swap button."""

    success: bool
    message: str = Field(..., description="Confirmation text or error message")
    confirmation: Optional[SwapConfirmationInfo] = None
    error_kind: Optional[str] = None
    state: WidgetStateResponse
