"""Swap form endpoints.

Each endpoint applies one user action to the widget and returns the
resulting display state.
"""

from fastapi import APIRouter, Depends, HTTPException

from tokenswap.errors import TokenNotListedError
from tokenswap.web.contracts.widget import (
    AmountUpdate,
    SlotToggle,
    SwapResponse,
    TokenSelection,
    WidgetStateResponse,
)
from tokenswap.web.controllers.dependencies import get_widget_service
from tokenswap.web.services.widget_service import WidgetService

router = APIRouter(prefix="/widget", tags=["widget"])


@router.get("", response_model=WidgetStateResponse)
async def get_state(service: WidgetService = Depends(get_widget_service)) -> WidgetStateResponse:
    """Current state of the swap form."""
    return service.get_state()


@router.post("/amount", response_model=WidgetStateResponse)
async def update_amount(
    request: AmountUpdate,
    service: WidgetService = Depends(get_widget_service),
) -> WidgetStateResponse:
    """Set the source amount text and recompute."""
    return service.update_amount(request.value)


@router.post("/select", response_model=WidgetStateResponse)
async def select_token(
    request: TokenSelection,
    service: WidgetService = Depends(get_widget_service),
) -> WidgetStateResponse:
    """Pick a token for the from or to selector and recompute."""
    try:
        return service.select_token(request.slot, request.symbol)
    except TokenNotListedError as e:
        raise HTTPException(status_code=400, detail=e.message)


@router.post("/toggle", response_model=WidgetStateResponse)
async def toggle_options(
    request: SlotToggle,
    service: WidgetService = Depends(get_widget_service),
) -> WidgetStateResponse:
    """Open or close one selector's option list."""
    return service.toggle_options(request.slot)


@router.post("/swap", response_model=SwapResponse)
async def confirm_swap(service: WidgetService = Depends(get_widget_service)) -> SwapResponse:
    """Confirm the swap shown in the form.

    Advisory only: nothing is executed or recorded.
    """
    return service.swap()
