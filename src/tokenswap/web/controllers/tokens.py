"""Token listing endpoints."""

from fastapi import APIRouter, Depends

from tokenswap.web.contracts.tokens import TokenListResponse
from tokenswap.web.controllers.dependencies import get_widget_service
from tokenswap.web.services.widget_service import WidgetService

router = APIRouter(prefix="/tokens", tags=["tokens"])


@router.get("", response_model=TokenListResponse)
async def list_tokens(service: WidgetService = Depends(get_widget_service)) -> TokenListResponse:
    """List tokens in the current price catalog."""
    return service.list_tokens()


@router.post("/reload", response_model=TokenListResponse)
async def reload_tokens(service: WidgetService = Depends(get_widget_service)) -> TokenListResponse:
    """Fetch the price document again and replace the catalog on success."""
    return await service.reload()
