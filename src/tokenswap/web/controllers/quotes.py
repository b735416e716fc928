"""Quote API endpoints."""

from fastapi import APIRouter, Depends

from tokenswap.web.contracts.quotes import QuoteRequest, QuoteResponse
from tokenswap.web.controllers.dependencies import get_quote_service
from tokenswap.web.services.quote_service import QuoteService

router = APIRouter(prefix="/quotes", tags=["quotes"])


@router.post("", response_model=QuoteResponse)
async def get_quote(
    request: QuoteRequest,
    service: QuoteService = Depends(get_quote_service),
) -> QuoteResponse:
    """Convert an amount between two listed tokens.

    Uses the current price catalog and leaves the swap form untouched.
    """
    return service.get_quote(request)
