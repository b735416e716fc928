"""Quote request and response contracts."""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field


class QuoteRequest(BaseModel):
    """Request for a one-off conversion quote."""

    from_asset: str = Field(..., description="Source token symbol (e.g., USDC, ETH)")
    to_asset: str = Field(..., description="Destination token symbol")
    amount: str = Field(..., description="Amount of the source token, as typed")


class QuoteResponse(BaseModel):
    """Response containing conversion details."""

    success: bool = Field(..., description="Whether the conversion succeeded")
    from_asset: str = Field(..., description="Source token")
    to_asset: str = Field(..., description="Destination token")
    from_amount: str = Field(..., description="Input amount, as typed")
    to_amount: Optional[str] = Field(None, description="Converted amount at display precision")
    rate: Optional[Decimal] = Field(None, description="Destination tokens per source token")
    error: Optional[str] = Field(None, description="Error message if failed")
    error_kind: Optional[str] = Field(None, description="Machine-readable error kind")
