"""Token listing contracts."""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field


class TokenInfo(BaseModel):
    """A token listed by the price catalog."""

    symbol: str = Field(..., description="Token symbol")
    price: Decimal = Field(..., description="Quote-currency price per token")
    logo: str = Field(default="", description="Display reference for the token logo")


class TokenListResponse(BaseModel):
    """Response containing the current price catalog."""

    success: bool = True
    tokens: list[TokenInfo] = Field(default_factory=list)
    total: int = Field(default=0, description="Total number of tokens")
    loaded: bool = Field(default=False, description="Whether prices have been loaded")
    error: Optional[str] = None
