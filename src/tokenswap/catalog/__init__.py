"""Token price catalog and price feed sources."""

from tokenswap.catalog.base import PriceCatalog, Token, TokenOption
from tokenswap.catalog.factory import create_price_feed
from tokenswap.catalog.feed import (
    DEFAULT_TOKEN_PRICES,
    FilePriceFeed,
    HttpPriceFeed,
    PriceFeed,
    StaticPriceFeed,
    parse_price_document,
    parse_price_json,
)

__all__ = [
    # Models
    "Token",
    "TokenOption",
    "PriceCatalog",
    # Feeds
    "PriceFeed",
    "HttpPriceFeed",
    "FilePriceFeed",
    "StaticPriceFeed",
    "DEFAULT_TOKEN_PRICES",
    "parse_price_document",
    "parse_price_json",
    # Factory
    "create_price_feed",
]
