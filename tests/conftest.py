"""Pytest configuration and fixtures."""

import os
from decimal import Decimal

import pytest
import pytest_asyncio

# Set test environment
os.environ["ENVIRONMENT"] = "test"
os.environ["PRICE_FEED_URL"] = ""
os.environ["DEBUG"] = "true"

from tokenswap.catalog.feed import StaticPriceFeed
from tokenswap.config import get_settings
from tokenswap.widget.widget import SwapWidget

get_settings.cache_clear()


@pytest.fixture
def fx_prices() -> dict:
    """Two-token price document used by the worked examples."""
    return {
        "USD": {"price": Decimal("1.0"), "logo": "usd.svg"},
        "EUR": {"price": Decimal("0.9"), "logo": "eur.svg"},
    }


@pytest.fixture
def token_prices(fx_prices) -> dict:
    """A slightly larger price document."""
    prices = dict(fx_prices)
    prices["ETH"] = {"price": Decimal("1645.93"), "logo": "eth.svg"}
    prices["SWTH"] = {"price": Decimal("0.004"), "logo": "swth.svg"}
    return prices


@pytest.fixture
def static_feed(token_prices) -> StaticPriceFeed:
    return StaticPriceFeed(token_prices)


@pytest_asyncio.fixture
async def widget(static_feed) -> SwapWidget:
    """Widget with the price catalog already loaded."""
    w = SwapWidget(feed=static_feed)
    assert await w.load_catalog()
    return w
