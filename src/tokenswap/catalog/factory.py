"""Factory for creating the configured price feed."""

import logging
from typing import Optional

from tokenswap.catalog.feed import FilePriceFeed, HttpPriceFeed, PriceFeed, StaticPriceFeed
from tokenswap.config import Settings, get_settings

logger = logging.getLogger(__name__)


def create_price_feed(settings: Optional[Settings] = None) -> PriceFeed:
    """Create the price feed selected by ``PRICE_FEED_URL``.

    - http(s) URL: HttpPriceFeed
    - any other non-empty value: FilePriceFeed
    - empty: StaticPriceFeed with bundled prices
    """
    settings = settings or get_settings()
    kind = settings.price_feed_kind
    url = settings.price_feed_url.strip()

    if kind == "http":
        logger.debug(f"Using HTTP price feed: {url}")
        return HttpPriceFeed(url, timeout=settings.price_feed_timeout)

    if kind == "file":
        logger.debug(f"Using file price feed: {url}")
        return FilePriceFeed(url)

    logger.debug("PRICE_FEED_URL not set - using bundled token prices")
    return StaticPriceFeed()
