"""Price feed sources.

A price document is a JSON object mapping token symbol to
``{"price": number, "logo": string}``. Feeds only fetch and parse; the
catalog decides what to do with the result.

Feeds:
- HttpPriceFeed: document served over HTTP(S)
- FilePriceFeed: document on the local filesystem
- StaticPriceFeed: in-process prices (bundled defaults)
"""

import logging
from abc import ABC, abstractmethod
from decimal import Decimal
from pathlib import Path
from typing import Any, Optional, Union

import httpx
from pydantic import BaseModel, Field, TypeAdapter, ValidationError

from tokenswap.catalog.base import Token
from tokenswap.errors import PriceFeedError, PriceFeedParseError

logger = logging.getLogger(__name__)

LOGO_URL_TEMPLATE = "https://raw.githubusercontent.com/Switcheo/token-icons/main/tokens/{symbol}.svg"


def _logo(symbol: str) -> str:
    return LOGO_URL_TEMPLATE.format(symbol=symbol)


# Bundled prices in USD, used when no feed URL is configured.
# Demonstration values only.
DEFAULT_TOKEN_PRICES: dict[str, dict[str, Any]] = {
    # ========== Stablecoins ==========
    "USD": {"price": Decimal("1.00"), "logo": _logo("USD")},
    "USDC": {"price": Decimal("1.00"), "logo": _logo("USDC")},
    "BUSD": {"price": Decimal("0.9998"), "logo": _logo("BUSD")},

    # ========== Majors ==========
    "ETH": {"price": Decimal("1645.93"), "logo": _logo("ETH")},
    "WBTC": {"price": Decimal("26002.82"), "logo": _logo("WBTC")},
    "ATOM": {"price": Decimal("7.19"), "logo": _logo("ATOM")},
    "OSMO": {"price": Decimal("0.3772"), "logo": _logo("OSMO")},

    # ========== Ecosystem Tokens ==========
    "SWTH": {"price": Decimal("0.0040"), "logo": _logo("SWTH")},
    "LUNA": {"price": Decimal("0.4091"), "logo": _logo("LUNA")},
    "EVMOS": {"price": Decimal("0.0624"), "logo": _logo("EVMOS")},
    "KUJI": {"price": Decimal("0.6752"), "logo": _logo("KUJI")},
    "GMX": {"price": Decimal("36.35"), "logo": _logo("GMX")},
    "OKB": {"price": Decimal("42.97"), "logo": _logo("OKB")},
    "ZIL": {"price": Decimal("0.0166"), "logo": _logo("ZIL")},
}


class TokenPriceEntry(BaseModel):
    """One entry of the price document."""

    price: Decimal = Field(..., gt=0, description="Quote-currency price per token")
    logo: str = Field(default="", description="Display reference (usually an image URL)")


_DOCUMENT = TypeAdapter(dict[str, TokenPriceEntry])


def _build_tokens(entries: dict[str, TokenPriceEntry]) -> dict[str, Token]:
    tokens: dict[str, Token] = {}
    for symbol, entry in entries.items():
        if not symbol.strip():
            raise PriceFeedParseError("Price document contains a blank token symbol")
        tokens[symbol] = Token(symbol=symbol, price=entry.price, logo=entry.logo)
    return tokens


def parse_price_document(payload: Any) -> dict[str, Token]:
    """Validate an already-decoded price document.

    Raises:
        PriceFeedParseError: if the payload is not a symbol -> entry mapping
    """
    try:
        entries = _DOCUMENT.validate_python(payload)
    except ValidationError as e:
        raise PriceFeedParseError(f"Invalid price document: {e.error_count()} error(s)") from e
    return _build_tokens(entries)


def parse_price_json(raw: Union[str, bytes]) -> dict[str, Token]:
    """Decode and validate a JSON price document.

    Raises:
        PriceFeedParseError: on malformed JSON or invalid entries
    """
    try:
        entries = _DOCUMENT.validate_json(raw)
    except ValidationError as e:
        raise PriceFeedParseError(f"Invalid price document: {e.error_count()} error(s)") from e
    return _build_tokens(entries)


class PriceFeed(ABC):
    """Abstract base class for price document sources."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Feed identifier used in logs."""
        pass

    @abstractmethod
    async def fetch(self) -> dict[str, Token]:
        """
        Fetch and parse the price document.

        Returns:
            Mapping of symbol to Token, in document order

        Raises:
            PriceFeedError: transport failure or non-2xx response
            PriceFeedParseError: malformed document
        """
        pass

    async def close(self) -> None:
        """Release any held resources."""
        return None


class HttpPriceFeed(PriceFeed):
    """Price document fetched over HTTP(S)."""

    def __init__(
        self,
        url: str,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize HTTP feed.

        Args:
            url: Document URL
            timeout: Request timeout in seconds, None for no timeout
            transport: Optional httpx transport (tests use MockTransport)
        """
        self.url = url
        self.timeout = timeout
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    @property
    def name(self) -> str:
        return self.url

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self.timeout),
                transport=self._transport,
            )
        return self._client

    async def fetch(self) -> dict[str, Token]:
        client = await self._get_client()

        try:
            response = await client.get(self.url)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(f"Price feed {self.url} returned HTTP {e.response.status_code}")
            raise PriceFeedError(f"HTTP {e.response.status_code} from {self.url}") from e
        except httpx.HTTPError as e:
            logger.error(f"Price feed request to {self.url} failed: {type(e).__name__}: {e}")
            raise PriceFeedError(f"Request to {self.url} failed: {e}") from e

        try:
            return parse_price_json(response.content)
        except PriceFeedParseError as e:
            logger.error(f"Price feed {self.url} sent a malformed document: {e}")
            raise

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None


class FilePriceFeed(PriceFeed):
    """Price document read from a local JSON file."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    @property
    def name(self) -> str:
        return str(self.path)

    async def fetch(self) -> dict[str, Token]:
        try:
            raw = self.path.read_bytes()
        except OSError as e:
            logger.error(f"Cannot read price document {self.path}: {e}")
            raise PriceFeedError(f"Cannot read {self.path}: {e}") from e

        try:
            return parse_price_json(raw)
        except PriceFeedParseError as e:
            logger.error(f"Price document {self.path} is malformed: {e}")
            raise


class StaticPriceFeed(PriceFeed):
    """In-process price document (defaults to the bundled prices)."""

    def __init__(self, prices: Optional[dict[str, Any]] = None):
        self._prices = DEFAULT_TOKEN_PRICES.copy() if prices is None else dict(prices)

    @property
    def name(self) -> str:
        return "static"

    async def fetch(self) -> dict[str, Token]:
        return parse_price_document(self._prices)
