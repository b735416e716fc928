"""Token and price catalog models."""

import logging
import time
from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING, Iterator, Optional

if TYPE_CHECKING:
    from tokenswap.catalog.feed import PriceFeed

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Token:
    """A priced token as listed by the price feed."""

    symbol: str
    price: Decimal  # quote currency per unit of token
    logo: str = ""

    def to_option(self) -> "TokenOption":
        """Selector entry for this token."""
        return TokenOption(symbol=self.symbol, logo=self.logo)


@dataclass(frozen=True)
class TokenOption:
    """One entry of a token selector's option list."""

    symbol: str
    logo: str = ""

    def to_dict(self) -> dict:
        return {"symbol": self.symbol, "logo": self.logo}


class PriceCatalog:
    """In-memory snapshot of token prices.

    The catalog is replaced wholesale on every successful load; consumers
    never observe a partially populated mapping.
    """

    def __init__(self, tokens: Optional[dict[str, Token]] = None):
        self._tokens: dict[str, Token] = dict(tokens or {})
        self.loaded_at: Optional[float] = time.time() if tokens is not None else None

    @classmethod
    async def load(cls, feed: "PriceFeed") -> "PriceCatalog":
        """Fetch a fresh catalog from ``feed``.

        Raises:
            PriceFeedError: if the document cannot be fetched or parsed
        """
        tokens = await feed.fetch()
        logger.info(f"Loaded {len(tokens)} token price(s) from {feed.name}")
        return cls(tokens)

    @property
    def is_loaded(self) -> bool:
        """Whether a load has populated this catalog."""
        return self.loaded_at is not None

    def get(self, symbol: Optional[str]) -> Optional[Token]:
        """Look up a token by symbol."""
        if symbol is None:
            return None
        return self._tokens.get(symbol)

    def price_of(self, symbol: str) -> Optional[Decimal]:
        """Price of ``symbol`` or None when not listed."""
        token = self.get(symbol)
        return token.price if token else None

    @property
    def symbols(self) -> list[str]:
        return list(self._tokens)

    def options(self) -> list[TokenOption]:
        """Selector option list, one entry per token in feed order."""
        return [token.to_option() for token in self._tokens.values()]

    def __contains__(self, symbol: object) -> bool:
        return symbol in self._tokens

    def __len__(self) -> int:
        return len(self._tokens)

    def __iter__(self) -> Iterator[Token]:
        return iter(self._tokens.values())

    def __repr__(self) -> str:
        return f"PriceCatalog({len(self._tokens)} tokens)"
