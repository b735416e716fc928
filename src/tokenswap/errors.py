"""Error kinds and exceptions.

Every failure the widget can surface has an ``ErrorKind`` carrying the text
shown to the user. Exceptions raised by the catalog, the conversion helpers
and the widget all derive from ``TokenSwapError`` and carry their kind.
"""

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """User-facing error categories."""

    FETCH_FAILED = "fetch_failed"
    INVALID_AMOUNT = "invalid_amount"
    SAME_TOKEN = "same_token"
    UNKNOWN_TOKEN = "unknown_token"
    INCOMPLETE_FORM = "incomplete_form"

    @property
    def message(self) -> str:
        """Display text for this kind."""
        return ERROR_MESSAGES[self]


ERROR_MESSAGES: dict[ErrorKind, str] = {
    ErrorKind.FETCH_FAILED: "Error fetching token prices.",
    ErrorKind.INVALID_AMOUNT: "Please enter a valid amount.",
    ErrorKind.SAME_TOKEN: "Please select different tokens to swap.",
    ErrorKind.UNKNOWN_TOKEN: "Invalid token selection.",
    ErrorKind.INCOMPLETE_FORM: "Please fill out all fields correctly before swapping.",
}


class TokenSwapError(Exception):
    """Base class for recoverable token swap errors.

    Subclasses set ``kind``; the base carries none unless one is passed.
    """

    kind: Optional[ErrorKind] = None

    def __init__(self, detail: Optional[str] = None, kind: Optional[ErrorKind] = None):
        if kind is not None:
            self.kind = kind
        self.detail = detail
        super().__init__(detail or self.message)

    @property
    def message(self) -> str:
        """User-facing message (never the internal detail)."""
        if self.kind is None:
            return "Unexpected token swap error."
        return self.kind.message


class PriceFeedError(TokenSwapError):
    """Raised when the price document cannot be fetched."""

    kind = ErrorKind.FETCH_FAILED


class PriceFeedParseError(PriceFeedError):
    """Raised when the price document was fetched but is malformed."""


class ValidationFailed(TokenSwapError):
    """Raised by a validation pass; ``kind`` says which check failed."""

    def __init__(self, kind: ErrorKind, detail: Optional[str] = None):
        super().__init__(detail, kind=kind)


class TokenNotListedError(TokenSwapError):
    """Raised when selecting a symbol the catalog does not list."""

    kind = ErrorKind.UNKNOWN_TOKEN

    def __init__(self, symbol: str):
        self.symbol = symbol
        super().__init__(f"Token {symbol!r} is not in the price catalog")


class IncompleteFormError(TokenSwapError):
    """Raised when a swap is confirmed without a valid converted amount."""

    kind = ErrorKind.INCOMPLETE_FORM
