"""Conversion math for the swap calculator.

``convert`` is the pure engine and keeps full precision; ``format_amount``
produces the fixed-precision text shown in the "to amount" field.
"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext
from typing import Union

from tokenswap.errors import ErrorKind, ValidationFailed

DEFAULT_DISPLAY_DECIMALS = 4

# Largest accepted power of ten in an amount (i.e. amounts below 1e31)
MAX_AMOUNT_EXPONENT = 30

Number = Union[Decimal, int, str]


def convert(amount: Number, price_from: Number, price_to: Number) -> Decimal:
    """Convert ``amount`` of the source token into the destination token.

    Args:
        amount: Amount of the source token
        price_from: Quote-currency price of one source token
        price_to: Quote-currency price of one destination token

    Returns:
        ``amount * price_from / price_to`` at full precision
    """
    return Decimal(amount) * Decimal(price_from) / Decimal(price_to)


def format_amount(value: Decimal, decimals: int = DEFAULT_DISPLAY_DECIMALS) -> str:
    """Render ``value`` with exactly ``decimals`` fractional digits (half-up)."""
    exponent = Decimal(1).scaleb(-decimals)
    with localcontext() as ctx:
        # Room for every integer digit plus the requested fraction
        ctx.prec = max(ctx.prec, value.adjusted() + decimals + 2)
        quantized = value.quantize(exponent, rounding=ROUND_HALF_UP)
    return f"{quantized:f}"


def parse_amount(text: str) -> Decimal:
    """Parse free-form amount text.

    Only plain ASCII decimal notation is accepted; digit-group underscores
    and other scripts' digits are rejected even though ``Decimal`` reads them.

    Raises:
        ValidationFailed: INVALID_AMOUNT if the text is not a finite
            positive number, or is too large to convert
    """
    raw = (text or "").strip()
    if "_" in raw or not raw.isascii():
        raise ValidationFailed(ErrorKind.INVALID_AMOUNT, f"Not a number: {raw!r}")

    try:
        amount = Decimal(raw)
    except InvalidOperation:
        raise ValidationFailed(ErrorKind.INVALID_AMOUNT, f"Not a number: {raw!r}") from None

    if not amount.is_finite() or amount <= 0:
        raise ValidationFailed(ErrorKind.INVALID_AMOUNT, f"Amount must be positive: {raw!r}")

    if amount.adjusted() > MAX_AMOUNT_EXPONENT:
        raise ValidationFailed(ErrorKind.INVALID_AMOUNT, f"Amount too large: {raw!r}")

    return amount
