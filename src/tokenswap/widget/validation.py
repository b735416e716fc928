"""Validation pass run before every conversion."""

import logging
from dataclasses import dataclass
from decimal import Decimal, DecimalException
from typing import Optional

from tokenswap.catalog.base import PriceCatalog
from tokenswap.conversion import DEFAULT_DISPLAY_DECIMALS, convert, format_amount, parse_amount
from tokenswap.errors import ErrorKind, ValidationFailed
from tokenswap.widget.selection import SelectionState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of one validation pass."""

    ok: bool
    amount_from: Optional[Decimal] = None
    amount_to: Optional[Decimal] = None
    display: Optional[str] = None
    error: Optional[ErrorKind] = None

    @property
    def message(self) -> Optional[str]:
        return self.error.message if self.error else None

    @property
    def rate(self) -> Optional[Decimal]:
        """Destination tokens received per source token."""
        if not self.ok or not self.amount_from:
            return None
        return self.amount_to / self.amount_from


class ValidationPipeline:
    """Ordered checks: amount, then distinct tokens, then listed tokens.

    The first failing check wins; later checks do not run.
    """

    def __init__(self, catalog: PriceCatalog, decimals: int = DEFAULT_DISPLAY_DECIMALS):
        self.catalog = catalog
        self.decimals = decimals

    def evaluate(self, amount_text: str, selection: SelectionState) -> ValidationResult:
        """Run the checks and convert.

        Raises:
            ValidationFailed: INVALID_AMOUNT, SAME_TOKEN or UNKNOWN_TOKEN; an amount
                the decimal context cannot convert is INVALID_AMOUNT
        """
        amount = parse_amount(amount_text)

        from_text = selection.from_slot.display_text
        to_text = selection.to_slot.display_text
        # Blank equals blank, so two unselected slots fail here too
        if from_text == to_text:
            raise ValidationFailed(ErrorKind.SAME_TOKEN, f"Both slots show {from_text!r}")

        price_from = self.catalog.price_of(from_text)
        price_to = self.catalog.price_of(to_text)
        if price_from is None or price_to is None:
            raise ValidationFailed(
                ErrorKind.UNKNOWN_TOKEN, f"Unpriced selection: {from_text!r} -> {to_text!r}"
            )

        try:
            amount_to = convert(amount, price_from, price_to)
        except DecimalException as e:
            raise ValidationFailed(
                ErrorKind.INVALID_AMOUNT, f"Cannot convert {amount} {from_text}: {e!r}"
            ) from None

        return ValidationResult(
            ok=True,
            amount_from=amount,
            amount_to=amount_to,
            display=format_amount(amount_to, self.decimals),
        )

    def run(self, amount_text: str, selection: SelectionState) -> ValidationResult:
        """Run the checks, reporting failure as a result instead of raising."""
        try:
            result = self.evaluate(amount_text, selection)
        except ValidationFailed as e:
            logger.debug(f"Validation failed ({e.kind.value}): {e.detail}")
            return ValidationResult(ok=False, error=e.kind)

        logger.debug(
            f"Converted {result.amount_from} {selection.from_slot.symbol} -> "
            f"{result.display} {selection.to_slot.symbol}"
        )
        return result
