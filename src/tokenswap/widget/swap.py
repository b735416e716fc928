"""Swap confirmation."""

import logging
from dataclasses import dataclass

from tokenswap.errors import IncompleteFormError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SwapConfirmation:
    """Summary of a confirmed swap, as displayed to the user."""

    amount_from: str
    token_from: str
    amount_to: str
    token_to: str

    @property
    def text(self) -> str:
        return f"Swapped {self.amount_from} {self.token_from} for {self.amount_to} {self.token_to}"

    def to_dict(self) -> dict:
        return {
            "amount_from": self.amount_from,
            "token_from": self.token_from,
            "amount_to": self.amount_to,
            "token_to": self.token_to,
        }


class SwapAction:
    """Gate the swap confirmation on a valid computed result.

    Confirmation is advisory only: nothing is recorded or settled.
    """

    def confirm(
        self,
        amount_from: str,
        token_from: str,
        amount_to: str,
        token_to: str,
        last_pass_ok: bool = True,
    ) -> SwapConfirmation:
        """Build the confirmation summary.

        Raises:
            IncompleteFormError: if there is no converted amount to swap, or
                the most recent validation pass failed
        """
        if amount_to == "" or not last_pass_ok:
            raise IncompleteFormError("No valid converted amount to swap")

        confirmation = SwapConfirmation(
            amount_from=amount_from,
            token_from=token_from,
            amount_to=amount_to,
            token_to=token_to,
        )
        logger.info(confirmation.text)
        return confirmation
