"""Token selection slots."""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from tokenswap.catalog.base import PriceCatalog
from tokenswap.errors import TokenNotListedError

logger = logging.getLogger(__name__)


class Slot(str, Enum):
    """Selection role of a token selector."""

    FROM = "from"
    TO = "to"


@dataclass
class SlotState:
    """Chosen symbol and option-list visibility for one slot."""

    symbol: Optional[str] = None
    options_visible: bool = False

    @property
    def display_text(self) -> str:
        """Text the selector shows; blank when nothing is chosen."""
        return self.symbol or ""


class SelectionState:
    """The "from" and "to" slots.

    Each slot is toggled independently: opening one option list does not
    close the other.
    """

    def __init__(self):
        self._slots: dict[Slot, SlotState] = {Slot.FROM: SlotState(), Slot.TO: SlotState()}

    def __getitem__(self, slot: Slot) -> SlotState:
        return self._slots[Slot(slot)]

    @property
    def from_slot(self) -> SlotState:
        return self._slots[Slot.FROM]

    @property
    def to_slot(self) -> SlotState:
        return self._slots[Slot.TO]

    def select(self, slot: Slot, symbol: str, catalog: PriceCatalog) -> None:
        """Choose ``symbol`` for ``slot`` and close that slot's option list.

        Choosing the symbol already held by the opposite slot is allowed;
        distinctness is a validation concern.

        Raises:
            TokenNotListedError: if the catalog does not list ``symbol``
        """
        if symbol not in catalog:
            raise TokenNotListedError(symbol)

        state = self[slot]
        state.symbol = symbol
        state.options_visible = False
        logger.debug(f"Selected {symbol} for '{Slot(slot).value}' slot")

    def toggle_options(self, slot: Slot) -> bool:
        """Flip the option-list visibility of ``slot``; returns the new value."""
        state = self[slot]
        state.options_visible = not state.options_visible
        return state.options_visible

    def prune(self, catalog: PriceCatalog) -> list[Slot]:
        """Clear slots whose symbol the catalog no longer lists.

        Returns:
            Slots that were cleared
        """
        cleared = []
        for slot, state in self._slots.items():
            if state.symbol is not None and state.symbol not in catalog:
                logger.info(f"Clearing '{slot.value}' slot: {state.symbol} no longer listed")
                state.symbol = None
                cleared.append(slot)
        return cleared
