"""Typed user commands applied to a SwapWidget."""

from dataclasses import dataclass
from typing import Union

from tokenswap.widget.selection import Slot


@dataclass(frozen=True)
class EditAmount:
    """The source amount field now holds ``value``."""

    value: str


@dataclass(frozen=True)
class SelectToken:
    """An option was picked in a selector."""

    slot: Slot
    symbol: str


@dataclass(frozen=True)
class ToggleOptions:
    """A selector's option list was opened or closed."""

    slot: Slot


@dataclass(frozen=True)
class ConfirmSwap:
    """The swap button was pressed."""


Command = Union[EditAmount, SelectToken, ToggleOptions, ConfirmSwap]
