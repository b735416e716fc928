"""Swap calculator widget: selection, validation, conversion and swap."""

from tokenswap.widget.commands import Command, ConfirmSwap, EditAmount, SelectToken, ToggleOptions
from tokenswap.widget.selection import SelectionState, Slot, SlotState
from tokenswap.widget.swap import SwapAction, SwapConfirmation
from tokenswap.widget.validation import ValidationPipeline, ValidationResult
from tokenswap.widget.widget import SwapWidget, WidgetPhase, WidgetSnapshot

__all__ = [
    # Commands
    "Command",
    "EditAmount",
    "SelectToken",
    "ToggleOptions",
    "ConfirmSwap",
    # State
    "Slot",
    "SlotState",
    "SelectionState",
    # Validation and swap
    "ValidationPipeline",
    "ValidationResult",
    "SwapAction",
    "SwapConfirmation",
    # Widget
    "SwapWidget",
    "WidgetPhase",
    "WidgetSnapshot",
]
