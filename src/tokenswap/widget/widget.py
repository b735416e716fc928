"""Swap calculator widget.

The widget owns the price catalog, the token selection, the amount text,
the converted amount display and the single visible error message. User
actions arrive as typed commands; anything a UI would render is available
from ``snapshot()``.

State machine:
    IDLE -> (catalog loaded) -> READY -> (edit/select) -> VALID | INVALID

A swap can only be confirmed from VALID while no error is visible.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Optional

from tokenswap.catalog.base import PriceCatalog, TokenOption
from tokenswap.catalog.feed import PriceFeed
from tokenswap.conversion import DEFAULT_DISPLAY_DECIMALS
from tokenswap.errors import ErrorKind, IncompleteFormError, PriceFeedError
from tokenswap.notifications import LoggingNotifier, Notifier
from tokenswap.widget.commands import Command, ConfirmSwap, EditAmount, SelectToken, ToggleOptions
from tokenswap.widget.selection import SelectionState, Slot
from tokenswap.widget.swap import SwapAction, SwapConfirmation
from tokenswap.widget.validation import ValidationPipeline, ValidationResult

logger = logging.getLogger(__name__)


class WidgetPhase(str, Enum):
    """Where the widget is in its lifecycle."""

    IDLE = "idle"  # catalog not loaded
    READY = "ready"  # catalog loaded, nothing validated yet
    VALID = "valid"  # last validation pass succeeded
    INVALID = "invalid"  # last validation pass failed


@dataclass(frozen=True)
class WidgetSnapshot:
    """Everything the display layer renders."""

    phase: WidgetPhase
    from_options: list[TokenOption] = field(default_factory=list)
    to_options: list[TokenOption] = field(default_factory=list)
    from_symbol: Optional[str] = None
    to_symbol: Optional[str] = None
    from_options_visible: bool = False
    to_options_visible: bool = False
    amount_from: str = ""
    amount_to: str = ""
    error: Optional[ErrorKind] = None

    @property
    def error_message(self) -> Optional[str]:
        return self.error.message if self.error else None

    @property
    def error_visible(self) -> bool:
        return self.error is not None

    @property
    def swap_enabled(self) -> bool:
        """A visible error, including a failed reload, disables the swap."""
        return self.phase is WidgetPhase.VALID and self.amount_to != "" and self.error is None


class SwapWidget:
    """Stateful swap calculator driven by typed commands."""

    def __init__(
        self,
        feed: PriceFeed,
        notifier: Optional[Notifier] = None,
        decimals: int = DEFAULT_DISPLAY_DECIMALS,
    ):
        self.feed = feed
        self.notifier = notifier or LoggingNotifier()
        self.decimals = decimals

        self.catalog = PriceCatalog()
        self.selection = SelectionState()
        self.amount_text = ""
        self.amount_to_text = ""
        self.error: Optional[ErrorKind] = None
        self.phase = WidgetPhase.IDLE
        self.last_result: Optional[ValidationResult] = None

        self._swap = SwapAction()

    # ------------------------------------------------------------------
    # Catalog
    # ------------------------------------------------------------------

    async def load_catalog(self) -> bool:
        """Fetch prices and replace the catalog.

        On failure the current catalog is kept (empty on first load) and
        the fetch error becomes the visible message. No retry is attempted.

        Returns:
            True if the catalog was replaced
        """
        try:
            catalog = await PriceCatalog.load(self.feed)
        except PriceFeedError as e:
            logger.error(f"Failed to load token prices: {e}")
            self._show_error(e.kind)
            return False

        self.catalog = catalog
        self.selection.prune(catalog)

        if self.error is ErrorKind.FETCH_FAILED:
            self.error = None

        if self.phase is WidgetPhase.IDLE:
            self.phase = WidgetPhase.READY
        elif self.last_result is not None:
            # Prices changed under an already computed result
            self._validate()

        return True

    async def close(self) -> None:
        await self.feed.close()

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def dispatch(self, command: Command) -> Optional[SwapConfirmation]:
        """Apply one command.

        Returns:
            The confirmation for a successful ConfirmSwap, else None
        """
        if isinstance(command, EditAmount):
            self.edit_amount(command.value)
        elif isinstance(command, SelectToken):
            self.select_token(command.slot, command.symbol)
        elif isinstance(command, ToggleOptions):
            self.toggle_options(command.slot)
        elif isinstance(command, ConfirmSwap):
            return self.confirm_swap()
        else:
            raise TypeError(f"Unknown command: {command!r}")
        return None

    def replay(self, commands: Iterable[Command]) -> list[Optional[SwapConfirmation]]:
        """Apply commands in order, collecting each dispatch result."""
        return [self.dispatch(command) for command in commands]

    def edit_amount(self, value: str) -> ValidationResult:
        self.amount_text = value
        return self._validate()

    def select_token(self, slot: Slot, symbol: str) -> ValidationResult:
        """Choose a token for a slot, then re-validate.

        Raises:
            TokenNotListedError: if the catalog does not list ``symbol``
        """
        self.selection.select(slot, symbol, self.catalog)
        return self._validate()

    def toggle_options(self, slot: Slot) -> bool:
        return self.selection.toggle_options(slot)

    def confirm_swap(self) -> Optional[SwapConfirmation]:
        """Confirm the swap if the form holds a valid converted amount.

        On failure the visible error becomes INCOMPLETE_FORM and nothing
        else changes.
        """
        try:
            confirmation = self._swap.confirm(
                amount_from=self.amount_text,
                token_from=self.selection.from_slot.display_text,
                amount_to=self.amount_to_text,
                token_to=self.selection.to_slot.display_text,
                last_pass_ok=self.phase is WidgetPhase.VALID and self.error is None,
            )
        except IncompleteFormError as e:
            logger.debug(f"Swap rejected: {e.detail}")
            self._show_error(e.kind)
            return None

        self.notifier.notify(confirmation)
        return confirmation

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def snapshot(self) -> WidgetSnapshot:
        options = self.catalog.options()
        return WidgetSnapshot(
            phase=self.phase,
            from_options=list(options),
            to_options=list(options),
            from_symbol=self.selection.from_slot.symbol,
            to_symbol=self.selection.to_slot.symbol,
            from_options_visible=self.selection.from_slot.options_visible,
            to_options_visible=self.selection.to_slot.options_visible,
            amount_from=self.amount_text,
            amount_to=self.amount_to_text,
            error=self.error,
        )

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _validate(self) -> ValidationResult:
        pipeline = ValidationPipeline(self.catalog, decimals=self.decimals)
        result = pipeline.run(self.amount_text, self.selection)
        self.last_result = result

        if result.ok:
            self.amount_to_text = result.display
            self.error = None
            self.phase = WidgetPhase.VALID
        else:
            # The previous converted amount stays on display
            self._show_error(result.error)
            self.phase = WidgetPhase.INVALID

        return result

    def _show_error(self, kind: ErrorKind) -> None:
        self.error = kind
