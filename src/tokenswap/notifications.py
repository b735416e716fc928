"""Swap confirmation notifiers.

A notifier receives the confirmation produced by a successful swap. The
notification is advisory only; notifiers must not raise for delivery
problems.
"""

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from tokenswap.widget.swap import SwapConfirmation

logger = logging.getLogger(__name__)


class Notifier(ABC):
    """Abstract sink for swap confirmations."""

    @abstractmethod
    def notify(self, confirmation: "SwapConfirmation") -> None:
        pass


class LoggingNotifier(Notifier):
    """Writes confirmations to the application log."""

    def __init__(self, level: int = logging.INFO):
        self.level = level

    def notify(self, confirmation: "SwapConfirmation") -> None:
        logger.log(self.level, f"Swap confirmed: {confirmation.text}")


class CallbackNotifier(Notifier):
    """Hands each confirmation's text to a callable (e.g. ``print``)."""

    def __init__(self, callback: Callable[[str], object]):
        self.callback = callback

    def notify(self, confirmation: "SwapConfirmation") -> None:
        try:
            self.callback(confirmation.text)
        except Exception as e:
            logger.error(f"Failed to deliver swap confirmation: {e}")
