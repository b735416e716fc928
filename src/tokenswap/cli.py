"""Command-line interface.

Usage:
    tokenswap tokens
    tokenswap convert 100 USDC ETH [--swap]
    tokenswap serve

``--feed`` overrides PRICE_FEED_URL for a single run.
"""

import argparse
import asyncio
import logging
import sys
from typing import Optional

from dotenv import load_dotenv

from tokenswap.catalog.factory import create_price_feed
from tokenswap.config import Settings, get_settings
from tokenswap.errors import TokenNotListedError
from tokenswap.notifications import CallbackNotifier
from tokenswap.widget.commands import ConfirmSwap, EditAmount, SelectToken
from tokenswap.widget.selection import Slot
from tokenswap.widget.widget import SwapWidget

logger = logging.getLogger(__name__)


def build_widget(settings: Settings) -> SwapWidget:
    """Create a widget whose confirmations are printed to stdout."""
    return SwapWidget(
        feed=create_price_feed(settings),
        notifier=CallbackNotifier(print),
        decimals=settings.display_decimals,
    )


async def cmd_tokens(settings: Settings) -> int:
    """Print the price catalog."""
    widget = build_widget(settings)
    try:
        if not await widget.load_catalog():
            print(widget.error.message, file=sys.stderr)
            return 1

        width = max((len(t.symbol) for t in widget.catalog), default=0)
        for token in widget.catalog:
            print(f"{token.symbol:<{width}}  {token.price:>14}  {token.logo}")
        print(f"\n{len(widget.catalog)} token(s) from {widget.feed.name}")
        return 0
    finally:
        await widget.close()


async def cmd_convert(
    settings: Settings, amount: str, token_from: str, token_to: str, swap: bool = False
) -> int:
    """Run one conversion through the widget, optionally confirming the swap."""
    widget = build_widget(settings)
    try:
        if not await widget.load_catalog():
            print(widget.error.message, file=sys.stderr)
            return 1

        try:
            widget.replay(
                [
                    EditAmount(amount),
                    SelectToken(Slot.FROM, token_from),
                    SelectToken(Slot.TO, token_to),
                ]
            )
        except TokenNotListedError as e:
            logger.debug(f"Selection rejected: {e}")
            print(e.message, file=sys.stderr)
            return 1

        if widget.error is not None:
            print(widget.error.message, file=sys.stderr)
            return 1

        print(f"{amount} {token_from} = {widget.amount_to_text} {token_to}")

        if swap and widget.dispatch(ConfirmSwap()) is None:
            print(widget.error.message, file=sys.stderr)
            return 1
        return 0
    finally:
        await widget.close()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="tokenswap", description="Token swap calculator")
    parser.add_argument("--feed", type=str, help="Price document URL or path (overrides PRICE_FEED_URL)")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("tokens", help="List tokens and prices")

    convert = subparsers.add_parser("convert", help="Convert an amount between two tokens")
    convert.add_argument("amount", help="Amount of the source token")
    convert.add_argument("token_from", metavar="FROM", help="Source token symbol")
    convert.add_argument("token_to", metavar="TO", help="Destination token symbol")
    convert.add_argument("--swap", action="store_true", help="Confirm the swap after converting")

    subparsers.add_parser("serve", help="Run the HTTP API")

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    load_dotenv()

    args = build_parser().parse_args(argv)

    if args.command == "serve":
        from tokenswap.main import main as serve

        serve()
        return 0

    settings = get_settings()
    if args.feed is not None:
        settings = settings.model_copy(update={"price_feed_url": args.feed})

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if args.command == "tokens":
        return asyncio.run(cmd_tokens(settings))

    return asyncio.run(
        cmd_convert(settings, args.amount, args.token_from, args.token_to, swap=args.swap)
    )


if __name__ == "__main__":
    sys.exit(main())
