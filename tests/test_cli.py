"""Tests for the command-line interface."""

import json

import pytest

from tokenswap.cli import build_parser, main


@pytest.fixture
def price_file(tmp_path):
    path = tmp_path / "tokenPrices.json"
    path.write_text(
        json.dumps(
            {
                "USD": {"price": 1.0, "logo": "usd.svg"},
                "EUR": {"price": 0.9, "logo": "eur.svg"},
            }
        )
    )
    return path


class TestCli:
    """Tests for CLI commands."""

    def test_parser(self):
        args = build_parser().parse_args(["convert", "100", "USD", "EUR", "--swap"])

        assert args.command == "convert"
        assert args.amount == "100"
        assert args.token_from == "USD"
        assert args.token_to == "EUR"
        assert args.swap is True

    def test_tokens(self, price_file, capsys):
        assert main(["--feed", str(price_file), "tokens"]) == 0

        out = capsys.readouterr().out
        assert "USD" in out
        assert "EUR" in out
        assert "2 token(s)" in out

    def test_convert(self, price_file, capsys):
        assert main(["--feed", str(price_file), "convert", "100", "EUR", "USD"]) == 0
        assert capsys.readouterr().out.strip() == "100 EUR = 90.0000 USD"

    def test_convert_and_swap(self, price_file, capsys):
        assert main(["--feed", str(price_file), "convert", "100", "EUR", "USD", "--swap"]) == 0

        lines = capsys.readouterr().out.strip().splitlines()
        assert lines == ["100 EUR = 90.0000 USD", "Swapped 100 EUR for 90.0000 USD"]

    @pytest.mark.parametrize(
        "argv,message",
        [
            (["convert", "-5", "EUR", "USD"], "Please enter a valid amount."),
            (["convert", "100", "USD", "USD"], "Please select different tokens to swap."),
            (["convert", "100", "USD", "BTC"], "Invalid token selection."),
        ],
    )
    def test_convert_errors(self, price_file, capsys, argv, message):
        assert main(["--feed", str(price_file), *argv]) == 1
        assert capsys.readouterr().err.strip().splitlines()[-1] == message

    def test_missing_feed(self, tmp_path, capsys):
        assert main(["--feed", str(tmp_path / "missing.json"), "tokens"]) == 1
        assert capsys.readouterr().err.strip().splitlines()[-1] == "Error fetching token prices."
