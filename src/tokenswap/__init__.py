"""tokenswap - token swap calculator with a live price feed."""

__version__ = "0.1.0"
