"""Telegram workout tracker: command dispatch over a small relational model."""

__version__ = "0.1.0"
