"""Polygraphic cipher engines."""

from cipher_machine.services.engines.polygraphic.key_square import KeySquare
from cipher_machine.services.engines.polygraphic.playfair import PlayfairEngine

__all__ = [
    "KeySquare",
    "PlayfairEngine",
]
