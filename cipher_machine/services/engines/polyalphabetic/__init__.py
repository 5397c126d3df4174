"""Polyalphabetic cipher engines."""

from cipher_machine.services.engines.polyalphabetic.vigenere import VigenereEngine

__all__ = [
    "VigenereEngine",
]
