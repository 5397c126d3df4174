"""Monoalphabetic cipher engines."""

from cipher_machine.services.engines.monoalphabetic.caesar import CaesarEngine
from cipher_machine.services.engines.monoalphabetic.rot13 import ROT13Engine
from cipher_machine.services.engines.monoalphabetic.atbash import AtbashEngine

__all__ = [
    "CaesarEngine",
    "ROT13Engine",
    "AtbashEngine",
]
