from typing import ClassVar

from cipher_machine.models.schemas import CipherFamily, CipherType, ParameterKind
from cipher_machine.services.engines.monoalphabetic.caesar import CaesarEngine
from cipher_machine.services.engines.registry import EngineRegistry


@EngineRegistry.register
class ROT13Engine(CaesarEngine):
    """
    ROT13 cipher engine.

    ROT13 is the Caesar cipher with a fixed shift of 13.
    Since 13 is exactly half of 26, applying ROT13 twice returns the original text.
    """

    name = "ROT13 Cipher"
    cipher_type = CipherType.ROT13
    cipher_family = CipherFamily.MONOALPHABETIC
    parameter = ParameterKind.NONE
    description = (
        "A special case of Caesar cipher with shift 13. "
        "Applying ROT13 twice returns the original text. "
        "Commonly used for simple obfuscation (e.g., hiding spoilers)."
    )

    SHIFT: ClassVar[int] = 13

    def encrypt(self, message: str, key: str | int | None = None) -> str:
        """Encrypt with the fixed shift; any supplied key is ignored."""
        return super().encrypt(message, self.SHIFT)

    def validate_key(self, key: str | int | None) -> None:
        """ROT13 has no variable key."""
        return None

    def explain(self, message: str, ciphertext: str, key: str | int | None) -> str:
        """Generate human-readable explanation."""
        return (
            "ROT13 cipher with fixed shift of 13. "
            "Each letter is shifted 13 positions, which means "
            "A becomes N, B becomes O, etc. "
            "ROT13 is self-reciprocal: applying it twice returns the original text."
        )
