from cipher_machine.models.schemas import CipherFamily, CipherType, ParameterKind
from cipher_machine.services.engines.base import CipherEngine
from cipher_machine.services.engines.registry import EngineRegistry


@EngineRegistry.register
class VigenereEngine(CipherEngine):
    """
    Vigenère cipher engine.

    The Vigenère cipher shifts each letter by the value of the matching
    keyword letter, repeating the keyword cyclically. Only letters consume
    a keyword position; everything else is copied through unchanged.

    Ciphertext letters are always uppercase, whatever the case of the
    message letter.
    """

    name = "Vigenère Cipher"
    cipher_type = CipherType.VIGENERE
    cipher_family = CipherFamily.POLYALPHABETIC
    parameter = ParameterKind.KEYWORD
    description = (
        "A polyalphabetic substitution cipher using a keyword. "
        "Each letter is shifted by the corresponding keyword letter's position. "
        "Resistant to simple frequency analysis."
    )

    def encrypt(self, message: str, key: str | int | None = None) -> str:
        """Encrypt using the keyword."""
        keyword = self._check_keyword(key).upper()

        result = []
        key_index = 0

        for char in message:
            if char in self.UPPER or char in self.LOWER:
                idx = self.UPPER.index(char.upper())
                shift = self.UPPER.index(keyword[key_index % len(keyword)])
                result.append(self.UPPER[(idx + shift) % 26])
                key_index += 1
            else:
                result.append(char)

        return "".join(result)

    def validate_key(self, key: str | int | None) -> None:
        """Validate that key is a non-empty alphabetic keyword."""
        self._check_keyword(key)

    def explain(self, message: str, ciphertext: str, key: str | int | None) -> str:
        """Generate human-readable explanation."""
        keyword = str(key).upper()

        shifts = [self.UPPER.index(c) for c in keyword]
        shift_desc = ", ".join(f"{keyword[i]}={shifts[i]}" for i in range(len(keyword)))

        return (
            f"Vigenère cipher with keyword '{keyword}' (length {len(keyword)}). "
            f"Letter shifts: {shift_desc}. "
            f"Each letter of the message is shifted forward by the corresponding "
            f"key letter's position in the alphabet."
        )
