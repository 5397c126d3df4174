from cipher_machine.models.schemas import CipherFamily, CipherType, ParameterKind
from cipher_machine.services.engines.base import CipherEngine
from cipher_machine.services.engines.registry import EngineRegistry


@EngineRegistry.register
class AtbashEngine(CipherEngine):
    """
    Atbash cipher engine.

    Atbash is a monoalphabetic substitution cipher where the alphabet is reversed:
    A -> Z, B -> Y, C -> X, etc. Letter case is kept.

    Originally used for the Hebrew alphabet, it's self-reciprocal like ROT13.
    """

    name = "Atbash Cipher"
    cipher_type = CipherType.ATBASH
    cipher_family = CipherFamily.MONOALPHABETIC
    parameter = ParameterKind.NONE
    description = (
        "A substitution cipher where the alphabet is reversed. "
        "A becomes Z, B becomes Y, etc. "
        "Self-reciprocal: applying twice returns the original text."
    )

    def encrypt(self, message: str, key: str | int | None = None) -> str:
        """Encrypt (same as decrypt for Atbash)."""
        return self._transform(message)

    def validate_key(self, key: str | int | None) -> None:
        """Atbash accepts any key (it's ignored)."""
        return None

    def explain(self, message: str, ciphertext: str, key: str | int | None) -> str:
        """Generate human-readable explanation."""
        return (
            "Atbash cipher reverses the alphabet. "
            "A becomes Z, B becomes Y, C becomes X, and so on. "
            "This is a fixed substitution with no key required. "
            f"For example, '{message[0] if message else 'A'}' "
            f"encrypts to '{ciphertext[0] if ciphertext else 'Z'}'."
        )

    def _transform(self, text: str) -> str:
        """Apply Atbash transformation (self-reciprocal)."""
        result = []

        for char in text:
            if char in self.UPPER:
                result.append(self.UPPER[25 - self.UPPER.index(char)])
            elif char in self.LOWER:
                result.append(self.LOWER[25 - self.LOWER.index(char)])
            else:
                result.append(char)

        return "".join(result)
