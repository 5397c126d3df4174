from cipher_machine.core.exceptions import InvalidShiftError
from cipher_machine.models.schemas import CipherFamily, CipherType, ParameterKind
from cipher_machine.services.engines.base import CipherEngine
from cipher_machine.services.engines.registry import EngineRegistry


@EngineRegistry.register
class CaesarEngine(CipherEngine):
    """
    Caesar cipher engine.

    The Caesar cipher is a simple substitution cipher that shifts each letter
    forward by a fixed amount, wrapping around within its own case.
    A shift of zero means "no shift chosen" and is rejected rather than
    treated as the identity.
    """

    name = "Caesar Cipher"
    cipher_type = CipherType.CAESAR
    cipher_family = CipherFamily.MONOALPHABETIC
    parameter = ParameterKind.SHIFT
    description = (
        "A substitution cipher where each letter is shifted by a fixed amount. "
        "Named after Julius Caesar who used it for military communications."
    )

    def encrypt(self, message: str, key: str | int | None = None) -> str:
        """Encrypt a message with the given shift."""
        shift = self._parse_key(key)
        self.validate_key(shift)
        return self._shift(message, shift % 26)

    def validate_key(self, key: str | int | None) -> None:
        """Reject a missing or zero shift."""
        shift = self._parse_key(key)
        if shift == 0:
            raise InvalidShiftError(shift)

    def explain(self, message: str, ciphertext: str, key: str | int | None) -> str:
        """Generate human-readable explanation."""
        shift = self._parse_key(key) % 26

        return (
            f"Caesar cipher with shift of {shift}. "
            f"Each letter was shifted forward {shift} positions in the alphabet, "
            f"keeping its case. "
            f"For example, '{message[0] if message else 'N/A'}' "
            f"becomes '{ciphertext[0] if ciphertext else 'N/A'}'."
        )

    def _parse_key(self, key: str | int | None) -> int:
        """Parse key to integer shift value, None meaning unset."""
        if key is None:
            return 0
        return int(key)

    def _shift(self, message: str, shift: int) -> str:
        """Shift every ASCII letter, copying everything else."""
        result = []

        for char in message:
            if char in self.UPPER:
                alphabet = self.UPPER
            elif char in self.LOWER:
                alphabet = self.LOWER
            else:
                result.append(char)
                continue
            idx = alphabet.index(char)
            result.append(alphabet[(idx + shift) % 26])

        return "".join(result)
