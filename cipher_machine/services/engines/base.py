import string
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar

from cipher_machine.core.exceptions import InvalidKeywordError
from cipher_machine.models.schemas import (
    CipherFamily,
    CipherType,
    ParameterKind,
    RejectionReason,
)


@dataclass(frozen=True)
class EncryptionResult:
    """
    Outcome of an encryption request.

    Exactly one of ``ciphertext`` (on success) or ``rejection`` is
    meaningful. An empty message encrypts successfully to an empty
    ciphertext, which is why callers should check ``ok`` rather than
    the truthiness of the text.
    """

    cipher_type: CipherType
    ciphertext: str = ""
    rejection: RejectionReason | None = None
    notification: str = "Encryption successful!"

    @property
    def ok(self) -> bool:
        return self.rejection is None


class CipherEngine(ABC):
    """
    Abstract base class for all cipher engines.

    Each cipher implementation must provide:
    - encrypt(): Encrypt a message, raising ValidationError on a bad key
    - validate_key(): Reject a key before any transformation happens
    - explain(): Generate human-readable explanation
    """

    # Cipher metadata
    name: str
    cipher_type: CipherType
    cipher_family: CipherFamily
    parameter: ParameterKind
    description: str

    UPPER: ClassVar[str] = string.ascii_uppercase
    LOWER: ClassVar[str] = string.ascii_lowercase

    @abstractmethod
    def encrypt(self, message: str, key: str | int | None = None) -> str:
        """
        Encrypt a message with the given key.

        Args:
            message: The plaintext to encrypt
            key: Keyword, shift or None depending on the cipher

        Returns:
            Ciphertext

        Raises:
            ValidationError: If the key is rejected
        """
        pass

    @abstractmethod
    def validate_key(self, key: str | int | None) -> None:
        """
        Validate that a key is usable for this cipher.

        Args:
            key: The key to validate

        Raises:
            ValidationError: If the key is rejected
        """
        pass

    @abstractmethod
    def explain(self, message: str, ciphertext: str, key: str | int | None) -> str:
        """
        Generate human-readable explanation of the encryption.

        Args:
            message: The original plaintext
            ciphertext: The produced ciphertext
            key: The key used

        Returns:
            Explanation string
        """
        pass

    def _check_keyword(self, keyword: str | int | None) -> str:
        """
        Return the keyword if it is non-empty and purely alphabetic.

        A non-str key is turned into its text first, so an int is rejected.
        """
        keyword = "" if keyword is None else str(keyword)
        if not keyword or not all(c in string.ascii_letters for c in keyword):
            raise InvalidKeywordError(self.name.split()[0], keyword)
        return keyword
