"""
Cipher machine entry points.

``encrypt`` dispatches on the cipher type and returns an
``EncryptionResult`` that tells a rejected request apart from a
successful one. The five per-cipher functions keep the plain string
contract: they return an empty string when the key is rejected.
"""

import logging

from cipher_machine.core.exceptions import ValidationError
from cipher_machine.models.schemas import CipherType, ParameterKind, RejectionReason
from cipher_machine.services.engines.base import EncryptionResult
from cipher_machine.services.engines.registry import EngineRegistry

logger = logging.getLogger(__name__)


def encrypt(
    cipher_type: CipherType,
    message: str,
    keyword: str | None = None,
    shift: int | None = None,
) -> EncryptionResult:
    """
    Encrypt a message with the selected cipher.

    Only the parameter the cipher needs is looked at: the keyword for
    Vigenère and Playfair, the shift for Caesar, nothing otherwise.
    """
    engine = EngineRegistry().get_engine(cipher_type)

    if engine.parameter is ParameterKind.KEYWORD:
        key: str | int | None = keyword
    elif engine.parameter is ParameterKind.SHIFT:
        key = shift
    else:
        key = None

    try:
        ciphertext = engine.encrypt(message, key)
    except ValidationError as e:
        logger.info("%s rejected: %s", cipher_type.value, e.reason)
        return EncryptionResult(
            cipher_type=cipher_type,
            rejection=RejectionReason(e.reason),
            notification=e.message,
        )

    logger.debug(
        "%s encrypted %d chars into %d chars",
        cipher_type.value,
        len(message),
        len(ciphertext),
    )
    return EncryptionResult(cipher_type=cipher_type, ciphertext=ciphertext)


def vigenere_encrypt(message: str, keyword: str) -> str:
    return encrypt(CipherType.VIGENERE, message, keyword=keyword).ciphertext


def caesar_encrypt(message: str, shift: int) -> str:
    return encrypt(CipherType.CAESAR, message, shift=shift).ciphertext


def atbash_encrypt(message: str) -> str:
    return encrypt(CipherType.ATBASH, message).ciphertext


def rot13_encrypt(message: str) -> str:
    return caesar_encrypt(message, 13)


def playfair_encrypt(message: str, keyword: str) -> str:
    return encrypt(CipherType.PLAYFAIR, message, keyword=keyword).ciphertext
