"""Tests for the cipher machine entry points."""

import pytest

from cipher_machine.models.schemas import CipherType, RejectionReason
from cipher_machine.services.machine import (
    atbash_encrypt,
    caesar_encrypt,
    encrypt,
    playfair_encrypt,
    rot13_encrypt,
    vigenere_encrypt,
)


class TestPlainFunctions:
    """The per-cipher functions return an empty string on rejection."""

    @pytest.fixture
    def messages(self):
        return [
            "",
            "Hello, World!",
            "The quick brown fox jumps over the lazy dog.",
            "MiXeD cAsE 123 -- ñandú",
        ]

    def test_golden_vectors(self):
        assert caesar_encrypt("Hello, World!", 3) == "Khoor, Zruog!"
        assert atbash_encrypt("Attack") == "Zggzxp"
        assert vigenere_encrypt("ATTACKATDAWN", "LEMON") == "LXFOPVEFRNHR"
        assert playfair_encrypt("INSTRUMENTS", "MONARCHY") == "GATLMZCLRQXA"

    def test_rot13_self_inverse(self, messages):
        for message in messages:
            assert rot13_encrypt(rot13_encrypt(message)) == message

    def test_atbash_self_inverse(self, messages):
        for message in messages:
            assert atbash_encrypt(atbash_encrypt(message)) == message

    def test_rot13_is_caesar_13(self, messages):
        for message in messages:
            assert rot13_encrypt(message) == caesar_encrypt(message, 13)

    def test_caesar_complementary_shift(self, messages):
        for message in messages:
            for shift in range(1, 26):
                assert caesar_encrypt(caesar_encrypt(message, shift), 26 - shift) == message

    def test_caesar_zero_shift_fails(self, messages):
        for message in messages:
            assert caesar_encrypt(message, 0) == ""

    @pytest.mark.parametrize("keyword", ["", "K3Y", "42"])
    def test_bad_keyword_fails(self, keyword):
        assert vigenere_encrypt("ATTACK AT DAWN", keyword) == ""
        assert playfair_encrypt("ATTACK AT DAWN", keyword) == ""

    def test_non_letters_positions_preserved(self):
        message = "a.b,c d!e?1"
        for ciphertext in (
            caesar_encrypt(message, 4),
            atbash_encrypt(message),
            rot13_encrypt(message),
            vigenere_encrypt(message, "KEY"),
        ):
            assert len(ciphertext) == len(message)
            for plain, cipher in zip(message, ciphertext):
                if not plain.isalpha():
                    assert cipher == plain

    def test_playfair_strips_non_letters(self):
        assert playfair_encrypt("IN-STRU MENTS!!", "MONARCHY") == "GATLMZCLRQXA"


class TestEncryptDispatch:
    """The dispatcher reports rejections as a discriminated result."""

    def test_success(self):
        result = encrypt(CipherType.CAESAR, "Hello, World!", shift=3)

        assert result.ok
        assert result.ciphertext == "Khoor, Zruog!"
        assert result.rejection is None
        assert result.notification == "Encryption successful!"

    def test_empty_message_is_success(self):
        result = encrypt(CipherType.VIGENERE, "", keyword="LEMON")

        assert result.ok
        assert result.ciphertext == ""

    def test_zero_shift_rejection(self):
        result = encrypt(CipherType.CAESAR, "Hello", shift=0)

        assert not result.ok
        assert result.ciphertext == ""
        assert result.rejection is RejectionReason.ZERO_SHIFT

    def test_missing_shift_rejection(self):
        result = encrypt(CipherType.CAESAR, "Hello")

        assert result.rejection is RejectionReason.ZERO_SHIFT

    def test_keyword_rejection(self):
        result = encrypt(CipherType.PLAYFAIR, "Hello", keyword="K3Y")

        assert result.rejection is RejectionReason.EMPTY_OR_NON_ALPHABETIC_KEYWORD
        assert result.notification == "Keyword must contain only alphabetic characters."

    def test_missing_keyword_rejection(self):
        result = encrypt(CipherType.VIGENERE, "Hello")

        assert result.rejection is RejectionReason.EMPTY_OR_NON_ALPHABETIC_KEYWORD
        assert result.notification.startswith("Vigenère cipher requires a keyword")

    def test_irrelevant_parameters_ignored(self):
        result = encrypt(CipherType.ATBASH, "Attack", keyword="12", shift=0)

        assert result.ok
        assert result.ciphertext == "Zggzxp"

    def test_rot13_dispatch(self):
        assert encrypt(CipherType.ROT13, "Hello").ciphertext == "Uryyb"
