"""Tests for Playfair cipher engine and key square."""

import pytest

from cipher_machine.core.exceptions import InvalidKeywordError
from cipher_machine.services.engines.polygraphic.key_square import KeySquare
from cipher_machine.services.engines.polygraphic.playfair import PlayfairEngine


class TestKeySquare:
    """Test suite for Playfair key square construction."""

    def test_keyword_square(self):
        square = KeySquare.from_keyword("KEYWORD")

        assert square.as_strings() == [
            "KEYWO",
            "RDABC",
            "FGHIL",
            "MNPQS",
            "TUVXZ",
        ]

    def test_lowercase_keyword_is_uppercased(self):
        assert KeySquare.from_keyword("keyword") == KeySquare.from_keyword("KEYWORD")

    def test_duplicates_and_j_skipped(self):
        square = KeySquare.from_keyword("JJAZZJ")

        assert square.as_strings()[0] == "AZBCD"
        letters = "".join(square.as_strings())
        assert "J" not in letters
        assert len(set(letters)) == 25

    def test_positions_match_grid(self):
        square = KeySquare.from_keyword("MONARCHY")

        for row, letters in enumerate(square.rows):
            for col, letter in enumerate(letters):
                assert square.find_position(letter) == (row, col)

    def test_find_position_j_falls_back_to_first_cell(self):
        square = KeySquare.from_keyword("MONARCHY")

        assert square.find_position("J") == (0, 0)

    def test_letter_at_wraps(self):
        square = KeySquare.from_keyword("MONARCHY")

        assert square.letter_at(0, 5) == "M"
        assert square.letter_at(5, 2) == "N"


class TestPlayfairPreparation:
    """Test suite for Playfair message preparation."""

    @pytest.fixture
    def engine(self):
        return PlayfairEngine()

    def test_double_letters_split(self, engine):
        assert "".join(engine.prepare_message("BALLOON")) == "BALXLOON"

    def test_odd_length_padded(self, engine):
        assert "".join(engine.prepare_message("INSTRUMENTS")) == "INSTRUMENTSX"

    def test_non_letters_dropped(self, engine):
        assert "".join(engine.prepare_message("Hide, the gold! 42")) == "HIDETHEGOLDX"

    def test_j_kept_as_its_own_letter(self, engine):
        assert "".join(engine.prepare_message("jam")) == "JAMX"
        # I and J are different letters, so no filler goes between them
        assert "".join(engine.prepare_message("IJ")) == "IJ"

    def test_repeated_run(self, engine):
        assert "".join(engine.prepare_message("AAAA")) == "AXAXAXAX"
        assert "".join(engine.prepare_message("AAA")) == "AXAXAX"

    def test_repeated_filler_letter(self, engine):
        assert "".join(engine.prepare_message("XX")) == "XXXX"

    def test_repeat_across_pair_boundary_kept(self, engine):
        # "AB BA": the two Bs fall in different pairs, so nothing is inserted
        assert "".join(engine.prepare_message("ABBA")) == "ABBA"

    def test_empty_message(self, engine):
        assert engine.prepare_message("") == []
        assert engine.prepare_message("123 !") == []


class TestPlayfairEngine:
    """Test suite for Playfair encryption."""

    @pytest.fixture
    def engine(self):
        return PlayfairEngine()

    def test_monarchy_instruments(self, engine):
        assert engine.encrypt("INSTRUMENTS", "MONARCHY") == "GATLMZCLRQXA"

    def test_playfair_example(self, engine):
        ciphertext = engine.encrypt("Hide the gold in the tree stump", "PlayfairExample")

        assert ciphertext == "BMODZBXDNABEKUDMUIXMMOUVIF"

    def test_j_encrypts_from_first_cell(self, engine):
        # J sits at (0, 0) with M, so JI is a rectangle with I at (2, 3)
        assert engine.encrypt("JI", "MONARCHY") == "AE"

    def test_output_is_even_uppercase_letters(self, engine):
        ciphertext = engine.encrypt("The quick brown fox, 1999!", "KEYWORD")

        assert len(ciphertext) % 2 == 0
        assert ciphertext.isalpha()
        assert ciphertext.isupper()

    def test_empty_message(self, engine):
        assert engine.encrypt("", "KEYWORD") == ""

    @pytest.mark.parametrize("keyword", ["", "KEY1", "KEY WORD"])
    def test_rejects_bad_keyword(self, engine, keyword):
        with pytest.raises(InvalidKeywordError):
            engine.encrypt("HELLO", keyword)

    def test_empty_keyword_message(self, engine):
        with pytest.raises(InvalidKeywordError) as exc_info:
            engine.encrypt("HELLO", "")

        assert exc_info.value.message == (
            "Playfair cipher requires a keyword. Please enter a keyword."
        )

    def test_explain_shows_square(self, engine):
        explanation = engine.explain("INSTRUMENTS", "GATLMZCLRQXA", "monarchy")

        assert "MONARCHY" in explanation
        assert "M O N A R" in explanation
