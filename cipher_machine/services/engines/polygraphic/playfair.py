import string
from typing import ClassVar

from cipher_machine.models.schemas import CipherFamily, CipherType, ParameterKind
from cipher_machine.services.engines.base import CipherEngine
from cipher_machine.services.engines.polygraphic.key_square import KeySquare
from cipher_machine.services.engines.registry import EngineRegistry


@EngineRegistry.register
class PlayfairEngine(CipherEngine):
    """
    Playfair cipher engine.

    The Playfair cipher encrypts digraphs (pairs of letters) using a 5x5 key square.
    The alphabet is reduced to 25 letters (J is dropped from the square;
    a J in the message is looked up at the top-left cell).

    Rules for encryption:
    1. Same row: replace each letter with the one to its right
    2. Same column: replace each letter with the one below
    3. Rectangle: swap corners horizontally

    Double letters are separated by an 'X' (e.g., "BALLOON" -> "BA LX LO ON").
    Everything except letters is dropped from the message.
    """

    name = "Playfair Cipher"
    cipher_type = CipherType.PLAYFAIR
    cipher_family = CipherFamily.POLYGRAPHIC
    parameter = ParameterKind.KEYWORD
    description = (
        "A digraph substitution cipher using a 5x5 key square. "
        "Pairs of letters are encrypted together based on their positions "
        "in the square. J is left out of the square."
    )

    FILLER: ClassVar[str] = "X"

    def encrypt(self, message: str, key: str | int | None = None) -> str:
        """Encrypt using the keyword."""
        keyword = self._check_keyword(key)
        square = self.build_key_square(keyword)
        prepared = self.prepare_message(message)

        result = []
        for i in range(0, len(prepared), 2):
            a, b = prepared[i], prepared[i + 1]
            row_a, col_a = square.find_position(a)
            row_b, col_b = square.find_position(b)

            if row_a == row_b:
                # Same row: shift right
                result.append(square.letter_at(row_a, col_a + 1))
                result.append(square.letter_at(row_b, col_b + 1))
            elif col_a == col_b:
                # Same column: shift down
                result.append(square.letter_at(row_a + 1, col_a))
                result.append(square.letter_at(row_b + 1, col_b))
            else:
                # Rectangle: swap columns
                result.append(square.letter_at(row_a, col_b))
                result.append(square.letter_at(row_b, col_a))

        return "".join(result)

    def validate_key(self, key: str | int | None) -> None:
        """Validate that key is a non-empty alphabetic keyword."""
        self._check_keyword(key)

    def explain(self, message: str, ciphertext: str, key: str | int | None) -> str:
        """Generate human-readable explanation."""
        square = self.build_key_square(str(key))

        # Show first two rows of the key square
        square_preview = " ".join(square.rows[0]) + "\n" + " ".join(square.rows[1])

        return (
            f"Playfair cipher with keyword '{str(key).upper()}'. "
            f"5x5 key square (first 2 rows):\n{square_preview}\n"
            f"Letters are encrypted in pairs using row/column rules."
        )

    def build_key_square(self, keyword: str) -> KeySquare:
        """Build the 5x5 key square from a keyword."""
        return KeySquare.from_keyword(keyword)

    def prepare_message(self, message: str) -> list[str]:
        """
        Prepare a message for Playfair encryption.

        - Keep letters only, uppercased
        - Walk the letters two at a time; when both letters of a pair
          are equal, insert X between them before moving on
        - Pad with X if the length ends up odd

        The walk always advances by two, so an inserted X becomes the
        second letter of the current pair and the displaced letter
        starts the next one.
        """
        letters = [c.upper() for c in message if c in string.ascii_letters]

        i = 0
        while i < len(letters) - 1:
            if letters[i] == letters[i + 1]:
                letters.insert(i + 1, self.FILLER)
            i += 2

        if len(letters) % 2 != 0:
            letters.append(self.FILLER)

        return letters
