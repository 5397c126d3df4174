import string
from dataclasses import dataclass, field
from typing import ClassVar


@dataclass(frozen=True)
class KeySquare:
    """
    Playfair 5x5 key square.

    The square holds the 25 letters A-Z without J, each exactly once,
    filled row by row: first the keyword letters in order of first
    appearance, then the unused letters of the alphabet. A letter to
    position lookup is built together with the grid.
    """

    SIZE: ClassVar[int] = 5
    ALPHABET: ClassVar[str] = "ABCDEFGHIKLMNOPQRSTUVWXYZ"  # 25 letters, no J

    rows: tuple[tuple[str, ...], ...]
    positions: dict[str, tuple[int, int]] = field(compare=False, repr=False)

    @classmethod
    def from_keyword(cls, keyword: str) -> "KeySquare":
        """Build the key square for a keyword."""
        letters: list[str] = []
        for char in keyword.upper():
            if char in string.ascii_uppercase and char != "J" and char not in letters:
                letters.append(char)

        letters.extend(c for c in cls.ALPHABET if c not in letters)

        rows = tuple(
            tuple(letters[row * cls.SIZE:(row + 1) * cls.SIZE])
            for row in range(cls.SIZE)
        )
        positions = {
            letter: (row, col)
            for row, row_letters in enumerate(rows)
            for col, letter in enumerate(row_letters)
        }
        return cls(rows=rows, positions=positions)

    def find_position(self, letter: str) -> tuple[int, int]:
        """Find the row and column of a letter, falling back to (0, 0) for J."""
        return self.positions.get(letter, (0, 0))

    def letter_at(self, row: int, col: int) -> str:
        """Letter at a position, wrapping both indices around the square."""
        return self.rows[row % self.SIZE][col % self.SIZE]

    def as_strings(self) -> list[str]:
        return ["".join(row) for row in self.rows]
