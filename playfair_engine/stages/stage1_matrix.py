"""
Stage 1 — MATRIX: Keyword → 5×5 Key Square
============================================
The keyword is uppercased, stripped to A–Z, and J is folded into I.
Its letters, first occurrence only, fill the grid left-to-right,
top-to-bottom. The rest of the 25-letter alphabet follows in order.

    keyword "PLAYFAIR"   →   P L A Y F
                             I R B C D
                             E G H K M
                             N O Q S T
                             U V W X Z

Every input string yields a valid square. An empty or fully
non-alphabetic keyword gives the plain alphabet in row-major order.

Lookup: letter → (row, col) is precomputed at construction, so
substitution never scans the grid.
"""

import hashlib
from functools import lru_cache
from typing import Tuple

ALPHABET = "ABCDEFGHIKLMNOPQRSTUVWXYZ"   # 25 letters, no J
SIZE     = 5


def normalize(text: str) -> str:
    """Uppercase, drop everything outside A–Z, fold J into I."""
    return "".join("I" if c == "J" else c
                   for c in text.upper() if "A" <= c <= "Z")


class KeySquare:
    """Immutable 5×5 Playfair grid, one cell per alphabet letter."""

    def __init__(self, letters: str):
        if len(letters) != len(ALPHABET) or set(letters) != set(ALPHABET):
            raise ValueError(
                f"Key square must be a permutation of {ALPHABET!r}, got {letters!r}."
            )
        self._letters   = letters
        self._positions = {ch: divmod(i, SIZE) for i, ch in enumerate(letters)}

    @property
    def letters(self) -> str:
        return self._letters

    @property
    def rows(self) -> Tuple[str, ...]:
        return tuple(self._letters[r * SIZE:(r + 1) * SIZE] for r in range(SIZE))

    def at(self, row: int, col: int) -> str:
        """Letter at (row, col); both coordinates wrap modulo 5."""
        return self._letters[(row % SIZE) * SIZE + (col % SIZE)]

    def position(self, letter: str) -> Tuple[int, int]:
        return self._positions[letter]

    def cell_index(self, letter: str) -> int:
        """Flat row-major index of a letter (0-24)."""
        row, col = self._positions[letter]
        return row * SIZE + col

    def fingerprint(self) -> str:
        """Short SHA-256 tag of the square, safe to log in place of the keyword."""
        return hashlib.sha256(self._letters.encode()).hexdigest()[:12]

    def __eq__(self, other):
        if not isinstance(other, KeySquare):
            return NotImplemented
        return self._letters == other._letters

    def __hash__(self):
        return hash(self._letters)

    def __str__(self):
        return "\n".join(" ".join(row) for row in self.rows)

    def __repr__(self):
        return f"KeySquare({self._letters!r})"


@lru_cache(maxsize=128)
def build_matrix(keyword: str) -> KeySquare:
    """Derive the key square for a keyword. Never raises."""
    placed = dict.fromkeys(normalize(keyword))   # ordered, first occurrence wins
    rest   = "".join(ch for ch in ALPHABET if ch not in placed)
    return KeySquare("".join(placed) + rest)
