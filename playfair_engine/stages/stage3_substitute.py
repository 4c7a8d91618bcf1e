"""
Stage 3 — SUBSTITUTE: Digraph → Digraph
========================================
Both letters are located in the key square, then:

  same row     → each letter moves one column  (right to encrypt, left to decrypt)
  same column  → each letter moves one row     (down to encrypt,  up to decrypt)
  rectangle    → each letter takes its own row and the partner's column

Shifts wrap modulo 5. The rectangle swap is its own inverse, so it is
identical in both directions.
"""

from enum import Enum
from typing import Iterable, Tuple

from .stage1_matrix import KeySquare
from .stage2_pairs import Digraph


class Direction(Enum):
    """Cipher mode. The value is the row/column shift applied."""

    ENCRYPT = 1
    DECRYPT = -1

    @classmethod
    def parse(cls, name: str) -> "Direction":
        key = name.strip().lower()
        if key in ("encrypt", "e"):
            return cls.ENCRYPT
        if key in ("decrypt", "d"):
            return cls.DECRYPT
        raise ValueError(f"Unknown direction {name!r}: use 'encrypt' or 'decrypt'.")


def substitute(square: KeySquare, digraph: Digraph, direction: Direction) -> Digraph:
    a, b = digraph
    r1, c1 = square.position(a)
    r2, c2 = square.position(b)
    shift = direction.value

    if r1 == r2:
        return square.at(r1, c1 + shift), square.at(r2, c2 + shift)
    if c1 == c2:
        return square.at(r1 + shift, c1), square.at(r2 + shift, c2)
    return square.at(r1, c2), square.at(r2, c1)


def substitute_all(square: KeySquare, pairs: Iterable[Digraph],
                   direction: Direction) -> Tuple[Digraph, ...]:
    return tuple(substitute(square, pair, direction) for pair in pairs)
