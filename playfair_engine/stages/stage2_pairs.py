"""
Stage 2 — PAIRS: Text → Digraphs
=================================
Splits normalized text into two-letter groups, left to right.

  * odd tail         → (letter, X), then stop
  * doubled letters  → (letter, X), cursor advances by ONE so the
                       repeated letter opens the next pair
  * anything else    → (letter, next), cursor advances by two

    "HELLO"  →  HE  LX  LO

An X next to another X is split the same way and yields the pair XX.
After decryption that X cannot be told apart from padding.
"""

from typing import Tuple

from .stage1_matrix import normalize

PAD = "X"

Digraph = Tuple[str, str]


def segment(text: str) -> Tuple[Digraph, ...]:
    letters = normalize(text)
    pairs = []
    i = 0
    while i < len(letters):
        if i == len(letters) - 1:
            pairs.append((letters[i], PAD))
            break
        if letters[i] == letters[i + 1]:
            pairs.append((letters[i], PAD))
            i += 1
        else:
            pairs.append((letters[i], letters[i + 1]))
            i += 2
    return tuple(pairs)
