"""
Stage 4 — ASSEMBLE: Digraphs → Text
====================================
Encryption output is the plain concatenation; padding X's are part of
the ciphertext and must survive.

Decryption output goes through a best-effort padding cleanup:
every X followed by another character is dropped, then one trailing X.
The combined effect removes every X, genuine ones included
("TAXI" decrypts to "TAI"). The heuristic is kept as-is for
compatibility with existing ciphertexts and tools.
"""

import re
from typing import Iterable

from .stage2_pairs import Digraph
from .stage3_substitute import Direction

_PAD_BEFORE_CHAR = re.compile(r"X(?=.)")
_PAD_AT_END      = re.compile(r"X$")


def clean_padding(text: str) -> str:
    return _PAD_AT_END.sub("", _PAD_BEFORE_CHAR.sub("", text))


def assemble(digraphs: Iterable[Digraph], direction: Direction) -> str:
    joined = "".join(a + b for a, b in digraphs)
    if direction is Direction.DECRYPT:
        return clean_padding(joined)
    return joined
