"""
playfair_engine — Playfair Digraph Cipher
==========================================
Four-stage pipeline, keyword and text in, ciphertext or plaintext out.

Stages:
    1  MATRIX      — keyword → 5×5 key square (I/J merged)
    2  PAIRS       — text → digraphs, X-padded and X-split
    3  SUBSTITUTE  — row / column / rectangle rule per digraph
    4  ASSEMBLE    — join digraphs; heuristic X cleanup on decrypt

Historical and educational. Not secure.

License: Apache 2.0
"""

__version__ = "1.0.0"

from .stages.stage1_matrix     import ALPHABET, KeySquare, build_matrix, normalize
from .stages.stage2_pairs      import PAD, segment
from .stages.stage3_substitute import Direction, substitute, substitute_all
from .stages.stage4_assemble   import assemble, clean_padding
from .pipeline                 import CipherResult, CipherStep, PlayfairCipher, run

__all__ = [
    "ALPHABET",
    "PAD",
    "KeySquare",
    "Direction",
    "CipherResult",
    "CipherStep",
    "PlayfairCipher",
    "build_matrix",
    "normalize",
    "segment",
    "substitute",
    "substitute_all",
    "assemble",
    "clean_padding",
    "run",
]
