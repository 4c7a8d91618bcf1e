"""
PLAYFAIR PIPELINE
=================
Wires the four stages together:

    keyword ──► stage1 build_matrix ─┐
                                     ├─► stage3 substitute ──► stage4 assemble
    text    ──► stage2 segment ──────┘

Every result is a pure function of (keyword, text, direction), so runs
are memoized. The cache only saves work; dropping it changes nothing.

CipherResult also carries the per-pair step list a viewer needs to walk
through the substitution and highlight the two active grid cells.
"""

import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Tuple

from .stages.stage1_matrix     import KeySquare, build_matrix
from .stages.stage2_pairs      import Digraph, segment
from .stages.stage3_substitute import Direction, substitute_all
from .stages.stage4_assemble   import assemble

logger = logging.getLogger(__name__)

DEFAULT_KEYWORD = "PLAYFAIR"
NO_STEP         = -1


@dataclass(frozen=True)
class CipherStep:
    index:  int
    source: Digraph
    result: Digraph
    cells:  Tuple[int, int]   # flat grid indices of the source letters

    def __str__(self):
        return f"{''.join(self.source)} -> {''.join(self.result)}"


@dataclass(frozen=True)
class CipherResult:
    square:    KeySquare
    direction: Direction
    pairs:     Tuple[Digraph, ...]
    processed: Tuple[Digraph, ...]
    text:      str

    @property
    def steps(self) -> Tuple[CipherStep, ...]:
        return tuple(
            CipherStep(i, src, dst,
                       (self.square.cell_index(src[0]), self.square.cell_index(src[1])))
            for i, (src, dst) in enumerate(zip(self.pairs, self.processed))
        )

    def highlight(self, index: int) -> Tuple[int, ...]:
        """
        Grid cells to highlight while step `index` is active.
        NO_STEP (-1) means nothing is active and returns ().
        """
        if index == NO_STEP:
            return ()
        if not 0 <= index < len(self.pairs):
            raise ValueError(
                f"Step {index} out of range: {len(self.pairs)} pair(s) available."
            )
        return self.steps[index].cells


@lru_cache(maxsize=256)
def run(keyword: str, text: str, direction: Direction) -> CipherResult:
    """Full pipeline: key square, pairs, substituted pairs, final text."""
    square    = build_matrix(keyword)
    pairs     = segment(text)
    processed = substitute_all(square, pairs, direction)
    result    = CipherResult(square, direction, pairs, processed,
                             assemble(processed, direction))
    logger.debug(f"{direction.name.lower()}: key={square.fingerprint()} "
                 f"pairs={len(pairs)} out={len(result.text)} chars")
    return result


class PlayfairCipher:
    """
    Playfair digraph cipher bound to one keyword.

    Historical only (Wheatstone, 1854; promoted by Lord Playfair).
    Output is uppercase A–Z with J folded into I; everything else is
    dropped. Decryption strips X padding heuristically and will also
    strip genuine X's from the plaintext.
    """

    def __init__(self, keyword: str = DEFAULT_KEYWORD):
        self._keyword = keyword
        self._square  = build_matrix(keyword)
        logger.info(f"PlayfairCipher key={self._square.fingerprint()}")

    @property
    def square(self) -> KeySquare:
        return self._square

    def process(self, text: str, direction: Direction) -> CipherResult:
        return run(self._keyword, text, direction)

    def encrypt(self, plaintext: str) -> str:
        return self.process(plaintext, Direction.ENCRYPT).text

    def decrypt(self, ciphertext: str) -> str:
        return self.process(ciphertext, Direction.DECRYPT).text
