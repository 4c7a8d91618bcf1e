"""
KEY SQUARE RENDERING
====================
Draws the 5×5 key square as a PNG, optionally highlighting cells,
e.g. the two letters of the pair currently being substituted.

Cells are addressed by flat row-major index (row * 5 + col), the same
indices CipherStep.cells carries.

Output: PNG bytes (lossless), or written straight to a path.

Dependencies: Pillow >= 10.0
"""

import io
from typing import Iterable

from PIL import Image, ImageDraw, ImageFont

from .stages.stage1_matrix import SIZE, KeySquare


class KeySquareRenderer:
    """Render a KeySquare grid with Pillow."""

    BACKGROUND  = (255, 255, 255)
    CELL_FILL   = (238, 242, 255)   # pale indigo
    ACCENT_FILL = (99, 102, 241)    # indigo, highlighted cells
    TEXT        = (30, 27, 75)
    ACCENT_TEXT = (255, 255, 255)

    def __init__(self, cell_size: int = 48, padding: int = 8):
        if cell_size <= 0 or padding < 0:
            raise ValueError("cell_size must be positive and padding non-negative.")
        self.cell_size = cell_size
        self.padding   = padding
        self._font     = ImageFont.load_default()

    @property
    def image_size(self) -> int:
        return SIZE * self.cell_size + (SIZE + 1) * self.padding

    def draw(self, square: KeySquare, highlight: Iterable[int] = ()) -> Image.Image:
        """
        Build the grid image.

        Args:
            square    : key square to draw
            highlight : flat cell indices (0-24) to fill with the accent colour

        Returns:
            RGB PIL Image
        """
        marked = set(highlight)
        bad = [i for i in marked if not 0 <= i < SIZE * SIZE]
        if bad:
            raise ValueError(f"Highlight indices out of range 0-24: {sorted(bad)}")

        img  = Image.new("RGB", (self.image_size, self.image_size), self.BACKGROUND)
        draw = ImageDraw.Draw(img)
        step = self.cell_size + self.padding

        for idx, letter in enumerate(square.letters):
            row, col = divmod(idx, SIZE)
            x0 = self.padding + col * step
            y0 = self.padding + row * step
            box = (x0, y0, x0 + self.cell_size - 1, y0 + self.cell_size - 1)
            active = idx in marked
            draw.rectangle(box, fill=self.ACCENT_FILL if active else self.CELL_FILL)

            left, top, right, bottom = draw.textbbox((0, 0), letter, font=self._font)
            tx = x0 + (self.cell_size - (right - left)) // 2 - left
            ty = y0 + (self.cell_size - (bottom - top)) // 2 - top
            draw.text((tx, ty), letter, font=self._font,
                      fill=self.ACCENT_TEXT if active else self.TEXT)
        return img

    def render(self, square: KeySquare, highlight: Iterable[int] = ()) -> bytes:
        """Return the grid as PNG bytes."""
        buf = io.BytesIO()
        self.draw(square, highlight).save(buf, format="PNG")
        return buf.getvalue()

    def save(self, square: KeySquare, path: str, highlight: Iterable[int] = ()) -> None:
        self.draw(square, highlight).save(path, format="PNG")
