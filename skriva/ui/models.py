"""Layout models mapping widget pixels to glyph space."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from skriva.core.geometry import GLYPH_SIZE, Point


@dataclass(frozen=True)
class GlyphFrame:
    """Where one 600x600 glyph box sits inside the canvas widget."""

    left: float
    top: float
    scale: float

    @property
    def size(self) -> float:
        return GLYPH_SIZE * self.scale

    def to_glyph(self, x: float, y: float) -> Point:
        return Point((x - self.left) / self.scale, (y - self.top) / self.scale)

    def to_widget(self, point: Point) -> Point:
        return Point(self.left + point[0] * self.scale, self.top + point[1] * self.scale)

    def contains(self, x: float, y: float) -> bool:
        return self.left <= x < self.left + self.size and self.top <= y < self.top + self.size


def layout_row(count: int, width: float, height: float, overlap: float = 0.35) -> List[GlyphFrame]:
    """Lay ``count`` glyph boxes side by side, centered in a width x height area.

    Letters only use the middle of their box, so neighbouring boxes overlap
    by ``overlap`` of a box to keep a word readable.
    """
    if count <= 0 or width <= 0 or height <= 0:
        return []
    step = 1.0 - overlap
    units_wide = 1.0 + step * (count - 1)
    scale = min(width / (GLYPH_SIZE * units_wide), height / GLYPH_SIZE)
    box = GLYPH_SIZE * scale
    total = box * units_wide
    left = (width - total) / 2
    top = (height - box) / 2
    return [GlyphFrame(left=left + i * box * step, top=top, scale=scale) for i in range(count)]
