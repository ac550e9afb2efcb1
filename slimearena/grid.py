"""Debug grid of axis lines on the ground plane."""

from __future__ import annotations

from dataclasses import dataclass

from .vector import Vec3

__all__ = ["GridLine", "Grid"]


@dataclass(frozen=True)
class GridLine:
    """One line of the grid; a marker sphere sits at ``end``."""

    start: Vec3
    end: Vec3
    color: int


class Grid:
    """Lines parallel to the X axis in red and to the Z axis in blue."""

    LEN = 800.0
    HLEN = LEN / 2.0
    TERM = 60.0
    NUM = float(int(LEN / TERM))
    HNUM = int(NUM / 2)

    X_LINE_COLOR = 0xFF0000
    Z_LINE_COLOR = 0x0000FF
    MARKER_RADIUS = 15.0
    MARKER_DIV = 10

    def lines(self) -> list[GridLine]:
        """Every grid line: first those along X, then those along Z."""
        offsets = [n * self.TERM for n in range(-self.HNUM, self.HNUM)]
        along_x = [
            GridLine(Vec3(-self.HLEN, 0.0, z), Vec3(self.HLEN, 0.0, z), self.X_LINE_COLOR)
            for z in offsets
        ]
        along_z = [
            GridLine(Vec3(x, 0.0, -self.HLEN), Vec3(x, 0.0, self.HLEN), self.Z_LINE_COLOR)
            for x in offsets
        ]
        return along_x + along_z