"""Geometry of the circular gauges drawn over the slimes.

A gauge is a fan of triangles around a screen position.  The fan is cut
into ``DIV_NUM`` slices and stops at ``rate`` of a full turn, starting at
the top and running clockwise.  The corner points are pushed out to the
bounding rectangle so a square texture is covered completely.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum, auto

from .vector import Vec3

__all__ = [
    "DIV_NUM",
    "FRAME_IMAGE",
    "GAUGE_IMAGES",
    "GaugeType",
    "Vertex2D",
    "make_rot_local_pos",
    "make_circle_vertices",
]

DIV_NUM = 8

FRAME_IMAGE = "CircleFrame.png"


class GaugeType(Enum):
    CHARGE = auto()
    PARRY_K = auto()
    PARRY_Y = auto()


GAUGE_IMAGES = {
    GaugeType.CHARGE: "Circle.png",
    GaugeType.PARRY_K: "ParryK.png",
    GaugeType.PARRY_Y: "ParryY.png",
}

_WHITE = (255, 255, 255, 255)


@dataclass(frozen=True)
class Vertex2D:
    """A screen-space vertex with texture coordinates."""

    pos: Vec3
    u: float
    v: float
    color: tuple[int, int, int, int] = _WHITE
    rhw: float = 1.0


def make_rot_local_pos(rad: float, size_x: float, size_y: float) -> Vec3:
    """Offset from the centre at angle ``rad``, clamped to the rectangle."""
    length = math.sqrt(size_x * size_x + size_y * size_y)
    x = math.sin(rad) * length
    y = -math.cos(rad) * length
    x = max(-size_x, min(size_x, x))
    y = max(-size_y, min(size_y, y))
    return Vec3(x, y, 0.0)


def _edge_vertex(centre: Vec3, offset: Vec3, size_x: float, size_y: float) -> Vertex2D:
    return Vertex2D(
        pos=Vec3(centre.x + offset.x, centre.y + offset.y, 0.0),
        u=(offset.x + size_x) / (size_x + size_x),
        v=(offset.y + size_y) / (size_y + size_y),
    )


def make_circle_vertices(
    pos: Vec3, size_x: int, size_y: int, rate: float = 1.0
) -> list[Vertex2D]:
    """Triangle list, three vertices per slice, filling ``rate`` of the circle."""
    div_rad = 2 * math.pi / DIV_NUM
    end_rad = 2 * math.pi * rate
    size_xf = float(size_x)
    size_yf = float(size_y)
    centre = Vertex2D(pos=Vec3(pos.x, pos.y, 0.0), u=0.5, v=0.5)

    vertices: list[Vertex2D] = []
    rad = 0.0
    for _ in range(DIV_NUM):
        first = make_rot_local_pos(rad, size_xf, size_yf)
        rad = min(rad + div_rad, end_rad)
        second = make_rot_local_pos(rad, size_xf, size_yf)
        vertices.append(centre)
        vertices.append(_edge_vertex(pos, first, size_xf, size_yf))
        vertices.append(_edge_vertex(pos, second, size_xf, size_yf))
        if rad >= end_rad:
            break
    return vertices