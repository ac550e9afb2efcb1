"""Fixed-angle game camera with a simple vertical shake."""

from __future__ import annotations

import math
from dataclasses import replace
from enum import Enum, auto

from .vector import Vec3

__all__ = ["ShakeState", "Camera"]


class ShakeState(Enum):
    SHAKE_UP = auto()
    SHAKE_DOWN = auto()


class Camera:
    """Position and angles of the camera."""

    NEAR = 10.0
    FAR = 30000.0
    DEFAULT_POS = Vec3(0.0, 600.0, -200.0)
    DEFAULT_ANGLES = Vec3(math.radians(75.0), 0.0, 0.0)

    def __init__(self) -> None:
        self.pos = self.DEFAULT_POS
        self.angles = self.DEFAULT_ANGLES
        self.shake_state = ShakeState.SHAKE_UP

    def reset(self) -> None:
        self.pos = self.DEFAULT_POS
        self.angles = self.DEFAULT_ANGLES
        self.shake_state = ShakeState.SHAKE_UP

    def shake(self, shake_cnt: int, limit: float) -> None:
        """Bob the camera up and down ``shake_cnt + 1`` times by ``limit``."""
        for _ in range(shake_cnt + 1):
            if self.shake_state is ShakeState.SHAKE_UP:
                self.pos = replace(self.pos, y=self.pos.y - limit)
                self.shake_state = ShakeState.SHAKE_DOWN
            else:
                self.pos = replace(self.pos, y=self.pos.y + limit)
                self.shake_state = ShakeState.SHAKE_UP

    def set_camera_work(self, pos: Vec3, rot: Vec3) -> None:
        self.pos = pos
        self.angles = rot