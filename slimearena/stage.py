"""The square arena the slimes fight on, and where items may appear."""

from __future__ import annotations

import random

from .vector import Vec3

__all__ = [
    "STAGE_ONE_SQUARE",
    "STAGE_SQUARE_NUM",
    "STAGE_ALL_SIZE_X",
    "STAGE_ALL_SIZE_Z",
    "STATE_HALF_SIZE_X",
    "STATE_HALF_SIZE_Z",
    "STAGE_UP_RIGHT_CENTER2SIZE",
    "STAGE_DOWN_LEFT_CENTER2SIZE",
    "STAGE_MODEL_FILE",
    "STAGE_MODEL_SCALE",
    "ITEM_RADIUS",
    "random_item_position",
]

STAGE_ONE_SQUARE = 60
STAGE_SQUARE_NUM = 11
STAGE_ALL_SIZE_X = STAGE_ONE_SQUARE * STAGE_SQUARE_NUM
STAGE_ALL_SIZE_Z = STAGE_ONE_SQUARE * STAGE_SQUARE_NUM
STATE_HALF_SIZE_X = STAGE_ALL_SIZE_X // 2
STATE_HALF_SIZE_Z = STAGE_ALL_SIZE_Z // 2

STAGE_UP_RIGHT_CENTER2SIZE = Vec3(330.0, 0.0, 330.0)
STAGE_DOWN_LEFT_CENTER2SIZE = Vec3(-330.0, 0.0, -330.0)

STAGE_MODEL_FILE = "EmaBeni3.mv1"
STAGE_MODEL_SCALE = Vec3(1.0, 0.1, 1.0)

ITEM_RADIUS = 25.0


def random_item_position(rng: random.Random, height: float = ITEM_RADIUS) -> Vec3:
    """Pick a spot on the stage, one square clear of the far edges."""
    x = rng.randint(0, STAGE_ALL_SIZE_X - STAGE_ONE_SQUARE) - STATE_HALF_SIZE_X
    z = rng.randint(0, STAGE_ALL_SIZE_Z - STAGE_ONE_SQUARE) - STATE_HALF_SIZE_Z
    return Vec3(float(x), height, float(z))