"""Window settings, asset paths and frame pacing of the game loop."""

from __future__ import annotations

__all__ = [
    "SCREEN_SIZE_X",
    "SCREEN_SIZE_Y",
    "FRAME_RATE",
    "PATH_MODEL",
    "PATH_IMAGE",
    "PATH_FONT",
    "PATH_EFFECT",
    "PATH_SOUND",
    "FPS_TEXT_X",
    "FrameClock",
]

SCREEN_SIZE_X = 1200
SCREEN_SIZE_Y = 800

# Milliseconds per frame, truncated as the loop has always used it.
FRAME_RATE = float(1000 // 60)

PATH_MODEL = "Data/Model/"
PATH_IMAGE = "Data/Image/"
PATH_FONT = "Data/Font/"
PATH_EFFECT = "Data/Effect/"
PATH_SOUND = "Data/Sound/"

FPS_TEXT_X = SCREEN_SIZE_X - 90

_RATE_PERIOD_MS = 1000


class FrameClock:
    """Decides when a frame is due and measures the achieved frame rate."""

    def __init__(self) -> None:
        self.current_time = 0
        self.last_frame_time = 0
        self.frame_count = 0
        self.update_frame_rate_time = 0
        self.frame_rate = 0.0

    def tick(self, now: int) -> bool:
        """Record the time ``now`` in ms; return True when a frame should run."""
        self.current_time = now
        if now - self.last_frame_time < FRAME_RATE:
            return False
        self.last_frame_time = now
        self.frame_count += 1
        self._calc_frame_rate()
        return True

    def _calc_frame_rate(self) -> None:
        elapsed = self.current_time - self.update_frame_rate_time
        if elapsed > _RATE_PERIOD_MS:
            self.frame_rate = self.frame_count * 1000 / elapsed
            self.frame_count = 0
            self.update_frame_rate_time = self.current_time

    def frame_rate_text(self) -> str:
        return f"FPS[{self.frame_rate:.2f}]"