"""Screen fade between scenes."""

from __future__ import annotations

from enum import Enum, auto

__all__ = ["FadeState", "Fader"]


class FadeState(Enum):
    NONE = auto()
    FADE_OUT = auto()
    FADE_IN = auto()


class Fader:
    """Black overlay that darkens or brightens the screen step by step.

    The fade reports its end one update after the alpha reached its limit,
    so the final frame is drawn before the scene moves on.
    """

    SPEED_ALPHA = 5.0
    MAX_ALPHA = 255.0

    def __init__(self) -> None:
        self.state = FadeState.NONE
        self.alpha = 0.0
        self._is_pre_end = True
        self._is_end = True
        self.reset()

    def reset(self) -> None:
        self.state = FadeState.NONE
        self.alpha = 0.0
        self._is_pre_end = True
        self._is_end = True

    @property
    def is_end(self) -> bool:
        return self._is_end

    def update(self) -> None:
        if self._is_end:
            return
        if self._is_pre_end:
            self._is_end = True
            return
        if self.state is FadeState.FADE_OUT:
            self.alpha += self.SPEED_ALPHA
            if self.alpha > self.MAX_ALPHA:
                self.alpha = self.MAX_ALPHA
                self._is_pre_end = True
        elif self.state is FadeState.FADE_IN:
            self.alpha -= self.SPEED_ALPHA
            if self.alpha < 0:
                self.alpha = 0.0
                self._is_pre_end = True

    def overlay_alpha(self) -> int | None:
        """Alpha of the black overlay to draw, or None when not fading."""
        if self.state is FadeState.NONE:
            return None
        return int(self.alpha)

    def set_fade(self, state: FadeState) -> None:
        self.state = state
        if state is not FadeState.NONE:
            self._is_pre_end = False
            self._is_end = False
        if state is FadeState.FADE_IN:
            self.alpha = self.MAX_ALPHA
        elif state is FadeState.FADE_OUT:
            self.alpha = 0.0