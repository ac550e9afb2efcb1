"""Scene switching with fades between title, game and result."""

from __future__ import annotations

import math
from collections.abc import Callable, Mapping
from enum import Enum, auto
from typing import Protocol

from .camera import Camera
from .common_data import CommonData, Mode
from .fade import FadeState, Fader
from .vector import Vec3

__all__ = [
    "GAME_CAMERA_POS",
    "GAME_CAMERA_ANGLE",
    "TITLE_CAMERA_POS",
    "TITLE_CAMERA_ANGLE",
    "SceneId",
    "Scene",
    "SceneFactory",
    "SceneManager",
]

GAME_CAMERA_POS = Vec3(0.0, 600.0, -200.0)
GAME_CAMERA_ANGLE = Vec3(math.radians(75.0), 0.0, 0.0)
TITLE_CAMERA_POS = Vec3(0.0, 100.0, -200.0)
TITLE_CAMERA_ANGLE = Vec3(math.radians(20.0), 0.0, 0.0)


class SceneId(Enum):
    NONE = auto()
    TITLE = auto()
    GAME = auto()
    RESULT = auto()
    MAX = auto()


class Scene(Protocol):
    """What the manager needs from a scene."""

    def init(self) -> None: ...

    def update(self) -> None: ...

    def draw(self) -> None: ...

    def release(self) -> None: ...


SceneFactory = Callable[["SceneManager"], Scene]

_CAMERA_WORK = {
    SceneId.GAME: (GAME_CAMERA_POS, GAME_CAMERA_ANGLE),
    SceneId.RESULT: (TITLE_CAMERA_POS, TITLE_CAMERA_ANGLE),
}


class SceneManager:
    """Owns the active scene and swaps it, fading out and back in."""

    def __init__(
        self,
        factories: Mapping[SceneId, SceneFactory],
        camera: Camera | None = None,
        fader: Fader | None = None,
    ) -> None:
        self._factories = dict(factories)
        self.camera = camera if camera is not None else Camera()
        self.fader = fader if fader is not None else Fader()
        self.data: CommonData | None = None
        self.scene_id = SceneId.NONE
        self._wait_scene_id = SceneId.NONE
        self._scene: Scene | None = None
        self._is_scene_changing = False
        self.match_mode = Mode.PVE

    @property
    def scene(self) -> Scene | None:
        return self._scene

    @property
    def is_scene_changing(self) -> bool:
        return self._is_scene_changing

    def start(self) -> None:
        """Open the title scene and fade it in."""
        self.fader.reset()
        self.camera.reset()
        self.data = CommonData()
        self.scene_id = SceneId.NONE
        self.change_scene(SceneId.TITLE, False)
        self.fader.set_fade(FadeState.FADE_IN)
        self._is_scene_changing = True
        self.match_mode = Mode.PVE

    def change_scene(self, next_id: SceneId, to_fade: bool) -> None:
        """Move to ``next_id``, at once or after fading out."""
        if next_id not in self._factories:
            raise ValueError(f"no scene registered for {next_id.name}")
        self._wait_scene_id = next_id
        if to_fade:
            self.fader.set_fade(FadeState.FADE_OUT)
            self._is_scene_changing = True
        else:
            self._do_change_scene()

    def _do_change_scene(self) -> None:
        self._release_scene()
        self.scene_id = self._wait_scene_id
        work = _CAMERA_WORK.get(self.scene_id)
        if work is not None:
            self.camera.set_camera_work(*work)
        scene = self._factories[self.scene_id](self)
        self._scene = scene
        scene.init()
        self._wait_scene_id = SceneId.NONE

    def _fade(self) -> None:
        state = self.fader.state
        if not self.fader.is_end:
            return
        if state is FadeState.FADE_OUT:
            self._do_change_scene()
            self.fader.set_fade(FadeState.FADE_IN)
        elif state is FadeState.FADE_IN:
            self.fader.set_fade(FadeState.NONE)
            self._is_scene_changing = False

    def _active_scene(self) -> Scene:
        if self._scene is None:
            raise RuntimeError("no active scene; call start() first")
        return self._scene

    def update(self) -> None:
        """Advance the fade, or the scene itself when no change is running."""
        self.fader.update()
        if self._is_scene_changing:
            self._fade()
        else:
            self._active_scene().update()

    def draw(self) -> int | None:
        """Draw the scene; return the alpha of the fade overlay, if any."""
        self._active_scene().draw()
        return self.fader.overlay_alpha()

    def _release_scene(self) -> None:
        if self._scene is not None:
            self._scene.release()
            self._scene = None

    def release(self) -> None:
        """Release the scene and the shared data."""
        self._release_scene()
        self.data = None
        self.fader.reset()
        self._is_scene_changing = False