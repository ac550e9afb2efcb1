"""Background music and sound effects by name."""

from __future__ import annotations

from enum import Enum, auto
from typing import Protocol

__all__ = [
    "SOUND_DIR",
    "VOLUME_MAX",
    "SE_VOL",
    "PLAYTYPE_NORMAL",
    "PLAYTYPE_BACK",
    "PLAYTYPE_LOOP",
    "BgmType",
    "SeType",
    "SoundBackend",
    "SoundManager",
    "scaled_volume",
]

SOUND_DIR = "Data/Sound/"
VOLUME_MAX = 100
SE_VOL = 70

PLAYTYPE_NORMAL = 0
PLAYTYPE_BACK = 1
PLAYTYPE_LOOP = 3


class BgmType(Enum):
    TITLE = auto()
    GAME = auto()
    GAME2 = auto()
    RESULT = auto()


class SeType(Enum):
    SLIMEMOVE = auto()
    ATTACK = auto()
    WAIDATKCHARGE = auto()
    WAIDATK = auto()
    BUTTON = auto()
    CANCEL = auto()
    CURSOR = auto()
    GAMESTART = auto()
    RESULT_TITLE = auto()


_BGM_FILES = {
    BgmType.TITLE: "Title.mp3",
    BgmType.GAME: "GameScene.mp3",
    BgmType.GAME2: "GameScene2.mp3",
    BgmType.RESULT: "Result.mp3",
}

_SE_FILES = {
    SeType.SLIMEMOVE: "MoveSlime.mp3",
    SeType.ATTACK: "Attack.mp3",
    SeType.WAIDATK: "WaidAtk.mp3",
    SeType.WAIDATKCHARGE: "WaidCharge.mp3",
    SeType.BUTTON: "button.mp3",
    SeType.CANCEL: "Cancel.mp3",
    SeType.CURSOR: "Cursor.mp3",
    SeType.GAMESTART: "GameStart.mp3",
    SeType.RESULT_TITLE: "ResultButton.mp3",
}

_RELEASED_SE = (
    SeType.SLIMEMOVE,
    SeType.ATTACK,
    SeType.BUTTON,
    SeType.CANCEL,
    SeType.WAIDATK,
    SeType.WAIDATKCHARGE,
    SeType.CURSOR,
)


def scaled_volume(percent: int) -> int:
    """Convert a volume percentage into the 0-255 scale, truncating."""
    raw = 255 * percent
    magnitude = abs(raw) // 100
    return magnitude if raw >= 0 else -magnitude


class SoundBackend(Protocol):
    """The audio device that loads and plays sound files."""

    def load(self, path: str) -> int: ...

    def play(self, handle: int, play_type: int, from_top: bool) -> None: ...

    def set_volume(self, handle: int, volume: int) -> None: ...

    def stop(self, handle: int) -> None: ...

    def delete(self, handle: int) -> None: ...


class SoundManager:
    """Loads, plays and stops music and sound effects by type."""

    def __init__(self, backend: SoundBackend, sound_dir: str = SOUND_DIR) -> None:
        self._backend = backend
        self._sound_dir = sound_dir
        self._bgm: dict[BgmType, int] = {}
        self._se: dict[SeType, int] = {}

    def load_bgm(self, bgm: BgmType) -> int:
        handle = self._backend.load(self._sound_dir + _BGM_FILES[bgm])
        self._bgm[bgm] = handle
        return handle

    def load_se(self, se: SeType) -> int:
        handle = self._backend.load(self._sound_dir + _SE_FILES[se])
        self._se[se] = handle
        return handle

    def _bgm_handle(self, bgm: BgmType) -> int:
        try:
            return self._bgm[bgm]
        except KeyError:
            raise KeyError(f"music {bgm.name} is not loaded") from None

    def _se_handle(self, se: SeType) -> int:
        try:
            return self._se[se]
        except KeyError:
            raise KeyError(f"sound effect {se.name} is not loaded") from None

    def _play(self, handle: int, play_type: int, volume_percent: int, from_top: bool) -> None:
        self._backend.play(handle, play_type, from_top)
        self._backend.set_volume(handle, scaled_volume(volume_percent))

    def play_bgm(
        self,
        bgm: BgmType,
        play_type: int,
        volume_percent: int = VOLUME_MAX,
        from_top: bool = True,
    ) -> None:
        self._play(self._bgm_handle(bgm), play_type, volume_percent, from_top)

    def play_se(
        self,
        se: SeType,
        play_type: int,
        volume_percent: int = VOLUME_MAX,
        from_top: bool = True,
    ) -> None:
        self._play(self._se_handle(se), play_type, volume_percent, from_top)

    def stop_bgm(self, bgm: BgmType) -> None:
        self._backend.stop(self._bgm_handle(bgm))

    def stop_se(self, se: SeType) -> None:
        self._backend.stop(self._se_handle(se))

    def release(self) -> None:
        """Free every loaded track and the common sound effects."""
        for bgm in BgmType:
            handle = self._bgm.pop(bgm, None)
            if handle is not None:
                self._backend.delete(handle)
        for se in _RELEASED_SE:
            handle = self._se.pop(se, None)
            if handle is not None:
                self._backend.delete(handle)