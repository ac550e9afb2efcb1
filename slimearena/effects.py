"""Bookkeeping for particle effects played on behalf of game objects."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum, auto
from typing import Protocol

from .vector import EffectParams

__all__ = ["EFFECT_DIR", "EFFECT_FILES", "EffectType", "EffectBackend", "EffectManager"]

EFFECT_DIR = "Data/Effect/"


class EffectType(Enum):
    HIT = auto()
    SHIELD = auto()
    WAIDCHARGE = auto()
    WAIDATK = auto()
    ITEMGET = auto()


EFFECT_FILES = {
    EffectType.HIT: "Tktk03/ToonHit.efkefc",
    EffectType.SHIELD: "MaterialBasic/Falloff.efkefc",
    EffectType.WAIDCHARGE: "Pierre01/PhantasmMeteor_Single.efkefc",
    EffectType.WAIDATK: "Suzuki/aura.efkefc",
    EffectType.ITEMGET: "MAGICALxSPIRAL/MagicArea.efkefc",
}


class EffectBackend(Protocol):
    """The effect runtime that actually loads and renders effects."""

    def load(self, path: str) -> int: ...

    def play(self, resource_id: int) -> int: ...

    def set_transform(self, handle: int, params: EffectParams) -> None: ...

    def stop(self, handle: int) -> None: ...

    def is_playing(self, handle: int) -> bool: ...


@dataclass
class _Playback:
    user: object
    handle: int
    params: EffectParams


@dataclass
class _LoadedEffect:
    resource_id: int
    playbacks: list[_Playback] = field(default_factory=list)


class EffectManager:
    """Plays effects for users and keeps looping effects running.

    Every playback remembers the object it was started for, so it can later
    be moved or stopped for that object alone.
    """

    def __init__(self, backend: EffectBackend, effect_dir: str = EFFECT_DIR) -> None:
        self._backend = backend
        self._effect_dir = effect_dir
        self._effects: dict[EffectType, _LoadedEffect] = {}
        self.load_effects()

    def load_effects(self) -> None:
        """Load every effect file; effects already registered are kept."""
        for effect, file_name in EFFECT_FILES.items():
            resource_id = self._backend.load(self._effect_dir + file_name)
            self._effects.setdefault(effect, _LoadedEffect(resource_id))

    def play(
        self, effect: EffectType, user: object, params: EffectParams
    ) -> int | None:
        """Start an effect for ``user``; return its handle, or None if unknown."""
        data = self._effects.get(effect)
        if data is None:
            return None
        handle = self._backend.play(data.resource_id)
        data.playbacks.append(_Playback(user, handle, replace(params)))
        self._backend.set_transform(handle, params)
        return handle

    def _playbacks_of(self, effect: EffectType, user: object) -> list[_Playback]:
        data = self._effects.get(effect)
        if data is None:
            return []
        return [play for play in data.playbacks if play.user is user]

    def sync(self, effect: EffectType, user: object, params: EffectParams) -> None:
        """Move every playback of ``effect`` belonging to ``user``."""
        for play in self._playbacks_of(effect, user):
            self._backend.set_transform(play.handle, params)

    def stop_all(self) -> None:
        for data in self._effects.values():
            for play in data.playbacks:
                self._backend.stop(play.handle)

    def stop_type(self, effect: EffectType) -> None:
        data = self._effects.get(effect)
        if data is None:
            return
        for play in data.playbacks:
            self._backend.stop(play.handle)

    def stop_for(self, effect: EffectType, user: object) -> None:
        """Stop ``user``'s playbacks of ``effect`` and keep them from looping."""
        for play in self._playbacks_of(effect, user):
            self._backend.stop(play.handle)
            play.params.is_stop = True

    def is_play_end(self, effect: EffectType, user: object) -> bool:
        """True when any of ``user``'s playbacks of ``effect`` has finished."""
        if effect not in self._effects:
            return True
        return any(
            not self._backend.is_playing(play.handle)
            for play in self._playbacks_of(effect, user)
        )

    def update(self) -> None:
        """Restart looping playbacks that have run out."""
        for data in self._effects.values():
            for play in data.playbacks:
                if not play.params.is_loop or play.params.is_stop:
                    continue
                if not self._backend.is_playing(play.handle):
                    play.handle = self._backend.play(data.resource_id)
                    self._backend.set_transform(play.handle, play.params)