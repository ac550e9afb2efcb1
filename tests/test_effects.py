import pytest

from slimearena.effects import EffectManager, EffectType
from slimearena.vector import EffectParams, Vec3


class FakeBackend:
    def __init__(self):
        self.loaded = []
        self.played = []
        self.playing = set()
        self.transforms = {}
        self.stopped = []
        self._next = 100

    def load(self, path):
        self.loaded.append(path)
        return len(self.loaded)

    def play(self, resource_id):
        handle = self._next
        self._next += 1
        self.played.append(resource_id)
        self.playing.add(handle)
        return handle

    def set_transform(self, handle, params):
        self.transforms[handle] = params

    def stop(self, handle):
        self.stopped.append(handle)
        self.playing.discard(handle)

    def is_playing(self, handle):
        return handle in self.playing


@pytest.fixture
def backend():
    return FakeBackend()


@pytest.fixture
def manager(backend):
    return EffectManager(backend)


def test_loads_every_effect_file():
    backend = FakeBackend()
    EffectManager(backend)
    assert len(backend.loaded) == len(EffectType)
    assert backend.loaded[0] == "Data/Effect/Tktk03/ToonHit.efkefc"
    assert "Data/Effect/Suzuki/aura.efkefc" in backend.loaded


def test_reloading_keeps_first_resources(backend, manager):
    manager.load_effects()
    handle = manager.play(EffectType.HIT, object(), EffectParams())
    assert handle == 100
    assert backend.played == [1]


def test_play_applies_and_copies_params(backend, manager):
    params = EffectParams(pos=Vec3(1.0, 2.0, 3.0), is_loop=True)
    user = object()
    handle = manager.play(EffectType.SHIELD, user, params)
    assert backend.transforms[handle] == params
    params.is_stop = True
    backend.playing.discard(handle)
    manager.update()
    assert len(backend.played) == 2


def test_sync_moves_only_users_playbacks(backend, manager):
    first, second = object(), object()
    h1 = manager.play(EffectType.HIT, first, EffectParams())
    h2 = manager.play(EffectType.HIT, second, EffectParams())
    moved = EffectParams(pos=Vec3(5.0, 0.0, 0.0))
    manager.sync(EffectType.HIT, first, moved)
    assert backend.transforms[h1] == moved
    assert backend.transforms[h2] == EffectParams()


def test_stop_for_prevents_loop_restart(backend, manager):
    user = object()
    handle = manager.play(EffectType.ITEMGET, user, EffectParams(is_loop=True))
    manager.stop_for(EffectType.ITEMGET, user)
    assert backend.stopped == [handle]
    manager.update()
    assert backend.played == [backend.played[0]]


def test_update_restarts_finished_loop(backend, manager):
    user = object()
    params = EffectParams(pos=Vec3(0.0, 1.0, 0.0), is_loop=True)
    handle = manager.play(EffectType.WAIDATK, user, params)
    backend.playing.discard(handle)
    manager.update()
    assert len(backend.played) == 2
    assert backend.played[0] == backend.played[1]
    new_handle = max(backend.transforms)
    assert new_handle != handle
    assert backend.transforms[new_handle].pos == params.pos


def test_update_leaves_one_shot_effects(backend, manager):
    handle = manager.play(EffectType.HIT, object(), EffectParams())
    backend.playing.discard(handle)
    manager.update()
    assert len(backend.played) == 1


def test_is_play_end(backend, manager):
    user = object()
    assert manager.is_play_end(EffectType.HIT, user) is False
    handle = manager.play(EffectType.HIT, user, EffectParams())
    assert manager.is_play_end(EffectType.HIT, user) is False
    backend.playing.discard(handle)
    assert manager.is_play_end(EffectType.HIT, user) is True


def test_stop_type_and_stop_all(backend, manager):
    h1 = manager.play(EffectType.HIT, object(), EffectParams())
    h2 = manager.play(EffectType.SHIELD, object(), EffectParams())
    manager.stop_type(EffectType.HIT)
    assert backend.stopped == [h1]
    manager.stop_all()
    assert set(backend.stopped) == {h1, h2}
    assert not backend.playing