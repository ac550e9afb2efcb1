import pytest

from slimearena.vector import EffectParams, Vec3, Vector2, Vector2F


def test_vec3_add_then_sub_round_trips():
    a = Vec3(1.5, -2.0, 3.25)
    b = Vec3(0.5, 4.0, -1.0)
    assert (a + b) - b == a


def test_vec3_sub_self_is_zero():
    a = Vec3(7.0, 8.0, 9.0)
    assert a - a == Vec3()


def test_vec3_add_rejects_other_types():
    with pytest.raises(TypeError):
        Vec3(1.0, 2.0, 3.0) + 5


def test_vec3_is_immutable():
    v = Vec3(1.0, 2.0, 3.0)
    with pytest.raises(AttributeError):
        v.x = 4.0
    assert (v.x, v.y, v.z) == (1.0, 2.0, 3.0)


def test_vector2_round_trips_through_float():
    v = Vector2(12, -34)
    assert v.to_vector2f().to_vector2() == v


def test_vector2_to_float_keeps_components():
    f = Vector2(3, 9).to_vector2f()
    assert (f.x, f.y, f.z) == (3.0, 9.0, 0.0)


def test_vector2f_truncates_toward_zero():
    assert Vector2F(-1.7, 2.9, 0.5).to_vector2() == Vector2(-1, 2, 0)


def test_effect_params_defaults():
    params = EffectParams()
    assert params.pos == Vec3()
    assert params.rot == Vec3()
    assert params.scl == Vec3(1.0, 1.0, 1.0)
    assert params.is_loop is False
    assert params.is_stop is False


def test_effect_params_are_independent():
    first = EffectParams()
    second = EffectParams()
    first.is_stop = True
    assert second.is_stop is False