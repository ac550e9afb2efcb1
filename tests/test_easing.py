import math

import pytest

from slimearena import easing

START = 10.0
END = 50.0
TOTAL = 4.0
OVERSHOOT = 1.70158


def test_curves_start_at_start():
    t = 0.0
    values = {
        "quad_in": easing.quad_in(t, TOTAL, START, END),
        "quad_out": easing.quad_out(t, TOTAL, START, END),
        "quad_in_out": easing.quad_in_out(t, TOTAL, START, END),
        "cubic_in": easing.cubic_in(t, TOTAL, START, END),
        "cubic_out": easing.cubic_out(t, TOTAL, START, END),
        "cubic_in_out": easing.cubic_in_out(t, TOTAL, START, END),
        "quart_in": easing.quart_in(t, TOTAL, START, END),
        "quart_out": easing.quart_out(t, TOTAL, START, END),
        "quart_in_out": easing.quart_in_out(t, TOTAL, START, END),
        "quint_in": easing.quint_in(t, TOTAL, START, END),
        "quint_out": easing.quint_out(t, TOTAL, START, END),
        "quint_in_out": easing.quint_in_out(t, TOTAL, START, END),
        "sine_in": easing.sine_in(t, TOTAL, START, END),
        "sine_out": easing.sine_out(t, TOTAL, START, END),
        "sine_in_out": easing.sine_in_out(t, TOTAL, START, END),
        "exp_in": easing.exp_in(t, TOTAL, START, END),
        "exp_out": easing.exp_out(t, TOTAL, START, END),
        "exp_in_out": easing.exp_in_out(t, TOTAL, START, END),
        "circ_in": easing.circ_in(t, TOTAL, START, END),
        "circ_out": easing.circ_out(t, TOTAL, START, END),
        "circ_in_out": easing.circ_in_out(t, TOTAL, START, END),
        "elastic_in": easing.elastic_in(t, TOTAL, START, END),
        "elastic_out": easing.elastic_out(t, TOTAL, START, END),
        "elastic_in_out": easing.elastic_in_out(t, TOTAL, START, END),
        "back_in": easing.back_in(t, TOTAL, START, END, OVERSHOOT),
        "back_out": easing.back_out(t, TOTAL, START, END, OVERSHOOT),
        "back_in_out": easing.back_in_out(t, TOTAL, START, END, OVERSHOOT),
        "bounce_in": easing.bounce_in(t, TOTAL, START, END),
        "bounce_out": easing.bounce_out(t, TOTAL, START, END),
        "bounce_in_out": easing.bounce_in_out(t, TOTAL, START, END),
        "linear": easing.linear(t, TOTAL, START, END),
    }
    for name, value in values.items():
        assert value == pytest.approx(START, abs=1e-9), name


def test_curves_end_at_end():
    t = TOTAL
    values = {
        "quad_in": easing.quad_in(t, TOTAL, START, END),
        "quad_out": easing.quad_out(t, TOTAL, START, END),
        "quad_in_out": easing.quad_in_out(t, TOTAL, START, END),
        "cubic_in": easing.cubic_in(t, TOTAL, START, END),
        "cubic_out": easing.cubic_out(t, TOTAL, START, END),
        "cubic_in_out": easing.cubic_in_out(t, TOTAL, START, END),
        "quart_in": easing.quart_in(t, TOTAL, START, END),
        "quart_out": easing.quart_out(t, TOTAL, START, END),
        "quart_in_out": easing.quart_in_out(t, TOTAL, START, END),
        "quint_in": easing.quint_in(t, TOTAL, START, END),
        "quint_out": easing.quint_out(t, TOTAL, START, END),
        "quint_in_out": easing.quint_in_out(t, TOTAL, START, END),
        "sine_in": easing.sine_in(t, TOTAL, START, END),
        "sine_out": easing.sine_out(t, TOTAL, START, END),
        "sine_in_out": easing.sine_in_out(t, TOTAL, START, END),
        "exp_in": easing.exp_in(t, TOTAL, START, END),
        "exp_out": easing.exp_out(t, TOTAL, START, END),
        "exp_in_out": easing.exp_in_out(t, TOTAL, START, END),
        "circ_in": easing.circ_in(t, TOTAL, START, END),
        "circ_out": easing.circ_out(t, TOTAL, START, END),
        "circ_in_out": easing.circ_in_out(t, TOTAL, START, END),
        "elastic_in": easing.elastic_in(t, TOTAL, START, END),
        "elastic_out": easing.elastic_out(t, TOTAL, START, END),
        "elastic_in_out": easing.elastic_in_out(t, TOTAL, START, END),
        "back_in": easing.back_in(t, TOTAL, START, END, OVERSHOOT),
        "back_out": easing.back_out(t, TOTAL, START, END, OVERSHOOT),
        "back_in_out": easing.back_in_out(t, TOTAL, START, END, OVERSHOOT),
        "bounce_in": easing.bounce_in(t, TOTAL, START, END),
        "bounce_out": easing.bounce_out(t, TOTAL, START, END),
        "bounce_in_out": easing.bounce_in_out(t, TOTAL, START, END),
        "linear": easing.linear(t, TOTAL, START, END),
    }
    for name, value in values.items():
        assert value == pytest.approx(END, abs=1e-9), name


def test_in_out_curves_pass_midpoint():
    t = TOTAL / 2
    mid = (START + END) / 2
    values = {
        "quad_in_out": easing.quad_in_out(t, TOTAL, START, END),
        "cubic_in_out": easing.cubic_in_out(t, TOTAL, START, END),
        "quart_in_out": easing.quart_in_out(t, TOTAL, START, END),
        "quint_in_out": easing.quint_in_out(t, TOTAL, START, END),
        "sine_in_out": easing.sine_in_out(t, TOTAL, START, END),
        "exp_in_out": easing.exp_in_out(t, TOTAL, START, END),
        "circ_in_out": easing.circ_in_out(t, TOTAL, START, END),
        "elastic_in_out": easing.elastic_in_out(t, TOTAL, START, END),
        "back_in_out": easing.back_in_out(t, TOTAL, START, END, OVERSHOOT),
        "bounce_in_out": easing.bounce_in_out(t, TOTAL, START, END),
        "linear": easing.linear(t, TOTAL, START, END),
    }
    for name, value in values.items():
        assert value == pytest.approx(mid, abs=1e-9), name


@pytest.mark.parametrize("time", [0.5, 1.0, 1.7, 2.5, 3.3])
def test_out_mirrors_in(time):
    back = TOTAL - time
    pairs = {
        "quad": (
            easing.quad_in(back, TOTAL, START, END),
            easing.quad_out(time, TOTAL, START, END),
        ),
        "cubic": (
            easing.cubic_in(back, TOTAL, START, END),
            easing.cubic_out(time, TOTAL, START, END),
        ),
        "quart": (
            easing.quart_in(back, TOTAL, START, END),
            easing.quart_out(time, TOTAL, START, END),
        ),
        "quint": (
            easing.quint_in(back, TOTAL, START, END),
            easing.quint_out(time, TOTAL, START, END),
        ),
        "sine": (
            easing.sine_in(back, TOTAL, START, END),
            easing.sine_out(time, TOTAL, START, END),
        ),
        "exp": (
            easing.exp_in(back, TOTAL, START, END),
            easing.exp_out(time, TOTAL, START, END),
        ),
        "circ": (
            easing.circ_in(back, TOTAL, START, END),
            easing.circ_out(time, TOTAL, START, END),
        ),
        "back": (
            easing.back_in(back, TOTAL, START, END, OVERSHOOT),
            easing.back_out(time, TOTAL, START, END, OVERSHOOT),
        ),
        "bounce": (
            easing.bounce_in(back, TOTAL, START, END),
            easing.bounce_out(time, TOTAL, START, END),
        ),
    }
    for name, (in_value, out_value) in pairs.items():
        assert in_value + out_value == pytest.approx(START + END, abs=1e-9), name


def test_back_with_zero_overshoot_matches_cubic():
    for time in (0.3, 1.1, 2.9):
        assert easing.back_in(time, TOTAL, START, END, 0.0) == pytest.approx(
            easing.cubic_in(time, TOTAL, START, END)
        )


def test_back_in_dips_below_start():
    assert easing.back_in(0.5, TOTAL, START, END, OVERSHOOT) < START


def test_quad_in_stays_within_range():
    values = [easing.quad_in(t / 10, 1.0, START, END) for t in range(11)]
    assert values == sorted(values)
    assert all(START <= v <= END for v in values)


def test_elastic_zero_range_is_undefined():
    value = easing.elastic_out(0.5, 1.0, 3.0, 3.0)
    assert math.isnan(value) is True


def test_zero_total_time_raises():
    with pytest.raises(ZeroDivisionError):
        easing.linear(1.0, 0.0, START, END)