"""Easing curves that map a time in ``[0, total_time]`` onto ``[start, end]``.

Every function takes the elapsed ``time``, the ``total_time`` of the
transition and the ``start`` and ``end`` values, and returns the eased
value for that moment.  The back curves also take an overshoot amount ``s``.
"""

from __future__ import annotations

import math

__all__ = [
    "quad_in",
    "quad_out",
    "quad_in_out",
    "cubic_in",
    "cubic_out",
    "cubic_in_out",
    "quart_in",
    "quart_out",
    "quart_in_out",
    "quint_in",
    "quint_out",
    "quint_in_out",
    "sine_in",
    "sine_out",
    "sine_in_out",
    "exp_in",
    "exp_out",
    "exp_in_out",
    "circ_in",
    "circ_out",
    "circ_in_out",
    "elastic_in",
    "elastic_out",
    "elastic_in_out",
    "back_in",
    "back_out",
    "back_in_out",
    "bounce_in",
    "bounce_out",
    "bounce_in_out",
    "linear",
]

_HALF_PI = math.pi / 2
_TWO_PI = math.pi * 2


def quad_in(time: float, total_time: float, start: float, end: float) -> float:
    change = end - start
    t = time / total_time
    return change * t * t + start


def quad_out(time: float, total_time: float, start: float, end: float) -> float:
    change = end - start
    t = time / total_time
    return -change * t * (t - 2) + start


def quad_in_out(time: float, total_time: float, start: float, end: float) -> float:
    change = end - start
    t = time / (total_time / 2)
    if t < 1:
        return change / 2 * t * t + start
    t -= 1
    return -change / 2 * (t * (t - 2) - 1) + start


def cubic_in(time: float, total_time: float, start: float, end: float) -> float:
    change = end - start
    t = time / total_time
    return change * t ** 3 + start


def cubic_out(time: float, total_time: float, start: float, end: float) -> float:
    change = end - start
    t = time / total_time - 1
    return change * (t ** 3 + 1) + start


def cubic_in_out(time: float, total_time: float, start: float, end: float) -> float:
    change = end - start
    t = time / (total_time / 2)
    if t < 1:
        return change / 2 * t ** 3 + start
    t -= 2
    return change / 2 * (t ** 3 + 2) + start


def quart_in(time: float, total_time: float, start: float, end: float) -> float:
    change = end - start
    t = time / total_time
    return change * t ** 4 + start


def quart_out(time: float, total_time: float, start: float, end: float) -> float:
    change = end - start
    t = time / total_time - 1
    return -change * (t ** 4 - 1) + start


def quart_in_out(time: float, total_time: float, start: float, end: float) -> float:
    change = end - start
    t = time / (total_time / 2)
    if t < 1:
        return change / 2 * t ** 4 + start
    t -= 2
    return -change / 2 * (t ** 4 - 2) + start


def quint_in(time: float, total_time: float, start: float, end: float) -> float:
    change = end - start
    t = time / total_time
    return change * t ** 5 + start


def quint_out(time: float, total_time: float, start: float, end: float) -> float:
    change = end - start
    t = time / total_time - 1
    return change * (t ** 5 + 1) + start


def quint_in_out(time: float, total_time: float, start: float, end: float) -> float:
    change = end - start
    t = time / (total_time / 2)
    if t < 1:
        return change / 2 * t ** 5 + start
    t -= 2
    return change / 2 * (t ** 5 + 2) + start


def sine_in(time: float, total_time: float, start: float, end: float) -> float:
    change = end - start
    return -change * math.cos(time * _HALF_PI / total_time) + change + start


def sine_out(time: float, total_time: float, start: float, end: float) -> float:
    change = end - start
    return change * math.sin(time * _HALF_PI / total_time) + start


def sine_in_out(time: float, total_time: float, start: float, end: float) -> float:
    change = end - start
    return -change / 2 * (math.cos(time * math.pi / total_time) - 1) + start


def exp_in(time: float, total_time: float, start: float, end: float) -> float:
    change = end - start
    if time == 0.0:
        return start
    return change * 2 ** (10 * (time / total_time - 1)) + start


def exp_out(time: float, total_time: float, start: float, end: float) -> float:
    change = end - start
    if time == total_time:
        return change + start
    return change * (-(2 ** (-10 * time / total_time)) + 1) + start


def exp_in_out(time: float, total_time: float, start: float, end: float) -> float:
    if time == 0.0:
        return start
    if time == total_time:
        return end
    change = end - start
    t = time / (total_time / 2)
    if t < 1:
        return change / 2 * 2 ** (10 * (t - 1)) + start
    t -= 1
    return change / 2 * (-(2 ** (-10 * t)) + 2) + start


def circ_in(time: float, total_time: float, start: float, end: float) -> float:
    change = end - start
    t = time / total_time
    return -change * (math.sqrt(1 - t * t) - 1) + start


def circ_out(time: float, total_time: float, start: float, end: float) -> float:
    change = end - start
    t = time / total_time - 1
    return change * math.sqrt(1 - t * t) + start


def circ_in_out(time: float, total_time: float, start: float, end: float) -> float:
    change = end - start
    t = time / (total_time / 2)
    if t < 1:
        return -change / 2 * (math.sqrt(1 - t * t) - 1) + start
    t -= 2
    return change / 2 * (math.sqrt(1 - t * t) + 1) + start


def _elastic_amplitude(change: float, period: float) -> tuple[float, float]:
    """Return the amplitude and phase shift of an elastic curve."""
    amplitude = change
    if amplitude < abs(change):
        return change, period / 4
    if amplitude == 0:
        # 0/0 inside asin: the curve is undefined for a zero-length range
        return amplitude, math.nan
    return amplitude, period / _TWO_PI * math.asin(change / amplitude)


def elastic_in(time: float, total_time: float, start: float, end: float) -> float:
    change = end - start
    t = time / total_time
    period = total_time * 0.3
    if t == 0:
        return start
    if t == 1:
        return start + change
    amplitude, shift = _elastic_amplitude(change, period)
    t -= 1
    return -(
        amplitude
        * 2 ** (10 * t)
        * math.sin((t * total_time - shift) * _TWO_PI / period)
    ) + start


def elastic_out(time: float, total_time: float, start: float, end: float) -> float:
    change = end - start
    t = time / total_time
    period = total_time * 0.3
    if t == 0:
        return start
    if t == 1:
        return start + change
    amplitude, shift = _elastic_amplitude(change, period)
    return (
        amplitude
        * 2 ** (-10 * t)
        * math.sin((t * total_time - shift) * _TWO_PI / period)
        + change
        + start
    )


def elastic_in_out(time: float, total_time: float, start: float, end: float) -> float:
    change = end - start
    t = time / (total_time / 2)
    period = total_time * (0.3 * 1.5)
    if t == 0:
        return start
    if t == 2:
        return start + change
    amplitude, shift = _elastic_amplitude(change, period)
    if t < 1:
        t -= 1
        return -0.5 * (
            amplitude
            * 2 ** (10 * t)
            * math.sin((t * total_time - shift) * _TWO_PI / period)
        ) + start
    t -= 1
    return (
        amplitude
        * 2 ** (-10 * t)
        * math.sin((t * total_time - shift) * _TWO_PI / period)
        * 0.5
        + change
        + start
    )


def back_in(time: float, total_time: float, start: float, end: float, s: float) -> float:
    change = end - start
    t = time / total_time
    return change * t * t * ((s + 1) * t - s) + start


def back_out(time: float, total_time: float, start: float, end: float, s: float) -> float:
    change = end - start
    t = time / total_time - 1
    return change * (t * t * ((s + 1) * t + s) + 1) + start


def back_in_out(
    time: float, total_time: float, start: float, end: float, s: float
) -> float:
    change = end - start
    s *= 1.525
    t = time / (total_time / 2)
    if t < 1:
        return change / 2 * (t * t * ((s + 1) * t - s)) + start
    t -= 2
    return change / 2 * (t * t * ((s + 1) * t + s) + 2) + start


def bounce_in(time: float, total_time: float, start: float, end: float) -> float:
    change = end - start
    return change - bounce_out(total_time - time, total_time, 0, change) + start


def bounce_out(time: float, total_time: float, start: float, end: float) -> float:
    change = end - start
    t = time / total_time
    if t < 1.0 / 2.75:
        return change * (7.5625 * t * t) + start
    if t < 2.0 / 2.75:
        t -= 1.5 / 2.75
        return change * (7.5625 * t * t + 0.75) + start
    if t < 2.5 / 2.75:
        t -= 2.25 / 2.75
        return change * (7.5625 * t * t + 0.9375) + start
    t -= 2.625 / 2.75
    return change * (7.5625 * t * t + 0.984375) + start


def bounce_in_out(time: float, total_time: float, start: float, end: float) -> float:
    change = end - start
    if time < total_time / 2:
        return bounce_in(time * 2, total_time, 0, change) * 0.5 + start
    return (
        bounce_out(time * 2 - total_time, total_time, 0, change) * 0.5
        + start
        + change * 0.5
    )


def linear(time: float, total_time: float, start: float, end: float) -> float:
    return (end - start) * time / total_time + start