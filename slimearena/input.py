"""Keyboard and game-pad state tracking with edge detection.

Each frame the caller feeds the current hardware state in; the manager keeps
the previous frame so it can report presses, holds and releases.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

__all__ = [
    "KEY_BUF_LEN",
    "PAD_NUM",
    "INPUT_PAD1",
    "INPUT_PAD2",
    "INPUT_KEY_PAD1",
    "PAD_INPUT_DOWN",
    "PAD_INPUT_LEFT",
    "PAD_INPUT_RIGHT",
    "PAD_INPUT_UP",
    "PAD_INPUT_A",
    "PAD_INPUT_B",
    "PAD_INPUT_C",
    "PAD_INPUT_X",
    "PAD_INPUT_5",
    "PAD_INPUT_6",
    "InputManager",
]

KEY_BUF_LEN = 256
PAD_NUM = 2

# Pad identifiers: pads are numbered from 1; the keyboard doubles as pad 1.
INPUT_PAD1 = 1
INPUT_PAD2 = 2
INPUT_KEY_PAD1 = 0x1001

# Button bits of a pad state.
PAD_INPUT_DOWN = 0x0001
PAD_INPUT_LEFT = 0x0002
PAD_INPUT_RIGHT = 0x0004
PAD_INPUT_UP = 0x0008
PAD_INPUT_A = 0x0010
PAD_INPUT_B = 0x0020
PAD_INPUT_C = 0x0040
PAD_INPUT_X = 0x0080
PAD_INPUT_5 = 0x0100
PAD_INPUT_6 = 0x0200


def _check_key(key_code: int) -> int:
    if not 0 <= key_code < KEY_BUF_LEN:
        raise ValueError(f"key code {key_code} outside 0..{KEY_BUF_LEN - 1}")
    return key_code


def _pad_index(pad_num: int) -> int:
    index = INPUT_PAD1 - 1 if pad_num == INPUT_KEY_PAD1 else pad_num - 1
    if not 0 <= index < PAD_NUM:
        raise ValueError(f"unknown pad number {pad_num}")
    return index


class InputManager:
    """Remembers this frame's and last frame's keys and pad buttons."""

    def __init__(self) -> None:
        self._current_keys: frozenset[int] = frozenset()
        self._previous_keys: frozenset[int] = frozenset()
        self._current_pads = [0] * PAD_NUM
        self._previous_pads = [0] * PAD_NUM

    def reset(self) -> None:
        """Forget every key and button."""
        self._current_keys = frozenset()
        self._previous_keys = frozenset()
        self._current_pads = [0] * PAD_NUM
        self._previous_pads = [0] * PAD_NUM

    def step_input(self, pressed_keys: Iterable[int]) -> None:
        """Advance one frame with the key codes held down now."""
        keys = frozenset(_check_key(key) for key in pressed_keys)
        self._previous_keys = self._current_keys
        self._current_keys = keys

    def is_key_down(self, key_code: int) -> bool:
        return _check_key(key_code) in self._current_keys

    def is_key_push(self, key_code: int) -> bool:
        key = _check_key(key_code)
        return key not in self._previous_keys and key in self._current_keys

    def is_key_keep(self, key_code: int) -> bool:
        key = _check_key(key_code)
        return key in self._previous_keys and key in self._current_keys

    def is_key_release(self, key_code: int) -> bool:
        key = _check_key(key_code)
        return key in self._previous_keys and key not in self._current_keys

    def step_pad_input(
        self, pad_states: Sequence[int], keyboard_state: int = 0
    ) -> None:
        """Advance one frame of pad input.

        ``pad_states`` holds the button bits of each connected pad in order.
        With no pad connected, ``keyboard_state`` (keyboard plus first pad)
        becomes the state of the first slot.
        """
        states = list(pad_states)
        self._previous_pads = list(self._current_pads)
        if not states:
            self._current_pads[0] = keyboard_state
        else:
            self._current_pads = [
                states[n] if n < len(states) else 0 for n in range(PAD_NUM)
            ]

    def _pad_bits(self, pad_num: int, key_code: int) -> tuple[bool, bool]:
        index = _pad_index(pad_num)
        return (
            (self._previous_pads[index] & key_code) != 0,
            (self._current_pads[index] & key_code) != 0,
        )

    def is_pad_down(self, pad_num: int, key_code: int) -> bool:
        return self._pad_bits(pad_num, key_code)[1]

    def is_pad_push(self, pad_num: int, key_code: int) -> bool:
        before, now = self._pad_bits(pad_num, key_code)
        return not before and now

    def is_pad_keep(self, pad_num: int, key_code: int) -> bool:
        before, now = self._pad_bits(pad_num, key_code)
        return before and now

    def is_pad_release(self, pad_num: int, key_code: int) -> bool:
        before, now = self._pad_bits(pad_num, key_code)
        return before and not now