# slimearena

The state and arithmetic of a small arena game. In the game two slimes
push each other off a square stage, either player against player or
player against computer. The package draws nothing. The program that
hosts it feeds in input and time, and it supplies the effect and audio
devices as backend objects.

## Modules

- `slimearena.easing`: tweening curves. Each one has the signature
  `f(time, total_time, start, end)`. They are `quad_*`, `cubic_*`,
  `quart_*`, `quint_*`, `sine_*`, `exp_*`, `circ_*`, `elastic_*` and
  `bounce_*` (each in `_in`, `_out` and `_in_out` forms), plus `linear`.
  The `back_in`, `back_out` and `back_in_out` curves take an extra
  overshoot argument `s`.
- `slimearena.vector`: the frozen float vector `Vec3`, which supports
  `+` and `-`. Also the integer `Vector2` with `to_vector2f()`, the float
  `Vector2F` with `to_vector2()`, and `EffectParams`, which holds `pos`,
  `rot`, `scl`, `is_loop` and `is_stop`.
- `slimearena.fade`: `Fader` and `FadeState`. `set_fade()` starts a fade
  out or a fade in, and `update()` steps the alpha by 5. `is_end` turns
  true one update after the alpha reaches 0 or 255. `overlay_alpha()`
  returns the alpha of the black overlay, or `None` when no fade is set.
- `slimearena.common_data`: `CommonData`, which holds the mode, the rule,
  the win pattern and the scores. It also defines the enums `Mode`,
  `Rule`, `WinPattern`, `SideType`, `Select`, `PlayerState` and
  `EnemyState`.
- `slimearena.input`: `InputManager`. Call `step_input(pressed_keys)` and
  `step_pad_input(pad_states, keyboard_state)` once per frame. After that,
  `is_key_down`, `is_key_push`, `is_key_keep` and `is_key_release` report
  the state of keys, and `is_pad_*` does the same for pad buttons. The
  module also exports the pad button bits, such as `PAD_INPUT_A` and
  `PAD_INPUT_UP`. A key code outside 0..255 or an unknown pad number
  raises `ValueError`.
- `slimearena.camera`: `Camera`, with `reset()`, `shake(shake_cnt, limit)`
  and `set_camera_work(pos, rot)`.
- `slimearena.effects`: `EffectManager` and `EffectType`. The manager
  drives an `EffectBackend`, which must provide `load`, `play`,
  `set_transform`, `stop` and `is_playing`. Playbacks are tracked per user
  object. `update()` restarts looping playbacks that have finished, unless
  they were stopped with `stop_for()`.
- `slimearena.sound`: `SoundManager`, `BgmType` and `SeType`. The manager
  drives a `SoundBackend`, which must provide `load`, `play`,
  `set_volume`, `stop` and `delete`. `scaled_volume(percent)` converts a
  percentage to the 0-255 scale. Playing or stopping a sound that was
  never loaded raises `KeyError`.
- `slimearena.gauge`: `make_circle_vertices(pos, size_x, size_y, rate)`
  builds the triangle fan of the circular charge gauge as `Vertex2D`
  values. `make_rot_local_pos` gives the clamped corner offset for an
  angle.
- `slimearena.grid`: `Grid.lines()` returns the debug ground lines as
  `GridLine` values.
- `slimearena.stage`: the stage dimensions, and
  `random_item_position(rng, height)`, which picks a spot for an item.
- `slimearena.app`: the screen size and asset path constants, and
  `FrameClock`. `tick(now)` takes milliseconds and returns whether a frame
  is due. `frame_rate_text()` formats the measured rate, for example
  `FPS[60.00]`.
- `slimearena.scenes`: `SceneManager` and `SceneId`. The manager builds
  scenes from factories keyed by `SceneId`, where each factory takes the
  manager and returns an object with `init`, `update`, `draw` and
  `release`. `start()` opens the title scene with a fade in.
  `change_scene(next_id, to_fade)` switches scenes, fading out first when
  `to_fade` is true. `draw()` returns the overlay alpha. Asking for an
  unregistered scene raises `ValueError`.
- `slimearena.rules`: `RuleHp` and `RuleScore`. Both read a `GameView`,
  write the outcome into `CommonData`, and ask the scene switcher to go to
  `SceneId.RESULT`. `RuleScore` counts down `TIME_LIMIT` seconds, driven
  by `update(now)`. `time_text()` gives the clock, for example
  `TIME(00:30)`.

## Example

```python
from slimearena.easing import quad_in_out
from slimearena.fade import Fader, FadeState
from slimearena.input import InputManager

print(quad_in_out(0.5, 1.0, 0.0, 100.0))  # 50.0

fader = Fader()
fader.set_fade(FadeState.FADE_OUT)
while True:
    fader.update()
    if fader.is_end:
        break
print(fader.overlay_alpha())  # 255

keys = InputManager()
keys.step_input({30})
print(keys.is_key_push(30))  # True
keys.step_input({30})
print(keys.is_key_keep(30))  # True
```

## What it does not do

The package has no window, renderer, audio output or game loop of its
own, and it installs no command. It does not contain the slime
characters, the title, game and result scenes, or the item logic. A host
program provides those and plugs them in through the scene factories,
the `GameView` protocol and the effect and sound backends.

## Tests

```
pip install -e .[test]
pytest
```