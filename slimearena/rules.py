"""Win conditions of a match: knock the other slime's HP out, or score more in time."""

from __future__ import annotations

from typing import Protocol

from .app import SCREEN_SIZE_X
from .common_data import CommonData, Mode, WinPattern
from .scenes import SceneId

__all__ = [
    "HP_GAUGE_START_X",
    "HP_BAR_LENGTH",
    "TIME_LIMIT",
    "GameView",
    "SceneSwitcher",
    "RuleBase",
    "RuleHp",
    "RuleScore",
]

HP_GAUGE_START_X = SCREEN_SIZE_X - 275
HP_BAR_LENGTH = 260
TIME_LIMIT = 30

_SECOND_MS = 1000
_SECONDS_PER_MINUTE = 60


class GameView(Protocol):
    """What a rule reads from the running game."""

    player_hp_percent: float
    enemy_hp_percent: float
    player2_hp_percent: float
    player_score: int
    enemy_score: int
    player2_score: int


class SceneSwitcher(Protocol):
    """Anything that can move the game to another scene."""

    def change_scene(self, next_id: SceneId, to_fade: bool) -> None: ...


def _zero_pad(value: int, digits: int) -> str:
    """Pad the magnitude to ``digits`` digits, keeping a leading minus sign."""
    text = str(abs(value)).zfill(digits)
    return "-" + text if value < 0 else text


class RuleBase:
    """A match rule; the base rule never ends the match."""

    def __init__(self, game: GameView, data: CommonData, scenes: SceneSwitcher) -> None:
        self.game = game
        self.data = data
        self.scenes = scenes

    def update(self) -> WinPattern | None:
        """Check the rule for this frame; return the outcome once decided."""
        return None

    def _finish(self, outcome: WinPattern) -> WinPattern:
        self.data.win_pattern = outcome
        self.scenes.change_scene(SceneId.RESULT, True)
        return outcome


class RuleHp(RuleBase):
    """The match ends when a slime's HP reaches zero."""

    def _opponent_hp(self) -> float | None:
        if self.data.mode is Mode.PVE:
            return self.game.enemy_hp_percent
        if self.data.mode is Mode.PVP:
            return self.game.player2_hp_percent
        return None

    def update(self) -> WinPattern | None:
        opponent_hp = self._opponent_hp()
        if opponent_hp is None:
            return None
        player_hp = self.game.player_hp_percent
        player_down = player_hp <= 0.0
        opponent_down = opponent_hp <= 0.0
        if not (player_down or opponent_down):
            return None
        if player_down and opponent_down:
            outcome = WinPattern.DRAW
        elif player_down:
            outcome = WinPattern.P2WIN
        else:
            outcome = WinPattern.P1WIN
        return self._finish(outcome)

    def bar_widths(self) -> tuple[float | None, float | None]:
        """Filled lengths of the player's and the opponent's HP bars.

        A bar whose HP has fallen below zero is not drawn and gives None;
        the opponent's bar is None too when the mode has no opponent.
        """
        player_hp = self.game.player_hp_percent
        player = player_hp * HP_BAR_LENGTH if player_hp >= 0.0 else None
        opponent_hp = self._opponent_hp()
        if opponent_hp is None or opponent_hp < 0.0:
            return player, None
        return player, opponent_hp * HP_BAR_LENGTH


class RuleScore(RuleBase):
    """The match ends when the countdown runs out; the higher score wins."""

    def __init__(self, game: GameView, data: CommonData, scenes: SceneSwitcher) -> None:
        super().__init__(game, data, scenes)
        self.start_time = 0
        self.count_down = TIME_LIMIT
        self.count = 0
        self.minute = 0

    def start(self, now: int) -> None:
        """Begin the countdown at time ``now`` in milliseconds."""
        self.start_time = now
        self.count_down = TIME_LIMIT
        self.count = 0
        self.minute = 0

    def update(self, now: int) -> WinPattern | None:
        """Advance the clock to ``now`` ms; decide the match when time is up."""
        if self.count_down <= 0:
            player = self.game.player_score
            enemy = self.game.enemy_score
            if player > enemy:
                outcome = WinPattern.P1WIN
            elif player == enemy:
                outcome = WinPattern.DRAW
            else:
                outcome = WinPattern.P2WIN
            return self._finish(outcome)

        if now - self.start_time > _SECOND_MS:
            self.count += 1
            self.count_down -= 1
            self.start_time = now

        if self.count >= _SECONDS_PER_MINUTE:
            self.minute += 1
            self.count = 0
        return None

    def time_text(self) -> str:
        return f"TIME({_zero_pad(self.minute, 2)}:{_zero_pad(self.count_down, 2)})"