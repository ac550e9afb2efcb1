"""Match settings and results shared between scenes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

__all__ = [
    "TYPE_MAX",
    "SideType",
    "Select",
    "Mode",
    "Rule",
    "WinPattern",
    "PlayerState",
    "EnemyState",
    "CommonData",
]

TYPE_MAX = 2


class SideType(Enum):
    PLAYER1 = auto()
    PLAYER2 = auto()
    ENEMY = auto()
    MAX = auto()


class Select(Enum):
    MODE = auto()
    RULE = auto()


class Mode(Enum):
    PVE = auto()
    PVP = auto()
    MAX = auto()


class Rule(Enum):
    HP = auto()
    SCORE = auto()


class WinPattern(Enum):
    P1WIN = auto()
    P2WIN = auto()
    DRAW = auto()


class PlayerState(Enum):
    COOL = auto()
    DEBUFF = auto()
    ACTIONABLE = auto()
    STEPKEEP = auto()
    STEP = auto()
    CHARGE = auto()
    NORMALATTACK = auto()
    CRITICALATTACK = auto()
    KNOCKBACK = auto()
    GUARD = auto()
    WAIDATTACK = auto()
    FALL = auto()
    REVIVAL = auto()


class EnemyState(Enum):
    NONE = auto()
    THINK = auto()
    DEBUFF = auto()
    MOVE = auto()
    STEP = auto()
    CHARGE = auto()
    KNOCKBACK = auto()
    KNOCKBACK_SMALL = auto()
    NORMALATTACK = auto()
    WAIDATTACK = auto()
    CRITICALATTACK = auto()
    FALL = auto()
    REVIVAL = auto()


_SIDES_BY_MODE = {
    Mode.PVE: (SideType.PLAYER1, SideType.ENEMY),
    Mode.PVP: (SideType.PLAYER1, SideType.PLAYER2),
}


@dataclass
class CommonData:
    """Selected mode and rule, the match outcome and the final scores."""

    mode: Mode = Mode.PVE
    rule: Rule = Rule.HP
    win_pattern: WinPattern = WinPattern.P1WIN
    player_score: int = 0
    enemy_score: int = 0
    types: tuple[SideType, ...] = (SideType.PLAYER1, SideType.ENEMY)

    def reset(self) -> None:
        """Return mode and outcome to their starting values."""
        self.mode = Mode.PVE
        self.win_pattern = WinPattern.P1WIN

    def update_types(self) -> tuple[SideType, ...]:
        """Set the two combatant sides from the current mode and return them."""
        sides = _SIDES_BY_MODE.get(self.mode)
        if sides is not None:
            self.types = sides
        return self.types