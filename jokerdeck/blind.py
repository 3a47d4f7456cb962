"""Antes and blinds."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .score import Money


@dataclass(frozen=True, order=True)
class Ante:
    """The current ante, a number from 1 to 255."""

    value: int = 1

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError("ante must be an int")
        if not 1 <= self.value <= 255:
            raise ValueError(f"ante {self.value} is out of range 1..255")


class Boss(Enum):
    HOOK = "hook"
    OX = "ox"
    HOUSE = "house"
    WALL = "wall"
    WHEEL = "wheel"
    ARM = "arm"
    CLUB = "club"
    FISH = "fish"
    PSYCHIC = "psychic"
    GOAD = "goad"
    WATER = "water"
    WINDOW = "window"
    MANACLE = "manacle"
    EYE = "eye"
    MOUTH = "mouth"
    PLANT = "plant"
    SERPENT = "serpent"
    PILLAR = "pillar"
    NEEDLE = "needle"
    HEAD = "head"
    TOOTH = "tooth"
    FLINT = "flint"
    MARK = "mark"


class BlindKind(Enum):
    SMALL = "small"
    BIG = "big"
    BOSS = "boss"


_REWARDS = {BlindKind.SMALL: 3, BlindKind.BIG: 4, BlindKind.BOSS: 5}
_SCORE_MULTS = {BlindKind.SMALL: 2, BlindKind.BIG: 3, BlindKind.BOSS: 5}


@dataclass(frozen=True)
class Blind:
    """A blind; boss blinds carry the boss they face."""

    kind: BlindKind
    boss: Boss | None = None

    def __post_init__(self) -> None:
        if (self.kind is BlindKind.BOSS) != (self.boss is not None):
            raise ValueError("a boss is required for, and only for, a boss blind")

    @staticmethod
    def small() -> Blind:
        return Blind(BlindKind.SMALL)

    @staticmethod
    def big() -> Blind:
        return Blind(BlindKind.BIG)

    @staticmethod
    def for_boss(boss: Boss) -> Blind:
        return Blind(BlindKind.BOSS, boss)

    def reward(self) -> Money:
        """Money paid for beating this blind."""
        return Money(_REWARDS[self.kind])

    def score_mult(self) -> int:
        """Multiplier on the ante's base score requirement."""
        return _SCORE_MULTS[self.kind]