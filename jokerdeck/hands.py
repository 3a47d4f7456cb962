"""Poker hand types, planets and per-hand levelling state."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum, IntEnum
from typing import Callable, Iterator

from .score import Chips, Mult

_U16_MAX = 2**16 - 1


class HandType(IntEnum):
    """A poker hand type, ordered from weakest to strongest."""

    HIGH_CARD = 0
    PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    FOUR_OF_A_KIND = 7
    STRAIGHT_FLUSH = 8
    FIVE_OF_A_KIND = 9
    FLUSH_HOUSE = 10
    FLUSH_FIVE = 11

    def base_score(self) -> tuple[Chips, Mult]:
        """Chips and mult of the hand at level one."""
        chips, mult = _BASE_SCORES[self]
        return Chips(chips), Mult(mult)

    def addl_score_per_level(self) -> tuple[Chips, Mult]:
        """Chips and mult added for each level above one."""
        chips, mult = _LEVEL_SCORES[self]
        return Chips(chips), Mult(mult)

    def is_secret(self) -> bool:
        """Whether the hand stays hidden until it has been played."""
        return self >= HandType.FIVE_OF_A_KIND


_BASE_SCORES: dict[HandType, tuple[int, int]] = {
    HandType.HIGH_CARD: (5, 1),
    HandType.PAIR: (10, 2),
    HandType.TWO_PAIR: (20, 2),
    HandType.THREE_OF_A_KIND: (30, 3),
    HandType.STRAIGHT: (30, 4),
    HandType.FLUSH: (35, 4),
    HandType.FULL_HOUSE: (40, 4),
    HandType.FOUR_OF_A_KIND: (60, 7),
    HandType.STRAIGHT_FLUSH: (100, 8),
    HandType.FIVE_OF_A_KIND: (120, 12),
    HandType.FLUSH_HOUSE: (140, 14),
    HandType.FLUSH_FIVE: (160, 16),
}

_LEVEL_SCORES: dict[HandType, tuple[int, int]] = {
    HandType.HIGH_CARD: (10, 1),
    HandType.PAIR: (10, 2),
    HandType.TWO_PAIR: (20, 1),
    HandType.THREE_OF_A_KIND: (20, 2),
    HandType.STRAIGHT: (30, 3),
    HandType.FLUSH: (15, 2),
    HandType.FULL_HOUSE: (25, 2),
    HandType.FOUR_OF_A_KIND: (30, 3),
    HandType.STRAIGHT_FLUSH: (40, 4),
    HandType.FIVE_OF_A_KIND: (35, 3),
    HandType.FLUSH_HOUSE: (40, 4),
    HandType.FLUSH_FIVE: (50, 3),
}


class Planet(Enum):
    """A planet card; using one levels up its hand type."""

    PLUTO = HandType.HIGH_CARD
    MERCURY = HandType.PAIR
    URANUS = HandType.TWO_PAIR
    VENUS = HandType.THREE_OF_A_KIND
    SATURN = HandType.STRAIGHT
    JUPITER = HandType.FLUSH
    EARTH = HandType.FULL_HOUSE
    MARS = HandType.FOUR_OF_A_KIND
    NEPTUNE = HandType.STRAIGHT_FLUSH
    PLANET_X = HandType.FIVE_OF_A_KIND
    CERES = HandType.FLUSH_HOUSE
    ERIS = HandType.FLUSH_FIVE

    def hand_type(self) -> HandType:
        return self.value


@dataclass(frozen=True)
class _InnerState:
    level: int = 1
    plays: int = 0

    def level_up(self) -> _InnerState:
        return replace(self, level=min(self.level + 1, _U16_MAX))

    def plays_up(self) -> _InnerState:
        if self.plays >= _U16_MAX:
            raise OverflowError("play count overflow")
        return replace(self, plays=self.plays + 1)


@dataclass(frozen=True)
class HandTypeState:
    """A snapshot of one hand type's level and play count."""

    hand_type: HandType
    level: int
    plays: int

    def is_unlocked(self) -> bool:
        return not self.hand_type.is_secret() or self.plays > 0

    def score(self) -> tuple[Chips, Mult]:
        """Chips and mult of the hand at its current level."""
        chips, mult = self.hand_type.base_score()
        addl_chips, addl_mult = self.hand_type.addl_score_per_level()
        times = self.level - 1
        return chips + Chips(addl_chips.value * times), mult + addl_mult * times


class HandTypeStates:
    """Immutable levels and play counts of every hand type."""

    def __init__(self) -> None:
        self._states: dict[HandType, _InnerState] = {
            hand_type: _InnerState() for hand_type in HandType
        }

    @classmethod
    def _from_states(cls, states: dict[HandType, _InnerState]) -> HandTypeStates:
        new = cls.__new__(cls)
        new._states = states
        return new

    def get(self, hand_type: HandType) -> HandTypeState:
        inner = self._states[hand_type]
        return HandTypeState(hand_type, inner.level, inner.plays)

    def use_planet(self, planet: Planet) -> HandTypeStates:
        return self.level_up(planet.hand_type())

    def use_black_hole(self) -> HandTypeStates:
        """Level up every hand type at once."""
        return self._from_states(
            {hand_type: state.level_up() for hand_type, state in self._states.items()}
        )

    def level_up(self, hand_type: HandType) -> HandTypeStates:
        return self._update(hand_type, _InnerState.level_up)

    def plays_up(self, hand_type: HandType) -> HandTypeStates:
        return self._update(hand_type, _InnerState.plays_up)

    def _update(
        self, hand_type: HandType, change: Callable[[_InnerState], _InnerState]
    ) -> HandTypeStates:
        states = dict(self._states)
        states[hand_type] = change(states[hand_type])
        return self._from_states(states)

    def __iter__(self) -> Iterator[HandTypeState]:
        return (self.get(hand_type) for hand_type in HandType)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HandTypeStates):
            return NotImplemented
        return self._states == other._states

    def __repr__(self) -> str:
        return f"HandTypeStates({list(self)!r})"

    def high_card(self) -> HandTypeState:
        return self.get(HandType.HIGH_CARD)

    def pair(self) -> HandTypeState:
        return self.get(HandType.PAIR)

    def two_pair(self) -> HandTypeState:
        return self.get(HandType.TWO_PAIR)

    def three_of_a_kind(self) -> HandTypeState:
        return self.get(HandType.THREE_OF_A_KIND)

    def straight(self) -> HandTypeState:
        return self.get(HandType.STRAIGHT)

    def flush(self) -> HandTypeState:
        return self.get(HandType.FLUSH)

    def full_house(self) -> HandTypeState:
        return self.get(HandType.FULL_HOUSE)

    def four_of_a_kind(self) -> HandTypeState:
        return self.get(HandType.FOUR_OF_A_KIND)

    def straight_flush(self) -> HandTypeState:
        return self.get(HandType.STRAIGHT_FLUSH)

    def five_of_a_kind(self) -> HandTypeState:
        return self.get(HandType.FIVE_OF_A_KIND)

    def flush_house(self) -> HandTypeState:
        return self.get(HandType.FLUSH_HOUSE)

    def flush_five(self) -> HandTypeState:
        return self.get(HandType.FLUSH_FIVE)