"""Jokers, their kinds, and the scorer they act on."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterator

from .edition import Edition, Slate
from .score import Chips, Money, Mult


class Rarity(IntEnum):
    COMMON = 1
    UNCOMMON = 2
    RARE = 3
    LEGENDARY = 4


class JokerKind(ABC):
    """The behaviour shared by every joker of one kind."""

    @abstractmethod
    def name(self) -> str: ...

    @abstractmethod
    def rarity(self) -> Rarity: ...

    @abstractmethod
    def price(self) -> Money: ...

    def run_independent(self, scorer: Scorer) -> None:
        """Apply the joker's independent effect; by default it has none."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


@dataclass
class Joker:
    """A joker: a kind together with an optional edition."""

    kind: JokerKind
    edition: Edition | None = None

    @staticmethod
    def builder(kind: JokerKind) -> JokerBuilder:
        return JokerBuilder(Joker(kind))

    def is_kind(self, kind_type: type[JokerKind]) -> bool:
        return isinstance(self.kind, kind_type)

    def name(self) -> str:
        return self.kind.name()

    def rarity(self) -> Rarity:
        return self.kind.rarity()

    def price(self) -> Money:
        return self.kind.price()


class JokerBuilder:
    """Fluent builder for a Joker."""

    def __init__(self, joker: Joker) -> None:
        self._joker = joker

    def edition(self, edition: Edition) -> JokerBuilder:
        self._joker.edition = edition
        return self

    def build(self) -> Joker:
        return self._joker


@dataclass
class Scorer:
    """Running chips and mult while jokers are applied."""

    jokers: Slate[Joker]
    chips: Chips = field(default=Chips(1))
    mult: Mult = field(default=Mult(1))


def of_kind(slate: Slate[Joker], kind_type: type[JokerKind]) -> Iterator[Joker]:
    """Yield the jokers in ``slate`` whose kind is ``kind_type``."""
    return (joker for joker in slate if joker.is_kind(kind_type))


def has_kind(slate: Slate[Joker], kind_type: type[JokerKind]) -> bool:
    return any(True for _ in of_kind(slate, kind_type))


class JimboJoker(JokerKind):
    """The plain joker: +4 mult."""

    def name(self) -> str:
        return "Joker"

    def rarity(self) -> Rarity:
        return Rarity.COMMON

    def price(self) -> Money:
        return Money(2)

    def run_independent(self, scorer: Scorer) -> None:
        scorer.mult = scorer.mult + 4


class MisprintJoker(JokerKind):
    """Adds a random mult from 0 to 23."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng

    def name(self) -> str:
        return "Misprint"

    def rarity(self) -> Rarity:
        return Rarity.COMMON

    def price(self) -> Money:
        return Money(4)

    def run_independent(self, scorer: Scorer) -> None:
        source = self._rng if self._rng is not None else random
        scorer.mult = scorer.mult + source.randint(0, 23)


class StencilJoker(JokerKind):
    """Multiplies mult by the empty joker slots plus the stencils held."""

    def name(self) -> str:
        return "Joker Stencil"

    def rarity(self) -> Rarity:
        return Rarity.UNCOMMON

    def price(self) -> Money:
        return Money(8)

    def run_independent(self, scorer: Scorer) -> None:
        empty = scorer.jokers.free_len()
        stencils = sum(1 for _ in of_kind(scorer.jokers, StencilJoker))
        scorer.mult = scorer.mult * (empty + stencils)