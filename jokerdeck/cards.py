"""Playing cards: ranks, suits, enhancements and seals."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum

from .edition import Edition


class Rank(IntEnum):
    """Card rank, ordered from two up to ace."""

    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    def score(self) -> int:
        """Chips the rank contributes when scored."""
        if self is Rank.ACE:
            return 11
        return min(self.value, 10)

    def is_face(self) -> bool:
        return self in (Rank.JACK, Rank.QUEEN, Rank.KING)

    def is_odd(self) -> bool:
        return self.score() % 2 == 1

    def is_even(self) -> bool:
        return not self.is_face() and not self.is_odd()


class SuitFamily(Enum):
    RED = "red"
    BLACK = "black"


class Suit(IntEnum):
    """Card suit, in the game's sort order."""

    CLUB = 1
    DIAMOND = 2
    HEART = 3
    SPADE = 4

    def family(self) -> SuitFamily:
        if self in (Suit.DIAMOND, Suit.HEART):
            return SuitFamily.RED
        return SuitFamily.BLACK


class Enhancement(Enum):
    BONUS = "bonus"
    MULT = "mult"
    WILD = "wild"
    GLASS = "glass"
    STEEL = "steel"
    STONE = "stone"
    GOLD = "gold"
    LUCKY = "lucky"


class Seal(Enum):
    GOLD = "gold"
    RED = "red"
    BLUE = "blue"
    PURPLE = "purple"


def _check_card_edition(edition: Edition | None) -> None:
    if edition is Edition.NEGATIVE:
        raise ValueError("a card cannot have the negative edition")


@dataclass
class Card:
    """A playing card with its optional modifiers."""

    rank: Rank
    suit: Suit
    enhancement: Enhancement | None = None
    edition: Edition | None = None
    seal: Seal | None = None

    def __post_init__(self) -> None:
        _check_card_edition(self.edition)

    @staticmethod
    def builder(rank: Rank, suit: Suit) -> CardBuilder:
        return CardBuilder(Card(rank, suit))


class CardBuilder:
    """Fluent builder for a Card."""

    def __init__(self, card: Card) -> None:
        self._card = card

    def enhancement(self, enhancement: Enhancement) -> CardBuilder:
        self._card.enhancement = enhancement
        return self

    def edition(self, edition: Edition) -> CardBuilder:
        _check_card_edition(edition)
        self._card.edition = edition
        return self

    def seal(self, seal: Seal) -> CardBuilder:
        self._card.seal = seal
        return self

    def build(self) -> Card:
        return self._card