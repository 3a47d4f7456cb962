# jokerdeck

A small, dependency-free model of the scoring rules of a poker-style
deck-building card game. It describes playing cards, poker hand types and
their levels, planet cards, blinds and antes, and jokers that change a
hand's chips and mult.

## Installation

```
pip install jokerdeck
```

Python 3.10 or later is required.

## Modules

- `jokerdeck.score` – frozen value types `Chips`, `Mult` and `Money`, each
  holding an unsigned 64-bit `value` (out-of-range values raise
  `OverflowError`, non-integers raise `TypeError`). `Chips` adds to `Chips`
  or a plain `int`; `Mult` adds to and multiplies by `Mult` or an `int`.
- `jokerdeck.cards` – `Rank` (with `score()`, `is_face()`, `is_odd()`,
  `is_even()`), `Suit` (with `family()`), `SuitFamily`, `Enhancement`,
  `Seal`, `Card` and `CardBuilder`. A card may not carry the negative
  edition; trying raises `ValueError`.
- `jokerdeck.edition` – `Edition` (foil, holographic, polychrome, negative),
  the helpers `is_foil`, `is_holographic`, `is_polychrome`, `is_negative`,
  and `Slate`, an ordered row with a base capacity that grows by one for
  every negative item it holds. `Slate` supports `len()`, iteration,
  indexing, `push`, `remove`, `cap`, `base_cap`, `free_len`, `is_empty`,
  `is_full` and `copy`. Pushing a non-negative item onto a full slate raises
  `SlateFullError`, whose `item` attribute holds the rejected item.
- `jokerdeck.blind` – `Ante` (1 to 255, default 1), `Boss`, `BlindKind` and
  `Blind`, built with `Blind.small()`, `Blind.big()` or
  `Blind.for_boss(boss)`. `reward()` is $3, $4 or $5 and `score_mult()` is
  2, 3 or 5 for small, big and boss blinds.
- `jokerdeck.hands` – `HandType` (with `base_score()`,
  `addl_score_per_level()`, `is_secret()`), `Planet` (with `hand_type()`),
  `HandTypeState` and `HandTypeStates`, an immutable record of levels and
  play counts for every hand type.
- `jokerdeck.jokers` – `Joker`, `JokerBuilder`, the abstract `JokerKind`,
  `Rarity`, `Scorer` and the jokers `JimboJoker`, `MisprintJoker` and
  `StencilJoker`, plus `of_kind` and `has_kind` for searching a slate of
  jokers.

## Examples

Cards:

```python
from jokerdeck.cards import Card, Rank, Suit, Enhancement, Seal

ace = Card.builder(Rank.ACE, Suit.SPADE).enhancement(Enhancement.GLASS).seal(Seal.RED).build()
ace.rank.score()        # 11
ace.suit.family()       # SuitFamily.BLACK
Rank.KING.is_face()     # True
```

Hand levels:

```python
from jokerdeck.hands import HandType, HandTypeStates, Planet

states = HandTypeStates()
states = states.use_planet(Planet.PLUTO)
states.get(HandType.HIGH_CARD).score()          # (Chips(value=15), Mult(value=2))
states.get(HandType.FLUSH_FIVE).is_unlocked()   # False until played
states.plays_up(HandType.FLUSH_FIVE).flush_five().is_unlocked()  # True
```

`HandTypeStates` never changes in place: `level_up`, `plays_up`,
`use_planet` and `use_black_hole` each return a new record. Levels stop at
65535; the play count raises `OverflowError` past that.

Slates and jokers:

```python
from jokerdeck.edition import Edition, Slate
from jokerdeck.jokers import Joker, JimboJoker, StencilJoker, Scorer, has_kind

slate = Slate(5)
slate.push(Joker(StencilJoker()))
slate.push(Joker.builder(JimboJoker()).edition(Edition.NEGATIVE).build())

slate.cap()                       # 6: the negative joker adds a slot
has_kind(slate, StencilJoker)     # True

scorer = Scorer(slate)            # starts at Chips(1), Mult(1)
for joker in slate:
    joker.kind.run_independent(scorer)
scorer.mult                       # Mult(value=9): x5 from the stencil, then +4
```

`MisprintJoker` adds a random mult from 0 to 23; pass a `random.Random` to
its constructor for reproducible results.

## What it does not do

This is a model of scoring pieces only. It has no game loop, no shop, no
deck or hand dealing, and it does not work out which hand type a set of
cards makes. A `Scorer` starts from one chip and one mult rather than from
a played hand's score, and only the three jokers above are provided. There
is no command-line program.

## Running the tests

```
pip install -e ".[test]"
pytest
```