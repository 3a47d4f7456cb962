import pytest

from jokerdeck.hands import HandType, HandTypeStates, Planet
from jokerdeck.score import Chips, Mult


def assert_levels(states, expected):
    for hand_type in HandType:
        assert states.get(hand_type).level == expected.get(hand_type, 1)


def assert_scores(states, expected):
    for hand_type in HandType:
        want = expected.get(hand_type)
        if want is None:
            want_score = hand_type.base_score()
        else:
            want_score = (Chips(want[0]), Mult(want[1]))
        assert states.get(hand_type).score() == want_score


def test_getters_return_same_hand_type():
    states = HandTypeStates()
    for hand_type in HandType:
        assert states.get(hand_type).hand_type is hand_type


def test_base_score():
    states = HandTypeStates()
    assert_levels(states, {})
    assert_scores(states, {})


def test_level_up_once():
    states = HandTypeStates().level_up(HandType.HIGH_CARD)
    assert_levels(states, {HandType.HIGH_CARD: 2})
    assert_scores(states, {HandType.HIGH_CARD: (15, 2)})


def test_level_up_twice():
    states = HandTypeStates().level_up(HandType.HIGH_CARD).level_up(HandType.HIGH_CARD)
    assert_levels(states, {HandType.HIGH_CARD: 3})
    assert_scores(states, {HandType.HIGH_CARD: (25, 3)})


def test_use_planet():
    states = HandTypeStates().use_planet(Planet.PLUTO)
    assert_levels(states, {HandType.HIGH_CARD: 2})
    assert_scores(states, {HandType.HIGH_CARD: (15, 2)})


def test_use_black_hole():
    states = HandTypeStates().use_black_hole()
    for hand_type in HandType:
        assert states.get(hand_type).level == 2


def test_increasing_plays():
    states = HandTypeStates()
    assert states.get(HandType.HIGH_CARD).plays == 0
    states = states.plays_up(HandType.HIGH_CARD)
    assert states.get(HandType.HIGH_CARD).plays == 1


def test_unlocked_non_secret():
    assert HandTypeStates().get(HandType.HIGH_CARD).is_unlocked()


def test_unlocked_secret():
    states = HandTypeStates()
    assert not states.get(HandType.FLUSH_FIVE).is_unlocked()
    states = states.plays_up(HandType.FLUSH_FIVE)
    assert states.get(HandType.FLUSH_FIVE).is_unlocked()


def test_updates_leave_original_unchanged():
    original = HandTypeStates()
    levelled = original.level_up(HandType.PAIR)
    assert original.get(HandType.PAIR).level == 1
    assert levelled.get(HandType.PAIR).level == 2
    assert original != levelled
    assert original == HandTypeStates()


@pytest.mark.parametrize(
    "hand_type, secret",
    [
        (HandType.HIGH_CARD, False),
        (HandType.STRAIGHT_FLUSH, False),
        (HandType.FIVE_OF_A_KIND, True),
        (HandType.FLUSH_HOUSE, True),
        (HandType.FLUSH_FIVE, True),
    ],
)
def test_is_secret(hand_type, secret):
    assert hand_type.is_secret() is secret


@pytest.mark.parametrize(
    "hand_type, base, per_level",
    [
        (HandType.HIGH_CARD, (5, 1), (10, 1)),
        (HandType.FLUSH, (35, 4), (15, 2)),
        (HandType.FOUR_OF_A_KIND, (60, 7), (30, 3)),
        (HandType.FLUSH_FIVE, (160, 16), (50, 3)),
    ],
)
def test_score_tables(hand_type, base, per_level):
    assert hand_type.base_score() == (Chips(base[0]), Mult(base[1]))
    assert hand_type.addl_score_per_level() == (Chips(per_level[0]), Mult(per_level[1]))


@pytest.mark.parametrize(
    "planet, hand_type",
    [
        (Planet.PLUTO, HandType.HIGH_CARD),
        (Planet.MERCURY, HandType.PAIR),
        (Planet.SATURN, HandType.STRAIGHT),
        (Planet.PLANET_X, HandType.FIVE_OF_A_KIND),
        (Planet.ERIS, HandType.FLUSH_FIVE),
    ],
)
def test_planet_hand_types(planet, hand_type):
    assert planet.hand_type() is hand_type


def test_every_hand_type_has_one_planet():
    assert sorted(Planet.hand_type(planet) for planet in Planet) == list(HandType)


def test_named_accessors():
    states = HandTypeStates().level_up(HandType.FULL_HOUSE)
    assert states.full_house().level == 2
    assert states.high_card().hand_type is HandType.HIGH_CARD
    assert states.pair().hand_type is HandType.PAIR
    assert states.two_pair().hand_type is HandType.TWO_PAIR
    assert states.three_of_a_kind().hand_type is HandType.THREE_OF_A_KIND
    assert states.straight().hand_type is HandType.STRAIGHT
    assert states.flush().hand_type is HandType.FLUSH
    assert states.four_of_a_kind().hand_type is HandType.FOUR_OF_A_KIND
    assert states.straight_flush().hand_type is HandType.STRAIGHT_FLUSH
    assert states.five_of_a_kind().hand_type is HandType.FIVE_OF_A_KIND
    assert states.flush_house().hand_type is HandType.FLUSH_HOUSE
    assert states.flush_five().hand_type is HandType.FLUSH_FIVE