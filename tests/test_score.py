import pytest

from jokerdeck.score import Chips, Money, Mult


def test_chips_add_pinned():
    assert Chips(5) + Chips(10) == Chips(15)


@pytest.mark.parametrize("a,b", [(0, 0), (3, 7), (100, 1), (12, 0)])
def test_chips_add_int_matches_add_chips(a, b):
    assert Chips(a) + b == Chips(a) + Chips(b)


@pytest.mark.parametrize("a,b", [(1, 2), (40, 25), (0, 9)])
def test_chips_add_commutes(a, b):
    assert Chips(a) + Chips(b) == Chips(b) + Chips(a)


def test_chips_zero_is_identity():
    assert Chips(42) + Chips(0) == Chips(42)


def test_mult_mul_pinned():
    assert Mult(2) * Mult(3) == Mult(6)


@pytest.mark.parametrize("a,b", [(1, 4), (4, 1), (7, 7), (0, 5)])
def test_mult_int_operands_match_newtype_operands(a, b):
    assert Mult(a) + b == Mult(a) + Mult(b)
    assert Mult(a) * b == Mult(a) * Mult(b)


def test_mult_one_is_multiplicative_identity():
    assert Mult(13) * 1 == Mult(13)


def test_augmented_assignment_builds_new_value():
    mult = Mult(1)
    original = mult
    mult += 4
    assert mult == Mult(1) + Mult(4)
    assert original == Mult(1)


def test_ordering():
    assert Chips(1) < Chips(2)
    assert Mult(9) > Mult(3)
    assert Money(3) < Money(4)
    assert sorted([Money(5), Money(3), Money(4)]) == [Money(3), Money(4), Money(5)]


@pytest.mark.parametrize(
    "operation, error",
    [
        (lambda: Chips(2) * Chips(3), TypeError),
        (lambda: Chips(2) + Mult(3), TypeError),
        (lambda: Mult(1.5), TypeError),
        (lambda: Chips(True), TypeError),
        (lambda: Chips(-1), OverflowError),
        (lambda: Money(-5), OverflowError),
        (lambda: Chips(2**64 - 1) + 1, OverflowError),
        (lambda: Mult(2**63) * 2, OverflowError),
    ],
    ids=[
        "chips-times-chips",
        "chips-plus-mult",
        "float-mult",
        "bool-chips",
        "negative-chips",
        "negative-money",
        "chips-overflow",
        "mult-overflow",
    ],
)
def test_invalid_operations_raise(operation, error):
    with pytest.raises(error):
        operation()


def test_values_are_frozen():
    chips = Chips(3)
    with pytest.raises(AttributeError):
        chips.value = 4  # type: ignore[misc]
    assert chips == Chips(3)