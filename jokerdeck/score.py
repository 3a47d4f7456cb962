"""Score and currency quantities: chips, mult and money."""

from __future__ import annotations

from dataclasses import dataclass

_U64_MAX = 2**64 - 1


def _check_value(value: object, name: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} value must be an int, not {type(value).__name__}")
    if not 0 <= value <= _U64_MAX:
        raise OverflowError(f"{name} value {value} is out of range")


def _operand(other: object, cls: type) -> int | None:
    """Return the raw integer behind ``other`` if it may combine with ``cls``."""
    if isinstance(other, cls):
        return other.value  # type: ignore[attr-defined]
    if isinstance(other, int) and not isinstance(other, bool):
        return other
    return None


@dataclass(frozen=True, order=True)
class Chips:
    """A number of chips. Chips can be added, but not multiplied."""

    value: int

    def __post_init__(self) -> None:
        _check_value(self.value, "Chips")

    def __add__(self, other: object) -> Chips:
        raw = _operand(other, Chips)
        if raw is None:
            return NotImplemented
        return Chips(self.value + raw)


@dataclass(frozen=True, order=True)
class Mult:
    """A multiplier applied to chips; it can be added to and multiplied."""

    value: int

    def __post_init__(self) -> None:
        _check_value(self.value, "Mult")

    def __add__(self, other: object) -> Mult:
        raw = _operand(other, Mult)
        if raw is None:
            return NotImplemented
        return Mult(self.value + raw)

    def __mul__(self, other: object) -> Mult:
        raw = _operand(other, Mult)
        if raw is None:
            return NotImplemented
        return Mult(self.value * raw)


@dataclass(frozen=True, order=True)
class Money:
    """An amount of money in whole dollars."""

    value: int

    def __post_init__(self) -> None:
        _check_value(self.value, "Money")