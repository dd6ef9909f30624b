"""Error handling solutions: name tags, token costs and positive integers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

_I32_BITS = 32
_I64_BITS = 64


def _parse_int(text: str, bits: int) -> int:
    """Parse a signed integer of the given width with strict digit rules."""
    if not text:
        raise ValueError("cannot parse integer from empty string")
    digits = text[1:] if text[0] in "+-" else text
    if not digits or not (digits.isascii() and digits.isdigit()):
        raise ValueError("invalid digit found in string")
    value = int(text)
    limit = 1 << (bits - 1)
    if value >= limit:
        raise ValueError("number too large to fit in target type")
    if value < -limit:
        raise ValueError("number too small to fit in target type")
    return value


def generate_nametag_text(name: str) -> str:
    """Return the name tag text; an empty name is rejected."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Five tokens per item plus a processing fee of one token."""
    processing_fee = 1
    cost_per_item = 5
    quantity = _parse_int(item_quantity, _I32_BITS)
    cost = quantity * cost_per_item + processing_fee
    if not -(1 << (_I32_BITS - 1)) <= cost < (1 << (_I32_BITS - 1)):
        raise OverflowError("attempt to multiply with overflow")
    return cost


def spend_tokens(tokens: int, item_quantity: str) -> int:
    """Buy the requested items if affordable and return the tokens left."""
    cost = total_cost(item_quantity)
    if cost > tokens:
        print("You can't afford that many!")
        return tokens
    tokens -= cost
    print(f"You now have {tokens} tokens.")
    return tokens


class CreationErrorKind(Enum):
    """Why a positive nonzero integer could not be made."""

    NEGATIVE = "number is negative"
    ZERO = "number is zero"


class CreationError(ValueError):
    """Raised for a value that is not a positive nonzero integer."""

    def __init__(self, kind: CreationErrorKind) -> None:
        super().__init__(kind.value)
        self.kind = kind

    def __eq__(self, other: object) -> bool:
        return isinstance(other, CreationError) and other.kind is self.kind

    def __hash__(self) -> int:
        return hash(self.kind)


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer greater than zero."""

    value: int

    @classmethod
    def new(cls, value: int) -> PositiveNonzeroInteger:
        if value < 0:
            raise CreationError(CreationErrorKind.NEGATIVE)
        if value == 0:
            raise CreationError(CreationErrorKind.ZERO)
        return cls(value)


class ParsePosNonzeroError(ValueError):
    """Raised when text is not a number or not a positive nonzero one."""

    def __init__(self, cause: ValueError) -> None:
        super().__init__(str(cause))
        self.cause = cause

    @property
    def creation(self) -> CreationError | None:
        return self.cause if isinstance(self.cause, CreationError) else None

    @property
    def parse_int(self) -> ValueError | None:
        return None if isinstance(self.cause, CreationError) else self.cause


def parse_pos_nonzero(text: str) -> PositiveNonzeroInteger:
    """Parse text as a 64-bit integer and check that it is positive."""
    try:
        value = _parse_int(text, _I64_BITS)
    except ValueError as err:
        raise ParsePosNonzeroError(err) from err
    try:
        return PositiveNonzeroInteger.new(value)
    except CreationError as err:
        raise ParsePosNonzeroError(err) from err