"""Struct, enum, trait and generic solutions: a message machine, orders, packages and licences."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, NamedTuple, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Point:
    """A position on a grid."""

    x: int
    y: int


@dataclass(frozen=True)
class Move:
    """Move to a new position."""

    point: Point


@dataclass(frozen=True)
class Quit:
    """Stop the machine."""


@dataclass(frozen=True)
class Echo:
    """Print a line of text."""

    text: str


@dataclass(frozen=True)
class ChangeColor:
    """Switch to a new RGB colour."""

    color: tuple[int, int, int]


Message = Move | Quit | Echo | ChangeColor


@dataclass
class MachineState:
    """A small machine driven by messages."""

    color: tuple[int, int, int] = (0, 0, 0)
    position: Point = field(default_factory=lambda: Point(0, 0))
    quit: bool = False

    def process(self, message: Message) -> None:
        """Apply one message to the machine."""
        match message:
            case Quit():
                self.quit = True
            case Move(point=point):
                self.position = point
            case Echo(text=text):
                print(text)
            case ChangeColor(color=color):
                self.color = color
            case _:
                raise TypeError(f"unknown message: {message!r}")


@dataclass
class ColorClassicStruct:
    """A colour with named components."""

    red: int
    green: int
    blue: int


class ColorTupleStruct(NamedTuple):
    """A colour whose components are reached by position."""

    red: int
    green: int
    blue: int


class UnitLikeStruct:
    """A type with no data."""

    def __repr__(self) -> str:
        return "UnitLikeStruct"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, UnitLikeStruct)

    def __hash__(self) -> int:
        return hash(UnitLikeStruct)


@dataclass(frozen=True)
class Order:
    """A customer order."""

    name: str
    year: int
    made_by_phone: bool
    made_by_mobile: bool
    made_by_email: bool
    item_number: int
    count: int


def create_order_template() -> Order:
    """Return the template order that new orders are based on."""
    return Order(
        name="Bob",
        year=2019,
        made_by_phone=False,
        made_by_mobile=False,
        made_by_email=True,
        item_number=123,
        count=0,
    )


@dataclass(frozen=True)
class Package:
    """A parcel to be shipped between countries."""

    sender_country: str
    recipient_country: str
    weight_in_grams: int

    def __post_init__(self) -> None:
        if self.weight_in_grams <= 0:
            raise ValueError("Can not ship a weightless package.")

    def is_international(self) -> bool:
        return self.sender_country != self.recipient_country

    def get_fees(self, cents_per_gram: int) -> int:
        return self.weight_in_grams * cents_per_gram


@dataclass(frozen=True)
class Wrapper(Generic[T]):
    """Holds a value of any type."""

    value: T


def append_bar(value: str | list[str]) -> str | list[str]:
    """Append "Bar" to a string, or add a "Bar" item to a list of strings."""
    match value:
        case str():
            return f"{value}Bar"
        case list():
            return [*value, "Bar"]
        case _:
            raise TypeError(f"cannot append Bar to {type(value).__name__}")


class Licensed:
    """Something that carries licensing information."""

    def licensing_info(self) -> str:
        return "Some information"


@dataclass
class SomeSoftware(Licensed):
    """Software with a numeric version."""

    version_number: int = 0


@dataclass
class OtherSoftware(Licensed):
    """Software with a textual version."""

    version_number: str = ""


def compare_license_types(software: Licensed, software_two: Licensed) -> bool:
    """Return True when both carry the same licensing information."""
    return software.licensing_info() == software_two.licensing_info()