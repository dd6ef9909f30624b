"""Quiz solutions: apple pricing, a string machine and report cards."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable


def calculate_price_of_apples(n: int) -> int:
    """Two per apple, or one each when buying more than 40."""
    return n * 2 if n <= 40 else n


class Command(Enum):
    """Commands that take no argument."""

    UPPERCASE = "uppercase"
    TRIM = "trim"


@dataclass(frozen=True)
class Append:
    """Append "bar" the given number of times."""

    times: int


def transformer(items: Iterable[tuple[str, Command | Append]]) -> list[str]:
    """Apply each command to its string."""
    output = []
    for text, command in items:
        match command:
            case Command.UPPERCASE:
                output.append(text.upper())
            case Command.TRIM:
                output.append(text.strip())
            case Append(times=times):
                output.append(text + "bar" * times)
            case _:
                raise TypeError(f"unknown command: {command!r}")
    return output


@dataclass
class ReportCard:
    """A report card with a grade of any printable kind."""

    grade: Any
    student_name: str
    student_age: int

    def print(self) -> str:
        return f"{self.student_name} ({self.student_age}) - achieved a grade of {self.grade}"