"""Collection solutions: fruit baskets, score tables and vectors."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, MutableMapping

_U8_MAX = 255


class Fruit(Enum):
    """Kinds of fruit that can go in a basket."""

    APPLE = "apple"
    BANANA = "banana"
    MANGO = "mango"
    LYCHEE = "lychee"
    PINEAPPLE = "pineapple"


def fruit_basket() -> dict[str, int]:
    """Return a basket with at least three kinds and five pieces of fruit."""
    return {"banana": 2, "oranges": 4, "apples": 4}


def fill_fruit_basket(basket: MutableMapping[Fruit, int]) -> None:
    """Add two of every kind of fruit not already in the basket."""
    for fruit in Fruit:
        basket.setdefault(fruit, 2)


@dataclass
class Team:
    """A team with its goal tallies."""

    name: str
    goals_scored: int
    goals_conceded: int


def _parse_goals(text: str) -> int:
    if not (text.isascii() and text.isdigit()):
        raise ValueError(f"invalid goal count: {text!r}")
    value = int(text)
    if value > _U8_MAX:
        raise ValueError(f"goal count too large: {text!r}")
    return value


def _add_goals(total: int, extra: int) -> int:
    result = total + extra
    if result > _U8_MAX:
        raise OverflowError("attempt to add with overflow")
    return result


def build_scores_table(results: str) -> dict[str, Team]:
    """Build a table of goals scored and conceded per team.

    Each line has the form team_1,team_2,team_1_goals,team_2_goals.
    """
    scores: dict[str, Team] = {}
    for line in results.splitlines():
        fields = line.split(",")
        if len(fields) < 4:
            raise ValueError(f"malformed result line: {line!r}")
        home, away = fields[0], fields[1]
        home_goals, away_goals = _parse_goals(fields[2]), _parse_goals(fields[3])
        for name, scored, conceded in (
            (home, home_goals, away_goals),
            (away, away_goals, home_goals),
        ):
            team = scores.get(name)
            if team is None:
                scores[name] = Team(name, scored, conceded)
            else:
                team.goals_scored = _add_goals(team.goals_scored, scored)
                team.goals_conceded = _add_goals(team.goals_conceded, conceded)
    return scores


def array_and_vec() -> tuple[tuple[int, ...], list[int]]:
    """Return the same elements as a fixed tuple and as a list."""
    return (10, 20, 30, 40), [10, 20, 30, 40]


def vec_loop(values: list[int]) -> list[int]:
    """Double every element in place and return the list."""
    values[:] = [value * 2 for value in values]
    return values


def vec_map(values: Iterable[int]) -> list[int]:
    """Return a new list with every element doubled."""
    return [value * 2 for value in values]


def fill_vec(values: Iterable[int]) -> list[int]:
    """Return the values followed by 22, 44 and 66."""
    return [*values, 22, 44, 66]