"""Basic solutions: prices, comparisons, options and string handling."""

from __future__ import annotations


def is_even(num: int) -> bool:
    """Return True for even numbers."""
    return num % 2 == 0


def sale_price(price: int) -> int:
    """Ten off an even price, three off an odd one."""
    return price - 10 if is_even(price) else price - 3


def square(num: int) -> int:
    """Return num squared."""
    return num * num


def bigger(a: int, b: int) -> int:
    """Return the bigger of two numbers."""
    return a if a > b else b


def foo_if_fizz(fizzish: str) -> str:
    """Map "fizz" to "foo", "fuzz" to "bar" and anything else to "baz"."""
    match fizzish:
        case "fizz":
            return "foo"
        case "fuzz":
            return "bar"
        case _:
            return "baz"


def longest(x: str, y: str) -> str:
    """Return the string with more UTF-8 bytes; y on a tie."""
    return x if len(x.encode("utf-8")) > len(y.encode("utf-8")) else y


def maybe_icecream(time_of_day: int) -> int | None:
    """Pieces of icecream left at an hour; None for hours past 24."""
    if time_of_day < 22:
        return 5
    if time_of_day >= 25:
        return None
    return 0


def is_a_color_word(attempt: str) -> bool:
    """Return True for "green", "blue" or "red"."""
    return attempt in ("green", "blue", "red")


def trim_me(text: str) -> str:
    """Remove whitespace from both ends."""
    return text.strip()


def compose_me(text: str) -> str:
    """Append " world!"."""
    return text + " world!"


def replace_me(text: str) -> str:
    """Replace every "cars" with "balloons"."""
    return text.replace("cars", "balloons")