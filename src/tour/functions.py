"""Plain functions, nested functions and functions as values."""

from __future__ import annotations

from typing import Callable, Iterable, NamedTuple, Sequence


class Statistics(NamedTuple):
    min: int
    max: int
    sum: int


def greet(person: str, day: str) -> str:
    return f"Hello {person}, today is {day}."


def greet_on(person: str, /, *, on: str) -> str:
    """Positional-only subject, keyword-only day: ``greet_on("John", on="Wednesday")``."""
    return f"Hello, {person}, today is {on}."


def calculate_statistics(scores: Sequence[int]) -> Statistics:
    """Return min, max and sum of ``scores`` in one pass."""
    if not scores:
        raise ValueError("scores must not be empty")
    low = high = scores[0]
    total = 0
    for score in scores:
        if score > high:
            high = score
        elif score < low:
            low = score
        total += score
    return Statistics(low, high, total)


def return_fifteen() -> int:
    y = 10

    def add() -> None:
        nonlocal y
        y += 5

    add()
    return y


def make_increment() -> Callable[[int], int]:
    def add_one(number: int) -> int:
        return 1 + number

    return add_one


def has_any_matches(items: Iterable[int], condition: Callable[[int], bool]) -> bool:
    for item in items:
        if condition(item):
            return True
    return False


def less_than_ten(number: int) -> bool:
    return number < 10
