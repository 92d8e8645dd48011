"""Functions, tuples of results, nested functions and closures."""

from __future__ import annotations

from tour.functions import (
    calculate_statistics,
    greet,
    greet_on,
    has_any_matches,
    less_than_ten,
    make_increment,
    return_fifteen,
)


def demo_1_calls() -> None:
    """Keyword arguments label call sites; ``/`` and ``*`` control labels."""
    print(
        "1. calls:",
        greet(person="Bob", day="Tuesday"),
        greet_on("John", on="Wednesday"),
        sep=" | ",
    )


def demo_2_tuples() -> None:
    """A NamedTuple result is addressable by name or by position."""
    statistics = calculate_statistics([5, 3, 100, 3, 9])
    print("2. statistics:", statistics.sum, statistics[2], statistics, sep=" | ")


def demo_3_nested_and_first_class() -> None:
    increment = make_increment()
    numbers = [20, 19, 7, 12]
    print(
        "3. functions:",
        return_fifteen(),
        increment(7),
        has_any_matches(numbers, less_than_ten),
        sep=" | ",
    )


def demo_4_closures() -> None:
    """Lambdas and comprehensions stand in for trailing closures."""
    numbers = [20, 19, 7, 12]
    tripled = list(map(lambda number: 3 * number, numbers))
    comprehended = [3 * number for number in numbers]
    sorted_numbers = sorted(numbers, reverse=True)
    by_key = sorted(numbers, key=lambda n: n % 10)
    print("4. closures:", tripled, comprehended, sorted_numbers, by_key, sep=" | ")


def run_all() -> None:
    demo_1_calls()
    demo_2_tuples()
    demo_3_nested_and_first_class()
    demo_4_closures()


if __name__ == "__main__":
    run_all()
