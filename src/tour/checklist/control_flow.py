"""Conditionals, loops, ranges and optional binding."""

from __future__ import annotations

from tour.optional import OptionalValue, Some, from_nullable, none, some


def demo_1_loops_and_conditionals() -> int:
    """Conditions must be booleans; ``if score:`` would test truthiness instead."""
    individual_scores = [75, 43, 103, 87, 12]
    team_score = 0
    for score in individual_scores:
        if score > 50:
            team_score += 3
        else:
            team_score += 1
    decoration = "🎉" if team_score > 10 else ""
    print("1. team score:", team_score, decoration, sep=" | ")
    return team_score


def demo_2_optional_binding() -> str:
    """Bind the payload only when it is present, or fall back to a default."""
    optional_string: OptionalValue[str] = some("Hello")
    print("2a. absent?", optional_string.is_none())

    optional_name: OptionalValue[str] = some("John Appleseed")
    greeting = "Hello!"
    for name in optional_name:
        greeting = f"Hello, {name}"

    nickname: OptionalValue[str] = none()
    full_name = "John Appleseed"
    informal_greeting = f"Hi {nickname.unwrap_or(full_name)}"
    for nick in nickname:
        print(f"Hey, {nick}")  # never runs: nickname is absent.

    # Bridge from a plain ``None``-able lookup.
    looked_up = from_nullable({"Kaylee": "Mechanic"}.get("Jayne"))
    print("2. binding:", greeting, informal_greeting, looked_up, sep=" | ")
    return greeting


def describe_vegetable(vegetable: str) -> str:
    match vegetable:
        case "celery":
            return "Add some raisins and make ants on a log."
        case "cucumber" | "watercress":
            return "That would make a good tea sandwich."
        case x if x.endswith("pepper"):
            return f"Is it a spicy {x}?"
        case _:
            return "Everything tastes good in soup."


def demo_3_match() -> None:
    """``match`` takes literals, alternatives, captures and guards."""
    print(
        "3. match:",
        describe_vegetable("red pepper"),
        describe_vegetable("celery"),
        describe_vegetable("watercress"),
        describe_vegetable("kale"),
        sep=" | ",
    )


def demo_4_dict_iteration() -> int:
    """Iterate key/value pairs; ``_`` discards the key."""
    interesting_numbers = {
        "Prime": [2, 3, 5, 7, 11, 13],
        "Fibonacci": [1, 1, 2, 3, 5, 8],
        "Square": [1, 4, 9, 16, 25],
    }
    largest = 0
    for _, numbers in interesting_numbers.items():
        for number in numbers:
            if number > largest:
                largest = number
    print("4. largest:", largest)
    return largest


def demo_5_while_loops() -> None:
    """Python has no do-while; ``while True`` with a trailing break runs at least once."""
    n = 2
    while n < 100:
        n *= 2

    m = 2
    while True:
        m *= 2
        if not m < 100:
            break
    print("5. while:", n, m, sep=" | ")


def demo_6_ranges() -> None:
    """``range`` excludes its stop; add one for an inclusive bound."""
    total = 0
    for i in range(0, 4):
        total += i
    inclusive = sum(range(0, 4 + 1))
    print("6. ranges:", total, inclusive, sep=" | ")


def demo_7_optional_patterns() -> None:
    """Structural matching over both variants."""

    def show(value: OptionalValue[int]) -> str:
        match value:
            case Some(number):
                return f"some {number}"
            case _:
                return "none"

    possible_integer: OptionalValue[int] = none()
    before = show(possible_integer)
    possible_integer = some(100)
    print("7. optional match:", before, show(possible_integer), sep=" | ")


def run_all() -> None:
    """Execute each demo in order."""
    demo_1_loops_and_conditionals()
    demo_2_optional_binding()
    demo_3_match()
    demo_4_dict_iteration()
    demo_5_while_loops()
    demo_6_ranges()
    demo_7_optional_patterns()


if __name__ == "__main__":
    run_all()
