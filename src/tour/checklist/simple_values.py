"""Simple values: bindings, conversions, interpolation and collection literals.

Each `demo_*` function prints numbered lines so that missing output is
obvious when comparing runs.
"""

from __future__ import annotations

from textwrap import dedent
from typing import Dict, Final, List


def demo_1_bindings() -> None:
    """Names are rebound freely; ``Final`` marks a constant for type checkers."""
    my_variable = 42
    my_variable = 50
    MY_CONSTANT: Final = 42
    implicit_integer = 70
    implicit_float = 70.0
    explicit_float: float = 70
    print(
        "1. bindings:",
        my_variable,
        MY_CONSTANT,
        type(implicit_integer).__name__,
        type(implicit_float).__name__,
        explicit_float,
        sep=" | ",
    )


def demo_2_conversion_interpolation() -> None:
    """No implicit conversion between str and int; f-strings interpolate."""
    label = "The width is "
    width = 94
    width_label = label + str(width)
    apples = 3
    oranges = 5
    apple_summary = f"I have {apples} apples."
    fruit_summary = f"I have {apples + oranges} pieces of fruit."
    print("2. interpolation:", width_label, apple_summary, fruit_summary, sep=" | ")


def demo_3_multiline() -> None:
    """Triple-quoted strings keep indentation unless it is stripped."""
    apples, oranges = 3, 5
    quotation = dedent(
        f"""\
        Even though there's whitespace to the left,
        the actual lines aren't indented.
            Except for this line.
        Double quotes (") can appear without being escaped.

        I still have {apples + oranges} pieces of fruit."""
    )
    print("3. multiline:", *quotation.splitlines(), sep="\n   ")


def demo_4_collections() -> None:
    """Lists and dicts grow on assignment; empty literals need an annotation."""
    fruits = ["strawberries", "limes", "tangerines"]
    fruits[1] = "grapes"
    occupations = {
        "Malcolm": "Captain",
        "Kaylee": "Mechanic",
    }
    occupations["Jayne"] = "Public Relations"
    fruits.append("blueberries")
    print("4. collections:", fruits, occupations, sep=" | ")

    fruits = []
    occupations = {}
    empty_list: List[str] = []
    empty_dict: Dict[str, float] = {}
    print("4b. emptied:", fruits, occupations, empty_list, empty_dict, sep=" | ")


def run_all() -> None:
    """Execute each demo; intended entry point for the checklist runner."""
    print("Hello, world!")
    demo_1_bindings()
    demo_2_conversion_interpolation()
    demo_3_multiline()
    demo_4_collections()


if __name__ == "__main__":
    run_all()
