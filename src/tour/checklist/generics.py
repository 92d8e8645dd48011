"""Generic functions and a generic sum type."""

from __future__ import annotations

from tour.generics import any_common_elements, make_array
from tour.optional import OptionalValue, none, some


def demo_1_generic_function() -> None:
    print("1. make_array:", make_array("knock", 4))


def demo_2_generic_type() -> None:
    """The same container type holds any payload type."""
    possible_integer: OptionalValue[int] = none()
    possible_integer = some(100)
    possible_name: OptionalValue[str] = some("Ada")
    print("2. generic type:", possible_integer, possible_name, sep=" | ")


def demo_3_constrained() -> None:
    """Both sides share an element type that supports ``==``."""
    print(
        "3. common elements:",
        any_common_elements([1, 2, 3], [3]),
        any_common_elements("abc", "xyz"),
        sep=" | ",
    )


def run_all() -> None:
    demo_1_generic_function()
    demo_2_generic_type()
    demo_3_constrained()


if __name__ == "__main__":
    run_all()
