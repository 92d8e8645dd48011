"""Protocols: unrelated types conforming to one capability set."""

from __future__ import annotations

import copy

from tour.capabilities import (
    DescribedInt,
    Describable,
    SimpleClass,
    SimpleStructure,
    describe_all,
    is_describable,
)


def demo_1_conformance() -> None:
    """A class and a dataclass both satisfy the protocol structurally."""
    a = SimpleClass()
    a.adjust()
    b = SimpleStructure()
    b.adjust()
    print("1. adjusted:", a.simple_description, b.simple_description, sep=" | ")


def demo_2_reference_vs_value() -> None:
    """Aliases of a class instance share state; a copied structure does not."""
    a = SimpleClass()
    alias = a
    alias.adjust()

    b = SimpleStructure()
    b_copy = copy.copy(b)
    b_copy.adjust()
    print(
        "2. sharing:",
        a.simple_description == alias.simple_description,
        b.simple_description,
        b_copy.simple_description,
        sep=" | ",
    )


def demo_3_wrapped_primitive() -> None:
    """``int`` gains the capability through an adapter, not by reopening it."""
    seven = DescribedInt(7)
    before = seven.simple_description
    seven.adjust()
    print("3. number:", before, seven.simple_description, is_describable(7), sep=" | ")


def demo_4_protocol_typed_values() -> None:
    """Only protocol members are used through a ``Describable`` reference."""
    protocol_value: Describable = SimpleClass()
    items: list[Describable] = [protocol_value, SimpleStructure(), DescribedInt(7)]
    print("4. protocol values:", *describe_all(items), sep=" | ")


def run_all() -> None:
    demo_1_conformance()
    demo_2_reference_vs_value()
    demo_3_wrapped_primitive()
    demo_4_protocol_typed_values()


if __name__ == "__main__":
    run_all()
