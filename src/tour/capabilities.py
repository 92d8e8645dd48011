"""The description/adjust capability set and a few conforming types.

Conformance is structural: :class:`Describable` is a ``Protocol``, so a
reference type, a value type and a wrapped ``int`` all qualify without a
shared base class.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Protocol, runtime_checkable


@runtime_checkable
class Describable(Protocol):
    @property
    def simple_description(self) -> str:
        ...

    def adjust(self) -> None:
        ...


class SimpleClass:
    """Reference type: every name bound to an instance sees its adjustments."""

    def __init__(self) -> None:
        self.simple_description = "A very simple class."
        self.another_property = 69105

    def adjust(self) -> None:
        self.simple_description += "  Now 100% adjusted."


@dataclass
class SimpleStructure:
    """Value type: compare by value and copy before sharing."""

    simple_description: str = "A simple structure"

    def adjust(self) -> None:
        self.simple_description += " (adjusted)"


class DescribedInt:
    """Adapter that gives a plain ``int`` the capability set.

    ``int`` itself is left alone; the wrapped number lives in :attr:`value`
    and ``adjust`` moves it by ``step``.
    """

    __slots__ = ("value", "step")

    def __init__(self, value: int, step: int = 42) -> None:
        self.value = value
        self.step = step

    @property
    def simple_description(self) -> str:
        return f"The number {self.value}"

    def adjust(self) -> None:
        self.value += self.step

    def __int__(self) -> int:
        return self.value

    def __repr__(self) -> str:
        return f"DescribedInt({self.value})"


def is_describable(obj: object) -> bool:
    return isinstance(obj, Describable)


def describe_all(items: Iterable[Describable]) -> list[str]:
    """Read the description of each item through the protocol only."""
    return [item.simple_description for item in items]
