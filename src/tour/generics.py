"""Generic helpers parameterised over their element type."""

from __future__ import annotations

from typing import Iterable, List, TypeVar

Item = TypeVar("Item")


def make_array(item: Item, times: int) -> List[Item]:
    result: List[Item] = []
    for _ in range(times):
        result.append(item)
    return result


def any_common_elements(lhs: Iterable[Item], rhs: Iterable[Item]) -> bool:
    """Return True when some element of ``lhs`` equals some element of ``rhs``.

    ``rhs`` is materialised once so that one-shot iterators work on both
    sides; elements only need ``==``, not hashing.
    """
    right = list(rhs)
    for lhs_item in lhs:
        for rhs_item in right:
            if lhs_item == rhs_item:
                return True
    return False
