"""A two-variant optional value.

:class:`OptionalValue` is either :class:`Some`, owning exactly one payload,
or :class:`Nothing`. There is deliberately no ``unwrap()`` that raises:
callers extract the payload with :meth:`OptionalValue.unwrap_or`,
:meth:`OptionalValue.match`, a ``match`` statement, or by iterating, which
binds the payload only inside a body that runs when it is present::

    for name in optional_name:
        greeting = f"Hello, {name}"

Unlike ``typing.Optional``, ``some(None)`` is a present value.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterator, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")
R = TypeVar("R")


class OptionalValue(ABC, Generic[T]):
    """Common interface of both variants.

    Abstract: only :class:`Some` and :class:`Nothing` are instantiated.
    """

    __slots__ = ()

    @abstractmethod
    def is_some(self) -> bool:
        raise NotImplementedError

    def is_none(self) -> bool:
        return not self.is_some()

    @abstractmethod
    def unwrap_or(self, default: T) -> T:
        """Return the payload if present, else ``default``."""
        raise NotImplementedError

    @abstractmethod
    def match(self, on_some: Callable[[T], R], on_none: Callable[[], R]) -> R:
        """Run exactly one of the callbacks, chosen by the active variant."""
        raise NotImplementedError

    @abstractmethod
    def chain(self, fn: Callable[[T], U]) -> "OptionalValue[U]":
        """Apply ``fn`` to the payload; an absent value stays absent."""
        raise NotImplementedError

    @abstractmethod
    def __iter__(self) -> Iterator[T]:
        raise NotImplementedError

    def __bool__(self) -> bool:
        return self.is_some()


@dataclass(frozen=True)
class Some(OptionalValue[T]):
    value: T

    def is_some(self) -> bool:
        return True

    def unwrap_or(self, default: T) -> T:
        return self.value

    def match(self, on_some: Callable[[T], R], on_none: Callable[[], R]) -> R:
        return on_some(self.value)

    def chain(self, fn: Callable[[T], U]) -> OptionalValue[U]:
        return Some(fn(self.value))

    def __iter__(self) -> Iterator[T]:
        yield self.value

    def __repr__(self) -> str:
        return f"Some({self.value!r})"


@dataclass(frozen=True)
class Nothing(OptionalValue[Any]):
    def is_some(self) -> bool:
        return False

    def unwrap_or(self, default: T) -> T:
        return default

    def match(self, on_some: Callable[[Any], R], on_none: Callable[[], R]) -> R:
        return on_none()

    def chain(self, fn: Callable[[Any], U]) -> OptionalValue[U]:
        return self

    def __iter__(self) -> Iterator[Any]:
        return iter(())

    def __repr__(self) -> str:
        return "Nothing()"


NOTHING: OptionalValue[Any] = Nothing()


def none() -> OptionalValue[Any]:
    """Return the absent variant."""
    return NOTHING


def some(value: T) -> OptionalValue[T]:
    """Wrap ``value`` in the present variant."""
    return Some(value)


def from_nullable(value: Optional[T]) -> OptionalValue[T]:
    """Treat Python's ``None`` as absence; anything else is present."""
    return NOTHING if value is None else Some(value)


def attempt(
    fn: Callable[..., T],
    *args: Any,
    errors: tuple[type[BaseException], ...] = (Exception,),
    **kwargs: Any,
) -> OptionalValue[T]:
    """Call ``fn`` and keep only whether it succeeded.

    Returns ``some(result)`` on success and ``none()`` when ``fn`` raises one
    of ``errors``; the failure detail is dropped. Other exceptions propagate.
    """
    try:
        result = fn(*args, **kwargs)
    except errors as exc:
        logger.debug("%s failed, discarding %r", getattr(fn, "__name__", fn), exc)
        return NOTHING
    return Some(result)
