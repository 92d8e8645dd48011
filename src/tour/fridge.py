"""Scoped acquisition: the fridge door is closed on every way out."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterable, Iterator

logger = logging.getLogger(__name__)

DEFAULT_CONTENT = ("milk", "eggs", "leftovers")


class Fridge:
    def __init__(self, content: Iterable[str] = DEFAULT_CONTENT) -> None:
        self.content = list(content)
        self.is_open = False

    @contextmanager
    def opened(self) -> Iterator[list[str]]:
        """Open the door for the duration of the block."""
        self.is_open = True
        logger.debug("fridge opened")
        try:
            yield self.content
        finally:
            self.is_open = False
            logger.debug("fridge closed")

    def contains(self, food: str) -> bool:
        with self.opened() as content:
            return food in content
