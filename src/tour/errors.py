"""Exception hierarchy for the tour package.

Everything raised by this package inherits from :class:`TourError` so that
callers can catch a single base class when they do not care about the
specific failure mode.
"""

from __future__ import annotations

from enum import Enum


class TourError(Exception):
    """Base exception for all tour operations."""


class PrinterFault(Enum):
    """Closed set of reasons a print job can fail."""

    OUT_OF_PAPER = "out of paper"
    NO_TONER = "no toner"
    ON_FIRE = "on fire"


class PrinterError(TourError):
    """Raised when a print job cannot be delivered.

    Subclasses fix :attr:`kind`; handlers can match one subclass, or the
    whole category by catching :class:`PrinterError`.
    """

    kind: PrinterFault

    def __init__(self, printer_name: str) -> None:
        super().__init__(f"{printer_name}: {self.kind.value}")
        self.printer_name = printer_name


class OutOfPaperError(PrinterError):
    kind = PrinterFault.OUT_OF_PAPER


class NoTonerError(PrinterError):
    kind = PrinterFault.NO_TONER


class OnFireError(PrinterError):
    kind = PrinterFault.ON_FIRE


class UnknownSectionError(TourError):
    """Raised when the checklist runner is asked for a section it lacks."""

    def __init__(self, name: str, available: list[str]) -> None:
        super().__init__(
            f"unknown section '{name}' (available: {', '.join(available)})"
        )
        self.name = name
        self.available = available
