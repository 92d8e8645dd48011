"""Raising, catching by kind or category, discarding errors, and cleanup."""

from __future__ import annotations

from tour.errors import PrinterError
from tour.fridge import Fridge
from tour.printer import describe_outcome, send, try_send


def demo_1_try_except() -> None:
    try:
        printer_response = send(1040, "Bi Sheng")
    except PrinterError as error:
        printer_response = str(error)
    print("1. send:", printer_response)


def demo_2_handler_chain() -> None:
    """Specific kind first, then the category, then anything else."""
    print(
        "2. handlers:",
        describe_outcome(1440, "Gutenberg"),
        describe_outcome(1441, "Never Has Toner"),
        sep=" | ",
    )


def demo_3_discard_errors() -> None:
    """Keep only whether the call worked."""
    printer_success = try_send(1884, "Mergenthaler")
    printer_failure = try_send(1885, "Never Has Toner")
    print("3. optional results:", printer_success, printer_failure, sep=" | ")


def demo_4_guaranteed_cleanup() -> None:
    """The door closes on the way out, whatever happens inside."""
    fridge = Fridge()
    found = fridge.contains("banana")
    print("4. fridge:", found, fridge.is_open, sep=" | ")


def run_all() -> None:
    demo_1_try_except()
    demo_2_handler_chain()
    demo_3_discard_errors()
    demo_4_guaranteed_cleanup()


if __name__ == "__main__":
    run_all()
