"""Print-job submission, used to show how failures travel to a handler."""

from __future__ import annotations

import logging

from tour.errors import NoTonerError, OnFireError, PrinterError, TourError
from tour.optional import OptionalValue, attempt

logger = logging.getLogger(__name__)

TONERLESS_PRINTER = "Never Has Toner"
JOB_SENT = "Job sent"


def send(job: int, printer_name: str) -> str:
    """Submit ``job`` to ``printer_name``.

    Raises:
        NoTonerError: If the printer is the one that never has toner.
    """
    logger.debug("sending job %d to %r", job, printer_name)
    if printer_name == TONERLESS_PRINTER:
        logger.warning("job %d rejected by %r: no toner", job, printer_name)
        raise NoTonerError(printer_name)
    return JOB_SENT


def try_send(job: int, printer_name: str) -> OptionalValue[str]:
    """Like :func:`send`, but only report whether the job went through."""
    return attempt(send, job, printer_name, errors=(PrinterError,))


def describe_outcome(job: int, printer_name: str) -> str:
    """Send a job and turn every outcome into a line of text.

    Handlers go from the most specific failure kind, through the printer
    category, to anything else the package raises.
    """
    try:
        return send(job, printer_name)
    except OnFireError:
        return "I'll just put this over here, with the rest of the fire."
    except PrinterError as printer_error:
        return f"Printer error: {printer_error.kind.name}."
    except TourError as error:
        return str(error)
