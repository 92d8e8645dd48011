"""A guided tour of the language, as a library plus a runnable checklist.

The reusable pieces live in the top-level modules: :mod:`tour.optional`,
:mod:`tour.capabilities`, :mod:`tour.printer` and friends. The numbered
demos that print their way through each topic live in :mod:`tour.checklist`.
"""

from __future__ import annotations

from tour.capabilities import (
    DescribedInt,
    Describable,
    SimpleClass,
    SimpleStructure,
    describe_all,
    is_describable,
)
from tour.errors import (
    NoTonerError,
    OnFireError,
    OutOfPaperError,
    PrinterError,
    PrinterFault,
    TourError,
    UnknownSectionError,
)
from tour.optional import (
    Nothing,
    OptionalValue,
    Some,
    attempt,
    from_nullable,
    none,
    some,
)

__version__ = "0.1.0"
__all__ = [
    "DescribedInt",
    "Describable",
    "SimpleClass",
    "SimpleStructure",
    "describe_all",
    "is_describable",
    "NoTonerError",
    "OnFireError",
    "OutOfPaperError",
    "PrinterError",
    "PrinterFault",
    "TourError",
    "UnknownSectionError",
    "Nothing",
    "OptionalValue",
    "Some",
    "attempt",
    "from_nullable",
    "none",
    "some",
]
