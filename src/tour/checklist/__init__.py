"""Runnable language tour.

Running ``python -m tour.checklist`` executes every topic module's
``run_all`` function in a stable order. Each module prints numbered lines, so
missing output is immediately obvious.

To add a topic:
1. Create ``<topic>.py`` with numbered ``demo_*`` functions and a ``run_all``.
2. Append the module name to ``SECTIONS``.
"""

from __future__ import annotations

from importlib import import_module
from typing import Callable, Iterable, Optional

from tour.console import section_header
from tour.errors import UnknownSectionError

SECTIONS = [
    "simple_values",
    "control_flow",
    "functions_closures",
    "objects_classes",
    "enums_structs",
    "concurrency",
    "protocols_extensions",
    "error_handling",
    "generics",
]


def load(name: str) -> Callable[[], None]:
    if name not in SECTIONS:
        raise UnknownSectionError(name, SECTIONS)
    module = import_module(f"{__name__}.{name}")
    return module.run_all


def run(names: Optional[Iterable[str]] = None, *, color: bool = False) -> list[str]:
    """Run the selected sections (all by default) and return their names.

    Every name is resolved before anything runs, so an unknown section
    produces no partial output.
    """
    selected = list(names) if names else list(SECTIONS)
    runners = [(name, load(name)) for name in selected]
    for name, runner in runners:
        print(section_header(name, color=color))
        runner()
    return selected
