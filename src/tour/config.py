"""Runtime configuration read from the environment."""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass
from typing import Mapping, Optional

COLOR_MODES = ("auto", "always", "never")


@dataclass(frozen=True)
class TourConfig:
    """Settings for a checklist run.

    Attributes:
        log_level:  Level name for the ``tour`` logger.
        color_mode: ``auto`` colours only when stdout is a terminal.
    """

    log_level: str = "WARNING"
    color_mode: str = "auto"

    @classmethod
    def from_env(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        *,
        log_level: Optional[str] = None,
        color_mode: Optional[str] = None,
    ) -> "TourConfig":
        """Build settings from ``environ``, letting explicit arguments win.

        A variable replaced by an argument is not read, so a bad value in it
        cannot fail the call. ``NO_COLOR`` forces ``never`` before
        ``TOUR_COLOR`` is looked at.
        """
        env = os.environ if environ is None else environ
        if log_level is None:
            log_level = env.get("TOUR_LOG_LEVEL", cls.log_level)
            source = "TOUR_LOG_LEVEL"
        else:
            source = "log level"
        log_level = log_level.upper()
        if not isinstance(logging.getLevelName(log_level), int):
            raise ValueError(f"{source}: unknown level '{log_level}'")
        if color_mode is None:
            if "NO_COLOR" in env:
                color_mode = "never"
            else:
                color_mode = env.get("TOUR_COLOR", cls.color_mode)
        color_mode = color_mode.lower()
        if color_mode not in COLOR_MODES:
            raise ValueError(
                f"TOUR_COLOR must be one of {', '.join(COLOR_MODES)}, got '{color_mode}'"
            )
        return cls(log_level=log_level, color_mode=color_mode)

    @property
    def level(self) -> int:
        return logging.getLevelName(self.log_level)

    def use_color(self) -> bool:
        if self.color_mode == "auto":
            return sys.stdout.isatty()
        return self.color_mode == "always"
