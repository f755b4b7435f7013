"""Runtime configuration for the editor front ends."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .exceptions import InvalidDimensionsError

FRONTENDS = ("console", "gui")


@dataclass
class EditorConfig:
    """Configuration values chosen at start-up.

    ``height`` and ``width`` may be left unset, in which case the front end
    prompts the user for them.
    """

    frontend: str = "console"
    height: Optional[int] = None
    width: Optional[int] = None
    squares_per_inch: Optional[int] = None
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "EditorConfig":
        env = os.environ if environ is None else environ
        return cls(
            frontend=env.get("CROSSWORD_FRONTEND", cls.frontend).lower(),
            log_level=env.get("CROSSWORD_LOG_LEVEL", cls.log_level).upper(),
        )

    def validate(self) -> None:
        if self.frontend not in FRONTENDS:
            raise ValueError(f"Unknown frontend {self.frontend!r}; expected one of {FRONTENDS}")
        for name in ("height", "width"):
            value = getattr(self, name)
            if value is not None and value <= 0:
                raise InvalidDimensionsError(f"{name} must be a positive integer, got {value}")
        if self.squares_per_inch is not None and self.squares_per_inch <= 0:
            raise ValueError("squares_per_inch must be a positive integer")
