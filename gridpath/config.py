# gridpath/config.py
"""
Run settings. Defaults reproduce the classic demo: a 30x15 maze from seed 4,
25% walls, 9999 step budget. Environment variables (GRIDPATH_*) override the
defaults and command-line flags override the environment.
"""

import os
from dataclasses import dataclass, fields, replace
from typing import Mapping, Optional

from gridpath.core.errors import InvalidInput
from gridpath.core.frontier import FRONTIERS

ENV_PREFIX = "GRIDPATH_"


@dataclass(frozen=True)
class Settings:
    width: int = 30
    height: int = 15
    seed: int = 4
    wall_chance: int = 25
    step_budget: int = 9999
    frontier: str = "heap"
    log_level: str = "INFO"

    def __post_init__(self):
        if self.frontier not in FRONTIERS:
            raise InvalidInput(f"Unknown frontier '{self.frontier}'. Available: {sorted(FRONTIERS)}")
        if self.log_level.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise InvalidInput(f"Unknown log level '{self.log_level}'")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        environ = os.environ if environ is None else environ
        overrides = {}
        for f in fields(cls):
            raw = environ.get(ENV_PREFIX + f.name.upper())
            if raw is None:
                continue
            if f.type in (int, "int"):
                try:
                    overrides[f.name] = int(raw)
                except ValueError:
                    raise InvalidInput(f"{ENV_PREFIX}{f.name.upper()} must be an integer, got {raw!r}") from None
            else:
                overrides[f.name] = raw.strip().lower() if f.name == "frontier" else raw.strip().upper()
        return cls(**overrides)

    def merged(self, **overrides) -> "Settings":
        """Copy with every non-None override applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})
