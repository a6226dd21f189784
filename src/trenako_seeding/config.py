from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class CommandOptions:
    """Holds the options parsed from the trenako-seeding command line.

    Built once at process start and never mutated afterwards.
    """

    verbose: bool = False
    source: Path | None = None
