from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class FileTask:
    """A discovered file and whether its extension makes it eligible."""

    path: Path
    eligible: bool
