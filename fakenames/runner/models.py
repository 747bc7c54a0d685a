from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class RunOptions:
    """Startup decisions for one run, resolved from CLI flags and settings."""

    root: Path
    dist_override: Path | None = None
    dry_run: bool = False
    release: bool = False


@dataclass
class RunSummary:
    """Counters accumulated while processing the dist files."""

    dry_run: bool
    total_replacements: int = 0
    touched_files: int = 0

    @property
    def message(self) -> str:
        action = "Dry run" if self.dry_run else "Done"
        return f"{action}. {self.total_replacements} replacements in {self.touched_files} files."
