import os
from pathlib import Path

from fakenames.walker.models import FileTask


class TreeWalker:
    """Lists files under a directory and decides which ones to process."""

    ELIGIBLE_EXTENSIONS: frozenset[str] = frozenset({".js", ".mjs", ".cjs", ".html", ".csv"})
    EXCLUDED_EXTENSIONS: frozenset[str] = frozenset({".map"})

    def list_files(self, root: Path) -> list[Path]:
        """Return every regular file under *root*, depth first, in listing order.

        Symbolic links and special files are skipped; *root* must be an
        existing directory.
        """
        files: list[Path] = []
        with os.scandir(root) as entries:
            for entry in entries:
                path = Path(entry.path)
                if entry.is_dir(follow_symlinks=False):
                    files.extend(self.list_files(path))
                elif entry.is_file(follow_symlinks=False):
                    files.append(path)
        return files

    def is_eligible(self, path: Path) -> bool:
        suffix = path.suffix.lower()
        if suffix in self.EXCLUDED_EXTENSIONS:
            return False
        return suffix in self.ELIGIBLE_EXTENSIONS

    def tasks(self, root: Path) -> list[FileTask]:
        return [
            FileTask(path=path, eligible=self.is_eligible(path))
            for path in self.list_files(root)
        ]

    def eligible_files(self, root: Path) -> list[Path]:
        """Return only the files under *root* that should be rewritten."""
        return [task.path for task in self.tasks(root) if task.eligible]
