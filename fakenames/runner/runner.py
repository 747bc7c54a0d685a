import os
import shutil
import tempfile
from pathlib import Path

from fakenames.config.settings import Settings
from fakenames.exceptions import EmptyInputError, FileAccessError, NotFoundError
from fakenames.logging.logger import Log
from fakenames.records.loader import FakeNamesLoader
from fakenames.records.models import RecordSet
from fakenames.runner.models import RunOptions, RunSummary
from fakenames.substitution.base import BaseSubstitutor
from fakenames.substitution.factory import SubstitutorFactory
from fakenames.walker.tree_walker import TreeWalker

SKIP_MESSAGE = "Skipped. Use --release or NODE_ENV=production for release builds."


class FakeNamesRunner:
    """Applies the fake-names table to every eligible file of a UI build.

    Pipeline: gate -> load table -> check dist -> list files -> substitute -> write.
    """

    def __init__(
        self,
        settings: Settings,
        loader: FakeNamesLoader,
        substitutor: BaseSubstitutor,
        walker: TreeWalker,
    ) -> None:
        self._settings = settings
        self._loader = loader
        self._substitutor = substitutor
        self._walker = walker

    def run(self, options: RunOptions) -> RunSummary | None:
        """Run one pass over the dist directory.

        Returns None when the run was skipped because this is not a release build.

        Raises:
            FileAccessError: if the table or a dist file cannot be read or written.
            FormatError: if the table header is wrong.
            EmptyInputError: if the table has no entries or the dist has no eligible files.
            NotFoundError: if the dist directory does not exist.
        """
        if not options.release:
            Log.summary(SKIP_MESSAGE)
            return None

        dist_path = self.resolve_dist_path(options)

        # Step 1: Load fake names
        records = self._loader.load(options.root / self._settings.fake_names_file)

        # Step 2: Check dist
        if not dist_path.is_dir():
            raise NotFoundError(f"Dist folder not found: {dist_path}")

        # Step 3: List files
        files = self._walker.eligible_files(dist_path)
        if not files:
            raise EmptyInputError(f"No files to process in {dist_path}.")
        Log.debug(f"Found {len(files)} files to process in {dist_path}")

        # Step 4: Substitute and write
        summary = RunSummary(dry_run=options.dry_run)
        for file_path in files:
            self._process_file(file_path, records, summary)

        Log.summary(summary.message)
        return summary

    def resolve_dist_path(self, options: RunOptions) -> Path:
        if options.dist_override is not None:
            return options.dist_override.resolve()
        return (options.root / self._settings.dist_relative_path).resolve()

    def _process_file(self, file_path: Path, records: RecordSet, summary: RunSummary) -> None:
        original = _read_text(file_path)
        outcome = self._substitutor.substitute(original, records)
        if outcome.replacement_count == 0:
            return

        summary.total_replacements += outcome.replacement_count
        summary.touched_files += 1
        Log.debug(f"{file_path}: {outcome.replacement_count} replacements")

        if not summary.dry_run:
            _write_text(file_path, outcome.updated_text)


def _read_text(path: Path) -> str:
    try:
        with path.open(encoding="utf-8", newline="") as fh:
            return fh.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise FileAccessError(f"Cannot read {path}: {exc}") from exc


def _write_text(path: Path, text: str) -> None:
    """Replace *path* with *text*; the file holds either the old or the new content."""
    tmp_path: Path | None = None
    try:
        fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
        tmp_path = Path(tmp_name)
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as fh:
            fh.write(text)
        shutil.copymode(path, tmp_path)
        os.replace(tmp_path, path)
    except OSError as exc:
        if tmp_path is not None:
            tmp_path.unlink(missing_ok=True)
        raise FileAccessError(f"Cannot write {path}: {exc}") from exc


def build_runner(settings: Settings) -> FakeNamesRunner:
    """Build a FakeNamesRunner with all required collaborators."""
    return FakeNamesRunner(
        settings=settings,
        loader=FakeNamesLoader(),
        substitutor=SubstitutorFactory.create(settings),
        walker=TreeWalker(),
    )
