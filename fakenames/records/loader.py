from pathlib import Path

from fakenames.exceptions import EmptyInputError, FileAccessError
from fakenames.logging.logger import Log
from fakenames.records.models import RecordSet
from fakenames.records.parser import parse_fake_names


class FakeNamesLoader:
    """Reads the fake-names table from disk and parses it."""

    def load(self, path: Path) -> RecordSet:
        """Read and parse the table at *path*.

        Raises:
            FileAccessError: if the file cannot be read.
            FormatError: if the header is wrong.
            EmptyInputError: if no valid rows remain after parsing.
        """
        try:
            # utf-8-sig drops a leading BOM left by spreadsheet exports
            raw = path.read_text(encoding="utf-8-sig")
        except OSError as exc:
            raise FileAccessError(f"Cannot read {path}: {exc}") from exc

        records = parse_fake_names(raw)
        if not records:
            raise EmptyInputError(f"No entries found in {path.name}.")

        Log.debug(f"Loaded {len(records)} fake name entries from {path}")
        return records
