import re

from fakenames.exceptions import FormatError
from fakenames.records.models import NameRecord, RecordSet

EXPECTED_HEADER: tuple[str, ...] = ("Country", "Name", "Surname", "FakeName", "FakeSurname")

_LINE_BREAK_RE = re.compile(r"\r?\n")


def _split_cells(line: str) -> list[str]:
    return [cell.strip() for cell in line.split(",")]


def parse_fake_names(raw: str) -> RecordSet:
    """Parse the fake-names table into records, in row order.

    Blank lines are ignored. Rows with fewer than five cells are skipped, and
    rows missing a country, name or surname are dropped. Returns an empty
    list when the table has no lines at all.

    Raises:
        FormatError: if the header is not exactly
            ``Country,Name,Surname,FakeName,FakeSurname``.
    """
    lines = [line.strip() for line in _LINE_BREAK_RE.split(raw)]
    lines = [line for line in lines if line]
    if not lines:
        return []

    header = tuple(_split_cells(lines[0]))
    if header != EXPECTED_HEADER:
        raise FormatError(
            f"Unexpected header in fake names table. Expected: {','.join(EXPECTED_HEADER)}"
        )

    records: RecordSet = []
    for line in lines[1:]:
        cells = _split_cells(line)
        if len(cells) < len(EXPECTED_HEADER):
            continue
        country, name, surname, fake_name, fake_surname = cells[:5]
        if not (country and name and surname):
            continue
        records.append(
            NameRecord(
                country=country,
                name=name,
                surname=surname,
                fake_name=fake_name,
                fake_surname=fake_surname,
            )
        )
    return records
