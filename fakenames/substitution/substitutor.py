"""Country-anchored name substitution.

A name is only replaced when it appears as ``<country>, <name>, <surname>``,
the way jumper rows are embedded in the built UI data. Separators (any
whitespace around each comma) are kept exactly as found; only the name and
surname segments change.

Records are applied one after another to the progressively updated text, so
a record sees the output of every record before it.
"""

import re
from collections.abc import Callable

from fakenames.logging.logger import Log
from fakenames.records.models import NameRecord, RecordSet
from fakenames.substitution.base import BaseSubstitutor
from fakenames.substitution.models import SubstitutionOutcome

_SEPARATOR = r"\s*,\s*"


def _compile(record: NameRecord) -> re.Pattern[str]:
    return re.compile(
        f"({re.escape(record.country)}{_SEPARATOR})"
        f"{re.escape(record.name)}"
        f"({_SEPARATOR})"
        f"{re.escape(record.surname)}"
    )


def _replacer(record: NameRecord) -> Callable[[re.Match[str]], str]:
    # Fake values are inserted as-is, never expanded as a template.
    def replace(match: re.Match[str]) -> str:
        return f"{match.group(1)}{record.fake_name}{match.group(2)}{record.fake_surname}"

    return replace


class NameSubstitutor(BaseSubstitutor):
    """Literal, case-sensitive substitution of (country, name, surname) triples.

    Compiled patterns are kept per instance, so one run compiles each record once.
    """

    def __init__(self) -> None:
        self._patterns: dict[NameRecord, re.Pattern[str]] = {}

    def substitute(self, text: str, records: RecordSet) -> SubstitutionOutcome:
        updated = text
        total = 0
        record_counts: dict[NameRecord, int] = {}

        for record in records:
            updated, count = self._pattern_for(record).subn(_replacer(record), updated)
            if count:
                record_counts[record] = record_counts.get(record, 0) + count
                total += count
                Log.debug(
                    f"{record.country}, {record.name}, {record.surname}: {count} replacements"
                )

        return SubstitutionOutcome(
            updated_text=updated,
            replacement_count=total,
            record_counts=record_counts,
        )

    def _pattern_for(self, record: NameRecord) -> re.Pattern[str]:
        pattern = self._patterns.get(record)
        if pattern is None:
            pattern = self._patterns[record] = _compile(record)
        return pattern
