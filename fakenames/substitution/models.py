from dataclasses import dataclass, field

from fakenames.records.models import NameRecord


@dataclass(frozen=True)
class SubstitutionOutcome:
    """Output of one substitution pass over a text."""

    updated_text: str
    replacement_count: int = 0
    record_counts: dict[NameRecord, int] = field(default_factory=dict)
