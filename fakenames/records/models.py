from dataclasses import dataclass


@dataclass(frozen=True)
class NameRecord:
    """One real-to-fake name pair, keyed by country."""

    country: str
    name: str
    surname: str
    fake_name: str
    fake_surname: str


RecordSet = list[NameRecord]
