from abc import ABC, abstractmethod

from fakenames.records.models import RecordSet
from fakenames.substitution.models import SubstitutionOutcome


class BaseSubstitutor(ABC):
    """Contract for all name substitution engines."""

    @abstractmethod
    def substitute(self, text: str, records: RecordSet) -> SubstitutionOutcome:
        """Replace real names in text with their fake equivalents.

        Args:
            text: Full text of one asset file.
            records: Name records, applied in order.

        Returns:
            SubstitutionOutcome with the updated text and replacement counts.
        """
