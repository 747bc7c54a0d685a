from fakenames.config.settings import Settings
from fakenames.substitution.base import BaseSubstitutor
from fakenames.substitution.substitutor import NameSubstitutor


class SubstitutorFactory:
    """Creates the configured substitution engine."""

    @classmethod
    def create(cls, settings: Settings) -> BaseSubstitutor:
        """Create a literal country-anchored name substitutor."""
        _ = settings  # nothing configurable yet
        return NameSubstitutor()
