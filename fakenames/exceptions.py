class FakeNamesError(Exception):
    """Base exception for all fake-names errors."""


class FormatError(FakeNamesError):
    """Raised when the fake-names table header does not match the expected columns."""


class EmptyInputError(FakeNamesError):
    """Raised when there is nothing to work with: no valid rows or no eligible files."""


class NotFoundError(FakeNamesError):
    """Raised when a required directory is missing or is not a directory."""


class FileAccessError(FakeNamesError):
    """Raised when a file cannot be read from or written to disk."""


class ConfigError(FakeNamesError):
    """Raised when the environment holds an invalid setting."""
