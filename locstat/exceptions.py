"""Custom exceptions for locstat."""


class LocstatError(Exception):
    """Base exception for all locstat errors."""


class UnknownLanguage(LocstatError):
    """Raised when a language identifier is not in the profile registry.

    Identifier resolution happens before the engine is invoked, so this
    signals a caller bug rather than a bad input file.
    """

    def __init__(self, language_id: str):
        self.language_id = language_id
        super().__init__(f"Unknown language identifier '{language_id}'")


class ScanLimitExceeded(LocstatError):
    """Raised when a scan visits more files than the configured entry limit."""

    def __init__(self, limit: int):
        self.limit = limit
        super().__init__(f"Too many entries in directory tree (limit: {limit})")
