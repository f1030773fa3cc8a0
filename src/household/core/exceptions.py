#!/usr/bin/env python3
"""
Household Finances Exceptions

Typed, human-readable errors raised by the parsing and sync layers.
The CLI turns these into operator-facing messages.
"""


class HouseholdError(Exception):
    """Base class for all household finance errors."""

    pass


class SourceFormatError(HouseholdError):
    """Raised when snapshot text is not a usable table (HTML page, empty sheet)."""

    pass


class NetworkError(HouseholdError):
    """
    Raised when retrieving snapshot text fails.

    Attributes:
        status_code: HTTP status of the failed response, or None when the
            request never produced a response (DNS failure, timeout, ...)
    """

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class LastSalaryChangeError(HouseholdError, ValueError):
    """Raised when removing the only remaining entry of a salary history."""

    pass
