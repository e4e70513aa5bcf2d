"""
Custom exceptions for obadhlib.

Transliteration itself never raises: unknown input degrades to Roman
passthrough. These exceptions cover broken lookup tables only.
"""


class ObadhError(Exception):
    """Base exception for all obadhlib errors."""
    pass


class DefinitionError(ObadhError):
    """Raised when a definitions table breaks one of its invariants."""

    def __init__(self, table: str, key: str = "", reason: str = ""):
        message = f"Invalid entry in {table} table"
        if key:
            message += f" for key {key!r}"
        if reason:
            message += f": {reason}"
        message += "\nFix: Give every key a non-empty Roman find and Bengali replace value"
        super().__init__(message)
        self.table = table
        self.key = key
        self.reason = reason
