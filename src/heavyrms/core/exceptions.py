"""Exceptions and warnings raised by heavyrms."""

from typing import Optional


class HeavyRMSError(Exception):
    """Base class for heavyrms errors."""


class StructureReadError(HeavyRMSError):
    """A structure file could not be opened or read."""


class UnsupportedFormatError(StructureReadError, ValueError):
    """The structure file extension does not name a supported format."""


class StructureParseError(StructureReadError):
    """A record inside a structure file is malformed."""

    def __init__(self, path: str, index: int, reason: Optional[str] = None):
        self.path = path
        self.index = index
        self.reason = reason
        message = f"Malformed structure record {index} in {path}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class DegenerateInputWarning(UserWarning):
    """No atoms were left to compare after normalization."""
