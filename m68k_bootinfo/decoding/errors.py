"""Fatal bootinfo decoding errors."""

from typing import Optional


class BootinfoError(Exception):
    """Base class for errors that abort a bootinfo decode."""

    def __init__(self, message: str, tag: Optional[int] = None):
        super().__init__(message)
        self.tag = tag


class BootinfoIOError(BootinfoError):
    """Read failure or end of file in the middle of a record."""


class FramingError(BootinfoError, ValueError):
    """Record size below the header size or not a multiple of 4."""


class ContentError(BootinfoError, ValueError):
    """Payload too small for its type, or an unterminated string."""


class ResourceError(BootinfoError):
    """No memory for a record buffer."""
