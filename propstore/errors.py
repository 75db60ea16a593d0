"""
Error types raised while loading properties.

These never escape ``load()``/``loads()``: the loader translates them into a
failed ``LoadResult``. They are public so that code driving
``PropertiesParser`` directly can catch them.
"""

from typing import Optional


class PropertiesError(Exception):
    """Base class for all propstore errors."""

    def __init__(self, message: str, line: Optional[int] = None):
        self.message = message
        self.line = line
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.line is not None:
            return f"{self.message} (line {self.line})"
        return self.message


class SourceUnavailableError(PropertiesError):
    """The source could not be opened, read or decoded."""


class AllocationError(PropertiesError):
    """Storage for a token or an entry could not be obtained."""


class BufferAllocationError(AllocationError):
    """A token buffer could not grow any further."""


class StoreAllocationError(AllocationError):
    """The store refused a new entry."""
