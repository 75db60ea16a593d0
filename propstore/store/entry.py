"""
Entry Definition

This module defines the record held by the properties store.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Entry:
    """
    Represents one key/value pair held by a Properties store.

    Entries are immutable. Updating a key replaces its entry with a new one,
    so an Entry obtained earlier keeps the value it had when it was read.

    Attributes:
        key: The property key
        value: The property value
    """
    key: str
    value: str

    def format(self) -> str:
        """Format the entry as a ``key = value`` line (no escaping)."""
        return f"{self.key} = {self.value}\n"
