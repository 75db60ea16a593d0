"""
Properties Store Module

This module implements the ordered key/value store that loaded properties
are kept in.

Keys are held in ascending order at all times, so enumeration and printing
never need to sort.
"""

import io
import logging
import sys
from bisect import bisect_left
from typing import Optional, Dict, Any, Iterator, List, TextIO

from .entry import Entry
from ..config.settings import settings

logger = logging.getLogger(__name__)


class Properties:
    """
    Ordered in-memory store of string properties.

    Operations:
    - get: Look up the value for a key
    - set: Insert a new key or replace the value of an existing one
    - delete: Remove a key
    - each: Enumerate entries in ascending key order
    - print: Write every entry as ``key = value``
    - destroy: Release every entry

    Internal Storage:
        A sorted list of keys (kept with bisect) next to a dict mapping each
        key to its Entry. Lookup is O(1) on the dict; insertion and deletion
        are O(n) on the key list, which is fine for configuration-sized data.
        Keys compare by code point, which matches the byte order of their
        UTF-8 encoding.

    Attributes:
        max_entries: Maximum number of entries (0 = unlimited)
    """

    def __init__(self, max_entries: int = None):
        """
        Initialize an empty store.

        Args:
            max_entries: Maximum number of entries (default from
                settings.MAX_ENTRIES, 0 = unlimited)

        Raises:
            ValueError: If max_entries is negative
        """
        self.max_entries = max_entries if max_entries is not None else settings.MAX_ENTRIES
        if self.max_entries < 0:
            raise ValueError("max_entries must not be negative")

        self._keys: List[str] = []
        self._entries: Dict[str, Entry] = {}

    @classmethod
    def create(cls, max_entries: int = None) -> "Properties":
        """Create an empty store."""
        return cls(max_entries=max_entries)

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """
        Retrieve the value for a given key.

        Args:
            key: The key to look up
            default: Returned when the key is absent

        Returns:
            The stored value, or ``default`` if the key is not present
        """
        entry = self._entries.get(key)
        if entry is None:
            return default
        return entry.value

    def set(self, key: str, value: str) -> bool:
        """
        Insert or update a property.

        An existing key keeps its position and gets the new value. A new key
        is inserted before the first stored key that sorts after it.

        Args:
            key: The key to store
            value: The value to associate with the key

        Returns:
            True on success, False if no room could be made for a new entry.
            On failure the store is left exactly as it was.

        Raises:
            TypeError: If key or value is not a string
        """
        if not isinstance(key, str) or not isinstance(value, str):
            raise TypeError("key and value must be strings")

        if key in self._entries:
            self._entries[key] = Entry(key, value)
            return True

        if self.max_entries and len(self._keys) >= self.max_entries:
            logger.error(f"Cannot store {key!r}: store is full ({self.max_entries} entries)")
            return False

        index = bisect_left(self._keys, key)
        try:
            entry = Entry(key, value)
            self._keys.insert(index, key)
            try:
                self._entries[key] = entry
            except MemoryError:
                del self._keys[index]
                raise
        except MemoryError:
            logger.error(f"Cannot store {key!r}: out of memory")
            return False

        return True

    def delete(self, key: str) -> bool:
        """
        Delete a property.

        Args:
            key: The key to delete

        Returns:
            True if the key was found and deleted, False otherwise
        """
        if key not in self._entries:
            return False

        index = bisect_left(self._keys, key)
        del self._keys[index]
        del self._entries[key]
        return True

    def exists(self, key: str) -> bool:
        """Check if a key is present."""
        return key in self._entries

    def each(self) -> Iterator[Entry]:
        """
        Iterate over the entries in ascending key order.

        The store must not be modified while the iterator is in use.
        """
        for key in self._keys:
            yield self._entries[key]

    def keys(self) -> List[str]:
        """Get all keys in ascending order."""
        return list(self._keys)

    def size(self) -> int:
        """Get the current number of entries."""
        return len(self._keys)

    def print(self, stream: TextIO = None) -> None:
        """
        Write every entry as ``key = value`` in ascending key order.

        Nothing is escaped, so the output is meant for people rather than
        for loading back.

        Args:
            stream: Destination (default sys.stdout)
        """
        if stream is None:
            stream = sys.stdout
        for entry in self.each():
            stream.write(entry.format())

    def dumps(self) -> str:
        """Return the text ``print()`` would write."""
        out = io.StringIO()
        self.print(out)
        return out.getvalue()

    def destroy(self) -> None:
        """Release every entry. The store is empty (and reusable) afterwards."""
        self._keys.clear()
        self._entries.clear()

    def get_stats(self) -> Dict[str, Any]:
        """
        Get statistics about the store.

        Returns:
            Dictionary containing:
            - total_keys: Number of entries
            - max_entries: Capacity (0 = unlimited)
            - first_key / last_key: Smallest and largest key, or None
        """
        return {
            "total_keys": len(self._keys),
            "max_entries": self.max_entries,
            "first_key": self._keys[0] if self._keys else None,
            "last_key": self._keys[-1] if self._keys else None,
        }

    def __len__(self) -> int:
        return len(self._keys)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __iter__(self) -> Iterator[Entry]:
        return self.each()

    def __repr__(self) -> str:
        return f"Properties({len(self._keys)} entries)"
