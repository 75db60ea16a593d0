"""
Growable Token Buffer

Keys and values are accumulated one character at a time. The buffer starts
small and doubles its capacity whenever it fills up. When a maximum length
is configured and the token would exceed it, the buffer raises instead of
truncating.
"""

from typing import List

from ..errors import BufferAllocationError


class GrowableBuffer:
    """
    Character buffer with doubling growth.

    Attributes:
        capacity: Current capacity in characters
        max_capacity: Hard limit in characters (0 = unlimited)
    """

    def __init__(self, initial_capacity: int, max_capacity: int = 0):
        """
        Args:
            initial_capacity: Starting capacity (must be positive)
            max_capacity: Hard limit (0 = unlimited)

        Raises:
            ValueError: If a capacity is out of range
        """
        if initial_capacity <= 0:
            raise ValueError("initial_capacity must be positive")
        if max_capacity < 0:
            raise ValueError("max_capacity must not be negative")

        self.max_capacity = max_capacity
        self.capacity = min(initial_capacity, max_capacity) if max_capacity else initial_capacity
        self._chars: List[str] = []

    def append(self, char: str) -> None:
        """
        Append one character, growing the buffer if it is full.

        Raises:
            BufferAllocationError: If the buffer cannot grow
        """
        if len(self._chars) == self.capacity:
            self._grow()
        try:
            self._chars.append(char)
        except MemoryError as e:
            raise BufferAllocationError("out of memory while reading token") from e

    def _grow(self) -> None:
        new_capacity = self.capacity * 2
        if self.max_capacity:
            if self.capacity >= self.max_capacity:
                raise BufferAllocationError(
                    f"token exceeds maximum length of {self.max_capacity} characters"
                )
            new_capacity = min(new_capacity, self.max_capacity)
        self.capacity = new_capacity

    def getvalue(self) -> str:
        """Return the accumulated characters as a string."""
        return "".join(self._chars)

    def __len__(self) -> int:
        return len(self._chars)
