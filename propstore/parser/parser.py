"""
Properties Parser Module

This module turns Java-style ``.properties`` text into ``Properties.set()``
calls.

Format:
    # comment                 -> ignored (also '!')
    key=value                 -> ("key", "value")
    key : value               -> ("key", "value")
    key value                 -> ("key", "value")
    key                       -> ("key", "")
    key\\ with\\ spaces = v     -> ("key with spaces", "v")
    long = first \\
           second             -> ("long", "first second")

Rules:
    - A key ends at an unescaped '=', ':', space, tab, form feed, newline
      or end of input.
    - Blanks around the assignment operator are dropped; the operator is
      optional.
    - A backslash at the end of a line continues the value on the next
      line, minus that line's leading blanks.
    - Any other backslash is dropped and the next character kept as is.
      Unicode escapes (\\uXXXX) are not decoded.
"""

import io
import logging
from typing import TextIO

from .buffer import GrowableBuffer
from .reader import CharReader, EOF
from ..config.settings import settings
from ..errors import BufferAllocationError, StoreAllocationError
from ..store.properties import Properties

logger = logging.getLogger(__name__)

BLANKS = frozenset(" \t\f")
WHITESPACE = frozenset(" \t\f\v\r\n")
KEY_TERMINATORS = frozenset("=: \t\f\n")
ASSIGNMENT_OPERATORS = frozenset("=:")
COMMENT_MARKERS = frozenset("#!")
ESCAPE = "\\"


class PropertiesParser:
    """
    Streaming parser for the ``.properties`` format.

    The parser keeps no state between calls, so one instance can be reused
    for any number of sources.

    Usage:
        parser = PropertiesParser()
        store = Properties()
        parser.parse_string("a = 1\\nb = 2\\n", store)
        store.get("b")  # '2'
    """

    def __init__(
            self,
            key_capacity: int = None,
            value_capacity: int = None,
            max_token_length: int = None,
            chunk_size: int = None,
    ):
        """
        Args:
            key_capacity: Initial key buffer size (default from settings)
            value_capacity: Initial value buffer size (default from settings)
            max_token_length: Longest accepted key or value, 0 = unlimited
                (default from settings)
            chunk_size: Characters read from the stream at once
                (default from settings)
        """
        self.key_capacity = key_capacity if key_capacity is not None else settings.INITIAL_KEY_CAPACITY
        self.value_capacity = value_capacity if value_capacity is not None else settings.INITIAL_VALUE_CAPACITY
        self.max_token_length = (
            max_token_length if max_token_length is not None else settings.MAX_TOKEN_LENGTH
        )
        self.chunk_size = chunk_size if chunk_size is not None else settings.READ_BUFFER_SIZE

    def parse(self, stream: TextIO, store: Properties) -> int:
        """
        Read every property from ``stream`` into ``store``.

        Args:
            stream: Text stream to read from (not closed by the parser)
            store: Store receiving the properties

        Returns:
            Number of key/value pairs read (duplicates counted each time)

        Raises:
            SourceUnavailableError: If the stream cannot be read or decoded
            BufferAllocationError: If a key or value is too long
            StoreAllocationError: If the store refuses an entry

        The store is modified progressively; callers wanting all-or-nothing
        behaviour should parse into a fresh store (see ``propstore.load``).
        """
        reader = CharReader(stream, self.chunk_size)
        count = 0

        while True:
            self._skip_whitespace(reader)
            char = reader.peek()

            if char == EOF:
                return count

            if char in COMMENT_MARKERS:
                self._consume_line(reader)
                continue

            line = reader.line
            try:
                key = self._read_key(reader)
                self._read_assignment(reader)
                value = self._read_value(reader)
            except BufferAllocationError as e:
                if e.line is None:
                    e.line = line
                raise

            if not store.set(key, value):
                raise StoreAllocationError(f"cannot store property {key!r}", line)

            logger.debug(f"line {line}: {key!r} = {value!r}")
            count += 1

    def parse_string(self, text: str, store: Properties) -> int:
        """Parse properties from an in-memory string. See ``parse()``."""
        return self.parse(io.StringIO(text, newline=None), store)

    def _new_buffer(self, initial_capacity: int) -> GrowableBuffer:
        return GrowableBuffer(initial_capacity, self.max_token_length)

    @staticmethod
    def _skip_whitespace(reader: CharReader) -> None:
        while reader.peek() in WHITESPACE:
            reader.advance()

    @staticmethod
    def _skip_blanks(reader: CharReader) -> None:
        while reader.peek() in BLANKS:
            reader.advance()

    @staticmethod
    def _consume_line(reader: CharReader) -> None:
        """Consume up to and including the next newline."""
        while True:
            char = reader.advance()
            if char == EOF or char == "\n":
                return

    def _read_key(self, reader: CharReader) -> str:
        """
        Read a key, stopping before the first unescaped terminator.

        End of input before any terminator still yields the key read so far.
        """
        buffer = self._new_buffer(self.key_capacity)

        while True:
            char = reader.peek()
            if char == EOF or char in KEY_TERMINATORS:
                return buffer.getvalue()

            reader.advance()
            if char == ESCAPE:
                char = reader.advance()
                if char == EOF:
                    return buffer.getvalue()

            buffer.append(char)

    def _read_assignment(self, reader: CharReader) -> None:
        """Skip blanks, one optional '=' or ':', then blanks again."""
        self._skip_blanks(reader)
        if reader.peek() in ASSIGNMENT_OPERATORS:
            reader.advance()
        self._skip_blanks(reader)

    def _read_value(self, reader: CharReader) -> str:
        """
        Read a value up to an unescaped newline or end of input.

        The terminating newline is left in the stream.
        """
        buffer = self._new_buffer(self.value_capacity)

        while True:
            char = reader.peek()
            if char == EOF or char == "\n":
                return buffer.getvalue()

            reader.advance()
            if char == ESCAPE:
                char = reader.advance()
                if char == EOF:
                    return buffer.getvalue()
                if char == "\n":
                    # Line continuation
                    self._skip_blanks(reader)
                    continue

            buffer.append(char)
