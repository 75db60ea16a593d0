"""
Character Reader Module

A peekable cursor over a text stream. The stream is read in chunks so that
large sources are never held in memory at once.
"""

from typing import TextIO

from ..config.settings import settings
from ..errors import SourceUnavailableError

# Returned by peek()/advance() once the stream is exhausted
EOF = ""


class CharReader:
    """
    One-character-lookahead reader.

    Usage:
        reader = CharReader(io.StringIO("a=b"))
        reader.peek()     # 'a' (not consumed)
        reader.advance()  # 'a' (consumed)

    Attributes:
        chunk_size: Number of characters requested from the stream per read
        line: Line number of the next character (1-based)
    """

    def __init__(self, stream: TextIO, chunk_size: int = None):
        self._stream = stream
        self.chunk_size = chunk_size if chunk_size is not None else settings.READ_BUFFER_SIZE
        if self.chunk_size <= 0:
            raise ValueError("chunk_size must be positive")

        self._chunk = ""
        self._pos = 0
        self._exhausted = False
        self.line = 1

    def _fill(self) -> bool:
        """Make sure a character is available. Returns False at end of stream."""
        if self._pos < len(self._chunk):
            return True
        if self._exhausted:
            return False

        try:
            chunk = self._stream.read(self.chunk_size)
        except UnicodeDecodeError as e:
            raise SourceUnavailableError(f"cannot decode source: {e.reason}", self.line) from e
        except OSError as e:
            raise SourceUnavailableError(f"cannot read source: {e}", self.line) from e

        if not chunk:
            self._exhausted = True
            return False

        self._chunk = chunk
        self._pos = 0
        return True

    def peek(self) -> str:
        """Return the next character without consuming it, or EOF."""
        if not self._fill():
            return EOF
        return self._chunk[self._pos]

    def advance(self) -> str:
        """Consume and return the next character, or EOF."""
        if not self._fill():
            return EOF
        char = self._chunk[self._pos]
        self._pos += 1
        if char == "\n":
            self.line += 1
        return char

    def at_eof(self) -> bool:
        return not self._fill()
