"""
Properties Loader Module

Top-level entry points: ``load()`` reads a file, ``loads()`` reads a string.

Loading is all-or-nothing. Either every property ends up in a new store
that is returned to the caller, or the partially built store is destroyed
and only the error is returned. Files are closed on every path.
"""

import io
import logging
import os
from dataclasses import dataclass
from enum import Enum
from typing import Optional, TextIO, Union

from .config.settings import settings
from .errors import AllocationError, SourceUnavailableError
from .parser.parser import PropertiesParser
from .store.properties import Properties

logger = logging.getLogger(__name__)


class LoadStatus(Enum):
    """Enumeration of load outcomes."""
    OK = "OK"
    SOURCE_UNAVAILABLE = "SOURCE_UNAVAILABLE"
    ALLOCATION_FAILURE = "ALLOCATION_FAILURE"


@dataclass
class LoadResult:
    """
    Represents the outcome of a load.

    Attributes:
        status: OK or the kind of failure
        properties: The loaded store (only set when status is OK)
        message: Error description (empty on success)
    """
    status: LoadStatus
    properties: Optional[Properties] = None
    message: str = ""

    @property
    def is_ok(self) -> bool:
        """Check if the load succeeded."""
        return self.status == LoadStatus.OK

    @classmethod
    def ok(cls, properties: Properties) -> "LoadResult":
        """Create a successful result."""
        return cls(status=LoadStatus.OK, properties=properties)

    @classmethod
    def failure(cls, status: LoadStatus, message: str) -> "LoadResult":
        """Create a failed result carrying no store."""
        return cls(status=status, message=message)


def load(
        path: Union[str, "os.PathLike[str]"],
        encoding: str = None,
        parser: PropertiesParser = None,
        max_entries: int = None,
) -> LoadResult:
    """
    Load properties from a file.

    Args:
        path: File to read
        encoding: Text encoding (default from settings.ENCODING)
        parser: Parser to use (a default PropertiesParser if omitted)
        max_entries: Capacity of the new store (default from settings)

    Returns:
        LoadResult holding the populated store, or the reason it failed

    Examples:
        >>> result = load("does/not/exist.properties")
        >>> result.status
        <LoadStatus.SOURCE_UNAVAILABLE: 'SOURCE_UNAVAILABLE'>
        >>> result.properties is None
        True
    """
    encoding = encoding or settings.ENCODING
    name = os.fspath(path)

    try:
        stream = open(path, "r", encoding=encoding)
    except (OSError, LookupError, ValueError) as e:
        # LookupError: unknown encoding; ValueError: unusable path (e.g. NUL byte)
        reason = e.strerror if isinstance(e, OSError) and e.strerror else str(e)
        message = f"cannot open {name}: {reason}"
        logger.debug(f"Failed to load properties: {message}")
        return LoadResult.failure(LoadStatus.SOURCE_UNAVAILABLE, message)

    with stream:
        return _load_stream(stream, name, parser, max_entries)


def loads(text: str, parser: PropertiesParser = None, max_entries: int = None) -> LoadResult:
    """Load properties from a string. See ``load()``."""
    return _load_stream(io.StringIO(text, newline=None), "<string>", parser, max_entries)


def _load_stream(
        stream: TextIO,
        name: str,
        parser: Optional[PropertiesParser],
        max_entries: Optional[int],
) -> LoadResult:
    """Parse ``stream`` into a new store, destroying it on failure."""
    parser = parser if parser is not None else PropertiesParser()
    properties = Properties(max_entries=max_entries)

    try:
        count = parser.parse(stream, properties)
    except SourceUnavailableError as e:
        status, message = LoadStatus.SOURCE_UNAVAILABLE, f"{name}: {e}"
    except AllocationError as e:
        status, message = LoadStatus.ALLOCATION_FAILURE, f"{name}: {e}"
    except MemoryError:
        status, message = LoadStatus.ALLOCATION_FAILURE, f"{name}: out of memory"
    else:
        logger.debug(f"Loaded {count} properties ({len(properties)} keys) from {name}")
        return LoadResult.ok(properties)

    properties.destroy()
    logger.debug(f"Failed to load properties: {message}")
    return LoadResult.failure(status, message)
