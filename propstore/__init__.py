"""
propstore: Java-style .properties files in memory

Loads ``.properties`` files into an ordered key/value store that can be
queried, updated and printed.

    >>> from propstore import loads
    >>> result = loads("greeting = hello world\\n")
    >>> result.properties.get("greeting")
    'hello world'
"""

from .loader import LoadResult, LoadStatus, load, loads
from .parser.parser import PropertiesParser
from .store import Entry, Properties

__version__ = "1.0.0"

__all__ = [
    "Entry",
    "LoadResult",
    "LoadStatus",
    "Properties",
    "PropertiesParser",
    "load",
    "loads",
]
