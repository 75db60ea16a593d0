"""Parser module for propstore."""

from .buffer import GrowableBuffer
from .parser import PropertiesParser
from .reader import CharReader, EOF

__all__ = [
    "CharReader",
    "EOF",
    "GrowableBuffer",
    "PropertiesParser",
]
