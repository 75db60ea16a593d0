"""Store module for propstore."""

from .entry import Entry
from .properties import Properties

__all__ = ["Entry", "Properties"]
