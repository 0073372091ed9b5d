"""Class group arithmetic module."""

from .ClassGroupElement import ClassGroupElement
from .abstract.IClassGroupElement import IClassGroupElement

__all__ = ["ClassGroupElement", "IClassGroupElement"]
