"""Discriminant derivation module."""

from .DiscriminantFactory import DiscriminantFactory
from .abstract.IDiscriminantFactory import IDiscriminantFactory

__all__ = ["DiscriminantFactory", "IDiscriminantFactory"]
