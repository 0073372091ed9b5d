"""Wesolowski fast verification module."""

from .FastVerifier import FastVerifier
from .abstract.IFastVerifier import IFastVerifier

__all__ = ["FastVerifier", "IFastVerifier"]
