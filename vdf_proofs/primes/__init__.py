"""Fiat-Shamir challenge prime module."""

from .PrimeChallengeOracle import PrimeChallengeOracle
from .abstract.IPrimeChallengeOracle import IPrimeChallengeOracle

__all__ = ["PrimeChallengeOracle", "IPrimeChallengeOracle"]
