"""Database entity models."""

from .ProofEntity import ProofEntity

__all__ = ["ProofEntity"]
