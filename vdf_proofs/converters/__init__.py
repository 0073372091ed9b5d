"""Byte codecs and database converters."""

from .group_element_codec import GroupElementCodec
from .proof_converter import ProofConverter

__all__ = ["GroupElementCodec", "ProofConverter"]
