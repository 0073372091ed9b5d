"""Class group VDF proofs (Wesolowski and Pietrzak) with fast verification."""

from .boundary.Boundary import (
    copy_proof,
    generate,
    proof_length,
    read_proof,
    release,
    verify,
    verify_slow,
)
from .boundary.ProofBufferRegistry import ProofHandle
from .boundary.VDFLibrary import VDFLibrary
from .errors import (
    BufferTooSmall,
    GenerationFailed,
    InvalidBitLength,
    InvalidHandle,
    InvalidIterations,
    MalformedProof,
    SizeOverflow,
    VDFError,
)
from .vdf import Scheme

__all__ = [
    "generate",
    "proof_length",
    "read_proof",
    "copy_proof",
    "release",
    "verify",
    "verify_slow",
    "ProofHandle",
    "VDFLibrary",
    "Scheme",
    "VDFError",
    "InvalidIterations",
    "MalformedProof",
    "SizeOverflow",
    "InvalidBitLength",
    "InvalidHandle",
    "BufferTooSmall",
    "GenerationFailed",
]
