"""Call boundary module."""

from . import Boundary
from .Orchestrator import Orchestrator, VerificationRequest
from .ProofBufferRegistry import ProofBufferRegistry, ProofHandle
from .VDFLibrary import VDFLibrary

__all__ = [
    "Boundary",
    "Orchestrator",
    "VerificationRequest",
    "ProofBufferRegistry",
    "ProofHandle",
    "VDFLibrary",
]
