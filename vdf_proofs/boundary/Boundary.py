"""Call boundary for proof generation and verification.

Callers own the proofs that `generate` produces through a ProofHandle and
must hand it back through `release`. Integer arguments and buffers are
validated before use; `verify` and `verify_slow` never raise.
"""

import logging
from typing import Optional, Tuple

from ..errors import SizeOverflow, VDFError
from ..protocol_constants import U16_MAX, U32_MAX
from ..vdf import Scheme
from .Orchestrator import Orchestrator
from .ProofBufferRegistry import ProofBufferRegistry, ProofHandle

logger = logging.getLogger(__name__)

STATUS_OK = 0
STATUS_FAILED = 1

_registry = ProofBufferRegistry()


def generate(
    iterations: int, challenge: bytes, bit_length: int, is_pietrzak: bool
) -> Tuple[int, Optional[ProofHandle]]:
    """Generate a proof.

    Returns:
        Tuple[int, Optional[ProofHandle]]: (0, handle) on success, (1, None) on failure
    """
    try:
        _check_uint(iterations, U32_MAX, "iterations")
        _check_uint(bit_length, U16_MAX, "bit_length")
        proof = Orchestrator().generate(
            iterations, _buffer(challenge), bit_length, Scheme.from_flag(bool(is_pietrzak))
        )
    except (VDFError, TypeError, ValueError) as e:
        logger.info("Proof generation failed: %s", e)
        return STATUS_FAILED, None
    return STATUS_OK, _registry.register(proof)


def proof_length(handle: ProofHandle) -> int:
    """Size of the buffer `copy_proof` needs for this handle."""
    return len(_registry.read(handle))


def read_proof(handle: ProofHandle) -> bytes:
    return _registry.read(handle)


def copy_proof(handle: ProofHandle, out: bytearray) -> int:
    return _registry.copy_into(handle, out)


def release(handle: ProofHandle) -> None:
    """Free a generated proof. The handle is invalid afterwards."""
    _registry.release(handle)


def verify(
    iterations: int,
    challenge: bytes,
    proof: bytes,
    bit_length: int,
    is_pietrzak: bool,
) -> bool:
    """Fast verification; Wesolowski proofs are checked without repeating the squarings."""
    return _verify(Orchestrator.verify, iterations, challenge, proof, bit_length, is_pietrzak)


def verify_slow(
    iterations: int,
    challenge: bytes,
    proof: bytes,
    bit_length: int,
    is_pietrzak: bool,
) -> bool:
    """Reference verification that repeats the sequential work, for cross-checking."""
    return _verify(
        Orchestrator.verify_slow, iterations, challenge, proof, bit_length, is_pietrzak
    )


# Private Functions
# --------------


def _verify(method, iterations, challenge, proof, bit_length, is_pietrzak) -> bool:
    try:
        _check_uint(iterations, U32_MAX, "iterations")
        _check_uint(bit_length, U32_MAX, "bit_length")
        if bit_length > U16_MAX:
            raise SizeOverflow(f"bit_length {bit_length} does not fit 16 bits")
        return method(
            Orchestrator(),
            iterations,
            _buffer(challenge),
            _buffer(proof),
            bit_length,
            Scheme.from_flag(bool(is_pietrzak)),
        )
    except (VDFError, TypeError, ValueError) as e:
        logger.debug("Verification failed closed: %s", e)
        return False


def _check_uint(value: int, maximum: int, name: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
    if not 0 <= value <= maximum:
        raise SizeOverflow(f"{name} out of range: {value}")


def _buffer(data) -> bytes:
    """Copy a bytes-like argument through a byte-wise memoryview."""
    with memoryview(data) as view:
        return view.cast("B").tobytes()
