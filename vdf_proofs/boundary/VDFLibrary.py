import logging

from ..errors import GenerationFailed
from ..protocol_constants import PIETRZAK_MIN_ITERATIONS, VALID_INT_SIZE_BITS
from . import Boundary

logger = logging.getLogger(__name__)


class VDFLibrary:
    """Caller-facing API over the boundary functions.

    Rejects argument combinations the boundary would only report as a bare
    failure status, and always hands generated buffers back to the boundary.
    """

    def generate(
        self, iterations: int, challenge: bytes, int_size_bits: int, is_pietrzak: bool
    ) -> bytes:
        """Generate a proof.

        Args:
            iterations (int): Number of sequential squarings
            challenge (bytes): Challenge the discriminant is derived from
            int_size_bits (int): Discriminant bit length, one of 1024, 2048, 3072, 4096
            is_pietrzak (bool): Use the Pietrzak scheme instead of Wesolowski

        Returns:
            bytes: The proof

        Raises:
            ValueError: If the arguments are rejected before generation
            GenerationFailed: If the boundary reports a failure status
        """
        self._check_iterations(iterations, is_pietrzak)
        if not challenge:
            raise ValueError("Challenge must not be empty")
        if int_size_bits not in VALID_INT_SIZE_BITS:
            raise ValueError(
                f"int_size_bits must be one of {VALID_INT_SIZE_BITS}: {int_size_bits}"
            )

        status, handle = Boundary.generate(iterations, challenge, int_size_bits, is_pietrzak)
        if status != Boundary.STATUS_OK:
            raise GenerationFailed(f"Proof generation failed with status {status}")
        try:
            return Boundary.read_proof(handle)
        finally:
            Boundary.release(handle)

    def verify(
        self,
        iterations: int,
        challenge: bytes,
        proof: bytes,
        int_size_bits: int,
        is_pietrzak: bool,
    ) -> bool:
        self._check_iterations(iterations, is_pietrzak)
        return Boundary.verify(iterations, challenge, proof, int_size_bits, is_pietrzak)

    def verify_slow(
        self,
        iterations: int,
        challenge: bytes,
        proof: bytes,
        int_size_bits: int,
        is_pietrzak: bool,
    ) -> bool:
        self._check_iterations(iterations, is_pietrzak)
        return Boundary.verify_slow(iterations, challenge, proof, int_size_bits, is_pietrzak)

    # Private Methods
    # --------------

    @staticmethod
    def _check_iterations(iterations: int, is_pietrzak: bool) -> None:
        if is_pietrzak and (iterations < PIETRZAK_MIN_ITERATIONS or iterations % 2 != 0):
            raise ValueError(
                f"Pietrzak iterations must be even and at least {PIETRZAK_MIN_ITERATIONS}: {iterations}"
            )
