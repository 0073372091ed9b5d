import hashlib
import itertools
import logging

from ..errors import InvalidBitLength
from ..mpc import MPC
from ..mpc.types import MPZ
from ..protocol_constants import COUNTER_BYTES, MIN_BIT_LENGTH
from .abstract.IDiscriminantFactory import IDiscriminantFactory

logger = logging.getLogger(__name__)

BLOCK_INDEX_BYTES = 4


class DiscriminantFactory(IDiscriminantFactory):
    """Seed-dependent hash-and-increment derivation of Δ = -p, p prime, p ≡ 7 (mod 8)."""

    @staticmethod
    def create(seed: bytes, bit_length: int) -> MPZ:
        if bit_length < MIN_BIT_LENGTH:
            raise InvalidBitLength(
                f"bit_length must be at least {MIN_BIT_LENGTH}, got {bit_length}"
            )

        byte_count = (bit_length + 7) // 8
        mask = (1 << bit_length) - 1
        top_bit = 1 << (bit_length - 1)

        for counter in itertools.count():
            block = DiscriminantFactory._expand(seed, counter, byte_count)
            # Exact bit length, and p ≡ 7 (mod 8) so that -p ≡ 1 (mod 8)
            candidate = MPC.mpz((int.from_bytes(block, "big") & mask) | top_bit | 7)
            if MPC.is_prime(candidate):
                logger.debug(
                    "Derived %d-bit discriminant after %d candidates", bit_length, counter + 1
                )
                return -candidate

    # Private Methods
    # --------------

    @staticmethod
    def _expand(seed: bytes, counter: int, byte_count: int) -> bytes:
        """Concatenate SHA-256(seed || counter || block) until byte_count bytes are produced."""
        prefix = seed + counter.to_bytes(COUNTER_BYTES, "little")
        output = bytearray()
        block_index = 0
        while len(output) < byte_count:
            output += hashlib.sha256(
                prefix + block_index.to_bytes(BLOCK_INDEX_BYTES, "little")
            ).digest()
            block_index += 1
        return bytes(output[:byte_count])
