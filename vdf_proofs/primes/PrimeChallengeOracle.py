import hashlib
import itertools

from ..mpc import MPC
from ..mpc.types import MPZ
from ..protocol_constants import COUNTER_BYTES, PRIME_CHALLENGE_FLOOR
from .abstract.IPrimeChallengeOracle import IPrimeChallengeOracle


class PrimeChallengeOracle(IPrimeChallengeOracle):
    """Hash-and-increment derivation of the Wesolowski challenge prime."""

    @staticmethod
    def hash_to_prime(transcript: bytes) -> MPZ:
        # No cap on the counter: capping would change which prime is returned
        for counter in itertools.count():
            candidate = PrimeChallengeOracle._candidate(transcript, counter)
            if candidate >= PRIME_CHALLENGE_FLOOR and MPC.is_prime(candidate):
                return candidate

    # Private Methods
    # --------------

    @staticmethod
    def _candidate(transcript: bytes, counter: int) -> MPZ:
        """Odd 64-bit candidate read from the low 8 bytes of SHA-256(transcript || counter)."""
        digest = hashlib.sha256(
            transcript + counter.to_bytes(COUNTER_BYTES, "little")
        ).digest()
        return MPC.mpz(int.from_bytes(digest[:8], "little") | 1)
