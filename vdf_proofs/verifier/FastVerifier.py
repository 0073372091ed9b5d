import logging
from typing import Optional

from ..class_group import IClassGroupElement
from ..mpc import MPC
from ..mpc.types import MPZ
from ..primes import IPrimeChallengeOracle, PrimeChallengeOracle
from .abstract.IFastVerifier import IFastVerifier

logger = logging.getLogger(__name__)

TWO = MPC.mpz(2)


class FastVerifier(IFastVerifier):
    """Wesolowski verification in O(log l + log r) group operations.

    Checks y == π^l · x^(2^t mod l) instead of repeating t squarings. Only the
    computation of r = 2^t mod l depends on t, and its cost is logarithmic.
    """

    def __init__(self, oracle: Optional[IPrimeChallengeOracle] = None) -> None:
        self._oracle = oracle or PrimeChallengeOracle()

    def verify(
        self,
        x: IClassGroupElement,
        y: IClassGroupElement,
        proof: IClassGroupElement,
        iterations: int,
        challenge: bytes,
        proof_bytes: bytes,
    ) -> bool:
        # The transcript holds the proof element only, never y
        l = self._oracle.hash_to_prime(bytes(challenge) + bytes(proof_bytes))
        r = FastVerifier.challenge_remainder(iterations, l)
        candidate = proof.pow(l).multiply(x.pow(r))
        if candidate != y:
            logger.debug("Verification equation does not hold for t=%d", iterations)
            return False
        return True

    @staticmethod
    def challenge_remainder(iterations: int, l: MPZ) -> MPZ:
        """Compute r = 2^t mod l by modular exponentiation."""
        return MPC.powmod(TWO, iterations, l)
