import hmac
import logging

from ..discriminant import IDiscriminantFactory
from ..errors import InvalidIterations, VDFError
from ..primes import IPrimeChallengeOracle, PrimeChallengeOracle
from ..protocol_constants import MAX_ITERATIONS
from ..verifier import FastVerifier
from .ClassGroupVDF import ClassGroupVDF

logger = logging.getLogger(__name__)


class WesolowskiVDF(ClassGroupVDF):
    """Wesolowski scheme: proof layout [y: 2S][π: 2S].

    The challenge prime l is hashed from challenge || π, so π is fixed before
    l is known: π is the generator squared t times and y is the value that
    satisfies y = π^l · x^(2^t mod l).
    """

    def __init__(
        self,
        bit_length: int,
        discriminant_factory: IDiscriminantFactory = None,
        oracle: IPrimeChallengeOracle = None,
    ) -> None:
        super().__init__(bit_length, discriminant_factory)
        self._oracle = oracle or PrimeChallengeOracle()

    def check_iterations(self, iterations: int) -> None:
        if not 0 <= iterations <= MAX_ITERATIONS:
            raise InvalidIterations(f"iterations out of range: {iterations}")

    def solve(self, challenge: bytes, iterations: int) -> bytes:
        self.check_iterations(iterations)
        challenge = bytes(challenge)
        _, x = self.setup(challenge)

        proof = self.iterate_squarings(x, iterations)
        proof_bytes = self.codec.encode(proof)

        l = self._oracle.hash_to_prime(challenge + proof_bytes)
        r = FastVerifier.challenge_remainder(iterations, l)
        y = proof.pow(l).multiply(x.pow(r))

        logger.info(
            "Solved Wesolowski VDF: t=%d, bit_length=%d", iterations, self.bit_length
        )
        return self.codec.encode(y) + proof_bytes

    def verify(self, challenge: bytes, iterations: int, proof: bytes) -> bool:
        """Full verification: repeat the t squarings and compare with the proof."""
        try:
            expected = self.solve(challenge, iterations)
        except VDFError as e:
            logger.debug("Slow verification rejected: %s", e)
            return False
        return hmac.compare_digest(expected, bytes(proof))
