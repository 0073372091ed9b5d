import hashlib
import logging
from typing import List, Tuple

from ..class_group import ClassGroupElement
from ..errors import InvalidIterations, MalformedProof, VDFError
from ..mpc import MPC
from ..mpc.types import MPZ
from ..protocol_constants import (
    PIETRZAK_CHALLENGE_BYTES,
    PIETRZAK_LEAF_ITERATIONS,
    PIETRZAK_MIN_ITERATIONS,
    MAX_ITERATIONS,
)
from .ClassGroupVDF import ClassGroupVDF

logger = logging.getLogger(__name__)


class PietrzakVDF(ClassGroupVDF):
    """Pietrzak scheme: proof layout [y: 2S][μ_1: 2S]...[μ_k: 2S].

    Each round halves the claim x^(2^t) = y using the midpoint μ = x^(2^(t/2))
    and a Fiat-Shamir exponent r: x' = x^r·μ, y' = μ^r·y. An odd t is first
    turned even by squaring y. The final claim is checked by direct squaring.
    """

    def check_iterations(self, iterations: int) -> None:
        if (
            iterations < PIETRZAK_MIN_ITERATIONS
            or iterations % 2 != 0
            or iterations > MAX_ITERATIONS
        ):
            raise InvalidIterations(
                f"Number of iterations must be even and at least {PIETRZAK_MIN_ITERATIONS}: {iterations}"
            )

    @staticmethod
    def round_count(iterations: int) -> int:
        """Number of midpoints a proof for t iterations carries."""
        rounds = 0
        while iterations > PIETRZAK_LEAF_ITERATIONS:
            iterations = (iterations + 1) // 2
            rounds += 1
        return rounds

    def solve(self, challenge: bytes, iterations: int) -> bytes:
        self.check_iterations(iterations)
        _, x = self.setup(challenge)
        y = self.iterate_squarings(x, iterations)

        midpoints: List[ClassGroupElement] = []
        x_i, y_i, t_i = x, y, iterations
        while t_i > PIETRZAK_LEAF_ITERATIONS:
            y_i, t_i = self._make_even(y_i, t_i)
            half = t_i // 2
            mu = self.iterate_squarings(x_i, half)
            midpoints.append(mu)
            x_i, y_i = self._fold(x_i, y_i, mu)
            t_i = half

        logger.info(
            "Solved Pietrzak VDF: t=%d, bit_length=%d, rounds=%d",
            iterations,
            self.bit_length,
            len(midpoints),
        )
        return self.codec.encode(y) + b"".join(self.codec.encode(mu) for mu in midpoints)

    def verify(self, challenge: bytes, iterations: int, proof: bytes) -> bool:
        try:
            self.check_iterations(iterations)
            discriminant, x = self.setup(challenge)
            y, midpoints = self._decode_proof(bytes(proof), iterations, discriminant)
        except VDFError as e:
            logger.debug("Pietrzak verification rejected: %s", e)
            return False

        x_i, y_i, t_i = x, y, iterations
        for mu in midpoints:
            y_i, t_i = self._make_even(y_i, t_i)
            x_i, y_i = self._fold(x_i, y_i, mu)
            t_i //= 2

        return self.iterate_squarings(x_i, t_i) == y_i

    # Private Methods
    # --------------

    @staticmethod
    def _make_even(y: ClassGroupElement, t: int) -> Tuple[ClassGroupElement, int]:
        """x^(2^t) = y implies x^(2^(t+1)) = y^2."""
        if t % 2:
            return y.square(), t + 1
        return y, t

    def _fold(
        self, x: ClassGroupElement, y: ClassGroupElement, mu: ClassGroupElement
    ) -> Tuple[ClassGroupElement, ClassGroupElement]:
        r = self._round_challenge(x, y, mu)
        return x.pow(r).multiply(mu), mu.pow(r).multiply(y)

    def _round_challenge(
        self, x: ClassGroupElement, y: ClassGroupElement, mu: ClassGroupElement
    ) -> MPZ:
        transcript = self.codec.encode(x) + self.codec.encode(y) + self.codec.encode(mu)
        digest = hashlib.sha256(transcript).digest()
        return MPC.from_bytes(digest[:PIETRZAK_CHALLENGE_BYTES])

    def _decode_proof(
        self, proof: bytes, iterations: int, discriminant: MPZ
    ) -> Tuple[ClassGroupElement, List[ClassGroupElement]]:
        element_size = self.codec.get_element_size()
        expected = element_size * (1 + self.round_count(iterations))
        if len(proof) != expected:
            raise MalformedProof(f"proof must be {expected} bytes, got {len(proof)}")
        elements = [
            self.codec.decode(proof[offset : offset + element_size], discriminant)
            for offset in range(0, expected, element_size)
        ]
        return elements[0], elements[1:]
