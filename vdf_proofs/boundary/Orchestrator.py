import logging
from multiprocessing import Pool
from typing import List, NamedTuple, Optional

from ..class_group import ClassGroupElement
from ..converters.group_element_codec import GroupElementCodec
from ..discriminant import DiscriminantFactory, IDiscriminantFactory
from ..errors import MalformedProof, VDFError
from ..utils.SystemSpecs import SystemSpecs
from ..vdf import Scheme, VerifiableDelayFunctionFactory
from ..verifier import FastVerifier, IFastVerifier

logger = logging.getLogger(__name__)


class VerificationRequest(NamedTuple):
    iterations: int
    challenge: bytes
    proof: bytes
    bit_length: int
    scheme: Scheme


class Orchestrator:
    """Dispatches generation and verification by scheme.

    Verification results are a pure function of the inputs. Every reason for
    rejection (framing, decoding, a false equation) yields the same False.
    """

    def __init__(
        self,
        verifier: Optional[IFastVerifier] = None,
        discriminant_factory: Optional[IDiscriminantFactory] = None,
    ) -> None:
        self._verifier = verifier or FastVerifier()
        self._discriminant_factory = discriminant_factory or DiscriminantFactory()

    def generate(
        self, iterations: int, challenge: bytes, bit_length: int, scheme: Scheme
    ) -> bytes:
        """Run the scheme's solver.

        Raises:
            InvalidIterations: If the scheme does not accept the iteration count
        """
        vdf = VerifiableDelayFunctionFactory.create(scheme, bit_length)
        return vdf.solve(challenge, iterations)

    def verify(
        self,
        iterations: int,
        challenge: bytes,
        proof: bytes,
        bit_length: int,
        scheme: Scheme,
    ) -> bool:
        try:
            if scheme is Scheme.PIETRZAK:
                vdf = VerifiableDelayFunctionFactory.create(scheme, bit_length)
                return vdf.verify(challenge, iterations, proof)
            return self._verify_wesolowski(iterations, challenge, proof, bit_length)
        except VDFError as e:
            logger.debug("Proof rejected: %s", e)
            return False

    def verify_slow(
        self,
        iterations: int,
        challenge: bytes,
        proof: bytes,
        bit_length: int,
        scheme: Scheme,
    ) -> bool:
        """Reference check through the scheme's full verification, for cross-checking."""
        try:
            vdf = VerifiableDelayFunctionFactory.create(scheme, bit_length)
            return vdf.verify(challenge, iterations, proof)
        except VDFError as e:
            logger.debug("Proof rejected by slow verification: %s", e)
            return False

    def verify_many(self, requests: List[VerificationRequest]) -> List[bool]:
        """
        Verify multiple proofs in parallel using multiprocessing.

        Args:
            requests: List of verification requests

        Returns:
            List of results in the same order as the requests
        """
        num_workers = SystemSpecs.get_num_parallel_processes()
        with Pool(num_workers) as pool:
            return pool.map(Orchestrator._verify_single, requests)

    # Private Methods
    # --------------

    def _verify_wesolowski(
        self, iterations: int, challenge: bytes, proof: bytes, bit_length: int
    ) -> bool:
        codec = GroupElementCodec(bit_length)
        element_size = codec.get_element_size()
        # Framing is checked before the discriminant search, which is the costly step
        if len(proof) != 2 * element_size:
            raise MalformedProof(
                f"proof must be {2 * element_size} bytes, got {len(proof)}"
            )

        discriminant = self._discriminant_factory.create(bytes(challenge), bit_length)
        x = ClassGroupElement.generator(discriminant)

        y_bytes = proof[:element_size]
        proof_bytes = proof[element_size:]
        y = codec.decode(y_bytes, discriminant)
        pi = codec.decode(proof_bytes, discriminant)

        return self._verifier.verify(
            x, y, pi, iterations, bytes(challenge), codec.encode(pi)
        )

    @staticmethod
    def _verify_single(request: VerificationRequest) -> bool:
        """Helper method to verify a single request for multiprocessing."""
        return Orchestrator().verify(*request)
