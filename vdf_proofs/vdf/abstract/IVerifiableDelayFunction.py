from abc import ABC, abstractmethod


class IVerifiableDelayFunction(ABC):
    """Abstract base class defining the capability set of a VDF scheme."""

    @abstractmethod
    def check_iterations(self, iterations: int) -> None:
        """Check that the scheme accepts an iteration count.

        Args:
            iterations (int): The number of sequential squarings

        Raises:
            InvalidIterations: If the scheme does not accept the count
        """

    @abstractmethod
    def solve(self, challenge: bytes, iterations: int) -> bytes:
        """Perform the sequential work and produce a proof.

        Args:
            challenge (bytes): The challenge seeding the discriminant
            iterations (int): The number of sequential squarings

        Returns:
            bytes: The serialized proof

        Raises:
            InvalidIterations: If the scheme does not accept the count
        """

    @abstractmethod
    def verify(self, challenge: bytes, iterations: int, proof: bytes) -> bool:
        """Fully verify a proof produced by solve.

        Args:
            challenge (bytes): The challenge the proof was produced for
            iterations (int): The claimed number of sequential squarings
            proof (bytes): The serialized proof

        Returns:
            bool: True if the proof is valid
        """
