from abc import ABC, abstractmethod
from ...class_group import IClassGroupElement


class IFastVerifier(ABC):
    """Abstract base class defining the interface for the Wesolowski short verification."""

    @abstractmethod
    def verify(
        self,
        x: IClassGroupElement,
        y: IClassGroupElement,
        proof: IClassGroupElement,
        iterations: int,
        challenge: bytes,
        proof_bytes: bytes,
    ) -> bool:
        """Check y == proof^l · x^r with l derived from challenge || proof_bytes.

        Args:
            x (IClassGroupElement): The generator the delay started from
            y (IClassGroupElement): The claimed output
            proof (IClassGroupElement): The proof element π
            iterations (int): The claimed number of squarings t
            challenge (bytes): Challenge bytes prefixing the transcript
            proof_bytes (bytes): Canonical encoding of π

        Returns:
            bool: True if the equation holds
        """
