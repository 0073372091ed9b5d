from abc import ABC, abstractmethod
from ...mpc.types import MPZ


class IPrimeChallengeOracle(ABC):
    """Abstract base class defining the interface for Fiat-Shamir prime derivation."""

    @staticmethod
    @abstractmethod
    def hash_to_prime(transcript: bytes) -> MPZ:
        """Map a transcript to a prime number.

        Args:
            transcript (bytes): The protocol transcript to bind the prime to.

        Returns:
            MPZ: An odd prime of at most 64 bits, at least 2^16
        """
