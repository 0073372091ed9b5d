from abc import ABC, abstractmethod
from ...mpc.types import MPZ


class IDiscriminantFactory(ABC):
    """Abstract base class defining the interface for class-group discriminant derivation."""

    @staticmethod
    @abstractmethod
    def create(seed: bytes, bit_length: int) -> MPZ:
        """Derive a discriminant from a seed.

        Args:
            seed (bytes): Challenge bytes the discriminant is bound to
            bit_length (int): Bit length of the discriminant's magnitude

        Returns:
            MPZ: A negative fundamental discriminant congruent to 1 mod 8
        """
