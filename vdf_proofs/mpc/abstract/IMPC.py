from abc import ABC, abstractmethod
from typing import Tuple
from ..types import MPZ


class IMPC(ABC):
    """Abstract base class defining the interface for multi-precision computing operations."""

    @staticmethod
    @abstractmethod
    def mpz(value: int) -> MPZ:
        """Convert a Python integer to an mpz.

        Args:
            value (int): Integer value to convert

        Returns:
            mpz: Multi-precision integer
        """

    @staticmethod
    @abstractmethod
    def powmod(base: MPZ, exp: MPZ, mod: MPZ) -> MPZ:
        """Compute (base ** exp) % mod efficiently.

        Args:
            base (mpz): Base value
            exp (mpz): Exponent value
            mod (mpz): Modulus value

        Returns:
            mpz: Result of modular exponentiation
        """

    @staticmethod
    @abstractmethod
    def is_prime(value: MPZ) -> bool:
        """Check whether a value is (probably) prime.

        Args:
            value (mpz): Value to test

        Returns:
            bool: True if the value passes the primality test
        """

    @staticmethod
    @abstractmethod
    def gcdext(a: MPZ, b: MPZ) -> Tuple[MPZ, MPZ, MPZ]:
        """Extended Euclid.

        Args:
            a (mpz): First operand
            b (mpz): Second operand

        Returns:
            Tuple[mpz, mpz, mpz]: (g, s, t) with g = gcd(a, b) = a*s + b*t
        """

    @staticmethod
    @abstractmethod
    def from_bytes(data: bytes, signed: bool = False) -> MPZ:
        """Read a big-endian integer.

        Args:
            data (bytes): Big-endian encoding
            signed (bool): Whether the encoding is two's complement

        Returns:
            mpz: Decoded integer
        """

    @staticmethod
    @abstractmethod
    def to_bytes(value: MPZ, length: int, signed: bool = False) -> bytes:
        """Write a fixed-width big-endian integer.

        Args:
            value (mpz): Integer to encode
            length (int): Output width in bytes
            signed (bool): Whether to use two's complement

        Returns:
            bytes: Big-endian encoding

        Raises:
            OverflowError: If the value does not fit in `length` bytes
        """
