import gmpy2
from typing import Tuple
from .abstract.IMPC import IMPC
from .types import MPZ

# Miller-Rabin rounds on top of GMP's trial division
PRIMALITY_ROUNDS = 25


class MPC(IMPC):
    """Implementation of multi-precision computing operations."""

    @staticmethod
    def mpz(value: int) -> MPZ:
        return gmpy2.mpz(value)

    @staticmethod
    def powmod(base: MPZ, exp: MPZ, mod: MPZ) -> MPZ:
        return gmpy2.powmod(base, exp, mod)

    @staticmethod
    def is_prime(value: MPZ) -> bool:
        return bool(gmpy2.is_prime(value, PRIMALITY_ROUNDS))

    @staticmethod
    def gcdext(a: MPZ, b: MPZ) -> Tuple[MPZ, MPZ, MPZ]:
        return gmpy2.gcdext(a, b)

    @staticmethod
    def from_bytes(data: bytes, signed: bool = False) -> MPZ:
        return gmpy2.mpz(int.from_bytes(data, "big", signed=signed))

    @staticmethod
    def to_bytes(value: MPZ, length: int, signed: bool = False) -> bytes:
        return int(value).to_bytes(length, "big", signed=signed)
