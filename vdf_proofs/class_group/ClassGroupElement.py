from typing import Self, Tuple

from ..mpc import MPC
from ..mpc.types import MPZ
from ..protocol_constants import GENERATOR_A, GENERATOR_B
from .abstract.IClassGroupElement import IClassGroupElement


class ClassGroupElement(IClassGroupElement):
    """Reduced positive definite binary quadratic form (a, b, c) of negative discriminant.

    Elements are immutable and always kept reduced, so equality of the
    coefficient triples is equality of classes.
    """

    __slots__ = ("_a", "_b", "_c")

    def __init__(self, a: MPZ, b: MPZ, c: MPZ) -> None:
        """Initialize from coefficients; they are reduced on construction.

        Args:
            a (MPZ): First coefficient, positive
            b (MPZ): Second coefficient
            c (MPZ): Third coefficient
        """
        self._a, self._b, self._c = ClassGroupElement._reduce(
            (MPC.mpz(a), MPC.mpz(b), MPC.mpz(c))
        )

    @classmethod
    def from_ab_discriminant(cls, a: MPZ, b: MPZ, discriminant: MPZ) -> Self:
        """Build the element (a, b, (b^2 - Δ) / 4a).

        Raises:
            ValueError: If Δ is not a negative value ≡ 1 (mod 4), or if no form
                with these coefficients has discriminant Δ
        """
        if discriminant >= 0:
            raise ValueError("Positive discriminant.")
        if discriminant % 4 != 1:
            raise ValueError("Invalid discriminant mod 4.")
        if a <= 0:
            raise ValueError("Positive definite form required.")
        numerator = b * b - discriminant
        if numerator % (4 * a) != 0:
            raise ValueError("No classgroup element given the discriminant.")
        return cls(a, b, numerator // (4 * a))

    @classmethod
    def generator(cls, discriminant: MPZ) -> Self:
        """The canonical generator (2, 1, (1 - Δ) / 8); Δ must be ≡ 1 (mod 8)."""
        return cls.from_ab_discriminant(
            MPC.mpz(GENERATOR_A), MPC.mpz(GENERATOR_B), discriminant
        )

    @classmethod
    def identity(cls, discriminant: MPZ) -> Self:
        return cls.from_ab_discriminant(MPC.mpz(1), MPC.mpz(1), discriminant)

    def get_a(self) -> MPZ:
        return self._a

    def get_b(self) -> MPZ:
        return self._b

    def get_c(self) -> MPZ:
        return self._c

    def discriminant(self) -> MPZ:
        return self._b * self._b - 4 * self._a * self._c

    def multiply(self, other: Self) -> Self:
        # Cohen, "A Course in Computational Algebraic Number Theory", Algorithm 5.4.7
        if self.discriminant() != other.discriminant():
            raise ValueError("Cannot compose forms of different discriminants.")
        a1, b1, c1 = self._a, self._b, self._c
        a2, b2, c2 = other._a, other._b, other._c
        if a1 > a2:
            a1, b1, c1, a2, b2, c2 = a2, b2, c2, a1, b1, c1

        s = (b1 + b2) // 2
        n = b2 - s

        if a2 % a1 == 0:
            y1 = 0
            d = a1
        else:
            d, u, _ = MPC.gcdext(a2, a1)
            y1 = u

        if s % d == 0:
            y2 = -1
            x2 = 0
            d1 = d
        else:
            d1, u, v = MPC.gcdext(s, d)
            x2 = u
            y2 = -v

        v1 = a1 // d1
        v2 = a2 // d1
        r = (y1 * y2 * n - x2 * c2) % v1
        b3 = b2 + 2 * v2 * r
        a3 = v1 * v2
        c3 = (c2 * d1 + r * (b2 + v2 * r)) // v1
        return self.__class__(a3, b3, c3)

    def square(self) -> Self:
        return self.multiply(self)

    def pow(self, exponent: int) -> Self:
        if exponent < 0:
            raise ValueError("Negative exponents are not supported.")
        result = self.identity(self.discriminant())
        # Left-to-right square and multiply
        for bit in bin(int(exponent))[2:]:
            result = result.square()
            if bit == "1":
                result = result.multiply(self)
        return result

    def is_reduced(self) -> bool:
        a, b, c = self._a, self._b, self._c
        return -a < b <= a <= c and (a != c or b >= 0)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ClassGroupElement):
            return NotImplemented
        return (self._a, self._b, self._c) == (other._a, other._b, other._c)

    def __hash__(self) -> int:
        return hash((int(self._a), int(self._b), int(self._c)))

    def __repr__(self):
        return f"<ClassGroupElement(a={self._a}, b={self._b}, c={self._c})>"

    # Private Methods
    # --------------

    @staticmethod
    def _normalize(form: Tuple[MPZ, MPZ, MPZ]) -> Tuple[MPZ, MPZ, MPZ]:
        """Move b into (-a, a]."""
        a, b, c = form
        if -a < b <= a:
            return a, b, c
        r = (a - b) // (2 * a)
        return a, b + 2 * r * a, a * r * r + b * r + c

    @staticmethod
    def _reduce(form: Tuple[MPZ, MPZ, MPZ]) -> Tuple[MPZ, MPZ, MPZ]:
        a, b, c = ClassGroupElement._normalize(form)
        while a > c or (a == c and b < 0):
            s = (c + b) // (c + c)
            a, b, c = c, -b + 2 * s * c, c * s * s - b * s + a
        return ClassGroupElement._normalize((a, b, c))
