from abc import ABC, abstractmethod
from typing import Self
from ...mpc.types import MPZ


class IClassGroupElement(ABC):
    """Abstract base class defining the class-group arithmetic used by the VDF schemes."""

    @abstractmethod
    def get_a(self) -> MPZ:
        """Get the first coefficient a of the reduced form."""

    @abstractmethod
    def get_b(self) -> MPZ:
        """Get the second coefficient b of the reduced form."""

    @abstractmethod
    def get_c(self) -> MPZ:
        """Get the third coefficient c of the reduced form."""

    @abstractmethod
    def discriminant(self) -> MPZ:
        """Get the discriminant b^2 - 4ac.

        Returns:
            MPZ: The discriminant of the form
        """

    @abstractmethod
    def multiply(self, other: Self) -> Self:
        """Compose two elements of the same class group.

        Args:
            other (IClassGroupElement): Element with the same discriminant

        Returns:
            IClassGroupElement: The reduced product
        """

    @abstractmethod
    def square(self) -> Self:
        """Compose the element with itself.

        Returns:
            IClassGroupElement: The reduced square
        """

    @abstractmethod
    def pow(self, exponent: int) -> Self:
        """Raise the element to a non-negative power.

        Args:
            exponent (int): Non-negative exponent

        Returns:
            IClassGroupElement: The reduced power
        """
