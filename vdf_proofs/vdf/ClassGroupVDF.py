from typing import Tuple

from ..class_group import ClassGroupElement
from ..converters.group_element_codec import GroupElementCodec
from ..discriminant import DiscriminantFactory, IDiscriminantFactory
from ..mpc.types import MPZ
from .abstract.IVerifiableDelayFunction import IVerifiableDelayFunction


class ClassGroupVDF(IVerifiableDelayFunction):
    """Shared setup for schemes working in the class group of a challenge-derived discriminant."""

    def __init__(
        self, bit_length: int, discriminant_factory: IDiscriminantFactory = None
    ) -> None:
        """Initialize the scheme.

        Args:
            bit_length (int): Bit length of the discriminant
            discriminant_factory (IDiscriminantFactory): Discriminant derivation, defaults to DiscriminantFactory
        """
        self.bit_length = bit_length
        self.codec = GroupElementCodec(bit_length)
        self._discriminant_factory = discriminant_factory or DiscriminantFactory()

    def setup(self, challenge: bytes) -> Tuple[MPZ, ClassGroupElement]:
        """Derive the discriminant for a challenge and the generator under it."""
        discriminant = self._discriminant_factory.create(bytes(challenge), self.bit_length)
        return discriminant, ClassGroupElement.generator(discriminant)

    @staticmethod
    def iterate_squarings(element: ClassGroupElement, iterations: int) -> ClassGroupElement:
        """Square an element `iterations` times, one after the other."""
        for _ in range(iterations):
            element = element.square()
        return element
