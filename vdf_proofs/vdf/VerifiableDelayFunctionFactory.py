from typing import Dict, Type

from .ClassGroupVDF import ClassGroupVDF
from .PietrzakVDF import PietrzakVDF
from .Scheme import Scheme
from .WesolowskiVDF import WesolowskiVDF
from .abstract.IVerifiableDelayFunction import IVerifiableDelayFunction


class VerifiableDelayFunctionFactory:
    """Factory selecting the scheme implementation for a Scheme value."""

    _SCHEMES: Dict[Scheme, Type[ClassGroupVDF]] = {
        Scheme.WESOLOWSKI: WesolowskiVDF,
        Scheme.PIETRZAK: PietrzakVDF,
    }

    @staticmethod
    def create(scheme: Scheme, bit_length: int) -> IVerifiableDelayFunction:
        """Create the scheme implementation.

        Args:
            scheme (Scheme): The proof scheme
            bit_length (int): Bit length of the discriminant

        Returns:
            IVerifiableDelayFunction: The scheme's solve/verify implementation
        """
        return VerifiableDelayFunctionFactory._SCHEMES[scheme](bit_length)
