"""VDF scheme module."""

from .Scheme import Scheme
from .ClassGroupVDF import ClassGroupVDF
from .WesolowskiVDF import WesolowskiVDF
from .PietrzakVDF import PietrzakVDF
from .VerifiableDelayFunctionFactory import VerifiableDelayFunctionFactory
from .abstract.IVerifiableDelayFunction import IVerifiableDelayFunction

__all__ = [
    "Scheme",
    "ClassGroupVDF",
    "WesolowskiVDF",
    "PietrzakVDF",
    "VerifiableDelayFunctionFactory",
    "IVerifiableDelayFunction",
]
