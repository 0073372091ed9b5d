"""Fixed-width byte codec for class group elements."""

import sys

from ..class_group import ClassGroupElement
from ..errors import MalformedProof, SizeOverflow
from ..mpc import MPC
from ..mpc.types import MPZ


class GroupElementCodec:
    """Serializes an element as its coefficients a and b, each a signed big-endian integer of S bytes."""

    def __init__(self, bit_length: int) -> None:
        """Initialize the codec.

        Args:
            bit_length (int): Bit length of the discriminant the elements belong to

        Raises:
            SizeOverflow: If the coordinate width cannot be represented
        """
        self._coordinate_size = GroupElementCodec.coordinate_size(bit_length)

    @staticmethod
    def coordinate_size(bit_length: int) -> int:
        """Compute S = (bit_length + 16) >> 4.

        A Wesolowski proof holds four coordinates, so 4·S must stay within the
        platform's addressable size.
        """
        if bit_length < 0:
            raise SizeOverflow(f"negative bit_length {bit_length}")
        size = (bit_length + 16) >> 4
        if size > sys.maxsize // 4:
            raise SizeOverflow(f"bit_length {bit_length} overflows the proof size")
        return size

    def get_coordinate_size(self) -> int:
        return self._coordinate_size

    def get_element_size(self) -> int:
        return 2 * self._coordinate_size

    def encode(self, element: ClassGroupElement) -> bytes:
        try:
            return MPC.to_bytes(
                element.get_a(), self._coordinate_size, signed=True
            ) + MPC.to_bytes(element.get_b(), self._coordinate_size, signed=True)
        except OverflowError as e:
            raise SizeOverflow("element does not fit the coordinate width") from e

    def decode(self, data: bytes, discriminant: MPZ) -> ClassGroupElement:
        """Decode an element, accepting only the canonical (reduced) encoding.

        Raises:
            MalformedProof: If the length is wrong or the bytes are not a
                reduced element of discriminant Δ
        """
        if len(data) != self.get_element_size():
            raise MalformedProof(
                f"element must be {self.get_element_size()} bytes, got {len(data)}"
            )
        a = MPC.from_bytes(data[: self._coordinate_size], signed=True)
        b = MPC.from_bytes(data[self._coordinate_size :], signed=True)
        try:
            element = ClassGroupElement.from_ab_discriminant(a, b, discriminant)
        except ValueError as e:
            raise MalformedProof(str(e)) from e
        if element.get_a() != a or element.get_b() != b:
            raise MalformedProof("element is not in reduced form")
        return element
