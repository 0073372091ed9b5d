import sys
import pytest
from gmpy2 import mpz
from vdf_proofs.class_group import ClassGroupElement
from vdf_proofs.converters import GroupElementCodec
from vdf_proofs.discriminant import DiscriminantFactory
from vdf_proofs.errors import MalformedProof, SizeOverflow


@pytest.mark.parametrize(
    "bit_length, expected",
    [(0, 1), (15, 1), (16, 2), (64, 5), (256, 17), (1024, 65), (2048, 129), (65535, 4096)],
)
def test_coordinate_size(bit_length, expected):
    assert GroupElementCodec.coordinate_size(bit_length) == expected


def test_element_size_is_two_coordinates():
    codec = GroupElementCodec(64)
    assert codec.get_coordinate_size() == 5
    assert codec.get_element_size() == 10


def test_coordinate_size_overflow():
    """S must keep 4·S within sys.maxsize."""
    with pytest.raises(SizeOverflow):
        GroupElementCodec.coordinate_size(sys.maxsize * 16)


def test_coordinate_size_at_limit():
    largest = (sys.maxsize // 4) * 16 - 16
    assert GroupElementCodec.coordinate_size(largest) == sys.maxsize // 4
    with pytest.raises(SizeOverflow):
        GroupElementCodec.coordinate_size(largest + 16)


def test_negative_bit_length_overflows():
    with pytest.raises(SizeOverflow):
        GroupElementCodec(-1)


def test_encode_small_element_layout():
    """(2, -1, 3) encodes as signed big-endian a || b."""
    codec = GroupElementCodec(16)
    element = ClassGroupElement(mpz(2), mpz(-1), mpz(3))
    assert codec.encode(element) == b"\x00\x02\xff\xff"


def test_decode_small_element():
    codec = GroupElementCodec(16)
    element = codec.decode(b"\x00\x02\xff\xff", mpz(-23))
    assert (element.get_a(), element.get_b(), element.get_c()) == (2, -1, 3)


def test_decode_generated_elements():
    discriminant = DiscriminantFactory.create(b"codec", 256)
    codec = GroupElementCodec(256)
    element = ClassGroupElement.generator(discriminant).pow(987654321)

    encoded = codec.encode(element)
    assert len(encoded) == codec.get_element_size()
    assert codec.decode(encoded, discriminant) == element


@pytest.mark.parametrize("data", [b"", b"\x00\x02\xff", b"\x00\x02\xff\xff\x00"])
def test_decode_wrong_length(data):
    with pytest.raises(MalformedProof):
        GroupElementCodec(16).decode(data, mpz(-23))


@pytest.mark.parametrize(
    "data",
    [
        b"\x00\x03\x00\x01",  # (3, 1, 2) is valid but not reduced
        b"\x00\x00\x00\x01",  # a = 0
        b"\xff\xfe\x00\x01",  # a < 0
        b"\x00\x05\x00\x01",  # 4a does not divide b^2 - Δ
    ],
)
def test_decode_rejects_non_canonical_bytes(data):
    with pytest.raises(MalformedProof):
        GroupElementCodec(16).decode(data, mpz(-23))
