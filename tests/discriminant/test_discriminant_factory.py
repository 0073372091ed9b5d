import gmpy2
import pytest
from vdf_proofs.discriminant import DiscriminantFactory
from vdf_proofs.errors import InvalidBitLength


@pytest.mark.parametrize("bit_length", [16, 17, 64, 255, 256, 1024])
def test_discriminant_properties(bit_length):
    """Δ is negative, ≡ 1 (mod 8), of the requested size, and -Δ is prime."""
    discriminant = DiscriminantFactory.create(b"seed", bit_length)

    assert discriminant < 0
    assert discriminant % 4 == 1
    assert discriminant % 8 == 1
    assert int(-discriminant).bit_length() == bit_length
    assert gmpy2.is_prime(-discriminant)


def test_discriminant_is_deterministic():
    assert DiscriminantFactory.create(b"test", 64) == DiscriminantFactory.create(b"test", 64)


def test_discriminant_depends_on_seed():
    assert DiscriminantFactory.create(b"seed-a", 256) != DiscriminantFactory.create(b"seed-b", 256)


def test_empty_seed_is_accepted():
    assert DiscriminantFactory.create(b"", 64) < 0


@pytest.mark.parametrize("bit_length", [0, 1, 15])
def test_bit_length_below_minimum_raises(bit_length):
    with pytest.raises(InvalidBitLength):
        DiscriminantFactory.create(b"seed", bit_length)


def test_expand_produces_requested_byte_count():
    assert len(DiscriminantFactory._expand(b"seed", 0, 100)) == 100
    assert DiscriminantFactory._expand(b"seed", 0, 32) != DiscriminantFactory._expand(b"seed", 1, 32)
