import pytest
from vdf_proofs.errors import InvalidIterations
from vdf_proofs.protocol_constants import MAX_ITERATIONS
from vdf_proofs.vdf import PietrzakVDF, Scheme, VerifiableDelayFunctionFactory


@pytest.fixture
def vdf():
    return PietrzakVDF(bit_length=64)


def test_factory_creates_pietrzak():
    assert isinstance(VerifiableDelayFunctionFactory.create(Scheme.PIETRZAK, 64), PietrzakVDF)


@pytest.mark.parametrize(
    "iterations, expected", [(32, 0), (33, 1), (66, 2), (100, 2), (1000, 5), (1 << 20, 15)]
)
def test_round_count(iterations, expected):
    assert PietrzakVDF.round_count(iterations) == expected


@pytest.mark.parametrize("iterations", [66, 100, 1000])
def test_solve_and_verify(vdf, iterations):
    proof = vdf.solve(b"test", iterations)

    assert len(proof) == vdf.codec.get_element_size() * (1 + vdf.round_count(iterations))
    assert vdf.verify(b"test", iterations, proof)


def test_output_is_generator_squared(vdf):
    """The leading element is x^(2^t)."""
    proof = vdf.solve(b"test", 66)
    discriminant, x = vdf.setup(b"test")

    y = vdf.codec.decode(proof[: vdf.codec.get_element_size()], discriminant)
    assert y == vdf.iterate_squarings(x, 66)


@pytest.mark.parametrize("iterations", [65, 64, 0, 67])
def test_invalid_iterations(vdf, iterations):
    with pytest.raises(InvalidIterations):
        vdf.solve(b"test", iterations)
    assert not vdf.verify(b"test", iterations, b"\x00" * 30)


def test_verify_rejects_tampered_midpoint(vdf):
    proof = vdf.solve(b"test", 100)
    element_size = vdf.codec.get_element_size()
    # Replace the first midpoint with the output element
    tampered = proof[:element_size] + proof[:element_size] + proof[2 * element_size :]
    assert not vdf.verify(b"test", 100, tampered)


def test_verify_rejects_wrong_length(vdf):
    proof = vdf.solve(b"test", 66)
    assert not vdf.verify(b"test", 66, proof[:-1])
    assert not vdf.verify(b"test", 66, proof + b"\x00")


def test_verify_rejects_other_challenge(vdf):
    proof = vdf.solve(b"test", 66)
    assert not vdf.verify(b"other", 66, proof)


def test_iterations_above_maximum(vdf):
    """Even counts past the shared 64-bit bound are rejected like odd ones."""
    with pytest.raises(InvalidIterations):
        vdf.check_iterations(MAX_ITERATIONS + 1)
    vdf.check_iterations(MAX_ITERATIONS - 1)
