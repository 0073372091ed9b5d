import pytest
from gmpy2 import mpz
from unittest.mock import patch
from vdf_proofs.class_group import ClassGroupElement
from vdf_proofs.primes import PrimeChallengeOracle
from vdf_proofs.verifier import FastVerifier


def reference_remainder(iterations, l):
    """2^t mod l by plain right-to-left square and multiply."""
    result, base, exponent = 1, 2 % l, iterations
    while exponent:
        if exponent & 1:
            result = result * base % l
        base = base * base % l
        exponent >>= 1
    return result


@pytest.mark.parametrize("iterations", [0, 1, 2, 1000, (1 << 32) - 1, (1 << 63) - 1])
@pytest.mark.parametrize("l", [65537, 4294967311, 18446744073709551557])
def test_challenge_remainder_matches_reference(iterations, l):
    assert FastVerifier.challenge_remainder(iterations, mpz(l)) == reference_remainder(iterations, l)


def test_challenge_remainder_zero_iterations_is_one():
    assert FastVerifier.challenge_remainder(0, mpz(65537)) == 1


@pytest.fixture
def small_group():
    """Class group of discriminant -23, which has order 3."""
    return ClassGroupElement.generator(mpz(-23))


def test_verify_accepts_consistent_proof(small_group):
    """A proof satisfying y = π^l · x^r is accepted."""
    x = small_group
    pi = x.square()
    l = mpz(65537)
    y = pi.pow(l).multiply(x.pow(FastVerifier.challenge_remainder(10, l)))

    with patch.object(PrimeChallengeOracle, "hash_to_prime", return_value=l):
        verifier = FastVerifier()
        assert verifier.verify(x, y, pi, 10, b"test", b"pi")


def test_verify_rejects_wrong_output(small_group):
    """Changing y breaks the equation."""
    x = small_group
    pi = x.square()
    l = mpz(65537)
    y = pi.pow(l).multiply(x.pow(FastVerifier.challenge_remainder(10, l)))
    wrong_y = y.multiply(x)

    with patch.object(PrimeChallengeOracle, "hash_to_prime", return_value=l):
        verifier = FastVerifier()
        assert not verifier.verify(x, wrong_y, pi, 10, b"test", b"pi")


def test_verify_hashes_challenge_and_proof_bytes(small_group):
    """The prime is derived from challenge || proof bytes."""
    x = small_group
    with patch.object(PrimeChallengeOracle, "hash_to_prime", return_value=mpz(65537)) as mock_hash:
        FastVerifier().verify(x, x, x, 3, b"chal", b"proof")

    mock_hash.assert_called_once_with(b"chalproof")
