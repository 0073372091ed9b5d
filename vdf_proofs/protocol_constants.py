# protocol_constants.py

DEFAULT_BIT_LENGTH = 2048           # Discriminant bit length
VALID_INT_SIZE_BITS = (1024, 2048, 3072, 4096)  # Sizes accepted by VDFLibrary
MIN_BIT_LENGTH = 16                 # Smallest discriminant that can be derived

PRIME_CHALLENGE_FLOOR = 1 << 16     # Lower bound for the Fiat-Shamir prime l
COUNTER_BYTES = 8                   # Little-endian counter appended to hashed transcripts

GENERATOR_A = 2                     # Canonical generator form (2, 1, c)
GENERATOR_B = 1

MAX_ITERATIONS = (1 << 64) - 1      # Upper bound on t for both schemes
PIETRZAK_MIN_ITERATIONS = 66        # Pietrzak iterations must be even and at least this
PIETRZAK_LEAF_ITERATIONS = 32       # Halving stops once t is at most this
PIETRZAK_CHALLENGE_BYTES = 16       # Width of the per-round Fiat-Shamir exponent

U16_MAX = (1 << 16) - 1
U32_MAX = (1 << 32) - 1
