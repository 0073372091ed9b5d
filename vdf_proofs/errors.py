"""Errors raised while generating or checking VDF proofs."""


class VDFError(Exception):
    """VDF computation or verification error."""


class InvalidIterations(VDFError):
    """Iteration count outside the range the scheme accepts."""


class MalformedProof(VDFError):
    """Proof bytes with the wrong length or that do not decode to group elements."""


class SizeOverflow(VDFError):
    """Bit length whose derived byte width cannot be represented."""


class InvalidBitLength(VDFError):
    """Bit length too small to derive a discriminant."""


class InvalidHandle(VDFError):
    """Proof handle that is unknown or already released."""


class BufferTooSmall(VDFError):
    """Caller-provided output buffer cannot hold the proof."""


class GenerationFailed(VDFError):
    """Proof generation reported a failure status."""
