"""Converter for generated proofs."""

from ..database.entity.ProofEntity import ProofEntity


class ProofConverter:
    """Converter between generated proof bytes and ProofEntity."""

    @staticmethod
    def to_entity(
        scheme_name: str, iterations: int, bit_length: int, challenge: bytes, proof: bytes
    ) -> ProofEntity:
        """Convert a generated proof to a ProofEntity.

        Args:
            scheme_name (str): Scheme the proof was generated with
            iterations (int): Number of sequential squarings
            bit_length (int): Discriminant bit length
            challenge (bytes): The challenge bytes
            proof (bytes): The proof bytes

        Returns:
            ProofEntity: The database entity
        """
        if not proof:
            raise ValueError("A generated proof is required for conversion.")
        return ProofEntity(
            scheme=scheme_name,
            iterations=iterations,
            bit_length=bit_length,
            challenge_hex=bytes(challenge).hex(),
            proof_hex=bytes(proof).hex(),
        )

    @staticmethod
    def from_entity(entity: ProofEntity) -> bytes:
        """Read the proof bytes back from an entity."""
        return bytes.fromhex(entity.proof)
