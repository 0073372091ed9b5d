import uuid
from sqlalchemy import Column, Integer, String, Text

from ..mixins.saveable import Saveable
from ..database import get_orm_base

Base = get_orm_base()


class ProofEntity(Base, Saveable):
    """Database entity for storing generated VDF proofs."""

    __tablename__ = "vdf_proofs"

    id = Column(
        String, primary_key=True, default=lambda: str(uuid.uuid4())
    )  # Unique generated string ID
    scheme = Column(String, nullable=False)  # "wesolowski" or "pietrzak"
    iterations = Column(Integer, nullable=False)  # Number of sequential squarings t
    bit_length = Column(Integer, nullable=False)  # Discriminant bit length
    challenge = Column(Text, nullable=False)  # Hex string of the challenge bytes
    proof = Column(Text, nullable=False)  # Hex string of the proof bytes

    def __repr__(self):
        return f"<Proof(id={self.id}, scheme={self.scheme}, t={self.iterations}, bits={self.bit_length})>"

    def __init__(
        self, scheme: str, iterations: int, bit_length: int, challenge_hex: str, proof_hex: str
    ):
        """Initialize a proof entity.

        Args:
            scheme (str): Scheme name
            iterations (int): Number of sequential squarings
            bit_length (int): Discriminant bit length
            challenge_hex (str): Hex string of the challenge
            proof_hex (str): Hex string of the proof
        """
        self.id = str(uuid.uuid4())
        self.scheme = scheme
        self.iterations = iterations
        self.bit_length = bit_length
        self.challenge = challenge_hex
        self.proof = proof_hex
