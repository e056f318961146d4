"""
Confidential Token Proof Payloads

Proof-bearing data carried by Mint and Transfer instructions. The proof
bytes are opaque here; only a verifier interprets them.
"""

from __future__ import annotations
from dataclasses import dataclass

import construct
from borsh_construct import Bytes, CStruct, U64

from ctoken.constants import U64_MAX
from ctoken.core.layout import COMMITMENT, build, parse_exact
from ctoken.core.types import Commitment
from ctoken.errors import DeserializationError


MINT_DATA_LAYOUT = CStruct(
    "amount" / U64,
    "comm" / COMMITMENT,
    "proof" / Bytes,
)

TRANSFER_DATA_LAYOUT = CStruct(
    "amount_comm" / COMMITMENT,
    "proof" / Bytes,
)


@dataclass(frozen=True, slots=True)
class MintData:
    """
    Data for new tokens to mint.

    SERIALIZATION: amount(u64 LE) || comm(32) || u32 len || proof
    """
    amount: int
    comm: Commitment
    proof: bytes = b""

    def __post_init__(self):
        if not 0 <= self.amount <= U64_MAX:
            raise ValueError(f"Mint amount out of u64 range: {self.amount}")
        object.__setattr__(self, "proof", bytes(self.proof))

    def serialize(self) -> bytes:
        return build(
            MINT_DATA_LAYOUT,
            {"amount": self.amount, "comm": self.comm, "proof": self.proof},
            "MintData",
        )

    @classmethod
    def deserialize(cls, data: bytes) -> MintData:
        """
        Decode a mint payload; the whole input must be consumed.

        Raises:
            DeserializationError: On short, long, or malformed input
        """
        try:
            parsed = parse_exact(MINT_DATA_LAYOUT, data)
        except construct.ConstructError as e:
            raise DeserializationError("MintData", str(e)) from e
        return cls(amount=parsed.amount, comm=parsed.comm, proof=parsed.proof)


@dataclass(frozen=True, slots=True)
class TransferData:
    """
    Data for a transfer between two accounts of the same mint.

    SERIALIZATION: amount_comm(32) || u32 len || proof
    """
    amount_comm: Commitment
    proof: bytes = b""

    def __post_init__(self):
        object.__setattr__(self, "proof", bytes(self.proof))

    def serialize(self) -> bytes:
        return build(
            TRANSFER_DATA_LAYOUT,
            {"amount_comm": self.amount_comm, "proof": self.proof},
            "TransferData",
        )

    @classmethod
    def deserialize(cls, data: bytes) -> TransferData:
        """
        Decode a transfer payload; the whole input must be consumed.

        Raises:
            DeserializationError: On short, long, or malformed input
        """
        try:
            parsed = parse_exact(TRANSFER_DATA_LAYOUT, data)
        except construct.ConstructError as e:
            raise DeserializationError("TransferData", str(e)) from e
        return cls(amount_comm=parsed.amount_comm, proof=parsed.proof)
