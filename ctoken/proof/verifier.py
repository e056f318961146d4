"""
Confidential Token Verifier Interface

The commitment and proof mathematics live outside this package. The
processor only depends on this interface and stores what it attests.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Protocol

from ctoken.constants import U64_MAX
from ctoken.core.types import Commitment
from ctoken.proof.data import MintData, TransferData


@dataclass(frozen=True, slots=True)
class MintEffect:
    """Attested result of a mint proof."""
    comm: Commitment        # New destination commitment
    amount: int             # Plaintext supply increase

    def __post_init__(self):
        if not isinstance(self.comm, Commitment):
            raise TypeError(f"comm must be a Commitment, got {type(self.comm).__name__}")
        if not 0 <= self.amount <= U64_MAX:
            raise ValueError(f"Mint amount out of u64 range: {self.amount}")


@dataclass(frozen=True, slots=True)
class TransferEffect:
    """Attested result of a transfer proof."""
    source_comm: Commitment
    destination_comm: Commitment

    def __post_init__(self):
        for name in ("source_comm", "destination_comm"):
            value = getattr(self, name)
            if not isinstance(value, Commitment):
                raise TypeError(f"{name} must be a Commitment, got {type(value).__name__}")


class CommitmentVerifier(Protocol):
    """
    Proof verifier consumed by the processor.

    Implementations raise VerificationError when a proof is invalid and
    must not mutate their arguments.
    """

    def verify_mint(
        self,
        mint_data: MintData,
        destination_comm: Commitment,
    ) -> MintEffect:
        ...

    def verify_transfer(
        self,
        transfer_data: TransferData,
        source_comm: Commitment,
        destination_comm: Commitment,
    ) -> TransferEffect:
        ...
