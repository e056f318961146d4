"""
Confidential Token Proof Payloads and Verifier Interface
"""

from ctoken.proof.data import MintData, TransferData
from ctoken.proof.verifier import CommitmentVerifier, MintEffect, TransferEffect

__all__ = [
    "MintData",
    "TransferData",
    "CommitmentVerifier",
    "MintEffect",
    "TransferEffect",
]
