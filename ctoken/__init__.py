"""
Confidential Token Core

Instruction codec and fixed-layout state records for a token ledger
whose balances are commitments and whose value-moving instructions are
authorized by externally verified proofs.
"""

__version__ = "0.1.0"

from ctoken.constants import ACCOUNT_LEN, MINT_LEN
from ctoken.core.state import Account, Mint
from ctoken.core.types import Commitment
from ctoken.protocol.instruction import pack, unpack

__all__ = [
    "ACCOUNT_LEN",
    "MINT_LEN",
    "Account",
    "Mint",
    "Commitment",
    "pack",
    "unpack",
    "__version__",
]
