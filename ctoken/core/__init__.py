"""
Confidential Token Core Data Structures
"""

from ctoken.core.types import Commitment, pubkey_from_bytes, pubkey_to_bytes
from ctoken.core.state import Account, Mint, ACCOUNT_LAYOUT, MINT_LAYOUT

__all__ = [
    # Types
    "Commitment",
    "pubkey_from_bytes",
    "pubkey_to_bytes",
    # Records
    "Account",
    "Mint",
    "ACCOUNT_LAYOUT",
    "MINT_LAYOUT",
]
