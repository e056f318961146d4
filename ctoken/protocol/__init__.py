"""
Confidential Token Instruction Protocol
"""

from ctoken.protocol.instruction import (
    InstructionTag,
    InitializeMint,
    MintTo,
    Transfer,
    CloseAccount,
    CTokenInstruction,
    pack,
    unpack,
)
from ctoken.protocol.builders import (
    initialize_mint,
    mint,
    transfer,
    close_account,
)

__all__ = [
    # Codec
    "InstructionTag",
    "InitializeMint",
    "MintTo",
    "Transfer",
    "CloseAccount",
    "CTokenInstruction",
    "pack",
    "unpack",
    # Builders
    "initialize_mint",
    "mint",
    "transfer",
    "close_account",
]
