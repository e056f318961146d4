"""
Confidential Token State Transitions
"""

from ctoken.state.processor import (
    AccountInfo,
    Processor,
    process_initialize_mint,
    process_mint,
    process_transfer,
    process_close_account,
)

__all__ = [
    "AccountInfo",
    "Processor",
    "process_initialize_mint",
    "process_mint",
    "process_transfer",
    "process_close_account",
]
