"""
Confidential Token Constants

All layout and protocol constants defined here for single source of truth.
All multi-byte integers are LITTLE-ENDIAN (Borsh).
"""

from typing import Final

# ==============================================================================
# FIELD SIZES
# ==============================================================================

PUBKEY_SIZE: Final[int] = 32                # Ledger public key
COMMITMENT_SIZE: Final[int] = 32            # Compressed commitment point
U64_SIZE: Final[int] = 8
BOOL_SIZE: Final[int] = 1

U64_MAX: Final[int] = 0xFFFFFFFFFFFFFFFF

# ==============================================================================
# RECORD LAYOUTS
# ==============================================================================

# Mint: mint_authority[0,32) || supply[32,40) || is_initialized[40,41)
MINT_LEN: Final[int] = PUBKEY_SIZE + U64_SIZE + BOOL_SIZE

# Account: mint[0,32) || is_initialized[32,33) || comm[33,65)
ACCOUNT_LEN: Final[int] = PUBKEY_SIZE + BOOL_SIZE + COMMITMENT_SIZE

# ==============================================================================
# INSTRUCTION TAGS
# ==============================================================================

TAG_INITIALIZE_MINT: Final[int] = 0
TAG_MINT: Final[int] = 1
TAG_TRANSFER: Final[int] = 2
TAG_CLOSE_ACCOUNT: Final[int] = 3

TAG_SIZE: Final[int] = 1
