"""
Confidential Token Value Types

Fixed-size values stored in records and carried by instructions.
"""

from __future__ import annotations
from dataclasses import dataclass, field

from solders.pubkey import Pubkey

from ctoken.constants import COMMITMENT_SIZE, PUBKEY_SIZE
from ctoken.errors import KeyLengthMismatchError


@dataclass(frozen=True, slots=True)
class Commitment:
    """
    Commitment to a hidden amount.

    SIZE: 32 bytes
    SERIALIZATION: raw bytes

    Opaque to this package: only stored, replaced wholesale, or handed
    to a verifier.
    """
    data: bytes = field(default_factory=lambda: bytes(COMMITMENT_SIZE))

    def __post_init__(self):
        if len(self.data) != COMMITMENT_SIZE:
            raise ValueError(
                f"Commitment must be {COMMITMENT_SIZE} bytes, got {len(self.data)}"
            )
        object.__setattr__(self, "data", bytes(self.data))

    def __bytes__(self) -> bytes:
        return self.data

    def __repr__(self) -> str:
        return f"Commitment({self.data.hex()[:16]}...)"

    @classmethod
    def zero(cls) -> Commitment:
        return cls(bytes(COMMITMENT_SIZE))

    def serialize(self) -> bytes:
        """Serialize to raw bytes."""
        return self.data


# ==============================================================================
# Key field adapter
# ==============================================================================

def pubkey_from_bytes(data: bytes) -> Pubkey:
    """
    Decode a stored key field.

    The input must be exactly 32 bytes; anything else raises
    KeyLengthMismatchError instead of being truncated or padded.
    """
    if len(data) != PUBKEY_SIZE:
        raise KeyLengthMismatchError(len(data), PUBKEY_SIZE)
    return Pubkey(bytes(data))


def pubkey_to_bytes(key: Pubkey) -> bytes:
    """Encode a key field: all 32 bytes of the key, unchanged."""
    if not isinstance(key, Pubkey):
        raise TypeError(f"Expected Pubkey, got {type(key).__name__}")
    return bytes(key)
