"""
Confidential Token Binary Layouts

Borsh building blocks shared by records and instruction payloads.
All multi-byte integers are LITTLE-ENDIAN.
"""

from __future__ import annotations
from typing import Any

import construct
from borsh_construct import U8
from construct import ExprAdapter, FocusedSeq, OneOf, Terminated

from ctoken.constants import COMMITMENT_SIZE, PUBKEY_SIZE
from ctoken.core.types import Commitment, pubkey_from_bytes, pubkey_to_bytes


# 32-byte key, decoded to solders.pubkey.Pubkey
PUBKEY = ExprAdapter(
    construct.Bytes(PUBKEY_SIZE),
    decoder=lambda obj, ctx: pubkey_from_bytes(obj),
    encoder=lambda obj, ctx: pubkey_to_bytes(obj),
)

# 32-byte commitment, decoded to Commitment
COMMITMENT = ExprAdapter(
    construct.Bytes(COMMITMENT_SIZE),
    decoder=lambda obj, ctx: Commitment(obj),
    encoder=lambda obj, ctx: obj.serialize(),
)

# Borsh bool: a single byte that must be 0 or 1
FLAG = ExprAdapter(
    OneOf(U8, (0, 1)),
    decoder=lambda obj, ctx: bool(obj),
    encoder=lambda obj, ctx: int(obj),
)


def exact(layout: construct.Construct) -> construct.Construct:
    """Wrap a layout so parsing fails unless the input is fully consumed."""
    return FocusedSeq("value", "value" / layout, Terminated)


def parse_exact(layout: construct.Construct, data: bytes) -> Any:
    """
    Parse data with layout, rejecting short input and trailing bytes.

    Raises:
        construct.ConstructError: On any structural failure
        KeyLengthMismatchError: If a key field is malformed
    """
    return exact(layout).parse(bytes(data))


def build(layout: construct.Construct, value: Any, what: str) -> bytes:
    """
    Build bytes from value.

    Raises:
        ValueError: If a field cannot be represented by the layout
    """
    try:
        return layout.build(value)
    except construct.ConstructError as e:
        raise ValueError(f"Cannot serialize {what}: {e}") from e
