"""
Confidential Token State Structures

Fixed-length Mint and Account records as stored by the ledger.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import ClassVar

import construct
from borsh_construct import CStruct, U64
from solders.pubkey import Pubkey

from ctoken.constants import ACCOUNT_LEN, MINT_LEN
from ctoken.core.layout import COMMITMENT, FLAG, PUBKEY, build, parse_exact
from ctoken.core.types import Commitment
from ctoken.errors import (
    InvalidAccountDataError,
    KeyLengthMismatchError,
    UninitializedAccountError,
)


MINT_LAYOUT = CStruct(
    "mint_authority" / PUBKEY,
    "supply" / U64,
    "is_initialized" / FLAG,
)

ACCOUNT_LAYOUT = CStruct(
    "mint" / PUBKEY,
    "is_initialized" / FLAG,
    "comm" / COMMITMENT,
)


def _parse_record(layout: construct.Construct, data: bytes, name: str, length: int):
    if len(data) != length:
        raise InvalidAccountDataError(
            name, f"expected {length} bytes, got {len(data)}"
        )
    try:
        return parse_exact(layout, data)
    except (construct.ConstructError, KeyLengthMismatchError) as e:
        raise InvalidAccountDataError(name, str(e)) from e


def _copy_into(dst: bytearray, packed: bytes, name: str) -> None:
    if len(dst) != len(packed):
        raise ValueError(
            f"{name} destination must be {len(packed)} bytes, got {len(dst)}"
        )
    dst[:] = packed


@dataclass
class Mint:
    """
    Token type record.

    SIZE: 41 bytes
    SERIALIZATION: mint_authority(32) || supply(u64 LE) || is_initialized(1)

    Supply is public; it only grows through verified mints.
    """
    LEN: ClassVar[int] = MINT_LEN

    mint_authority: Pubkey = field(default_factory=Pubkey.default)
    supply: int = 0
    is_initialized: bool = False

    def pack(self) -> bytes:
        """Serialize to exactly LEN bytes."""
        return build(
            MINT_LAYOUT,
            {
                "mint_authority": self.mint_authority,
                "supply": self.supply,
                "is_initialized": self.is_initialized,
            },
            "Mint",
        )

    def pack_into_slice(self, dst: bytearray) -> None:
        """Write the packed record over dst, which must be LEN bytes long."""
        _copy_into(dst, self.pack(), "Mint")

    @classmethod
    def unpack_unchecked(cls, data: bytes) -> Mint:
        """Decode a stored record without looking at is_initialized."""
        parsed = _parse_record(MINT_LAYOUT, data, "Mint", cls.LEN)
        return cls(
            mint_authority=parsed.mint_authority,
            supply=parsed.supply,
            is_initialized=parsed.is_initialized,
        )

    @classmethod
    def unpack(cls, data: bytes) -> Mint:
        """Decode a stored record that must already be initialized."""
        mint = cls.unpack_unchecked(data)
        if not mint.is_initialized:
            raise UninitializedAccountError("Mint")
        return mint


@dataclass
class Account:
    """
    Confidential balance record.

    SIZE: 65 bytes
    SERIALIZATION: mint(32) || is_initialized(1) || comm(32)
    """
    LEN: ClassVar[int] = ACCOUNT_LEN

    mint: Pubkey = field(default_factory=Pubkey.default)
    is_initialized: bool = False
    comm: Commitment = field(default_factory=Commitment.zero)

    def pack(self) -> bytes:
        """Serialize to exactly LEN bytes."""
        return build(
            ACCOUNT_LAYOUT,
            {
                "mint": self.mint,
                "is_initialized": self.is_initialized,
                "comm": self.comm,
            },
            "Account",
        )

    def pack_into_slice(self, dst: bytearray) -> None:
        """Write the packed record over dst, which must be LEN bytes long."""
        _copy_into(dst, self.pack(), "Account")

    @classmethod
    def unpack_unchecked(cls, data: bytes) -> Account:
        """Decode a stored record without looking at is_initialized."""
        parsed = _parse_record(ACCOUNT_LAYOUT, data, "Account", cls.LEN)
        return cls(
            mint=parsed.mint,
            is_initialized=parsed.is_initialized,
            comm=parsed.comm,
        )

    @classmethod
    def unpack(cls, data: bytes) -> Account:
        """Decode a stored record that must already be initialized."""
        account = cls.unpack_unchecked(data)
        if not account.is_initialized:
            raise UninitializedAccountError("Account")
        return account
