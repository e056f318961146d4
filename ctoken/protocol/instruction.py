"""
Confidential Token Instruction Codec

Wire format: tag(1) || payload

    tag 0  InitializeMint   mint_authority(32)
    tag 1  Mint             MintData (Borsh)
    tag 2  Transfer         TransferData (Borsh)
    tag 3  CloseAccount     (empty)

Decoding is pure parsing: no proof verification, no state access.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from enum import IntEnum
from typing import ClassVar, Union

from solders.pubkey import Pubkey

from ctoken.constants import (
    PUBKEY_SIZE,
    TAG_CLOSE_ACCOUNT,
    TAG_INITIALIZE_MINT,
    TAG_MINT,
    TAG_TRANSFER,
)
from ctoken.core.types import pubkey_from_bytes, pubkey_to_bytes
from ctoken.errors import InvalidInstructionError
from ctoken.proof.data import MintData, TransferData

logger = logging.getLogger(__name__)


class InstructionTag(IntEnum):
    """Leading byte of every instruction."""
    INITIALIZE_MINT = TAG_INITIALIZE_MINT
    MINT = TAG_MINT
    TRANSFER = TAG_TRANSFER
    CLOSE_ACCOUNT = TAG_CLOSE_ACCOUNT


@dataclass(frozen=True, slots=True)
class InitializeMint:
    """
    Initializes a new mint.

    Accounts expected:
        0. [writable] The mint to initialize.
        1. [] Rent sysvar.
    """
    TAG: ClassVar[InstructionTag] = InstructionTag.INITIALIZE_MINT

    mint_authority: Pubkey

    def pack(self) -> bytes:
        return bytes([self.TAG]) + pubkey_to_bytes(self.mint_authority)


@dataclass(frozen=True, slots=True)
class MintTo:
    """
    Mints new tokens into an account, initializing it on first use.

    Accounts expected:
        0. [writable] The mint.
        1. [writable] The account to mint tokens to.
        2. [signer] The mint's minting authority.
    """
    TAG: ClassVar[InstructionTag] = InstructionTag.MINT

    mint_data: MintData

    def pack(self) -> bytes:
        return bytes([self.TAG]) + self.mint_data.serialize()


@dataclass(frozen=True, slots=True)
class Transfer:
    """
    Transfers tokens between two accounts.

    No account signs: the proof in transfer_data is the authorization.

    Accounts expected:
        0. [writable] The source account.
        1. [writable] The destination account.
    """
    TAG: ClassVar[InstructionTag] = InstructionTag.TRANSFER

    transfer_data: TransferData

    def pack(self) -> bytes:
        return bytes([self.TAG]) + self.transfer_data.serialize()


@dataclass(frozen=True, slots=True)
class CloseAccount:
    """
    Closes an account, moving its value out of the confidential ledger.

    Accounts expected:
        0. [writable] The source account.
        1. [writable] The destination account.
    """
    TAG: ClassVar[InstructionTag] = InstructionTag.CLOSE_ACCOUNT

    def pack(self) -> bytes:
        return bytes([self.TAG])


CTokenInstruction = Union[InitializeMint, MintTo, Transfer, CloseAccount]


def pack(instruction: CTokenInstruction) -> bytes:
    """Encode an instruction: tag byte followed by its payload."""
    return instruction.pack()


def unpack_pubkey(data: bytes) -> tuple[Pubkey, bytes]:
    """
    Split a leading key off data.

    Returns (key, rest).

    Raises:
        InvalidInstructionError: If fewer than 32 bytes are available
    """
    if len(data) < PUBKEY_SIZE:
        raise InvalidInstructionError(
            f"Expected {PUBKEY_SIZE} key bytes, got {len(data)}"
        )
    return pubkey_from_bytes(data[:PUBKEY_SIZE]), data[PUBKEY_SIZE:]


def unpack(data: bytes, strict: bool = False) -> CTokenInstruction:
    """
    Decode instruction bytes.

    Fixed-size payloads (InitializeMint, CloseAccount) ignore trailing
    bytes unless strict is set. Proof payloads are always decoded
    strictly.

    Args:
        data: Raw instruction data
        strict: Reject trailing bytes after fixed-size payloads

    Raises:
        InvalidInstructionError: Empty input, unknown tag, short key, or
            trailing bytes in strict mode
        DeserializationError: Malformed proof payload
    """
    data = bytes(data)
    if not data:
        raise InvalidInstructionError("Empty instruction data")

    tag, rest = data[0], data[1:]

    if tag == InstructionTag.INITIALIZE_MINT:
        mint_authority, rest = unpack_pubkey(rest)
        _check_trailing(rest, strict, "InitializeMint")
        return InitializeMint(mint_authority=mint_authority)

    if tag == InstructionTag.MINT:
        return MintTo(mint_data=MintData.deserialize(rest))

    if tag == InstructionTag.TRANSFER:
        return Transfer(transfer_data=TransferData.deserialize(rest))

    if tag == InstructionTag.CLOSE_ACCOUNT:
        _check_trailing(rest, strict, "CloseAccount")
        return CloseAccount()

    raise InvalidInstructionError(f"Unknown instruction tag: {tag}")


def _check_trailing(rest: bytes, strict: bool, name: str) -> None:
    if not rest:
        return
    if strict:
        raise InvalidInstructionError(
            f"{name} has {len(rest)} unexpected trailing bytes"
        )
    logger.debug(f"Ignoring {len(rest)} trailing bytes after {name}")
