"""
Confidential Token Processor

State transitions: initialize_mint, mint, transfer, close_account.

Every handler loads and checks all records and runs the verifier before
writing anything back; a raised error leaves account data untouched.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

from solders.pubkey import Pubkey
from solders.sysvar import RENT

from ctoken.config import ProgramConfig
from ctoken.constants import U64_MAX
from ctoken.core.state import Account, Mint
from ctoken.core.types import Commitment
from ctoken.errors import (
    AccountNotWritableError,
    AlreadyInitializedError,
    AuthorityMismatchError,
    DuplicateAccountError,
    InvalidSysvarError,
    MintMismatchError,
    MissingRequiredSignatureError,
    NotEnoughAccountKeysError,
    SupplyOverflowError,
    UninitializedAccountError,
)
from ctoken.proof.data import MintData, TransferData
from ctoken.proof.verifier import CommitmentVerifier, MintEffect, TransferEffect
from ctoken.protocol.instruction import (
    CloseAccount,
    CTokenInstruction,
    InitializeMint,
    MintTo,
    Transfer,
    unpack,
)

logger = logging.getLogger(__name__)


@dataclass
class AccountInfo:
    """Account handed to the processor by the ledger environment."""
    key: Pubkey
    data: bytearray
    is_signer: bool = False
    is_writable: bool = False


def _short(key: Pubkey) -> str:
    return bytes(key).hex()[:16]


def _expect_accounts(accounts: Sequence[AccountInfo], count: int) -> None:
    if len(accounts) < count:
        raise NotEnoughAccountKeysError(len(accounts), count)


def _expect_writable(info: AccountInfo) -> None:
    if not info.is_writable:
        raise AccountNotWritableError(bytes(info.key))


def process_initialize_mint(
    accounts: Sequence[AccountInfo],
    mint_authority: Pubkey,
) -> None:
    """
    Initialize a blank mint.

    Accounts: [mint (writable), rent sysvar]

    Raises:
        AlreadyInitializedError: If the mint is live
        InvalidAccountDataError: If the mint data is not a Mint record
    """
    _expect_accounts(accounts, 2)
    mint_info, rent_info = accounts[0], accounts[1]
    _expect_writable(mint_info)

    if rent_info.key != RENT:
        raise InvalidSysvarError(bytes(RENT), bytes(rent_info.key))

    mint = Mint.unpack_unchecked(mint_info.data)
    if mint.is_initialized:
        raise AlreadyInitializedError("Mint", bytes(mint_info.key))

    new_mint = Mint(
        mint_authority=mint_authority,
        supply=0,
        is_initialized=True,
    )
    new_mint.pack_into_slice(mint_info.data)

    logger.debug(
        f"Initialized mint {_short(mint_info.key)}, "
        f"authority={_short(mint_authority)}"
    )


def process_mint(
    accounts: Sequence[AccountInfo],
    mint_data: MintData,
    verifier: CommitmentVerifier,
) -> None:
    """
    Mint tokens into an account.

    Accounts: [mint (writable), destination (writable), authority (signer)]

    A blank destination is initialized for this mint. Supply grows by the
    amount the verifier attests.

    Raises:
        UninitializedAccountError: If the mint is blank
        MissingRequiredSignatureError: If the authority did not sign
        AuthorityMismatchError: If the signer is not the mint authority
        MintMismatchError: If the destination belongs to another mint
        SupplyOverflowError: If supply would exceed u64
        VerificationError: Propagated from the verifier
    """
    _expect_accounts(accounts, 3)
    mint_info, dest_info, authority_info = accounts[0], accounts[1], accounts[2]
    _expect_writable(mint_info)
    _expect_writable(dest_info)

    mint = Mint.unpack(mint_info.data)
    if not authority_info.is_signer:
        raise MissingRequiredSignatureError(bytes(authority_info.key))
    if authority_info.key != mint.mint_authority:
        raise AuthorityMismatchError(
            bytes(mint.mint_authority), bytes(authority_info.key)
        )

    dest = Account.unpack_unchecked(dest_info.data)
    if dest.is_initialized:
        if dest.mint != mint_info.key:
            raise MintMismatchError(bytes(mint_info.key), bytes(dest.mint))
        current_comm = dest.comm
    else:
        current_comm = Commitment.zero()

    effect = verifier.verify_mint(mint_data, current_comm)
    if not isinstance(effect, MintEffect):
        raise TypeError(f"Verifier returned {type(effect).__name__}, expected MintEffect")

    new_supply = mint.supply + effect.amount
    if new_supply > U64_MAX:
        raise SupplyOverflowError(mint.supply, effect.amount)

    new_mint = Mint(
        mint_authority=mint.mint_authority,
        supply=new_supply,
        is_initialized=True,
    )
    new_dest = Account(
        mint=mint_info.key,
        is_initialized=True,
        comm=effect.comm,
    )
    packed_mint = new_mint.pack()
    packed_dest = new_dest.pack()
    mint_info.data[:] = packed_mint
    dest_info.data[:] = packed_dest

    logger.debug(
        f"Minted into {_short(dest_info.key)} from mint {_short(mint_info.key)}, "
        f"supply={new_supply}"
    )


def process_transfer(
    accounts: Sequence[AccountInfo],
    transfer_data: TransferData,
    verifier: CommitmentVerifier,
) -> None:
    """
    Replace source and destination commitments with verified ones.

    Accounts: [source (writable), destination (writable)]

    No signature is checked; the proof authorizes the transfer.

    Raises:
        DuplicateAccountError: If source and destination are the same
        UninitializedAccountError: If either account is blank
        MintMismatchError: If the accounts belong to different mints
        VerificationError: Propagated from the verifier
    """
    _expect_accounts(accounts, 2)
    source_info, dest_info = accounts[0], accounts[1]
    _expect_writable(source_info)
    _expect_writable(dest_info)

    if source_info.key == dest_info.key:
        raise DuplicateAccountError(bytes(source_info.key))

    source = Account.unpack(source_info.data)
    dest = Account.unpack(dest_info.data)
    if source.mint != dest.mint:
        raise MintMismatchError(bytes(source.mint), bytes(dest.mint))

    effect = verifier.verify_transfer(transfer_data, source.comm, dest.comm)
    if not isinstance(effect, TransferEffect):
        raise TypeError(f"Verifier returned {type(effect).__name__}, expected TransferEffect")

    source.comm = effect.source_comm
    dest.comm = effect.destination_comm
    packed_source = source.pack()
    packed_dest = dest.pack()
    source_info.data[:] = packed_source
    dest_info.data[:] = packed_dest

    logger.debug(
        f"Transferred {_short(source_info.key)} -> {_short(dest_info.key)}"
    )


def process_close_account(accounts: Sequence[AccountInfo]) -> None:
    """
    Close an account by blanking its record.

    Accounts: [source (writable), destination (writable)]

    Moving the equivalent value to the destination is left to the ledger
    environment.
    """
    _expect_accounts(accounts, 2)
    source_info, dest_info = accounts[0], accounts[1]
    _expect_writable(source_info)
    _expect_writable(dest_info)

    if source_info.key == dest_info.key:
        raise DuplicateAccountError(bytes(source_info.key))

    source = Account.unpack_unchecked(source_info.data)
    if not source.is_initialized:
        raise UninitializedAccountError("Account", bytes(source_info.key))

    Account().pack_into_slice(source_info.data)

    logger.debug(
        f"Closed {_short(source_info.key)}, destination={_short(dest_info.key)}"
    )


class Processor:
    """
    Decodes instruction data and applies it to the given accounts.

    Usage::

        processor = Processor(verifier, ProgramConfig.load(path))
        processor.process(accounts, instruction_data)
    """

    def __init__(
        self,
        verifier: CommitmentVerifier,
        config: Optional[ProgramConfig] = None,
    ):
        self.verifier = verifier
        self.config = config or ProgramConfig()
        errors = self.config.validate()
        if errors:
            raise ValueError("Invalid configuration: " + "; ".join(errors))

    def process(self, accounts: List[AccountInfo], data: bytes) -> CTokenInstruction:
        """
        Process one instruction.

        Returns:
            The decoded instruction that was applied

        Raises:
            CTokenError: On any failure; account data is then unchanged
        """
        instruction = unpack(data, strict=self.config.codec.strict_payload_length)
        self.apply(accounts, instruction)
        return instruction

    def apply(self, accounts: List[AccountInfo], instruction: CTokenInstruction) -> None:
        """Apply an already decoded instruction."""
        if isinstance(instruction, InitializeMint):
            logger.debug("Instruction: InitializeMint")
            process_initialize_mint(accounts, instruction.mint_authority)
        elif isinstance(instruction, MintTo):
            logger.debug("Instruction: Mint")
            process_mint(accounts, instruction.mint_data, self.verifier)
        elif isinstance(instruction, Transfer):
            logger.debug("Instruction: Transfer")
            process_transfer(accounts, instruction.transfer_data, self.verifier)
        elif isinstance(instruction, CloseAccount):
            logger.debug("Instruction: CloseAccount")
            process_close_account(accounts)
        else:
            raise TypeError(f"Unknown instruction: {instruction!r}")
