"""
Confidential Token Instruction Builders

Assemble ledger instructions with the account order the processor
reads positionally.
"""

from __future__ import annotations

from solders.instruction import AccountMeta, Instruction
from solders.pubkey import Pubkey
from solders.sysvar import RENT

from ctoken.proof.data import MintData, TransferData
from ctoken.protocol.instruction import CloseAccount, InitializeMint, MintTo, Transfer


def initialize_mint(
    program_id: Pubkey,
    mint: Pubkey,
    mint_authority: Pubkey,
) -> Instruction:
    """
    Create an InitializeMint instruction.

    Accounts: [mint (writable), rent sysvar (readonly)]
    """
    data = InitializeMint(mint_authority=mint_authority).pack()
    accounts = [
        AccountMeta(mint, is_signer=False, is_writable=True),
        AccountMeta(RENT, is_signer=False, is_writable=False),
    ]
    return Instruction(program_id, data, accounts)


def mint(
    program_id: Pubkey,
    mint: Pubkey,
    account: Pubkey,
    authority: Pubkey,
    mint_data: MintData,
) -> Instruction:
    """
    Create a Mint instruction.

    Accounts: [mint (writable), destination (writable),
               authority (readonly, signer)]
    """
    data = MintTo(mint_data=mint_data).pack()
    accounts = [
        AccountMeta(mint, is_signer=False, is_writable=True),
        AccountMeta(account, is_signer=False, is_writable=True),
        AccountMeta(authority, is_signer=True, is_writable=False),
    ]
    return Instruction(program_id, data, accounts)


def transfer(
    program_id: Pubkey,
    source: Pubkey,
    destination: Pubkey,
    transfer_data: TransferData,
) -> Instruction:
    """
    Create a Transfer instruction.

    Accounts: [source (writable), destination (writable)]. Nobody signs.
    """
    data = Transfer(transfer_data=transfer_data).pack()
    accounts = [
        AccountMeta(source, is_signer=False, is_writable=True),
        AccountMeta(destination, is_signer=False, is_writable=True),
    ]
    return Instruction(program_id, data, accounts)


def close_account(
    program_id: Pubkey,
    source: Pubkey,
    destination: Pubkey,
) -> Instruction:
    """Create a CloseAccount instruction."""
    accounts = [
        AccountMeta(source, is_signer=False, is_writable=True),
        AccountMeta(destination, is_signer=False, is_writable=True),
    ]
    return Instruction(program_id, CloseAccount().pack(), accounts)
