"""
Confidential Token Test Fixtures
"""

import hashlib

import pytest
from solders.pubkey import Pubkey
from solders.sysvar import RENT

from ctoken.core.state import Account, Mint
from ctoken.core.types import Commitment
from ctoken.errors import VerificationError
from ctoken.proof.data import MintData, TransferData
from ctoken.proof.verifier import MintEffect, TransferEffect
from ctoken.state.processor import AccountInfo


REJECTED_PROOF = b"reject"


def _digest(*parts: bytes) -> Commitment:
    return Commitment(hashlib.sha256(b"".join(parts)).digest())


class FakeVerifier:
    """
    Deterministic stand-in for the proof verifier.

    Proofs equal to REJECTED_PROOF fail; everything else is accepted and
    the new commitments are hashes of the inputs.
    """

    def __init__(self):
        self.mint_calls = []
        self.transfer_calls = []

    def verify_mint(self, mint_data: MintData, destination_comm: Commitment) -> MintEffect:
        self.mint_calls.append((mint_data, destination_comm))
        if mint_data.proof == REJECTED_PROOF:
            raise VerificationError("Mint")
        return MintEffect(
            comm=_digest(b"add", destination_comm.data, mint_data.comm.data),
            amount=mint_data.amount,
        )

    def verify_transfer(
        self,
        transfer_data: TransferData,
        source_comm: Commitment,
        destination_comm: Commitment,
    ) -> TransferEffect:
        self.transfer_calls.append((transfer_data, source_comm, destination_comm))
        if transfer_data.proof == REJECTED_PROOF:
            raise VerificationError("Transfer")
        return TransferEffect(
            source_comm=_digest(b"sub", source_comm.data, transfer_data.amount_comm.data),
            destination_comm=_digest(b"add", destination_comm.data, transfer_data.amount_comm.data),
        )


def make_pubkey(seed: int) -> Pubkey:
    """Deterministic key from a small seed."""
    return Pubkey(bytes([(seed + i) % 256 for i in range(32)]))


@pytest.fixture
def verifier() -> FakeVerifier:
    return FakeVerifier()


@pytest.fixture
def program_id() -> Pubkey:
    return make_pubkey(200)


@pytest.fixture
def mint_key() -> Pubkey:
    return make_pubkey(1)


@pytest.fixture
def authority_key() -> Pubkey:
    return make_pubkey(50)


@pytest.fixture
def account_key() -> Pubkey:
    return make_pubkey(100)


@pytest.fixture
def other_account_key() -> Pubkey:
    return make_pubkey(150)


@pytest.fixture
def mock_commitment() -> Commitment:
    return Commitment(bytes([(i * 7) % 256 for i in range(32)]))


@pytest.fixture
def mint_data(mock_commitment) -> MintData:
    return MintData(amount=1000, comm=mock_commitment, proof=b"mint-proof")


@pytest.fixture
def transfer_data(mock_commitment) -> TransferData:
    return TransferData(amount_comm=mock_commitment, proof=b"transfer-proof")


@pytest.fixture
def blank_mint_info(mint_key) -> AccountInfo:
    return AccountInfo(key=mint_key, data=bytearray(Mint.LEN), is_writable=True)


@pytest.fixture
def rent_info() -> AccountInfo:
    return AccountInfo(key=RENT, data=bytearray())


@pytest.fixture
def live_mint_info(mint_key, authority_key) -> AccountInfo:
    mint = Mint(mint_authority=authority_key, supply=0, is_initialized=True)
    return AccountInfo(key=mint_key, data=bytearray(mint.pack()), is_writable=True)


@pytest.fixture
def authority_info(authority_key) -> AccountInfo:
    return AccountInfo(key=authority_key, data=bytearray(), is_signer=True)


@pytest.fixture
def blank_account_info(account_key) -> AccountInfo:
    return AccountInfo(key=account_key, data=bytearray(Account.LEN), is_writable=True)


def make_live_account_info(key: Pubkey, mint: Pubkey, comm: Commitment) -> AccountInfo:
    account = Account(mint=mint, is_initialized=True, comm=comm)
    return AccountInfo(key=key, data=bytearray(account.pack()), is_writable=True)
