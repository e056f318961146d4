"""
Confidential Token Proof Payload Tests
"""

import pytest

from ctoken.constants import U64_MAX
from ctoken.core.types import Commitment
from ctoken.errors import DeserializationError, ErrorCode
from ctoken.proof.data import MintData, TransferData
from ctoken.proof.verifier import MintEffect, TransferEffect


class TestMintData:
    """Tests for MintData payload."""

    def test_layout(self, mock_commitment):
        """Test amount LE, commitment, u32-prefixed proof."""
        data = MintData(amount=5, comm=mock_commitment, proof=b"\x01\x02").serialize()
        assert data[0:8] == (5).to_bytes(8, "little")
        assert data[8:40] == mock_commitment.data
        assert data[40:44] == (2).to_bytes(4, "little")
        assert data[44:] == b"\x01\x02"

    def test_round_trip(self, mint_data):
        """Test deserialize(serialize(data)) == data."""
        assert MintData.deserialize(mint_data.serialize()) == mint_data

    def test_empty_proof(self, mock_commitment):
        """Test an empty proof still encodes its length prefix."""
        md = MintData(amount=0, comm=mock_commitment)
        assert len(md.serialize()) == 8 + 32 + 4

    def test_amount_range(self, mock_commitment):
        """Test amounts outside u64 are rejected."""
        with pytest.raises(ValueError):
            MintData(amount=-1, comm=mock_commitment)
        with pytest.raises(ValueError):
            MintData(amount=U64_MAX + 1, comm=mock_commitment)

    def test_truncated(self, mint_data):
        """Test short input fails."""
        encoded = mint_data.serialize()
        with pytest.raises(DeserializationError) as exc_info:
            MintData.deserialize(encoded[:-1])
        assert exc_info.value.code == ErrorCode.DESERIALIZATION_FAILED

    def test_trailing_bytes(self, mint_data):
        """Test trailing bytes fail."""
        with pytest.raises(DeserializationError):
            MintData.deserialize(mint_data.serialize() + b"\x00")

    def test_empty_input(self):
        """Test empty input fails."""
        with pytest.raises(DeserializationError):
            MintData.deserialize(b"")


class TestTransferData:
    """Tests for TransferData payload."""

    def test_round_trip(self, transfer_data):
        """Test deserialize(serialize(data)) == data."""
        assert TransferData.deserialize(transfer_data.serialize()) == transfer_data

    def test_length_prefix_overrun(self, mock_commitment):
        """Test a proof length larger than the remaining bytes fails."""
        encoded = mock_commitment.data + (100).to_bytes(4, "little") + b"abc"
        with pytest.raises(DeserializationError) as exc_info:
            TransferData.deserialize(encoded)
        assert exc_info.value.details["type"] == "TransferData"

    def test_trailing_bytes(self, transfer_data):
        """Test trailing bytes fail."""
        with pytest.raises(DeserializationError):
            TransferData.deserialize(transfer_data.serialize() + b"extra")


class TestEffects:
    """Tests for verifier result types."""

    def test_mint_effect_amount_range(self):
        """Test a mint effect cannot carry a negative amount."""
        with pytest.raises(ValueError):
            MintEffect(comm=Commitment.zero(), amount=-1)

    def test_mint_effect_requires_commitment(self):
        """Test raw bytes are not accepted as a commitment."""
        with pytest.raises(TypeError):
            MintEffect(comm=bytes(32), amount=5)

    @pytest.mark.parametrize("field", ["source_comm", "destination_comm"])
    def test_transfer_effect_requires_commitment(self, field):
        """Test both transfer commitments must be Commitment values."""
        comms = {"source_comm": Commitment.zero(), "destination_comm": Commitment.zero()}
        comms[field] = bytes(32)
        with pytest.raises(TypeError):
            TransferEffect(**comms)
