"""
Confidential Token Error Handling

All error codes and exception classes.
"""

from enum import IntEnum
from typing import Optional, Any


class ErrorCode(IntEnum):
    """Program error codes."""

    # 2xxx - Instruction errors
    INVALID_INSTRUCTION = 2001
    DESERIALIZATION_FAILED = 2002

    # 3xxx - Stored record errors
    INVALID_ACCOUNT_DATA = 3001
    KEY_LENGTH_MISMATCH = 3002
    UNINITIALIZED_ACCOUNT = 3003
    ALREADY_INITIALIZED = 3004

    # 4xxx - Processing errors
    NOT_ENOUGH_ACCOUNT_KEYS = 4001
    MISSING_REQUIRED_SIGNATURE = 4002
    ACCOUNT_NOT_WRITABLE = 4003
    AUTHORITY_MISMATCH = 4004
    MINT_MISMATCH = 4005
    DUPLICATE_ACCOUNT = 4006
    SUPPLY_OVERFLOW = 4007
    INVALID_SYSVAR = 4008

    # 5xxx - Verification errors
    VERIFICATION_FAILED = 5001


class CTokenError(Exception):
    """Base exception for all confidential token errors."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        details: Optional[Any] = None
    ):
        self.code = code
        self.message = message
        self.details = details
        super().__init__(f"[{code.value}] {message}")

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dict for reporting."""
        result = {
            "code": self.code.value,
            "name": self.code.name,
            "message": self.message,
        }
        if self.details is not None:
            result["details"] = self.details
        return result


# ==============================================================================
# Instruction Errors (2xxx)
# ==============================================================================

class InvalidInstructionError(CTokenError):
    def __init__(self, reason: str = "Invalid instruction"):
        super().__init__(ErrorCode.INVALID_INSTRUCTION, reason)


class DeserializationError(CTokenError):
    """Structured payload could not be decoded."""

    def __init__(self, what: str, cause: str):
        super().__init__(
            ErrorCode.DESERIALIZATION_FAILED,
            f"Failed to deserialize {what}",
            {"type": what, "cause": cause}
        )


# ==============================================================================
# Stored Record Errors (3xxx)
# ==============================================================================

class InvalidAccountDataError(CTokenError):
    def __init__(self, record: str, reason: str):
        super().__init__(
            ErrorCode.INVALID_ACCOUNT_DATA,
            f"Invalid {record} data: {reason}",
            {"record": record, "reason": reason}
        )


class KeyLengthMismatchError(CTokenError, ValueError):
    def __init__(self, length: int, expected: int):
        super().__init__(
            ErrorCode.KEY_LENGTH_MISMATCH,
            f"Bytes does not match Pubkey size: {length} != {expected}",
            {"length": length, "expected": expected}
        )


class UninitializedAccountError(CTokenError):
    def __init__(self, record: str, key: Optional[bytes] = None):
        details = {"record": record}
        if key is not None:
            details["key"] = key.hex()
        super().__init__(
            ErrorCode.UNINITIALIZED_ACCOUNT,
            f"{record} is not initialized",
            details
        )


class AlreadyInitializedError(CTokenError):
    def __init__(self, record: str, key: Optional[bytes] = None):
        details = {"record": record}
        if key is not None:
            details["key"] = key.hex()
        super().__init__(
            ErrorCode.ALREADY_INITIALIZED,
            f"{record} is already initialized",
            details
        )


# ==============================================================================
# Processing Errors (4xxx)
# ==============================================================================

class NotEnoughAccountKeysError(CTokenError):
    def __init__(self, count: int, expected: int):
        super().__init__(
            ErrorCode.NOT_ENOUGH_ACCOUNT_KEYS,
            f"Not enough account keys: {count} < {expected}",
            {"count": count, "expected": expected}
        )


class MissingRequiredSignatureError(CTokenError):
    def __init__(self, key: bytes):
        super().__init__(
            ErrorCode.MISSING_REQUIRED_SIGNATURE,
            f"Missing required signature from {key.hex()[:16]}...",
            {"key": key.hex()}
        )


class AccountNotWritableError(CTokenError):
    def __init__(self, key: bytes):
        super().__init__(
            ErrorCode.ACCOUNT_NOT_WRITABLE,
            f"Account {key.hex()[:16]}... is not writable",
            {"key": key.hex()}
        )


class AuthorityMismatchError(CTokenError):
    def __init__(self, expected: bytes, got: bytes):
        super().__init__(
            ErrorCode.AUTHORITY_MISMATCH,
            "Signer is not the mint authority",
            {"expected": expected.hex(), "got": got.hex()}
        )


class MintMismatchError(CTokenError):
    def __init__(self, expected: bytes, got: bytes):
        super().__init__(
            ErrorCode.MINT_MISMATCH,
            "Account does not belong to this mint",
            {"expected": expected.hex(), "got": got.hex()}
        )


class DuplicateAccountError(CTokenError):
    def __init__(self, key: bytes):
        super().__init__(
            ErrorCode.DUPLICATE_ACCOUNT,
            f"Source and destination are the same account {key.hex()[:16]}...",
            {"key": key.hex()}
        )


class SupplyOverflowError(CTokenError):
    def __init__(self, supply: int, amount: int):
        super().__init__(
            ErrorCode.SUPPLY_OVERFLOW,
            f"Supply overflow: {supply} + {amount}",
            {"supply": supply, "amount": amount}
        )


class InvalidSysvarError(CTokenError):
    def __init__(self, expected: bytes, got: bytes):
        super().__init__(
            ErrorCode.INVALID_SYSVAR,
            "Unexpected sysvar account",
            {"expected": expected.hex(), "got": got.hex()}
        )


# ==============================================================================
# Verification Errors (5xxx)
# ==============================================================================

class VerificationError(CTokenError):
    """Raised by verifier implementations when a proof does not check out."""

    def __init__(self, operation: str, reason: str = "proof rejected"):
        super().__init__(
            ErrorCode.VERIFICATION_FAILED,
            f"{operation} verification failed: {reason}",
            {"operation": operation, "reason": reason}
        )
