"""
Confidential Token Program Configuration
"""

from __future__ import annotations
import json
import logging
from dataclasses import dataclass, field, asdict
from typing import List, Optional

from solders.pubkey import Pubkey

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class CodecConfig:
    """Instruction decoding configuration."""
    # Reject trailing bytes after fixed-size payloads
    strict_payload_length: bool = False


@dataclass
class LogConfig:
    """Logging configuration."""
    level: str = "INFO"
    file: Optional[str] = None
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    max_size_mb: int = 100
    backup_count: int = 5


@dataclass
class ProgramConfig:
    """
    Complete program configuration.

    Passed explicitly to whatever hosts the processor; nothing here is
    read from global state.
    """
    # Base58 program id
    program_id: Optional[str] = None

    # Sub-configurations
    codec: CodecConfig = field(default_factory=CodecConfig)
    log: LogConfig = field(default_factory=LogConfig)

    @property
    def program_pubkey(self) -> Optional[Pubkey]:
        """Parsed program id, or None if unset."""
        if self.program_id is None:
            return None
        return Pubkey.from_string(self.program_id)

    def validate(self) -> List[str]:
        """
        Validate configuration.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if self.program_id is not None:
            try:
                Pubkey.from_string(self.program_id)
            except ValueError:
                errors.append(f"Invalid program id: {self.program_id}")

        if self.log.level.upper() not in LOG_LEVELS:
            errors.append(f"Invalid log level: {self.log.level}")

        if self.log.max_size_mb < 1:
            errors.append("max_size_mb must be at least 1")

        if self.log.backup_count < 0:
            errors.append("backup_count cannot be negative")

        return errors

    def save(self, path: str) -> None:
        """Save configuration to file."""
        with open(path, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)

        logger.info(f"Configuration saved to {path}")

    @classmethod
    def load(cls, path: str) -> "ProgramConfig":
        """Load configuration from file."""
        with open(path, 'r') as f:
            data = json.load(f)

        config = cls(program_id=data.get("program_id"))

        if "codec" in data:
            config.codec = CodecConfig(**data["codec"])

        if "log" in data:
            config.log = LogConfig(**data["log"])

        logger.info(f"Configuration loaded from {path}")
        return config

    def to_dict(self) -> dict:
        """Export configuration as dictionary."""
        return {
            "program_id": self.program_id,
            "codec": asdict(self.codec),
            "log": asdict(self.log),
        }


def setup_logging(config: LogConfig) -> None:
    """Configure logging based on config."""
    level = getattr(logging, config.level.upper(), logging.INFO)

    handlers = [logging.StreamHandler()]

    if config.file:
        from logging.handlers import RotatingFileHandler
        file_handler = RotatingFileHandler(
            config.file,
            maxBytes=config.max_size_mb * 1024 * 1024,
            backupCount=config.backup_count,
        )
        handlers.append(file_handler)

    logging.basicConfig(
        level=level,
        format=config.format,
        handlers=handlers,
        force=True,
    )
