"""
Confidential Token Configuration Tests
"""

import logging

from ctoken.config import CodecConfig, LogConfig, ProgramConfig, setup_logging

from conftest import make_pubkey


class TestProgramConfig:
    """Tests for ProgramConfig."""

    def test_defaults(self):
        """Test default configuration is valid and permissive."""
        config = ProgramConfig()
        assert config.validate() == []
        assert config.codec.strict_payload_length is False
        assert config.program_pubkey is None

    def test_program_pubkey(self):
        """Test program id parsing."""
        key = make_pubkey(200)
        config = ProgramConfig(program_id=str(key))
        assert config.program_pubkey == key
        assert config.validate() == []

    def test_validate_errors(self):
        """Test validation reports each problem."""
        config = ProgramConfig(program_id="not-a-key")
        config.log.level = "LOUD"
        config.log.max_size_mb = 0
        errors = config.validate()
        assert len(errors) == 3
        assert any("program id" in e for e in errors)
        assert any("log level" in e for e in errors)

    def test_save_load(self, tmp_path):
        """Test configuration survives a JSON round trip."""
        path = tmp_path / "ctoken.json"
        config = ProgramConfig(
            program_id=str(make_pubkey(7)),
            codec=CodecConfig(strict_payload_length=True),
            log=LogConfig(level="DEBUG"),
        )
        config.save(str(path))

        loaded = ProgramConfig.load(str(path))
        assert loaded.to_dict() == config.to_dict()
        assert loaded.codec.strict_payload_length is True

    def test_load_partial(self, tmp_path):
        """Test missing sections fall back to defaults."""
        path = tmp_path / "partial.json"
        path.write_text('{"codec": {"strict_payload_length": true}}')
        loaded = ProgramConfig.load(str(path))
        assert loaded.program_id is None
        assert loaded.codec.strict_payload_length is True
        assert loaded.log == LogConfig()


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_file_handler(self, tmp_path):
        """Test a log file is written when configured."""
        log_file = tmp_path / "ctoken.log"
        setup_logging(LogConfig(level="DEBUG", file=str(log_file)))
        logging.getLogger("ctoken.test").debug("hello")
        for handler in logging.getLogger().handlers:
            handler.flush()
        assert "hello" in log_file.read_text()
        setup_logging(LogConfig())
