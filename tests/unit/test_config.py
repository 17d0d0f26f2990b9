"""Unit tests for settings and the component factory."""

import logging

import pytest

from formflow.core import ComponentFactory, CredentialsConfig, Settings
from formflow.core.logging_config import get_logger, setup_logging
from formflow.forms import FormEngine
from formflow.interfaces.segmenter import MatchSegment
from formflow.strategies import ConstraintValidator, TokenSegmenter


class TestSettings:
    """Test suite for Settings."""

    def test_defaults(self, monkeypatch):
        """Test default values without environment overrides."""
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        monkeypatch.delenv("CREDENTIALS__PHONE", raising=False)

        settings = Settings(_env_file=None)

        assert settings.log_level == "INFO"
        assert settings.log_dir is None
        assert settings.highlight_pattern == "Bfast"
        assert settings.credentials == CredentialsConfig()

    def test_log_level_normalized(self):
        """Test that the log level is uppercased."""
        assert Settings(_env_file=None, log_level="debug").log_level == "DEBUG"

    def test_nested_credentials_from_env(self, monkeypatch):
        """Test that credentials load from nested environment variables."""
        monkeypatch.setenv("CREDENTIALS__PHONE", "5551234")
        monkeypatch.setenv("CREDENTIALS__PASSWORD", "secret1")

        settings = Settings(_env_file=None)

        assert settings.credentials.phone == "5551234"
        assert settings.credentials.password == "secret1"


class TestLogging:
    """Test suite for logging setup."""

    @pytest.fixture(autouse=True)
    def restore_root_logger(self):
        """Restore root logger handlers and level after each test."""
        root = logging.getLogger()
        handlers, level = list(root.handlers), root.level
        yield
        for handler in list(root.handlers):
            if handler not in handlers:
                handler.close()
        root.handlers[:] = handlers
        root.setLevel(level)

    def test_console_only(self):
        """Test that only a console handler is installed without log_dir."""
        root = setup_logging(Settings(_env_file=None, log_level="INFO"))

        assert len(root.handlers) == 1
        assert root.level == logging.INFO

    def test_file_handlers(self, tmp_path):
        """Test that log files are created when log_dir is set."""
        root = setup_logging(Settings(_env_file=None, log_dir=tmp_path / "logs", log_level="DEBUG"))

        get_logger("formflow.test").error("boom")
        for handler in root.handlers:
            handler.flush()

        assert len(root.handlers) == 3
        assert root.level == logging.DEBUG
        assert "boom" in (tmp_path / "logs" / "error.log").read_text(encoding="utf-8")

    def test_configure_logging_installs_handlers_when_enabled(self, tmp_path):
        """Test that configure_logging installs root handlers on request."""
        settings = Settings(_env_file=None, install_log_handlers=True, log_dir=tmp_path)

        settings.configure_logging()

        root = logging.getLogger()
        assert len(root.handlers) == 3
        assert (tmp_path / "info.log").exists()

    def test_configure_logging_leaves_handlers_by_default(self):
        """Test that root handlers are untouched unless enabled."""
        root = logging.getLogger()
        before = list(root.handlers)

        Settings(_env_file=None).configure_logging()

        assert root.handlers == before


class TestComponentFactory:
    """Test suite for ComponentFactory."""

    @pytest.fixture
    def factory(self):
        return ComponentFactory(Settings(_env_file=None, highlight_pattern=r"\d+"))

    def test_validator_cached(self, factory):
        """Test that the validator instance is reused."""
        validator = factory.get_validator()

        assert isinstance(validator, ConstraintValidator)
        assert factory.get_validator() is validator

    def test_default_segmenter_uses_settings(self, factory):
        """Test that the default segmenter uses the configured pattern."""
        segmenter = factory.get_segmenter()

        assert isinstance(segmenter, TokenSegmenter)
        assert factory.get_segmenter() is segmenter
        assert list(segmenter.segment("42"))[0] == MatchSegment("42", 0)

    def test_explicit_pattern_not_cached(self, factory):
        """Test that explicit patterns build fresh segmenters."""
        segmenter = factory.get_segmenter("x")

        assert segmenter is not factory.get_segmenter()

    def test_invalid_pattern(self, factory):
        """Test that invalid patterns raise ValueError."""
        with pytest.raises(ValueError):
            factory.get_segmenter("(unclosed")

    def test_create_form(self, factory):
        """Test that each call creates an independent engine."""
        first = factory.create_form({"a": 1}, lambda v: {}, None)
        second = factory.create_form({"a": 1}, lambda v: {}, None)

        assert isinstance(first, FormEngine)
        assert first is not second
