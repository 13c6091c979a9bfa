"""Configuration tests."""

import json
import logging

import pytest

from tinyrouter_core.utils.config import RouterConfig, configure_logging, load_config


class TestRouterConfig:
    """Test RouterConfig."""

    def test_defaults(self):
        """Test default values."""
        config = RouterConfig()
        assert config.log_level == "INFO"
        assert config.log_dispatch is False

    def test_from_dict_ignores_unknown(self):
        """Test unknown keys are dropped."""
        config = RouterConfig.from_dict({"log_level": "DEBUG", "bogus": 1})
        assert config.log_level == "DEBUG"

    def test_from_env(self, monkeypatch):
        """Test environment variables with type conversion."""
        monkeypatch.setenv("TINYROUTER_LOG_DISPATCH", "true")
        monkeypatch.setenv("TINYROUTER_LOG_LEVEL", "WARNING")

        config = RouterConfig.from_env()

        assert config.log_dispatch is True
        assert config.log_level == "WARNING"


class TestLoadConfig:
    """Test layered loading."""

    def test_file_then_env(self, tmp_path, monkeypatch):
        """Test environment overrides file, file overrides defaults."""
        path = tmp_path / "router.json"
        path.write_text(json.dumps({"log_level": "DEBUG", "log_dispatch": True}))
        monkeypatch.setenv("TINYROUTER_LOG_LEVEL", "ERROR")
        monkeypatch.delenv("TINYROUTER_LOG_DISPATCH", raising=False)

        config = load_config(str(path))

        assert config.log_level == "ERROR"
        assert config.log_dispatch is True

    def test_missing_file_uses_defaults(self, tmp_path, monkeypatch, caplog):
        """Test a missing file falls back to defaults with a warning."""
        monkeypatch.delenv("TINYROUTER_LOG_LEVEL", raising=False)
        monkeypatch.delenv("TINYROUTER_LOG_DISPATCH", raising=False)

        with caplog.at_level(logging.WARNING):
            config = load_config(str(tmp_path / "absent.json"))

        assert config.log_level == "INFO"
        assert "not found" in caplog.text

    def test_configure_logging(self, monkeypatch):
        """Test configure_logging hands level and format to basicConfig."""
        calls = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.append(kw))

        configure_logging(RouterConfig(log_level="debug", log_format="%(message)s"))

        assert calls == [{"level": "DEBUG", "format": "%(message)s"}]

    def test_configure_logging_numeric_level_from_env(self, monkeypatch):
        """Test an all-digit level from the environment is passed through."""
        calls = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.append(kw))
        monkeypatch.setenv("TINYROUTER_LOG_LEVEL", "10")

        config = load_config()
        configure_logging(config)

        assert config.log_level == 10
        assert calls[0]["level"] == 10


class TestYamlConfig:
    """Test YAML config files."""

    def test_from_yaml(self, tmp_path, monkeypatch):
        """Test loading a YAML config file."""
        pytest.importorskip("yaml")
        monkeypatch.delenv("TINYROUTER_LOG_LEVEL", raising=False)
        monkeypatch.delenv("TINYROUTER_LOG_DISPATCH", raising=False)
        path = tmp_path / "router.yaml"
        path.write_text("log_level: WARNING\nlog_dispatch: true\n")

        config = load_config(str(path))

        assert config.log_level == "WARNING"
        assert config.log_dispatch is True
