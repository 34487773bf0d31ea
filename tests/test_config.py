"""Unit tests for configuration management."""
import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from mcp_notes_rpc.cli.config import get_config_dir, get_config_file, load_config
from mcp_notes_rpc.common.config import DEFAULT_URL, Settings, resolve_settings


class TestSettings:
    """Test cases for Settings class."""

    def test_default_values(self):
        test_settings = Settings()

        assert test_settings.url == "http://127.0.0.1:3030"
        assert test_settings.timeout is None
        assert test_settings.log_level == "WARNING"

    def test_environment_override(self):
        with patch.dict(
            os.environ,
            {"NOTES_RPC_URL": "http://custom:8080", "NOTES_RPC_TIMEOUT": "12.5"},
        ):
            test_settings = Settings()

            assert test_settings.url == "http://custom:8080"
            assert test_settings.timeout == 12.5

    def test_log_level_is_case_insensitive(self):
        with patch.dict(os.environ, {"NOTES_RPC_LOG_LEVEL": "debug"}):
            assert Settings().log_level == "DEBUG"

    def test_unknown_log_level_rejected(self):
        with patch.dict(os.environ, {"NOTES_RPC_LOG_LEVEL": "loud"}):
            with pytest.raises(ValidationError):
                Settings()

    def test_invalid_timeout_fails_in_resolve_settings(self):
        with patch.dict(os.environ, {"NOTES_RPC_TIMEOUT": "abc"}):
            with pytest.raises(ValidationError):
                resolve_settings({})

    def test_dotenv_file(self, tmp_path):
        (tmp_path / ".env").write_text("NOTES_RPC_URL=http://dotenv:1\n")

        assert Settings().url == "http://dotenv:1"


class TestResolveSettings:
    """Test precedence between flags, environment, config file and defaults."""

    def test_defaults_without_sources(self):
        resolved = resolve_settings({})

        assert resolved.url == DEFAULT_URL
        assert resolved.timeout is None

    def test_config_file_over_defaults(self):
        resolved = resolve_settings({"rpc": {"url": "http://file:1", "timeout": 3}})

        assert resolved.url == "http://file:1"
        assert resolved.timeout == 3.0

    def test_environment_over_config_file(self):
        with patch.dict(os.environ, {"NOTES_RPC_URL": "http://env:2"}):
            resolved = resolve_settings({"rpc": {"url": "http://file:1", "timeout": 3}})

        assert resolved.url == "http://env:2"
        assert resolved.timeout == 3.0

    def test_flags_over_everything(self):
        with patch.dict(os.environ, {"NOTES_RPC_URL": "http://env:2"}):
            resolved = resolve_settings(
                {"rpc": {"url": "http://file:1"}}, url="http://flag:3", timeout=None
            )

        assert resolved.url == "http://flag:3"
        assert resolved.timeout is None

    def test_unknown_file_keys_ignored(self):
        resolved = resolve_settings({"rpc": {"colour": "blue"}, "other": {"x": 1}})
        assert resolved.url == DEFAULT_URL


class TestConfigFile:
    """Test config file location and loading."""

    def test_xdg_config_home(self, tmp_path, monkeypatch):
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))

        assert get_config_dir() == tmp_path / "notes-rpc"
        assert get_config_file() == tmp_path / "notes-rpc" / "config.toml"

    def test_missing_file_loads_empty(self):
        assert load_config() == {}

    def test_load_existing_file(self):
        config_file = get_config_file()
        config_file.parent.mkdir(parents=True)
        config_file.write_text('[rpc]\nurl = "http://toml:5"\ntimeout = 7\n')

        assert load_config() == {"rpc": {"url": "http://toml:5", "timeout": 7}}
