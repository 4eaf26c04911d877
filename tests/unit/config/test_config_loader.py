"""Unit tests for configuration loading."""

import json
from pathlib import Path

import pytest

from simplemcp.config.loader import DEFAULT_CONFIG_NAME, load_config
from simplemcp.config.schema import DEFAULT_USER_AGENT, Config
from simplemcp.core.errors import ConfigError


def write_config(path: Path, data: object) -> Path:
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


class TestLoadConfig:
    """Tests for load_config()."""

    def test_defaults_without_file(self, tmp_path: Path) -> None:
        config = load_config(cwd=tmp_path, environ={})

        assert config == Config()
        assert config.server.protocol_version == "2024-11-05"
        assert config.logging.file == "mcp-server.log"
        assert config.fetch.timeout == 30.0
        assert config.fetch.user_agent == DEFAULT_USER_AGENT
        assert config.fetch.max_content_length == 10000

    def test_local_file_discovered(self, tmp_path: Path) -> None:
        write_config(tmp_path / DEFAULT_CONFIG_NAME, {"server": {"name": "local-tools"}})

        config = load_config(cwd=tmp_path, environ={})

        assert config.server.name == "local-tools"

    def test_explicit_path(self, tmp_path: Path) -> None:
        path = write_config(tmp_path / "custom.json", {
            "logging": {"level": "DEBUG", "backup_count": 0},
            "fetch": {"timeout": 5},
        })

        config = load_config(path, environ={})

        assert config.logging.level == "DEBUG"
        assert config.logging.backup_count == 0
        assert config.fetch.timeout == 5.0

    def test_explicit_path_must_exist(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="Config file not found"):
            load_config(tmp_path / "missing.json", environ={})

    def test_empty_file_uses_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.json"
        path.write_text("", encoding="utf-8")

        assert load_config(path, environ={}) == Config()

    def test_byte_order_mark_accepted(self, tmp_path: Path) -> None:
        path = tmp_path / "bom.json"
        path.write_bytes(b"\xef\xbb\xbf" + json.dumps({"server": {"name": "bom"}}).encode())

        assert load_config(path, environ={}).server.name == "bom"

    def test_directory_is_not_a_config_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="Config file not found"):
            load_config(tmp_path, environ={})

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(ConfigError, match="Invalid JSON"):
            load_config(path, environ={})

    def test_non_object_json(self, tmp_path: Path) -> None:
        path = write_config(tmp_path / "list.json", [1, 2])

        with pytest.raises(ConfigError, match="must contain a JSON object"):
            load_config(path, environ={})

    def test_unknown_key_rejected(self, tmp_path: Path) -> None:
        path = write_config(tmp_path / "extra.json", {"server": {"port": 8080}})

        with pytest.raises(ConfigError, match="Config validation failed"):
            load_config(path, environ={})

    @pytest.mark.parametrize("fetch", [{"timeout": 0}, {"timeout": -1}, {"max_content_length": 0}])
    def test_non_positive_fetch_values_rejected(self, tmp_path: Path, fetch: dict) -> None:
        path = write_config(tmp_path / "fetch.json", {"fetch": fetch})

        with pytest.raises(ConfigError):
            load_config(path, environ={})

    def test_bad_log_level_rejected(self, tmp_path: Path) -> None:
        path = write_config(tmp_path / "level.json", {"logging": {"level": "LOUD"}})

        with pytest.raises(ConfigError):
            load_config(path, environ={})


class TestEnvOverrides:
    """Tests for SIMPLEMCP_* environment overrides."""

    def test_env_overrides_file(self, tmp_path: Path) -> None:
        path = write_config(tmp_path / "c.json", {
            "logging": {"file": "from-file.log", "level": "WARNING"},
            "fetch": {"timeout": 10},
        })

        config = load_config(path, environ={
            "SIMPLEMCP_LOG_FILE": "from-env.log",
            "SIMPLEMCP_FETCH_TIMEOUT": "2.5",
        })

        assert config.logging.file == "from-env.log"
        assert config.logging.level == "WARNING"
        assert config.fetch.timeout == 2.5

    def test_empty_env_value_ignored(self, tmp_path: Path) -> None:
        config = load_config(cwd=tmp_path, environ={"SIMPLEMCP_LOG_FILE": ""})
        assert config.logging.file == "mcp-server.log"

    def test_invalid_env_value(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError):
            load_config(cwd=tmp_path, environ={"SIMPLEMCP_FETCH_TIMEOUT": "soon"})
