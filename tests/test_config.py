"""Tests for configuration management."""

from pathlib import Path

import pytest

from zoneaudit import config
from zoneaudit.modules.scanner.models import DEFAULT_MAX_LOOKUPS, DEFAULT_TIMEOUT


def _write_global(home: Path, text: str) -> None:
    config_dir = home / ".zoneaudit"
    config_dir.mkdir(exist_ok=True)
    (config_dir / "config.yml").write_text(text)


class TestLoadEnvFile:
    """Tests for load_env_file."""

    def test_load_env_file_missing_returns_empty(self, temp_dir: Path) -> None:
        assert config.load_env_file(temp_dir / ".env") == {}

    def test_load_env_file_parses_and_strips(self, temp_dir: Path) -> None:
        env_path = temp_dir / ".env"
        env_path.write_text("# comment\n\nZONEAUDIT_PROFILES=\"a,b\"\nZONEAUDIT_TIMEOUT = '5'\nbroken\n")
        assert config.load_env_file(env_path) == {
            "ZONEAUDIT_PROFILES": "a,b",
            "ZONEAUDIT_TIMEOUT": "5",
        }


class TestLoadGlobalConfig:
    """Tests for load_global_config."""

    def test_missing_returns_empty(self) -> None:
        assert config.load_global_config() == {}

    def test_loads_yml(self) -> None:
        _write_global(Path.home(), "ZONEAUDIT_MAX_LOOKUPS: 7\nZONEAUDIT_PROFILES:\n  - dev\n  - prod\n")
        assert config.load_global_config() == {
            "ZONEAUDIT_MAX_LOOKUPS": 7,
            "ZONEAUDIT_PROFILES": ["dev", "prod"],
        }

    def test_non_mapping_yml_is_ignored(self) -> None:
        _write_global(Path.home(), "- just\n- a list\n")
        assert config.load_global_config() == {}


class TestGetConfig:
    """Tests for layered lookup."""

    def test_priority_env_then_local_then_global(self, monkeypatch: pytest.MonkeyPatch) -> None:
        _write_global(Path.home(), "ZONEAUDIT_TIMEOUT: 30\n")
        assert config.get_config("ZONEAUDIT_TIMEOUT") == 30

        Path(".env").write_text("ZONEAUDIT_TIMEOUT=20\n")
        assert config.get_config("ZONEAUDIT_TIMEOUT") == "20"

        monkeypatch.setenv("ZONEAUDIT_TIMEOUT", "10")
        assert config.get_config("ZONEAUDIT_TIMEOUT") == "10"

    def test_default_when_unset(self) -> None:
        assert config.get_config("ZONEAUDIT_FINGERPRINTS", default="x") == "x"


class TestGetters:
    """Tests for typed getters."""

    def test_defaults(self) -> None:
        assert config.get_profiles() == ["default"]
        assert config.get_max_lookups() == DEFAULT_MAX_LOOKUPS
        assert config.get_timeout() == DEFAULT_TIMEOUT
        assert config.get_fingerprints_path() is None
        assert config.get_bool("ZONEAUDIT_VERBOSE") is False

    def test_profiles_from_env_and_yaml_list(self, monkeypatch: pytest.MonkeyPatch) -> None:
        _write_global(Path.home(), "ZONEAUDIT_PROFILES:\n  - dev\n  - prod\n")
        assert config.get_profiles() == ["dev", "prod"]

        monkeypatch.setenv("ZONEAUDIT_PROFILES", "a, b,,c")
        assert config.get_profiles() == ["a", "b", "c"]

    def test_invalid_number_falls_back(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ZONEAUDIT_MAX_LOOKUPS", "lots")
        monkeypatch.setenv("ZONEAUDIT_TIMEOUT", "soon")
        assert config.get_max_lookups() == DEFAULT_MAX_LOOKUPS
        assert config.get_timeout() == DEFAULT_TIMEOUT

    def test_negative_max_lookups_clamped(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ZONEAUDIT_MAX_LOOKUPS", "-5")
        assert config.get_max_lookups() == 0

    @pytest.mark.parametrize("value", ["1", "true", "YES", "on"])
    def test_truthy_values(self, monkeypatch: pytest.MonkeyPatch, value: str) -> None:
        monkeypatch.setenv("ZONEAUDIT_VERBOSE", value)
        assert config.get_bool("ZONEAUDIT_VERBOSE") is True

    def test_yaml_bool(self) -> None:
        _write_global(Path.home(), "ZONEAUDIT_HTTPS: true\n")
        assert config.get_bool("ZONEAUDIT_HTTPS") is True

    def test_fingerprints_path_expands_user(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ZONEAUDIT_FINGERPRINTS", "/opt/fp.json")
        assert config.get_fingerprints_path() == Path("/opt/fp.json")
