"""Unit tests for EncoderSettings and its loaders."""

from __future__ import annotations

import dataclasses
from pathlib import Path
from typing import ClassVar

import pytest

from mp_querydsl.config import (
    ConfigError,
    DotenvSettingsLoader,
    EncoderSettings,
    EnvSettingsLoader,
    InvalidSettingValueError,
    MissingRequiredSettingError,
    Settings,
)

_KEYS = (
    "QUERYDSL_EMIT_MINIMUM_SHOULD_MATCH",
    "QUERYDSL_ENSURE_ASCII",
    "QUERYDSL_INDENT",
    "QUERYDSL_LOG_ENCODING",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    # setenv registers an undo, so values written by load_dotenv are removed too
    for key in _KEYS:
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)


@dataclasses.dataclass(frozen=True)
class ClientSettings(Settings):
    _prefix: ClassVar[str] = "CLIENT"

    endpoint: str
    hosts: list[str] = dataclasses.field(default_factory=list)
    timeout: float = 1.0


# ---------------------------------------------------------------------------
# EncoderSettings
# ---------------------------------------------------------------------------


class TestEncoderSettings:
    def test_defaults(self) -> None:
        s = EncoderSettings()
        assert s.emit_minimum_should_match is False
        assert s.ensure_ascii is False
        assert s.indent is None
        assert s.log_encoding is False

    def test_negative_indent_rejected(self) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            EncoderSettings(indent=-1)
        assert exc_info.value.setting_name == "indent"

    def test_is_frozen(self) -> None:
        s = EncoderSettings()
        with pytest.raises((AttributeError, TypeError)):
            s.indent = 2  # type: ignore[misc]


# ---------------------------------------------------------------------------
# EnvSettingsLoader
# ---------------------------------------------------------------------------


class TestEnvSettingsLoader:
    def test_defaults_when_env_absent(self) -> None:
        assert EnvSettingsLoader().load(EncoderSettings) == EncoderSettings()

    def test_loads_bool_true(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for truthy in ("true", "True", "1", "yes", "on"):
            monkeypatch.setenv("QUERYDSL_EMIT_MINIMUM_SHOULD_MATCH", truthy)
            assert EnvSettingsLoader().load(EncoderSettings).emit_minimum_should_match is True

    def test_loads_bool_false(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for falsy in ("false", "False", "0", "no", "off"):
            monkeypatch.setenv("QUERYDSL_ENSURE_ASCII", falsy)
            assert EnvSettingsLoader().load(EncoderSettings).ensure_ascii is False

    def test_invalid_bool(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("QUERYDSL_LOG_ENCODING", "maybe")
        with pytest.raises(InvalidSettingValueError):
            EnvSettingsLoader().load(EncoderSettings)

    def test_loads_optional_int(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("QUERYDSL_INDENT", "4")
        assert EnvSettingsLoader().load(EncoderSettings).indent == 4

    def test_optional_int_none(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("QUERYDSL_INDENT", "none")
        assert EnvSettingsLoader().load(EncoderSettings).indent is None

    def test_invalid_int(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("QUERYDSL_INDENT", "two")
        with pytest.raises(InvalidSettingValueError):
            EnvSettingsLoader().load(EncoderSettings)

    def test_settings_validation_propagates(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("QUERYDSL_INDENT", "-3")
        with pytest.raises(ConfigError):
            EnvSettingsLoader().load(EncoderSettings)

    def test_missing_required(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("CLIENT_ENDPOINT", raising=False)
        with pytest.raises(MissingRequiredSettingError) as exc_info:
            EnvSettingsLoader().load(ClientSettings)
        assert exc_info.value.setting_name == "CLIENT_ENDPOINT"

    def test_list_and_float(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CLIENT_ENDPOINT", "http://es:9200")
        monkeypatch.setenv("CLIENT_HOSTS", "a, b,,c")
        monkeypatch.setenv("CLIENT_TIMEOUT", "2.5")
        s = EnvSettingsLoader().load(ClientSettings)
        assert s.hosts == ["a", "b", "c"]
        assert s.timeout == 2.5


# ---------------------------------------------------------------------------
# DotenvSettingsLoader
# ---------------------------------------------------------------------------


class TestDotenvSettingsLoader:
    def test_reads_env_file(self, tmp_path: Path) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("QUERYDSL_EMIT_MINIMUM_SHOULD_MATCH=true\nQUERYDSL_INDENT=2\n")
        settings = DotenvSettingsLoader(str(env_file)).load(EncoderSettings)
        assert settings.emit_minimum_should_match is True
        assert settings.indent == 2

    def test_existing_env_wins_without_override(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("QUERYDSL_INDENT=8\n")
        monkeypatch.setenv("QUERYDSL_INDENT", "1")
        assert DotenvSettingsLoader(str(env_file)).load(EncoderSettings).indent == 1

    def test_override_replaces_existing_env(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("QUERYDSL_INDENT=8\n")
        monkeypatch.setenv("QUERYDSL_INDENT", "1")
        assert DotenvSettingsLoader(str(env_file), override=True).load(EncoderSettings).indent == 8
