"""Unit tests for config settings & loaders."""

import dataclasses
from dataclasses import dataclass, field
from pathlib import Path
from typing import ClassVar

import pytest

from mp_flags.config import (
    ConfigError,
    DotenvSettingsLoader,
    EnvSettingsLoader,
    FlagStoreSettings,
    InvalidSettingValueError,
    MissingRequiredSettingError,
    Settings,
)

_FLAG_ENV = ("FLAGS_DATABASE_URL", "FLAGS_TABLE_NAME", "FLAGS_ECHO", "FLAGS_NULL_POOL")


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in _FLAG_ENV:
        # teardown restores the pre-test environment, keys set by load_dotenv included
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)


@dataclass
class ToolSettings(Settings):
    _prefix: ClassVar[str] = "TOOL"

    retries: int = 3
    ratio: float = 0.5
    hosts: list[str] = field(default_factory=list)


# ---------------------------------------------------------------------------
# FlagStoreSettings
# ---------------------------------------------------------------------------


class TestFlagStoreSettings:
    def test_prefix_is_not_a_field(self) -> None:
        names = [f.name for f in dataclasses.fields(FlagStoreSettings)]
        assert names == ["database_url", "table_name", "echo", "null_pool"]
        assert FlagStoreSettings._prefix == "FLAGS"

    def test_required_database_url(self) -> None:
        with pytest.raises(TypeError):
            FlagStoreSettings()  # type: ignore[call-arg]

    def test_defaults(self) -> None:
        settings = FlagStoreSettings(database_url="sqlite+aiosqlite:///:memory:")
        assert settings.table_name == "flags"
        assert settings.echo is False
        assert settings.null_pool is False

    def test_empty_database_url_rejected(self) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            FlagStoreSettings(database_url="  ")
        assert exc_info.value.setting_name == "database_url"

    def test_empty_table_name_rejected(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            FlagStoreSettings(database_url="sqlite+aiosqlite://", table_name="")


# ---------------------------------------------------------------------------
# EnvSettingsLoader
# ---------------------------------------------------------------------------


class TestEnvSettingsLoader:
    def test_loads_flag_settings(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FLAGS_DATABASE_URL", "postgresql+asyncpg://db/flags")
        monkeypatch.setenv("FLAGS_TABLE_NAME", "app_flags")
        monkeypatch.setenv("FLAGS_NULL_POOL", "yes")
        settings = EnvSettingsLoader().load(FlagStoreSettings)
        assert settings.database_url == "postgresql+asyncpg://db/flags"
        assert settings.table_name == "app_flags"
        assert settings.null_pool is True
        assert settings.echo is False

    def test_missing_required_raises(self) -> None:
        with pytest.raises(MissingRequiredSettingError) as exc_info:
            EnvSettingsLoader().load(FlagStoreSettings)
        assert exc_info.value.setting_name == "FLAGS_DATABASE_URL"

    def test_bool_values(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FLAGS_DATABASE_URL", "sqlite+aiosqlite://")
        for truthy in ("true", "True", "1", "on"):
            monkeypatch.setenv("FLAGS_ECHO", truthy)
            assert EnvSettingsLoader().load(FlagStoreSettings).echo is True
        for falsy in ("false", "0", "no", "OFF"):
            monkeypatch.setenv("FLAGS_ECHO", falsy)
            assert EnvSettingsLoader().load(FlagStoreSettings).echo is False

    def test_bad_bool_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FLAGS_DATABASE_URL", "sqlite+aiosqlite://")
        monkeypatch.setenv("FLAGS_ECHO", "maybe")
        with pytest.raises(InvalidSettingValueError):
            EnvSettingsLoader().load(FlagStoreSettings)

    def test_validation_error_is_not_rewrapped(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FLAGS_DATABASE_URL", " ")
        with pytest.raises(InvalidSettingValueError):
            EnvSettingsLoader().load(FlagStoreSettings)

    def test_numbers_and_lists(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TOOL_RETRIES", "7")
        monkeypatch.setenv("TOOL_RATIO", "0.75")
        monkeypatch.setenv("TOOL_HOSTS", "a, b,,c")
        settings = EnvSettingsLoader().load(ToolSettings)
        assert settings.retries == 7
        assert settings.ratio == 0.75
        assert settings.hosts == ["a", "b", "c"]

    def test_bad_int_raises_config_error(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TOOL_RETRIES", "many")
        with pytest.raises(ConfigError):
            EnvSettingsLoader().load(ToolSettings)


# ---------------------------------------------------------------------------
# DotenvSettingsLoader
# ---------------------------------------------------------------------------


class TestDotenvSettingsLoader:
    def test_reads_env_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("FLAGS_DATABASE_URL=sqlite+aiosqlite:///flags.db\nFLAGS_ECHO=true\n")
        settings = DotenvSettingsLoader(str(env_file)).load(FlagStoreSettings)
        assert settings.database_url == "sqlite+aiosqlite:///flags.db"
        assert settings.echo is True

    def test_environment_wins_without_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("FLAGS_DATABASE_URL=sqlite+aiosqlite:///from-file.db\n")
        monkeypatch.setenv("FLAGS_DATABASE_URL", "sqlite+aiosqlite:///from-env.db")
        settings = DotenvSettingsLoader(str(env_file)).load(FlagStoreSettings)
        assert settings.database_url == "sqlite+aiosqlite:///from-env.db"
