"""Tests for settings loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from treefs import config
from treefs.config import Settings, load_settings


@pytest.fixture
def no_default_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Point the default config at a missing file and clear the env var."""
    monkeypatch.setattr(config, "CONFIG_FILE", tmp_path / "absent.yaml")
    monkeypatch.delenv(config.CONFIG_ENV, raising=False)


class TestSettings:
    """Tests for the Settings model."""

    def test_defaults(self) -> None:
        """Test default values."""
        settings = Settings()

        assert settings.directory_mode == 0o777
        assert settings.log_level == "WARNING"

    def test_from_file(self, tmp_path: Path) -> None:
        """Test loading camelCase keys with a YAML octal mode."""
        path = tmp_path / "treefs.yaml"
        path.write_text("directoryMode: 0755\nlogLevel: debug\n")

        settings = Settings.from_file(path)

        assert settings.directory_mode == 0o755
        assert settings.log_level == "DEBUG"

    def test_quoted_mode(self, tmp_path: Path) -> None:
        """Test a quoted mode is read as octal."""
        path = tmp_path / "treefs.yaml"
        path.write_text('directory_mode: "0700"\n')

        assert Settings.from_file(path).directory_mode == 0o700

    def test_empty_file(self, tmp_path: Path) -> None:
        """Test an empty file yields defaults."""
        path = tmp_path / "treefs.yaml"
        path.write_text("")

        assert Settings.from_file(path) == Settings()

    def test_missing_file(self, tmp_path: Path) -> None:
        """Test a missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            Settings.from_file(tmp_path / "missing.yaml")

    @pytest.mark.parametrize(
        "content",
        [
            "logLevel: LOUD\n",
            "directoryMode: 99999\n",
            "unknown: 1\n",
            "- a\n- b\n",
            "directoryMode: [\n",
        ],
    )
    def test_invalid_content(self, tmp_path: Path, content: str) -> None:
        """Test invalid files raise ValueError."""
        path = tmp_path / "treefs.yaml"
        path.write_text(content)

        with pytest.raises(ValueError):
            Settings.from_file(path)


class TestLoadSettings:
    """Tests for locating the settings file."""

    def test_defaults_without_file(self, no_default_config: None) -> None:
        """Test defaults when no file is present."""
        assert load_settings() == Settings()

    def test_env_var(
        self, tmp_path: Path, no_default_config: None, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test $TREEFS_CONFIG is honored."""
        path = tmp_path / "env.yaml"
        path.write_text("logLevel: INFO\n")
        monkeypatch.setenv(config.CONFIG_ENV, str(path))

        assert load_settings().log_level == "INFO"

    def test_default_file(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test the default location is read when present."""
        path = tmp_path / "home.yaml"
        path.write_text("logLevel: ERROR\n")
        monkeypatch.setattr(config, "CONFIG_FILE", path)
        monkeypatch.delenv(config.CONFIG_ENV, raising=False)

        assert load_settings().log_level == "ERROR"

    def test_explicit_path_must_exist(self, tmp_path: Path) -> None:
        """Test an explicit missing path raises."""
        with pytest.raises(FileNotFoundError):
            load_settings(tmp_path / "missing.yaml")
