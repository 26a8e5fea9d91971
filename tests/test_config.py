"""Tests for CLI configuration loading."""

import tempfile
from pathlib import Path

import pytest
import toml

from candlekit.config import (
    CONFIG_ENV_VAR,
    Settings,
    create_template_config,
    get_config_path,
    load_settings,
)


class TestLoadSettings:
    """Tests for reading config.toml."""

    def test_missing_file_gives_defaults(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            settings = load_settings(Path(tmpdir) / "missing.toml")

        assert settings == Settings()
        assert settings.max_rows == 20
        assert settings.precision == 2
        assert settings.exclude_before is None
        assert settings.exclude_after is None

    def test_values_from_file(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "config.toml"
            path.write_text(toml.dumps({
                "display": {"max_rows": 5, "precision": 4},
                "filter": {"exclude_before": 0, "exclude_after": 3500},
            }))

            settings = load_settings(path)

        assert settings.max_rows == 5
        assert settings.precision == 4
        assert settings.exclude_before == 0
        assert settings.exclude_after == 3500

    def test_unreadable_file_gives_defaults(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "config.toml"
            path.write_text("this is [not toml")

            assert load_settings(path) == Settings()

    def test_template_round_trip(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = create_template_config(Path(tmpdir) / "nested" / "config.toml")

            assert path.exists()
            assert load_settings(path) == Settings()


class TestConfigPath:
    """Tests for config path resolution."""

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv(CONFIG_ENV_VAR, "/tmp/custom.toml")

        assert get_config_path() == Path("/tmp/custom.toml")

    def test_default_path(self, monkeypatch):
        monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)

        assert get_config_path() == Path.home() / ".config" / "candlekit" / "config.toml"


class TestUnusableConfig:
    """Config files that parse but hold bad values fall back to defaults."""

    @pytest.mark.parametrize(
        "text",
        [
            "[display]\nmax_rows = 0\n",
            '[display]\nprecision = "x"\n',
            "[filter]\nexclude_before = -5\n",
            "display = 5\n",
            'filter = "all"\n',
        ],
    )
    def test_bad_values_give_defaults(self, text):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "config.toml"
            path.write_text(text)

            assert load_settings(path) == Settings()

    def test_partial_display_keeps_other_defaults(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "config.toml"
            path.write_text("[display]\nprecision = 4\n")

            settings = load_settings(path)

        assert settings.precision == 4
        assert settings.max_rows == Settings().max_rows
