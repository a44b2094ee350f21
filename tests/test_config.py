"""Tests for configuration loading and merging."""

from pathlib import Path

import pytest

from git_dig.config import AnalysisConfig, load_config
from git_dig.exceptions import ConfigurationError, InvalidConfigError


class TestAnalysisConfig:
    """Test AnalysisConfig defaults and validation."""

    def test_defaults(self):
        config = AnalysisConfig()
        assert config.hotspot_top == 20
        assert config.coupling_top == 20
        assert config.coupling_min_commits == 3
        assert config.max_files_per_commit == 30
        assert config.author_top == 15
        assert config.silo_min_commits == 2
        assert config.git_max_commits == 5000
        assert config.since is None
        assert config.until is None
        assert config.verbosity == "normal"

    def test_frozen(self):
        config = AnalysisConfig()
        with pytest.raises(AttributeError):
            config.hotspot_top = 5  # type: ignore[misc]

    @pytest.mark.parametrize(
        "field, value",
        [
            ("hotspot_top", 0),
            ("coupling_top", 0),
            ("author_top", -1),
            ("coupling_min_commits", 0),
            ("max_files_per_commit", 1),
            ("silo_min_commits", 0),
            ("git_max_commits", 0),
            ("verbosity", "loud"),
        ],
    )
    def test_rejects_invalid_values(self, field, value):
        with pytest.raises(ValueError, match=field):
            AnalysisConfig(**{field: value})


class TestLoadConfig:
    """Test load_config source merging."""

    def test_defaults_without_sources(self, isolated_config):
        assert load_config() == AnalysisConfig()

    def test_global_config(self, isolated_config):
        home = Path.home()
        (home / ".git-dig.toml").write_text("hotspot_top = 7\n")
        assert load_config().hotspot_top == 7

    def test_project_overrides_global(self, isolated_config):
        (Path.home() / ".git-dig.toml").write_text("hotspot_top = 7\nauthor_top = 3\n")
        (isolated_config / "git-dig.toml").write_text("hotspot_top = 9\n")
        config = load_config()
        assert config.hotspot_top == 9
        assert config.author_top == 3

    def test_explicit_file(self, isolated_config, tmp_path):
        path = tmp_path / "custom.toml"
        path.write_text('coupling_min_commits = 1\nsince = "6 months ago"\n')
        config = load_config(config_file=path)
        assert config.coupling_min_commits == 1
        assert config.since == "6 months ago"

    def test_missing_explicit_file(self, isolated_config, tmp_path):
        with pytest.raises(ConfigurationError, match="not found"):
            load_config(config_file=tmp_path / "nope.toml")

    def test_malformed_toml(self, isolated_config):
        (isolated_config / "git-dig.toml").write_text("hotspot_top = = 3\n")
        with pytest.raises(ConfigurationError, match="Invalid config file"):
            load_config()

    def test_unknown_key(self, isolated_config):
        (isolated_config / "git-dig.toml").write_text("colour = 'blue'\n")
        with pytest.raises(ConfigurationError):
            load_config()

    def test_invalid_value_from_file(self, isolated_config):
        (isolated_config / "git-dig.toml").write_text("max_files_per_commit = 1\n")
        with pytest.raises(ConfigurationError, match="max_files_per_commit"):
            load_config()


class TestEnvironment:
    """Test GIT_DIG_* environment variables."""

    def test_int_variable(self, isolated_config, monkeypatch):
        monkeypatch.setenv("GIT_DIG_COUPLING_TOP", "4")
        assert load_config().coupling_top == 4

    def test_optional_string_variable(self, isolated_config, monkeypatch):
        monkeypatch.setenv("GIT_DIG_UNTIL", "2026-01-01")
        assert load_config().until == "2026-01-01"

    def test_literal_variable(self, isolated_config, monkeypatch):
        monkeypatch.setenv("GIT_DIG_VERBOSITY", "quiet")
        assert load_config().verbosity == "quiet"

    def test_env_overrides_files(self, isolated_config, monkeypatch):
        (isolated_config / "git-dig.toml").write_text("author_top = 3\n")
        monkeypatch.setenv("GIT_DIG_AUTHOR_TOP", "8")
        assert load_config().author_top == 8

    def test_bad_value(self, isolated_config, monkeypatch):
        monkeypatch.setenv("GIT_DIG_HOTSPOT_TOP", "many")
        with pytest.raises(InvalidConfigError) as exc_info:
            load_config()
        assert exc_info.value.key == "GIT_DIG_HOTSPOT_TOP"
        assert exc_info.value.value == "many"


class TestOverrides:
    """Test keyword overrides passed by the CLI."""

    def test_override_wins(self, isolated_config, monkeypatch):
        monkeypatch.setenv("GIT_DIG_GIT_MAX_COMMITS", "100")
        assert load_config(git_max_commits=10).git_max_commits == 10

    def test_none_is_ignored(self, isolated_config, monkeypatch):
        monkeypatch.setenv("GIT_DIG_SINCE", "1 week ago")
        config = load_config(since=None, git_max_commits=None)
        assert config.since == "1 week ago"
        assert config.git_max_commits == 5000

    def test_verbose_flag(self, isolated_config):
        assert load_config(verbose=True).verbosity == "verbose"
        assert load_config(verbose=False).verbosity == "normal"

    def test_quiet_flag(self, isolated_config):
        assert load_config(quiet=True).verbosity == "quiet"

    def test_invalid_override(self, isolated_config):
        with pytest.raises(ConfigurationError, match="hotspot_top"):
            load_config(hotspot_top=0)
