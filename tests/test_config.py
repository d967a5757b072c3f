"""Tests for settings files."""

import warnings

import pytest

from edgerouter_tools.config import (
    OUTPUT_FORMATS,
    Config,
    ConfigError,
    check_value,
    find_project_settings,
    read_settings,
    settings_files,
)
from edgerouter_tools.exceptions import ConfigurationError


@pytest.fixture
def project(tmp_path):
    """A repository root holding a project settings file."""
    root = tmp_path / "router-backups"
    root.mkdir()
    (root / ".git").mkdir()
    return root


@pytest.fixture
def user_settings(tmp_path, monkeypatch):
    """Point the user settings file at a temp path and return it."""
    path = tmp_path / "user.toml"
    monkeypatch.setattr("edgerouter_tools.config.USER_CONFIG_PATH", path)
    return path


class TestConfigLoad:
    """Effective settings from the user and project files."""

    def test_defaults_without_files(self, project):
        assert Config.load(project) == Config(
            format="text",
            verbose=False,
            quiet=False,
            default_file="config.boot",
            encoding="utf-8",
        )

    def test_project_file(self, project):
        (project / ".edgerouter-tools.toml").write_text(
            '[defaults]\nformat = "commands"\nquiet = true\n'
            '[input]\ndefault_file = "/config/config.boot"\nencoding = "latin-1"\n'
        )

        config = Config.load(project)

        assert config.format == "commands"
        assert config.quiet is True
        assert config.verbose is False
        assert config.default_file == "/config/config.boot"
        assert config.encoding == "latin-1"

    def test_project_overrides_user(self, project, user_settings):
        user_settings.write_text('[defaults]\nformat = "yaml"\nverbose = true\n')
        (project / "edgerouter-tools.toml").write_text('[defaults]\nformat = "json"\n')

        config = Config.load(project)

        assert config.format == "json"
        assert config.verbose is True

    def test_found_from_subdirectory(self, project):
        (project / ".edgerouter-tools.toml").write_text('[defaults]\nformat = "yaml"\n')
        nested = project / "site-a" / "2024"
        nested.mkdir(parents=True)

        assert Config.load(nested).format == "yaml"

    def test_defaults_to_working_directory(self, isolated_config):
        (isolated_config / ".edgerouter-tools.toml").write_text('[input]\nencoding = "ascii"\n')
        assert Config.load().encoding == "ascii"


class TestSettingsDiscovery:
    """Which files apply, and in what order."""

    def test_hidden_name_preferred(self, project):
        (project / "edgerouter-tools.toml").write_text("")
        hidden = project / ".edgerouter-tools.toml"
        hidden.write_text("")

        assert find_project_settings(project) == hidden

    def test_search_stops_at_repository_root(self, project):
        (project.parent / ".edgerouter-tools.toml").write_text("")
        assert find_project_settings(project) is None

    def test_user_file_comes_first(self, project, user_settings):
        user_settings.write_text("")
        project_file = project / ".edgerouter-tools.toml"
        project_file.write_text("")

        assert settings_files(project) == [user_settings, project_file]

    def test_no_files(self, project):
        assert settings_files(project) == []


class TestValidation:
    """Values are checked before they are applied."""

    @pytest.mark.parametrize("fmt", OUTPUT_FORMATS)
    def test_every_output_format(self, project, fmt):
        (project / ".edgerouter-tools.toml").write_text(f'[defaults]\nformat = "{fmt}"\n')
        assert Config.load(project).format == fmt

    def test_unknown_output_format(self, project):
        (project / ".edgerouter-tools.toml").write_text('[defaults]\nformat = "xml"\n')

        with pytest.raises(ConfigError, match="Invalid output format 'xml'") as exc_info:
            Config.load(project)

        assert "commands" in exc_info.value.suggestions[0]

    @pytest.mark.parametrize("value", ['"no"', '"false"', "0", "1"])
    def test_flags_must_be_booleans(self, project, value):
        (project / ".edgerouter-tools.toml").write_text(f"[defaults]\nverbose = {value}\n")

        with pytest.raises(ConfigError, match="'defaults.verbose' must be a bool"):
            Config.load(project)

    def test_strings_must_be_strings(self, project):
        (project / ".edgerouter-tools.toml").write_text("[input]\nencoding = 8\n")

        with pytest.raises(ConfigError, match="'input.encoding' must be a str, got int"):
            Config.load(project)

    def test_check_value(self):
        assert check_value("defaults.quiet", True, bool, "x.toml") is True

        with pytest.raises(ConfigError) as exc_info:
            check_value("defaults.quiet", "yes", bool, "x.toml")
        assert exc_info.value.context == {"file": "x.toml", "value": "'yes'"}

    def test_error_is_configuration_error(self):
        assert issubclass(ConfigError, ConfigurationError)


class TestUnknownSettings:
    """Unknown names are ignored with a warning."""

    def test_unknown_section(self):
        config = Config()

        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            config.update({"route": {"strategy": "fast"}}, source="a.toml")

        assert len(caught) == 1
        assert "[route]" in str(caught[0].message)
        assert config == Config()

    def test_unknown_key(self):
        config = Config()

        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            config.update({"input": {"colour": "red", "encoding": "ascii"}})

        assert len(caught) == 1
        assert "'input.colour'" in str(caught[0].message)
        assert config.encoding == "ascii"

    def test_key_outside_its_section(self):
        with pytest.warns(UserWarning, match="'input.format'"):
            Config().update({"input": {"format": "json"}})


class TestReadSettings:
    def test_invalid_toml(self, tmp_path):
        path = tmp_path / "bad.toml"
        path.write_text("format = [")

        with pytest.raises(ConfigError, match="Invalid TOML"):
            read_settings(path)

    def test_unreadable(self, tmp_path):
        with pytest.raises(ConfigError, match="Cannot read settings file"):
            read_settings(tmp_path / "missing.toml")
