"""Unit tests for dotinstall.api.config.DotinstallConfig module."""

import pytest

from dotinstall.api.config.DotinstallConfig import DotinstallConfig

pytestmark = pytest.mark.config


class TestLoad:
    def test_missing_file_gives_defaults(self, dotinstall_home):
        config = DotinstallConfig.load()
        assert config.log.level == "INFO"
        assert config.log.file == "logfile"
        assert config.display.format == "yaml"

    def test_config_path_under_home(self, dotinstall_home):
        assert DotinstallConfig.get_config_path() == dotinstall_home.resolve() / "config.json"

    def test_reads_sections(self, write_config):
        write_config({"log": {"level": "DEBUG", "file": "install.log"}, "display": {"format": "json"}})

        config = DotinstallConfig.load()

        assert config.log.level == "DEBUG"
        assert config.log.file == "install.log"
        assert config.display.format == "json"

    def test_partial_sections_use_defaults(self, write_config):
        write_config({"log": {"level": "ERROR"}})

        config = DotinstallConfig.load()

        assert config.log.file == "logfile"
        assert config.display.format == "yaml"

    def test_invalid_json(self, write_config):
        write_config("{invalid json")
        with pytest.raises(ValueError, match="Invalid JSON"):
            DotinstallConfig.load()

    def test_not_an_object(self, write_config):
        write_config("[1, 2]")
        with pytest.raises(ValueError, match="JSON object"):
            DotinstallConfig.load()

    def test_unknown_section_rejected(self, write_config):
        write_config({"manifest": {}})
        with pytest.raises(ValueError, match="Configuration validation error"):
            DotinstallConfig.load()

    def test_bad_level_names_field(self, write_config):
        write_config({"log": {"level": "LOUD"}})
        with pytest.raises(ValueError, match="log.level"):
            DotinstallConfig.load()


def test_to_dict():
    assert DotinstallConfig().to_dict() == {
        "log": {"level": "INFO", "file": "logfile"},
        "display": {"format": "yaml"},
    }
