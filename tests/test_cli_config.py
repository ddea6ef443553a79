import json

import pytest

from library_catalog.utils.cli_config import CLIConfig, DEFAULT_CONFIG


@pytest.fixture
def config(tmp_path):
    return CLIConfig(tmp_path)


def test_defaults_written_on_first_use(config):
    assert config.config_file.exists()
    assert config.get("preferences.confirm_remove") is False
    assert config.get_alias("rm") == "remove"


def test_set_refuses_to_replace_a_section(config):
    with pytest.raises(ValueError, match="section"):
        config.set("aliases", "x")

    assert config.list_aliases() == DEFAULT_CONFIG["aliases"]
    assert json.loads(config.config_file.read_text(encoding="utf-8"))["aliases"] == DEFAULT_CONFIG["aliases"]


def test_aliases_stored_as_non_mapping_are_ignored(tmp_path):
    (tmp_path / "config.json").write_text(json.dumps({"aliases": "x"}), encoding="utf-8")

    config = CLIConfig(tmp_path)

    assert config.list_aliases() == {}
    assert config.get_alias("s") == "s"
    config.add_alias("s", "search")
    assert config.get_alias("S") == "search"


def test_non_object_config_file_falls_back_to_defaults(tmp_path):
    (tmp_path / "config.json").write_text("[1, 2]", encoding="utf-8")

    config = CLIConfig(tmp_path)

    assert config.config == DEFAULT_CONFIG
