from pathlib import Path

from anno_consumption.config import DEFAULT_CATEGORIES, Config, get_config, reload_config


def test_defaults_match_wiki_layout():
    config = Config(_env_file=None)

    assert config.categories == DEFAULT_CATEGORIES
    assert len(config.categories) == 11
    assert config.cache_path == Path("./temp/data/data.txt")
    assert config.output_path == Path("./temp/consumption.txt")
    assert config.residence_url("Elder") == "https://anno1800.fandom.com/wiki/Elder_Residence"


def test_labeled_cache_path():
    config = Config(_env_file=None, cache_format="labeled")
    assert config.cache_path.name == "data.json"


def test_environment_overrides(env_config, tmp_path):
    assert env_config.categories == ("Farmer", "Worker")
    assert env_config.temp_dir == tmp_path / "temp"
    assert get_config() is env_config


def test_reload_config_returns_fresh_instance():
    first = get_config()
    assert reload_config() is not first
