import pytest

from gridcrawl.dungeon.config import GenerationConfig, load_generation_config
from gridcrawl.exceptions import ConfigError, GridcrawlError


def test_embedded_defaults_match_dataclass_defaults():
    assert load_generation_config() == GenerationConfig()


def test_load_from_yaml_path(tmp_path):
    path = tmp_path / "gen.yaml"
    path.write_text("width: 60\nheight: 45\nmax_rooms: 15\nmin_rooms: 10\n", encoding="utf-8")
    cfg = load_generation_config(str(path))
    assert (cfg.width, cfg.height) == (60, 45)
    assert (cfg.min_rooms, cfg.max_rooms) == (10, 15)
    assert cfg.room_max_size == 9


def test_unknown_keys_ignored(tmp_path, caplog):
    path = tmp_path / "gen.yaml"
    path.write_text("padding: 3\nflavour: spooky\n", encoding="utf-8")
    cfg = load_generation_config(str(path))
    assert cfg.padding == 3
    assert "flavour" in caplog.text


def test_empty_yaml_gives_defaults(tmp_path):
    path = tmp_path / "gen.yaml"
    path.write_text("", encoding="utf-8")
    assert load_generation_config(str(path)) == GenerationConfig()


@pytest.mark.parametrize(
    "overrides",
    [
        {"room_min_size": 0},
        {"room_min_size": 8, "room_max_size": 5},
        {"width": 10, "room_max_size": 9},
        {"min_rooms": 5, "max_rooms": 2},
        {"max_attempts": -1},
        {"padding": -1},
        {"width": 2},
    ],
)
def test_invalid_values_raise_config_error(overrides):
    with pytest.raises(ConfigError):
        GenerationConfig(**overrides)


def test_non_mapping_and_non_integer_yaml_rejected(tmp_path):
    path = tmp_path / "gen.yaml"
    path.write_text("- 1\n- 2\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_generation_config(str(path))
    path.write_text("width: wide\n", encoding="utf-8")
    with pytest.raises(GridcrawlError):
        load_generation_config(str(path))
