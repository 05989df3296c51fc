"""Tests for YAML config management."""

import pytest
import yaml

from hintmode import config
from hintmode.config import NavConfig
from hintmode.labels import HintStyle
from hintmode.types import HintPosition, TargetPriority


@pytest.fixture
def config_env(tmp_path, monkeypatch):
    """Point the config dir at a temp directory."""
    config_dir = tmp_path / "hintmode"
    monkeypatch.setattr(config, "get_config_dir", lambda: config_dir)
    return config_dir


class TestNavConfig:
    def test_defaults(self):
        cfg = NavConfig()
        assert cfg.hint_key == "f"
        assert cfg.hint_charset == "asdfghjkl"
        assert cfg.max_hints == 0
        assert cfg.max_code_length == 3
        assert cfg.min_target_area == 1
        assert cfg.min_priority == TargetPriority.LOW
        assert cfg.compact_hints is False
        assert cfg.hint_position == HintPosition.TOP_LEFT

    def test_empty_charset_rejected(self):
        with pytest.raises(ValueError):
            NavConfig(hint_charset="")

    def test_bad_hint_key_rejected(self):
        with pytest.raises(ValueError):
            NavConfig(hint_key="ff")

    def test_negative_limit_rejected(self):
        with pytest.raises(ValueError):
            NavConfig(max_hints=-3)

    def test_from_dict(self):
        cfg = NavConfig.from_dict(
            {
                "hint_key": "g",
                "hint_charset": "abcdef",
                "max_hints": 50,
                "min_target_area": 10,
                "min_priority": "normal",
                "hint_position": "center",
                "style": {"matched": "bold red", "unknown": "x"},
            }
        )
        assert cfg.hint_key == "g"
        assert cfg.hint_charset == "abcdef"
        assert cfg.max_hints == 50
        assert cfg.min_target_area == 10
        assert cfg.min_priority == TargetPriority.NORMAL
        assert cfg.hint_position == HintPosition.CENTER
        assert cfg.style == HintStyle(matched="bold red")

    def test_from_dict_invalid_priority(self):
        with pytest.raises(ValueError):
            NavConfig.from_dict({"min_priority": "urgent"})

    def test_to_dict_round_trip(self):
        cfg = NavConfig(hint_charset="jkl", compact_hints=True, min_priority=TargetPriority.HIGH)
        assert NavConfig.from_dict(cfg.to_dict()) == cfg


class TestLoadConfig:
    def test_load_defaults_when_missing(self, config_env):
        assert config.load_config() == NavConfig()

    def test_save_and_load(self, config_env):
        config.save_config(NavConfig(hint_charset="jk", max_hints=20))
        loaded = config.load_config()
        assert loaded.hint_charset == "jk"
        assert loaded.max_hints == 20

    def test_partial_file_merges_defaults(self, config_env):
        config_env.mkdir()
        with open(config_env / "config.yaml", "w") as f:
            yaml.dump({"max_code_length": 2, "style": {"text": "white on blue"}}, f)

        cfg = config.load_config()
        assert cfg.max_code_length == 2
        assert cfg.hint_charset == "asdfghjkl"
        assert cfg.style.text == "white on blue"
        assert cfg.style.matched == HintStyle().matched

    def test_corrupt_yaml_falls_back(self, config_env, caplog):
        config_env.mkdir()
        (config_env / "config.yaml").write_text("hint_key: [unclosed")
        with caplog.at_level("WARNING", logger="hintmode.config"):
            assert config.load_config() == NavConfig()
        assert "unreadable" in caplog.text

    def test_invalid_values_fall_back(self, config_env, caplog):
        config_env.mkdir()
        (config_env / "config.yaml").write_text("hint_charset: aa\n")
        with caplog.at_level("WARNING", logger="hintmode.config"):
            assert config.load_config() == NavConfig()
        assert "Invalid" in caplog.text

    def test_non_mapping_yaml(self, config_env):
        config_env.mkdir()
        (config_env / "config.yaml").write_text("- just\n- a list\n")
        assert config.load_config() == NavConfig()

    def test_explicit_path(self, tmp_path):
        path = tmp_path / "custom.yaml"
        path.write_text("hint_key: g\n")
        assert config.load_config(path).hint_key == "g"

    def test_config_dir_respects_xdg(self, tmp_path, monkeypatch):
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
        assert config.get_config_path() == tmp_path / "hintmode" / "config.yaml"
