"""Tests for configuration loading."""

import pytest

from codeplan.config import CodeplanConfig, load_config, save_config
from codeplan.errors import ConfigError


def test_load_yaml_config(tmp_path):
    path = tmp_path / "codeplan.yaml"
    path.write_text(
        "validation:\n"
        "  min_prompt_length: 3\n"
        "scoring:\n"
        "  entity_weight: 1.0\n"
        "keywords:\n"
        "  languages: [rust, python]\n"
    )
    cfg = load_config(path)
    assert cfg.validation.min_prompt_length == 3
    assert cfg.validation.max_prompt_length == 1000
    assert cfg.scoring.entity_weight == 1.0
    assert cfg.keywords.languages == ["rust", "python"]
    assert cfg.keywords.frameworks is None


def test_load_json_config(tmp_path):
    path = tmp_path / "codeplan.json"
    path.write_text('{"runtime": {"verbose": true}}')
    assert load_config(path).verbose is True


def test_missing_explicit_config_raises(tmp_path):
    with pytest.raises(ConfigError):
        load_config(tmp_path / "missing.yaml")


def test_non_mapping_config_raises(tmp_path):
    path = tmp_path / "codeplan.yaml"
    path.write_text("- just\n- a list\n")
    with pytest.raises(ConfigError):
        load_config(path)


def test_invalid_values_raise(tmp_path):
    path = tmp_path / "codeplan.yaml"
    path.write_text("validation:\n  min_prompt_length: 50\n  max_prompt_length: 10\n")
    with pytest.raises(ConfigError):
        load_config(path)


def test_log_level_env_override(tmp_path, monkeypatch):
    path = tmp_path / "codeplan.yaml"
    path.write_text("runtime:\n  log_level: WARNING\n")
    monkeypatch.setenv("CODEPLAN_LOG_LEVEL", "debug")
    assert load_config(path).runtime.log_level == "DEBUG"


def test_save_and_reload(tmp_path):
    cfg = CodeplanConfig()
    cfg.scoring.priority_base = 6
    path = save_config(cfg, tmp_path / "nested" / "config.yaml")
    assert load_config(path).scoring.priority_base == 6
