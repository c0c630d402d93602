from pathlib import Path

import pytest

from writing_intelligence.config import (
    EngineConfig,
    OpenAISettings,
    config_from_dict,
    load_config,
)


def test_load_config_defaults():
    cfg = load_config()

    assert cfg == EngineConfig()
    assert cfg.debounce_ms == 600
    assert cfg.min_report_chars == 10
    assert cfg.words_per_minute == 238


def test_load_config_from_yaml(tmp_path: Path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "debounce_ms: 300\nopenai:\n  model: gpt-4o-mini\n  temperature: 0.2\n",
        encoding="utf-8",
    )
    cfg = load_config(path)

    assert cfg.debounce_ms == 300
    assert cfg.openai.model == "gpt-4o-mini"
    assert cfg.openai.temperature == 0.2
    assert cfg.min_report_chars == 10


def test_yaml_must_be_a_mapping(tmp_path: Path):
    path = tmp_path / "config.yaml"
    path.write_text("- not\n- a mapping\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(path)


def test_config_from_dict_ignores_unknown_keys():
    cfg = config_from_dict({"max_actions": 2, "unknown": True})
    assert cfg.max_actions == 2


def test_config_from_dict_accepts_settings_instance():
    settings = OpenAISettings(model="custom")
    assert config_from_dict({"openai": settings}).openai is settings


def test_openai_block_must_be_a_mapping():
    with pytest.raises(ValueError):
        config_from_dict({"openai": "gpt-4"})


def test_to_dict_round_trips_through_config_from_dict():
    cfg = EngineConfig(debounce_ms=900)
    assert config_from_dict(cfg.to_dict()) == cfg
