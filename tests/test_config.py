from dataclasses import FrozenInstanceError
from pathlib import Path

import pytest

from comprehension_mask.config import (
    MarkerConfig,
    config_from_dict,
    config_from_yaml,
    load_config,
)


def test_load_config_defaults():
    config = load_config(None)

    assert config == MarkerConfig()
    assert config.to_dict() == {"open_marker": "[", "close_marker": "]", "seed": ""}


def test_config_from_dict_ignores_unknown_keys():
    config = config_from_dict({"open_marker": "(", "volume": 11})

    assert config.open_marker == "("
    assert config.close_marker == "]"


def test_config_from_yaml(tmp_path: Path):
    path = tmp_path / "config.yaml"
    path.write_text('open_marker: "{"\nclose_marker: "}"\nseed: 42\n', encoding="utf-8")

    config = config_from_yaml(path)

    assert config.open_marker == "{"
    assert config.close_marker == "}"
    assert config.seed == "42"


def test_config_from_yaml_rejects_non_mapping(tmp_path: Path):
    path = tmp_path / "config.yaml"
    path.write_text("- one\n- two\n", encoding="utf-8")

    with pytest.raises(ValueError, match="mapping"):
        config_from_yaml(path)


def test_empty_markers_rejected():
    with pytest.raises(ValueError):
        MarkerConfig(open_marker="")


def test_oversized_seed_rejected():
    with pytest.raises(ValueError):
        MarkerConfig(seed="x" * 65)


def test_empty_yaml_values_keep_defaults(tmp_path: Path):
    path = tmp_path / "config.yaml"
    path.write_text("seed:\nopen_marker: ~\nclose_marker: \")\"\n", encoding="utf-8")

    config = config_from_yaml(path)

    assert config.seed == ""
    assert config.open_marker == "["
    assert config.close_marker == ")"


def test_config_is_immutable():
    config = MarkerConfig()

    with pytest.raises(FrozenInstanceError):
        config.open_marker = ""  # type: ignore[misc]
    assert config.open_marker == "["
