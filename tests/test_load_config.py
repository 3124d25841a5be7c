"""Tests for configuration loading and merging."""

from pathlib import Path

import yaml

from component_docs.button_defaults import ButtonDefaults
from component_docs.deep_merge import deep_merge
from component_docs.load_config import DEFAULT_CONFIG, load_config
from component_docs.style_tokens import Size


def test_deep_merge_scalars() -> None:
    """Verify scalar replacement in deep merge."""
    merged = deep_merge({"a": 1, "b": 2}, {"b": 3, "c": 4})
    assert merged == {"a": 1, "b": 3, "c": 4}


def test_deep_merge_nested() -> None:
    """Verify recursive merging of dictionaries."""
    base = {"nested": {"x": 1, "y": 2}}
    merged = deep_merge(base, {"nested": {"y": 3, "z": 4}})
    assert merged == {"nested": {"x": 1, "y": 3, "z": 4}}
    assert base == {"nested": {"x": 1, "y": 2}}


def test_deep_merge_lists_replace_and_none_keeps() -> None:
    """Verify lists replace and None keeps the base value."""
    merged = deep_merge({"arr": [1, 2], "keep": "x"}, {"arr": [3], "keep": None})
    assert merged == {"arr": [3], "keep": "x"}


def test_load_config_defaults() -> None:
    """Verify defaults are returned when no path is provided."""
    config = load_config(None)
    assert config == DEFAULT_CONFIG
    config["section_titles"]["see_also"] = "Changed"
    assert DEFAULT_CONFIG["section_titles"]["see_also"] == "See Also"


def test_load_config_missing_file(tmp_path: Path) -> None:
    """Verify a missing config file falls back to defaults."""
    assert load_config(str(tmp_path / "nope.yml")) == DEFAULT_CONFIG


def test_load_config_with_file(tmp_path: Path) -> None:
    """Verify user config overrides defaults."""
    config_file = tmp_path / "config.yml"
    config_file.write_text(
        yaml.dump(
            {
                "api_root": "/components",
                "section_titles": {"see_also": "Related"},
                "button_defaults": {"size": "small"},
            }
        )
    )
    loaded = load_config(str(config_file))
    assert loaded["api_root"] == "/components"
    assert loaded["section_titles"]["see_also"] == "Related"
    assert loaded["section_titles"]["properties"] == "Properties"
    assert ButtonDefaults.from_config(loaded) == ButtonDefaults(size=Size.SMALL)
