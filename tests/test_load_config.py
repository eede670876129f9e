"""Tests for configuration loading and merging."""

from pathlib import Path

import yaml

from rar_analyzer.deep_merge import deep_merge
from rar_analyzer.load_config import DEFAULT_CONFIG, load_config


def test_deep_merge_scalars() -> None:
    """Verify scalar replacement in deep merge."""
    base = {"a": 1, "b": 2}
    update = {"b": 3, "c": 4}
    assert deep_merge(base, update) == {"a": 1, "b": 3, "c": 4}


def test_deep_merge_nested() -> None:
    """Verify recursive merging of dictionaries."""
    base = {"nested": {"x": 1, "y": 2}}
    update = {"nested": {"y": 3, "z": 4}}
    assert deep_merge(base, update) == {"nested": {"x": 1, "y": 3, "z": 4}}


def test_deep_merge_arrays_replace() -> None:
    """Verify that arrays are replaced by default."""
    assert deep_merge({"arr": [1, 2]}, {"arr": [3, 4]}) == {"arr": [3, 4]}


def test_deep_merge_does_not_mutate_base() -> None:
    """Verify that merging leaves the base mapping untouched."""
    base = {"nested": {"x": 1}}
    deep_merge(base, {"nested": {"x": 2}})
    assert base == {"nested": {"x": 1}}


def test_load_config_defaults() -> None:
    """Verify that default config is loaded when no path is provided."""
    config = load_config(None)
    assert config["task_names"] == ["ResolveAssemblyReference"]
    assert config["report"]["used_title"] == "Used search-path locations"


def test_load_config_missing_file(tmp_path: Path) -> None:
    """Verify that a missing file falls back to defaults."""
    assert load_config(str(tmp_path / "absent.yml")) == DEFAULT_CONFIG


def test_load_config_with_file(tmp_path: Path) -> None:
    """Verify that user config correctly overrides defaults."""
    config_file = tmp_path / "config.yml"
    config_data = {
        "task_names": ["CustomResolveReferences"],
        "report": {"unused_title": "Stale probing paths"},
    }
    config_file.write_text(yaml.dump(config_data))

    loaded = load_config(str(config_file))

    assert loaded["task_names"] == ["CustomResolveReferences"]
    assert loaded["report"]["unused_title"] == "Stale probing paths"
    assert loaded["report"]["used_title"] == "Used search-path locations"


def test_load_config_does_not_mutate_defaults(tmp_path: Path) -> None:
    """Verify that callers editing the result leave the defaults intact."""
    config = load_config(None)
    config["report"]["used_title"] = "changed"
    assert DEFAULT_CONFIG["report"]["used_title"] == "Used search-path locations"
