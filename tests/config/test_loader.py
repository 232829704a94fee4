"""Tests for config/loader.py module.

Covers:
- _load_yaml() function
- _deep_merge() function
- load_config() precedence: defaults < global yaml < repo yaml < env < kwargs
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path
from unittest.mock import patch

import pytest

from typeplane.config.loader import _deep_merge, _load_yaml, load_config
from typeplane.config.models import TypePlaneConfig
from typeplane.core.errors import ConfigError, ErrorCode


@pytest.fixture(autouse=True)
def isolated_global_config(tmp_path: Path) -> Iterator[Path]:
    """Point the global config at a file that does not exist yet."""
    global_path = tmp_path / "global" / "config.yaml"
    with patch("typeplane.config.loader.GLOBAL_CONFIG_PATH", global_path):
        yield global_path


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in list(os.environ):
        if key.upper().startswith("TYPEPLANE__"):
            monkeypatch.delenv(key)


def _write_repo_config(repo: Path, text: str) -> None:
    config_dir = repo / ".typeplane"
    config_dir.mkdir(parents=True, exist_ok=True)
    (config_dir / "config.yaml").write_text(text)


class TestLoadYaml:
    """Tests for _load_yaml function."""

    def test_returns_empty_dict_for_missing_file(self, tmp_path: Path) -> None:
        assert _load_yaml(tmp_path / "nonexistent.yaml") == {}

    def test_loads_valid_yaml(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "config.yaml"
        yaml_file.write_text("diagram:\n  title: model\n")

        assert _load_yaml(yaml_file) == {"diagram": {"title": "model"}}

    def test_returns_empty_for_empty_file(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "empty.yaml"
        yaml_file.write_text("")

        assert _load_yaml(yaml_file) == {}

    def test_raises_on_invalid_yaml(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "bad.yaml"
        yaml_file.write_text("diagram: [unclosed\n")

        with pytest.raises(ConfigError) as exc_info:
            _load_yaml(yaml_file)
        assert exc_info.value.code == ErrorCode.CONFIG_PARSE_ERROR

    def test_raises_on_non_mapping_top_level(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "list.yaml"
        yaml_file.write_text("- a\n- b\n")

        with pytest.raises(ConfigError, match="mapping"):
            _load_yaml(yaml_file)


class TestDeepMerge:
    """Tests for _deep_merge function."""

    def test_nested_dicts_merge(self) -> None:
        base = {"diagram": {"title": "a", "theme": "plain"}}
        override = {"diagram": {"title": "b"}}

        assert _deep_merge(base, override) == {"diagram": {"title": "b", "theme": "plain"}}

    def test_non_dict_replaces(self) -> None:
        assert _deep_merge({"a": {"x": 1}}, {"a": 2}) == {"a": 2}

    def test_base_not_mutated(self) -> None:
        base = {"a": {"x": 1}}
        _deep_merge(base, {"a": {"y": 2}})
        assert base == {"a": {"x": 1}}


class TestLoadConfig:
    """Tests for load_config precedence."""

    def test_defaults(self, tmp_path: Path) -> None:
        config = load_config(tmp_path)

        assert isinstance(config, TypePlaneConfig)
        assert config.source.root == "src/main/java"
        assert config.diagram.output == "docs/diagrams/src/class-diagram.puml"
        assert config.logging.level == "WARNING"

    def test_repo_yaml_applies(self, tmp_path: Path) -> None:
        _write_repo_config(tmp_path, "diagram:\n  title: shop\n  theme: blueprint\n")

        config = load_config(tmp_path)

        assert config.diagram.title == "shop"
        assert config.diagram.theme == "blueprint"
        # untouched keys keep their defaults
        assert config.diagram.hide_empty_members is True

    def test_repo_yaml_overrides_global(
        self, tmp_path: Path, isolated_global_config: Path
    ) -> None:
        isolated_global_config.parent.mkdir(parents=True)
        isolated_global_config.write_text("diagram:\n  title: global\n  theme: plain\n")
        _write_repo_config(tmp_path, "diagram:\n  title: repo\n")

        config = load_config(tmp_path)

        assert config.diagram.title == "repo"
        assert config.diagram.theme == "plain"

    def test_env_overrides_yaml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        _write_repo_config(tmp_path, "diagram:\n  direction: left_to_right\n")
        monkeypatch.setenv("TYPEPLANE__DIAGRAM__DIRECTION", "top_to_bottom")

        config = load_config(tmp_path)

        assert config.diagram.direction == "top_to_bottom"

    def test_kwargs_override_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TYPEPLANE__LOGGING__LEVEL", "INFO")

        config = load_config(tmp_path, logging={"level": "ERROR"})

        assert config.logging.level == "ERROR"

    def test_invalid_value_raises_config_error(self, tmp_path: Path) -> None:
        _write_repo_config(tmp_path, "diagram:\n  direction: sideways\n")

        with pytest.raises(ConfigError) as exc_info:
            load_config(tmp_path)

        assert exc_info.value.code == ErrorCode.CONFIG_INVALID_VALUE
        assert "direction" in exc_info.value.details["field"]

    def test_invalid_yaml_raises_parse_error(self, tmp_path: Path) -> None:
        _write_repo_config(tmp_path, "source: {root: [\n")

        with pytest.raises(ConfigError) as exc_info:
            load_config(tmp_path)

        assert exc_info.value.code == ErrorCode.CONFIG_PARSE_ERROR
