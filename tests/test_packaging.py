"""Tests for project metadata."""

import tomllib
from pathlib import Path

import typeplane

ROOT = Path(__file__).parent.parent


def _project() -> dict:
    with (ROOT / "pyproject.toml").open("rb") as f:
        return tomllib.load(f)["project"]


def test_readme_is_user_facing() -> None:
    readme = _project()["readme"]

    assert readme == "README.md"
    assert (ROOT / readme).read_text().startswith("# TypePlane")


def test_package_imported_from_source_tree() -> None:
    assert Path(typeplane.__file__).resolve().is_relative_to((ROOT / "src").resolve())


def test_version_matches_metadata() -> None:
    assert typeplane.__version__ == _project()["version"]
