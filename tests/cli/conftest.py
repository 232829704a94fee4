"""Shared fixtures for CLI tests."""

from collections.abc import Generator
from pathlib import Path
from unittest.mock import patch

import pytest

SOURCES = {
    "pa/A.java": "package pa;\n\npublic interface A {}\n",
    "pb/B.java": (
        "package pb;\n\n"
        "import pa.A;\n\n"
        "public class B implements A {\n"
        "    private A delegate;\n"
        "    public static class Builder {}\n"
        "}\n"
    ),
    "pb/E.java": "package pb;\n\npublic enum E implements pa.A { ONE, TWO }\n",
}


@pytest.fixture
def java_repo(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[Path, None, None]:
    """A repository with a Maven-style source root, used as the working directory."""
    repo = tmp_path / "repo"
    root = repo / "src" / "main" / "java"
    for rel, text in SOURCES.items():
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text)

    monkeypatch.chdir(repo)
    for key in ("TYPEPLANE__LOGGING__LEVEL", "TYPEPLANE__DIAGRAM__OUTPUT"):
        monkeypatch.delenv(key, raising=False)
    with patch("typeplane.config.loader.GLOBAL_CONFIG_PATH", tmp_path / "global.yaml"):
        yield repo
