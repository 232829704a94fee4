"""Tests for core/excludes.py."""

from typeplane.core.excludes import (
    HARDCODED_DIRS,
    PRUNABLE_DIRS,
    is_default_prunable,
    is_hardcoded_dir,
    pruned_dirs,
)


class TestTiers:
    def test_prunable_is_union_of_tiers(self) -> None:
        assert HARDCODED_DIRS <= PRUNABLE_DIRS
        assert "target" in PRUNABLE_DIRS

    def test_vcs_dirs_are_hardcoded(self) -> None:
        assert is_hardcoded_dir(".git")
        assert not is_default_prunable(".git")

    def test_build_dirs_are_default_prunable(self) -> None:
        assert is_default_prunable("build")
        assert not is_hardcoded_dir("build")


class TestPrunedDirs:
    def test_defaults(self) -> None:
        assert pruned_dirs() == PRUNABLE_DIRS

    def test_extra_dirs_added(self) -> None:
        assert "generated" in pruned_dirs(extra={"generated"})

    def test_include_reopens_default_dir(self) -> None:
        assert "out" not in pruned_dirs(include={"out"})

    def test_include_cannot_reopen_hardcoded_dir(self) -> None:
        assert ".git" in pruned_dirs(include={".git"})
