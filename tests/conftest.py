# tests/conftest.py
# Shared filesystem fixtures for path normalization tests.

from __future__ import annotations

from pathlib import Path

import pytest

from pathcanon.paths import PathNormalizer


@pytest.fixture()
def tree(tmp_path: Path) -> Path:
    """Small project layout: README.md and src/pkg/module.py."""
    root = tmp_path / "project"
    (root / "src" / "pkg").mkdir(parents=True)
    (root / "src" / "pkg" / "module.py").write_text("x = 1\n")
    (root / "README.md").write_text("readme\n")
    return root


@pytest.fixture()
def normalizer() -> PathNormalizer:
    return PathNormalizer(follow_symlinks=False)


@pytest.fixture()
def following() -> PathNormalizer:
    return PathNormalizer(follow_symlinks=True)
