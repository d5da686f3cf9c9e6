# -*- coding: utf-8 -*-
"""
Symlink handling for PathNormalizer in both resolution modes.
These run on Unix-like CI. On Windows, symlink creation needs extra privileges.
"""
import os
import sys

import pytest

from pathcanon.config import Settings
from pathcanon.paths import PathNormalizer, PathResolutionError, canonicalize

pytestmark = pytest.mark.skipif(
    sys.platform.startswith("win"),
    reason="Symlink tests are Unix-focused.",
)


@pytest.fixture()
def links(tree):
    module = tree / "src" / "pkg" / "module.py"
    file_link = tree / "link.py"
    os.symlink(str(module), str(file_link))
    dir_link = tree / "alias"
    os.symlink(str(tree / "src"), str(dir_link))
    dangling = tree / "dangling"
    os.symlink(str(tree / "gone.txt"), str(dangling))
    return module, file_link, dir_link, dangling


def test_default_keeps_link_path(normalizer, links):
    _, file_link, _, _ = links
    assert normalizer.resolve_absolute(file_link) == canonicalize(str(file_link))


def test_follow_resolves_link_target(following, links):
    module, file_link, _, _ = links
    assert following.resolve_absolute(file_link) == canonicalize(os.path.realpath(module))


def test_dangling_link_exists_only_without_following(normalizer, following, links):
    _, _, _, dangling = links
    assert normalizer.to_string(dangling) == canonicalize(str(dangling))
    with pytest.raises(PathResolutionError):
        following.to_string(dangling)
    # Best-effort variant still returns the input.
    assert following.resolve_absolute(dangling) == canonicalize(str(dangling))


def test_exists_follows_links(normalizer, links):
    _, file_link, _, dangling = links
    assert normalizer.exists(str(file_link)) is True
    assert normalizer.exists(str(dangling)) is False


def test_relative_through_directory_link(normalizer, following, tree, links):
    assert normalizer.resolve_relative(tree, "alias/pkg/module.py") == "alias/pkg/module.py"
    assert following.resolve_relative(tree, "alias/pkg/module.py") == "src/pkg/module.py"


def test_link_loop_falls_back(following, tree):
    loop_a = tree / "loop_a"
    loop_b = tree / "loop_b"
    os.symlink(str(loop_b), str(loop_a))
    os.symlink(str(loop_a), str(loop_b))
    with pytest.raises(PathResolutionError):
        following.to_string(loop_a)
    assert following.resolve_relative(tree, "loop_a") == "loop_a"


def test_default_mode_comes_from_settings(monkeypatch, links):
    _, file_link, _, _ = links
    monkeypatch.setattr("pathcanon.paths.normalizer.settings", Settings(follow_symlinks=True))
    normalizer = PathNormalizer()
    assert normalizer.follow_symlinks is True
    assert normalizer.resolve_absolute(file_link) == canonicalize(os.path.realpath(links[0]))
