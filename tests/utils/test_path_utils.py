#!/usr/bin/env python3
"""
Unit тесты для path_utils.py
"""

from pathlib import Path

import pytest

from gvt_mcp.tools.base import ToolError
from gvt_mcp.tools.gvt.errors import InvalidPath
from gvt_mcp.utils.path_utils import resolve_tracked_path, resolve_working_dir


def make_dir_symlink(link, target):
    """Создает символическую ссылку на каталог или пропускает тест"""
    try:
        link.symlink_to(target, target_is_directory=True)
    except (OSError, NotImplementedError):
        pytest.skip("symlinks are not supported on this platform")


class TestResolveTrackedPath:
    """Тесты для resolve_tracked_path"""

    @pytest.fixture
    def workdir(self, tmp_path):
        return tmp_path.resolve()

    @pytest.mark.parametrize(
        "path_str, expected",
        [
            ("a.txt", "a.txt"),
            ("./docs/a.md", "docs/a.md"),
            ("docs/../b.txt", "b.txt"),
            ("docs/version_details", "docs/version_details"),
        ],
    )
    def test_normalizes_relative_paths(self, workdir, path_str, expected):
        """Тест нормализации относительных путей"""
        assert resolve_tracked_path(workdir, path_str) == Path(expected)

    def test_accepts_absolute_path_inside(self, workdir):
        """Тест абсолютного пути внутри рабочего каталога"""
        assert resolve_tracked_path(workdir, str(workdir / "x" / "y.txt")) == Path("x/y.txt")

    @pytest.mark.parametrize("path_str", ["../a.txt", "/etc/passwd", ".gvt/0/a.txt", "version_details", "", "  ", "."])
    def test_rejects_invalid_paths(self, workdir, path_str):
        """Тест отклонения недопустимых путей"""
        with pytest.raises(InvalidPath):
            resolve_tracked_path(workdir, path_str)

    def test_custom_repository_dir(self, workdir):
        """Тест пользовательского имени каталога репозитория"""
        assert resolve_tracked_path(workdir, ".gvt/a.txt", repository_dir=".versions") == Path(".gvt/a.txt")
        with pytest.raises(InvalidPath):
            resolve_tracked_path(workdir, ".versions/a.txt", repository_dir=".versions")


    def test_rejects_symlink_outside_working_dir(self, workdir, tmp_path_factory):
        """Тест пути через ссылку на внешний каталог"""
        outside = tmp_path_factory.mktemp("outside")
        (outside / "secret.txt").write_text("secret")
        make_dir_symlink(workdir / "link", outside)

        with pytest.raises(InvalidPath, match="resolves outside"):
            resolve_tracked_path(workdir, "link/secret.txt")

    def test_rejects_symlink_into_repository_dir(self, workdir):
        """Тест пути через ссылку на каталог репозитория"""
        (workdir / ".gvt" / "0").mkdir(parents=True)
        make_dir_symlink(workdir / "meta", workdir / ".gvt")

        with pytest.raises(InvalidPath, match="inside the repository"):
            resolve_tracked_path(workdir, "meta/0/version_details")

    def test_accepts_symlink_within_working_dir(self, workdir):
        """Тест ссылки, которая остается внутри рабочего каталога"""
        (workdir / "real").mkdir()
        make_dir_symlink(workdir / "alias", workdir / "real")

        assert resolve_tracked_path(workdir, "alias/a.txt") == Path("alias/a.txt")

class TestResolveWorkingDir:
    """Тесты для resolve_working_dir"""

    def test_existing_directory(self, tmp_path):
        """Тест существующего каталога"""
        assert resolve_working_dir(str(tmp_path)) == tmp_path.resolve()

    def test_missing_directory(self, tmp_path):
        """Тест отсутствующего каталога"""
        with pytest.raises(ToolError):
            resolve_working_dir(str(tmp_path / "missing"))

    def test_relative_to_workspace_root(self, tmp_path):
        """Тест относительного пути внутри рабочего пространства"""
        (tmp_path / "project").mkdir()

        assert resolve_working_dir("project", tmp_path) == (tmp_path / "project").resolve()

    def test_escape_from_workspace_root(self, tmp_path):
        """Тест выхода за пределы рабочего пространства"""
        (tmp_path / "root").mkdir()

        with pytest.raises(ToolError, match="outside the workspace root"):
            resolve_working_dir("..", tmp_path / "root")
