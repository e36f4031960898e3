#!/usr/bin/env python3
"""
Unit тесты для gvt_tool.py
"""

import pytest

from gvt_mcp.tools.gvt.manager import RepositoryManager
from gvt_mcp.tools.gvt_tool import GvtTool


class TestGvtTool:
    """Тесты для GvtTool"""

    @pytest.fixture
    def gvt_tool(self):
        """Создает экземпляр GvtTool"""
        return GvtTool(repository_manager=RepositoryManager())

    @pytest.fixture
    def workdir(self, tmp_path):
        """Создает рабочий каталог с одним файлом"""
        work = tmp_path / "work"
        work.mkdir()
        (work / "a.txt").write_text("hello")
        return work

    def test_input_schema(self, gvt_tool):
        """Тест схемы параметров инструмента"""
        schema = gvt_tool.get_input_schema()

        assert gvt_tool.name == "gvt"
        assert schema["required"] == ["command", "path"]
        assert "checkout" in schema["properties"]["command"]["enum"]
        assert schema["properties"]["limit"]["type"] == "integer"
        assert "checkout" in schema["description"]

    @pytest.mark.asyncio
    async def test_init_add_history(self, gvt_tool, workdir):
        """Тест последовательности init, add, history"""
        path = str(workdir)

        result = await gvt_tool.execute({"command": "init", "path": path})
        assert result.error is None
        assert result.output == "Current directory initialized successfully."
        assert result.error_code == 0

        result = await gvt_tool.execute({"command": "add", "path": path, "file": "a.txt", "message": "Add a"})
        assert result.output == "File added successfully. File: a.txt"

        result = await gvt_tool.execute({"command": "history", "path": path})
        assert result.output == "1: Add a\n0: GVT initialized."

        result = await gvt_tool.execute({"command": "status", "path": path})
        assert result.output == "Version: 1\na.txt"

    @pytest.mark.asyncio
    async def test_checkout_restores_file(self, gvt_tool, workdir):
        """Тест восстановления файла через checkout"""
        path = str(workdir)
        await gvt_tool.execute({"command": "init", "path": path})
        await gvt_tool.execute({"command": "add", "path": path, "file": "a.txt"})
        (workdir / "a.txt").write_text("world")
        await gvt_tool.execute({"command": "commit", "path": path, "file": "a.txt"})

        result = await gvt_tool.execute({"command": "checkout", "path": path, "version": 1})

        assert result.output == "Checkout successful for version: 1"
        assert (workdir / "a.txt").read_text() == "hello"

    @pytest.mark.asyncio
    async def test_error_results(self, gvt_tool, workdir):
        """Тест ошибок операций"""
        path = str(workdir)

        result = await gvt_tool.execute({"command": "add", "path": path, "file": "a.txt"})
        assert result.error_code == -2
        assert "not initialized" in result.error

        await gvt_tool.execute({"command": "init", "path": path})
        result = await gvt_tool.execute({"command": "add", "path": path, "file": "missing.txt"})
        assert result.error == "File not found. File: missing.txt"
        assert result.error_code == 21

        result = await gvt_tool.execute({"command": "checkout", "path": path, "version": "99"})
        assert result.error == "Invalid version number: 99"
        assert result.error_code == 60

    @pytest.mark.asyncio
    async def test_already_tracked_is_not_an_error(self, gvt_tool, workdir):
        """Тест повторного добавления без ошибки"""
        path = str(workdir)
        await gvt_tool.execute({"command": "init", "path": path})
        await gvt_tool.execute({"command": "add", "path": path, "file": "a.txt"})

        result = await gvt_tool.execute({"command": "add", "path": path, "file": "a.txt"})

        assert result.error is None
        assert result.output == "File already added. File: a.txt"
        assert result.error_code == 0

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "arguments",
        [
            {"command": "push", "path": "."},
            {"command": "init"},
            {"command": "history", "path": ".", "limit": "3"},
            {"command": "add", "path": ".", "file": 5},
        ],
    )
    async def test_invalid_arguments(self, gvt_tool, arguments):
        """Тест недопустимых аргументов"""
        result = await gvt_tool.execute(arguments)

        assert result.error
        assert result.error_code == 1

    @pytest.mark.asyncio
    async def test_path_must_be_directory(self, gvt_tool, workdir):
        """Тест пути, не являющегося каталогом"""
        result = await gvt_tool.execute({"command": "init", "path": str(workdir / "a.txt")})

        assert "not a directory" in result.error
        assert result.error_code == 1

    @pytest.mark.asyncio
    async def test_workspace_root_sandbox(self, tmp_path, workdir):
        """Тест ограничения рабочим пространством"""
        sandbox = tmp_path / "sandbox"
        sandbox.mkdir()
        tool = GvtTool(repository_manager=RepositoryManager(), workspace_root=sandbox)

        result = await tool.execute({"command": "init", "path": str(workdir)})
        assert "outside the workspace root" in result.error

        (sandbox / "project").mkdir()
        result = await tool.execute({"command": "init", "path": "project"})
        assert result.error_code == 0
        assert (sandbox / "project" / ".gvt" / "0").is_dir()
