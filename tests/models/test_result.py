#!/usr/bin/env python3
"""
Unit тесты для result.py
"""

import pytest

from gvt_mcp.models.result import OperationResult, OperationStatus, exit_code_for


class TestExitCodes:
    """Тесты для таблицы кодов возврата"""

    @pytest.mark.parametrize(
        "command, status, code",
        [
            (None, OperationStatus.NO_ARGUMENTS, 1),
            ("push", OperationStatus.UNKNOWN_COMMAND, 1),
            ("history", OperationStatus.NOT_INITIALIZED, -2),
            ("history", OperationStatus.IO_FAILURE, -3),
            ("init", OperationStatus.ALREADY_INITIALIZED, 10),
            ("add", OperationStatus.FILE_NOT_FOUND, 21),
            ("add", OperationStatus.INVALID_PATH, 22),
            ("detach", OperationStatus.CORRUPT_STATE, 31),
            ("commit", OperationStatus.IO_FAILURE, 52),
            ("commit", OperationStatus.NOT_TRACKED, 53),
            ("checkout", OperationStatus.INVALID_VERSION, 60),
            ("version", OperationStatus.CORRUPT_STATE, -3),
        ],
    )
    def test_exit_code_for(self, command, status, code):
        """Тест сопоставления статуса и кода возврата"""
        assert exit_code_for(command, status) == code

    def test_notes_exit_with_zero(self):
        """Тест нулевого кода для некритичных результатов"""
        result = OperationResult.note("detach", OperationStatus.NOT_TRACKED, "File is not added to gvt. File: a.txt")

        assert result.ok
        assert result.exit_code == 0

    def test_failure_serializes_status(self):
        """Тест сериализации результата"""
        result = OperationResult.failure("commit", OperationStatus.NOT_TRACKED, "File is not added to gvt. File: a.txt")

        assert result.model_dump()["status"] == "not_tracked"
        assert result.exit_code == 53
