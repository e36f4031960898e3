#!/usr/bin/env python3
"""
Unit тесты для pointer_store.py
"""

import pytest

from gvt_mcp.tools.gvt.errors import CorruptState, IOFailure
from gvt_mcp.tools.gvt.pointer_store import PointerStore


class TestPointerStore:
    """Тесты для PointerStore"""

    @pytest.fixture
    def store(self, tmp_path):
        """Создает PointerStore во временном каталоге"""
        return PointerStore(tmp_path)

    def test_write_then_read(self, store, tmp_path):
        """Тест записи и чтения указателя"""
        store.write("last_version", 12)

        assert (tmp_path / "last_version").read_text() == "12"
        assert store.read("last_version") == 12

    def test_read_tolerates_whitespace(self, store, tmp_path):
        """Тест чтения значения с пробелами и переводом строки"""
        (tmp_path / "current_version").write_text(" 3\n")

        assert store.read_current() == 3

    @pytest.mark.parametrize("content", ["", "abc", "-1", "1.5"])
    def test_unparsable_pointer_is_corrupt(self, store, tmp_path, content):
        """Тест поврежденного содержимого указателя"""
        (tmp_path / "last_version").write_text(content)

        with pytest.raises(CorruptState):
            store.read_last()

    def test_missing_pointer_is_io_failure(self, store):
        """Тест отсутствующего файла указателя"""
        with pytest.raises(IOFailure):
            store.read_last()

    def test_negative_value_rejected(self, store):
        """Тест запрета отрицательных значений"""
        with pytest.raises(ValueError):
            store.write("last_version", -1)

    def test_advance_moves_both_pointers(self, store):
        """Тест одновременного продвижения обоих указателей"""
        store.advance(4)

        assert store.read_current() == 4
        assert store.read_last() == 4

    def test_non_utf8_pointer_is_corrupt(self, store, tmp_path):
        """Тест указателя с байтами, не являющимися UTF-8"""
        (tmp_path / "current_version").write_bytes(b"\xff\xfe1")

        with pytest.raises(CorruptState, match="UTF-8"):
            store.read_current()
