"""utils/text.py のテスト"""

from koyomi.utils.text import is_empty


class TestIsEmpty:
    def test_none(self):
        assert is_empty(None) is True

    def test_empty_string(self):
        assert is_empty('') is True

    def test_whitespace_is_not_empty(self):
        assert is_empty(' ') is False

    def test_text(self):
        assert is_empty('2024/01/01') is False
