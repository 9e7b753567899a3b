"""
Tests for vetter.strings helpers.
"""

from functools import cmp_to_key

import pytest

from vetter.strings import (
    keyword_compare,
    numeric_compare,
    readable_size,
    safe_parse_float,
    safe_parse_int,
    zfill,
)


class TestZfill:
    def test_pads(self):
        assert zfill(5) == "05"
        assert zfill(5, 3) == "005"

    def test_no_truncation(self):
        assert zfill(1234, 2) == "1234"


class TestKeywordCompare:
    def test_subsequence(self):
        assert keyword_compare("hw", "Hello World")
        assert keyword_compare("HLO", "hello")

    def test_order_matters(self):
        assert not keyword_compare("wh", "Hello World")

    def test_empty_keyword(self):
        assert keyword_compare("", "anything")

    def test_special_characters(self):
        assert keyword_compare("a.b", "a-x.b")
        assert not keyword_compare("a.b", "axb")


class TestNumericCompare:
    def test_numbers(self):
        assert numeric_compare("9", "10") < 0
        assert numeric_compare("123", "123") == 0

    def test_long_integers(self):
        assert numeric_compare("1" * 5000, "2") > 0
        assert numeric_compare("2", "1" * 5000) < 0
        assert numeric_compare("9" * 5000, "9" * 5000) == 0

    def test_leading_zero_is_text(self):
        assert numeric_compare("019", "12") < 0

    def test_sorting(self):
        items = ["10", "9", "019", "12"]
        assert sorted(items, key=cmp_to_key(numeric_compare)) == ["019", "9", "10", "12"]


class TestSafeParse:
    @pytest.mark.parametrize(
        "value, expected",
        [("42", 42), (" 7 ", 7), (3.9, 3), (12, 12), ("4x", None), ("", None)],
    )
    def test_int(self, value, expected):
        assert safe_parse_int(value) == expected

    def test_int_fallback_and_base(self):
        assert safe_parse_int("oops", 0) == 0
        assert safe_parse_int("ff", base=16) == 255
        assert safe_parse_int(float("nan"), -1) == -1

    def test_int_rejects_bool_and_partial_strings(self):
        assert safe_parse_int(True, 0) == 0
        assert safe_parse_int(False) is None
        assert safe_parse_int("12abc") is None

    def test_float(self):
        assert safe_parse_float("1.5", 0.0) == 1.5
        assert safe_parse_float(2, 0.0) == 2.0
        assert safe_parse_float("abc", 1.0) == 1.0
        assert safe_parse_float("nan", 2.0) == 2.0


class TestReadableSize:
    def test_bytes(self):
        assert readable_size(512) == "512 B"

    def test_binary(self):
        assert readable_size(1536) == "1.5 KiB"
        assert readable_size(1024**2) == "1.0 MiB"

    def test_si(self):
        assert readable_size(1500, si=True) == "1.5 kB"

    def test_decimal_places(self):
        assert readable_size(1536, dp=2) == "1.50 KiB"
