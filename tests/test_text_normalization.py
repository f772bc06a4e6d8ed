"""
Unit tests for text_normalization module.

Covers the artifacts PDF and DOCX extraction leave in resume text.
"""

from cv_enhancer.core.text_normalization import normalize_line_endings, normalize_raw_text


class TestNormalizeRawText:
    def test_crlf_and_nbsp(self):
        assert normalize_raw_text("Jane Doe\r\nSKILLS\u00a0:") == "Jane Doe\nSKILLS :"

    def test_zero_width_removed(self):
        assert normalize_raw_text("Py\u200bthon\ufeff") == "Python"

    def test_tabs_and_trailing_whitespace(self):
        assert normalize_raw_text("a\tb   \nc\t") == "a b\nc"

    def test_blank_lines_are_kept(self):
        assert normalize_raw_text("a\n\n\nb") == "a\n\n\nb"

    def test_dashes_untouched(self):
        assert normalize_raw_text("2019 – 2021") == "2019 – 2021"

    def test_empty(self):
        assert normalize_raw_text("") == ""


def test_old_mac_line_endings():
    assert normalize_line_endings("a\rb\r\nc") == "a\nb\nc"
