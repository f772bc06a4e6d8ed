"""Tests for date token normalization and date-range detection."""

import pytest

from cv_enhancer.core.date_normalizer import (
    MONTHS,
    find_date_range,
    find_single_date,
    is_ongoing,
    normalize_date,
    normalize_or_keep,
)


class TestNormalizeDate:
    @pytest.mark.parametrize(
        "token,expected",
        [
            ("2020", "2020-01"),
            ("Jan 2020", "2020-01"),
            ("january 2020", "2020-01"),
            ("September 2019", "2019-09"),
            ("Sept. 2019", "2019-09"),
            ("dec2018", "2018-12"),
        ],
    )
    def test_known_forms(self, token, expected):
        assert normalize_date(token) == expected

    def test_unparseable_is_empty(self):
        assert normalize_date("garbage") == ""
        assert normalize_date("Spring 2019") == ""
        assert normalize_date("") == ""

    def test_normalize_or_keep_keeps_raw_token(self):
        assert normalize_or_keep("Spring 2019") == "Spring 2019"
        assert normalize_or_keep(" Mar 2017 ") == "2017-03"


def test_is_ongoing():
    assert is_ongoing("Present")
    assert is_ongoing("current")
    assert is_ongoing("NOW")
    assert not is_ongoing("2020")


def test_month_range_to_present_is_current():
    dr = find_date_range("Jan 2020 - Present")
    assert dr is not None
    assert dr.start == "2020-01"
    assert dr.end == ""
    assert dr.is_current is True


@pytest.mark.parametrize("word", ["Current", "Now", "present"])
def test_ongoing_synonyms(word):
    dr = find_date_range(f"Mar 2018 – {word}")
    assert dr.is_current is True
    assert dr.end == ""


def test_year_range_with_en_dash():
    dr = find_date_range("2018 – 2021")
    assert (dr.start, dr.end, dr.is_current) == ("2018-01", "2021-01", False)


def test_range_with_to_separator():
    dr = find_date_range("Mar 2017 to Dec 2019")
    assert (dr.start, dr.end) == ("2017-03", "2019-12")


def test_range_inside_longer_line_reports_matched_text():
    dr = find_date_range("Acme Corp | Jun 2015 - 2018")
    assert dr.text == "Jun 2015 - 2018"
    assert dr.start == "2015-06"
    assert dr.end == "2018-01"


def test_no_range():
    assert find_date_range("Led a team of five engineers") is None
    assert find_date_range("") is None


def test_find_single_date_prefers_month_year():
    m = find_single_date("Issued Mar 2021 by AWS")
    assert m.group(0) == "Mar 2021"
    assert find_single_date("no date here") is None


@pytest.mark.parametrize("year", ["1900", "1999", "2099"])
def test_every_month_abbreviation(year):
    for abbrev, number in MONTHS.items():
        assert normalize_date(f"{abbrev.title()} {year}") == f"{year}-{number}"
