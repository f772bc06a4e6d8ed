"""
Date handling for resume entries.

normalize_date() turns a single loose date token into canonical YYYY-MM.
find_date_range() locates a "start - end" expression inside a line, trying the
month-year form before the bare-year form.
"""

import re
from dataclasses import dataclass
from typing import Optional


MONTHS = {
    "jan": "01", "feb": "02", "mar": "03", "apr": "04", "may": "05", "jun": "06",
    "jul": "07", "aug": "08", "sep": "09", "oct": "10", "nov": "11", "dec": "12",
}

_MONTH_ALT = "|".join(MONTHS)

# "Jan 2020", "January 2020", "Sept. 2019", "jan2020"
MONTH_YEAR = rf"(?:{_MONTH_ALT})[a-z]*\.?\s*\d{{4}}"
BARE_YEAR = r"(?:19|20)\d{2}"
ONGOING = r"(?:present|current|now)"

# Hyphen, en-dash, em-dash, or the word "to"
RANGE_SEP = r"(?:\s*[-–—]\s*|\s+to\s+)"

MONTH_RANGE_RE = re.compile(
    rf"\b(?P<start>{MONTH_YEAR})"
    rf"{RANGE_SEP}"
    rf"(?P<end>{MONTH_YEAR}|{BARE_YEAR}|{ONGOING})\b",
    re.IGNORECASE,
)
YEAR_RANGE_RE = re.compile(
    rf"\b(?P<start>{BARE_YEAR})"
    rf"{RANGE_SEP}"
    rf"(?P<end>{BARE_YEAR}|{ONGOING})\b",
    re.IGNORECASE,
)
# Month-year takes precedence when both could match the same line
DATE_RANGE_PATTERNS = (MONTH_RANGE_RE, YEAR_RANGE_RE)

# A single date anywhere in a line (certification issue dates)
SINGLE_DATE_RE = re.compile(rf"\b{MONTH_YEAR}\b|\b{BARE_YEAR}\b", re.IGNORECASE)

ONGOING_RE = re.compile(rf"^{ONGOING}$", re.IGNORECASE)
_YEAR_ONLY_RE = re.compile(r"^\d{4}$")
_MONTH_TOKEN_RE = re.compile(r"^([a-z]{3})[a-z]*\.?\s*(\d{4})$", re.IGNORECASE)


@dataclass(frozen=True)
class DateRange:
    """A date range found in a line of text."""
    text: str  # exact matched substring, so callers can remove it from the line
    start: str  # canonical or verbatim
    end: str  # canonical or verbatim; empty when is_current
    is_current: bool


def normalize_date(token: str) -> str:
    """
    Convert a loose date token to YYYY-MM.

    A bare year maps to January of that year. A month name or abbreviation
    followed by a year maps through the first three letters of the month.
    Anything else yields "" so the caller can decide to keep the raw token.

    Examples:
        "2020"        -> "2020-01"
        "Jan 2020"    -> "2020-01"
        "September 2019" -> "2019-09"
        "garbage"     -> ""
    """
    if not token:
        return ""
    t = token.strip()

    if _YEAR_ONLY_RE.match(t):
        return f"{t}-01"

    m = _MONTH_TOKEN_RE.match(t)
    if m:
        month = MONTHS.get(m.group(1).lower())
        if month:
            return f"{m.group(2)}-{month}"

    return ""


def normalize_or_keep(token: str) -> str:
    """Normalized form of token, or the token itself (trimmed) when unparseable."""
    return normalize_date(token) or (token or "").strip()


def is_ongoing(token: str) -> bool:
    return bool(ONGOING_RE.match((token or "").strip()))


def find_date_range(line: str) -> Optional[DateRange]:
    """
    Find the first date range in a line.

    Returns None when the line holds no recognizable range. An end token of
    Present/Current/Now marks the range as current and leaves end empty.
    """
    if not line:
        return None

    for pattern in DATE_RANGE_PATTERNS:
        m = pattern.search(line)
        if not m:
            continue
        start = normalize_or_keep(m.group("start"))
        end_raw = m.group("end")
        if is_ongoing(end_raw):
            return DateRange(text=m.group(0), start=start, end="", is_current=True)
        return DateRange(text=m.group(0), start=start, end=normalize_or_keep(end_raw), is_current=False)

    return None


def find_single_date(line: str) -> Optional[re.Match]:
    """First month-year or bare-year token in a line, month-year preferred."""
    if not line:
        return None
    return SINGLE_DATE_RE.search(line)
