import re
from typing import Optional

from cv_enhancer.core.schemas import PersonalInfo


EMAIL_RE = re.compile(r"\b[A-Z0-9._%+-]+@[A-Z0-9.-]+\.[A-Z]{2,}\b", re.IGNORECASE)

# Handles: (555) 123-4567, 555.123.4567, +1 555 123 4567, +44 (20) 7946-0958 x12
PHONE_RE = re.compile(
    r"(?<![\w+])"
    r"(?:\+?\d{1,3}[-. ]?)?"  # Optional country code
    r"\(?\d{2,4}\)?"  # Area code (optional parens)
    r"[-. ]?"
    r"\d{3}"  # Exchange
    r"[-. ]?"
    r"\d{4}"  # Line number
    r"(?:[ ]*(?:x|ext\.?|extension)[ ]*\d{1,5})?"  # Optional extension
    r"(?!\w)",
    re.IGNORECASE,
)

LINKEDIN_RE = re.compile(r"(?:https?://)?(?:www\.)?linkedin\.com/in/[A-Za-z0-9_-]+", re.IGNORECASE)

# Bare domains count too: "janedoe.dev", "www.janedoe.com/work"
URL_RE = re.compile(
    r"(?<![@\w.])"
    r"(?:https?://)?(?:www\.)?"
    r"(?:[A-Za-z0-9][-A-Za-z0-9]*\.)+[A-Za-z]{2,}"
    r"(?:/[^\s]*)?"
    r"(?![@\w])",
    re.IGNORECASE,
)

# "City, State" or "City, State, Country" where every part is a capitalized phrase.
# Scanned per line and per "|"/"•" segment; lines longer than this are prose.
MAX_LOCATION_LINE_CHARS = 160
MAX_PLACE_PARTS = 3
SEGMENT_SPLIT_RE = re.compile(r"[|•·]")


def _first_match(pattern: re.Pattern, text: str) -> str:
    m = pattern.search(text)
    return m.group(0).strip() if m else ""


def extract_name(header: str) -> str:
    """First non-blank line of the header."""
    for line in header.splitlines():
        if line.strip():
            return line.strip()
    return ""


def _is_place_word(word: str) -> bool:
    return word[:1].isupper() and all(ch.isalpha() or ch in ".'-" for ch in word)


def _location_in_segment(segment: str) -> str:
    parts = [part.split() for part in segment.split(",")]
    for start in range(len(parts) - 1):
        head = parts[start]
        i = len(head)
        while i > 0 and _is_place_word(head[i - 1]):
            i -= 1
        if i == len(head):
            continue

        places = [" ".join(head[i:])]
        for words in parts[start + 1:start + MAX_PLACE_PARTS]:
            n = 0
            while n < len(words) and _is_place_word(words[n]):
                n += 1
            if n == 0:
                break
            places.append(" ".join(words[:n]))
            if n < len(words):
                break
        if len(places) > 1:
            return ", ".join(places)
    return ""


def extract_location(header: str) -> str:
    """
    First "City, Region[, Country]" phrase in the header.

    Lines are split into "|" / "•" segments and each segment is scanned word
    by word around its commas. Any Unicode capital letter starts a place word.

    Examples:
        "jane@x.com | San Francisco, CA" -> "San Francisco, CA"
        "Based in Austin, TX 78701"      -> "Austin, TX"
        "São Paulo, Brazil"              -> "São Paulo, Brazil"
    """
    for line in header.splitlines():
        if len(line) > MAX_LOCATION_LINE_CHARS:
            continue
        for segment in SEGMENT_SPLIT_RE.split(line):
            location = _location_in_segment(segment)
            if location:
                return location
    return ""


def extract_portfolio(header: str, linkedin: Optional[str] = None) -> str:
    """First URL-shaped token that is neither the LinkedIn link nor part of an email."""
    for m in URL_RE.finditer(header):
        url = m.group(0).rstrip(".,;)")
        if "@" in url:
            continue
        if "linkedin.com" in url.lower():
            continue
        if linkedin and linkedin.lower() in url.lower():
            continue
        return url
    return ""


def extract_personal_info(header: str) -> PersonalInfo:
    """
    Pull contact details out of the text that precedes the first section heading.

    Every field falls back to "" when nothing matches; this never raises.
    """
    if not header or not header.strip():
        return PersonalInfo()

    linkedin = _first_match(LINKEDIN_RE, header)

    return PersonalInfo(
        full_name=extract_name(header),
        email=_first_match(EMAIL_RE, header),
        phone=_first_match(PHONE_RE, header),
        location=extract_location(header),
        linkedin_handle=linkedin,
        portfolio_url=extract_portfolio(header, linkedin),
    )
