"""
Raw-text cleanup applied before section segmentation.

Extraction layers hand over text with Windows line endings, non-breaking
spaces and zero-width characters. These break line-anchored heading detection
and blank-line entry splitting, so they are normalized here. En/em dashes are
kept as-is: the date-range patterns accept them.
"""

import re


# NBSP, thin/figure/ideographic spaces, etc.
UNICODE_SPACES_RE = re.compile(r"[\u00a0\u1680\u2000-\u200a\u202f\u205f\u3000]")
ZERO_WIDTH_RE = re.compile(r"[\u200b\u200c\u200d\u2060\ufeff]")
TRAILING_WS_RE = re.compile(r"[ \t]+$", re.MULTILINE)


def normalize_line_endings(text: str) -> str:
    return text.replace("\r\n", "\n").replace("\r", "\n")


def normalize_raw_text(text: str) -> str:
    """
    Normalize extracted resume text without changing its line structure.

    Examples:
        "Jane Doe\\r\\nSKILLS\\u00a0:" -> "Jane Doe\\nSKILLS :"
        "Py\\u200bthon"               -> "Python"
    """
    if not text:
        return ""
    t = normalize_line_endings(text)
    t = ZERO_WIDTH_RE.sub("", t)
    t = UNICODE_SPACES_RE.sub(" ", t)
    t = t.replace("\t", " ")
    t = TRAILING_WS_RE.sub("", t)
    return t
