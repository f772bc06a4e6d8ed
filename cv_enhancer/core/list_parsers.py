"""
Extractors for list-shaped sections: skills, certifications, languages.

Each picks a splitting strategy by looking at which delimiters the section
actually uses, then filters candidates that look like prose or sub-headings.
"""

import logging
import re
from typing import List, Optional, Tuple

from cv_enhancer.core.date_normalizer import find_single_date, normalize_or_keep
from cv_enhancer.core.schemas import CertificationEntry, LanguageEntry
from cv_enhancer.core.section_segmenter import MIN_SECTION_CHARS

logger = logging.getLogger(__name__)

MAX_SKILL_CHARS = 60

# ===== SKILLS =====

# "•" and "*" are bullets anywhere; "-" only at line start or between spaces,
# so "CI-CD" or "Node-RED" in a comma list does not switch strategy
SKILL_BULLET_PRESENT_RE = re.compile(r"[•*]|^[ \t]*-|[ \t]-[ \t]", re.MULTILINE)
SKILL_BULLET_SPLIT_RE = re.compile(r"[•*]|^[ \t]*-|[ \t]-[ \t]|\n", re.MULTILINE)


def _looks_like_skill(candidate: str) -> bool:
    if not candidate:
        return False
    if len(candidate) > MAX_SKILL_CHARS:
        return False
    if ":" in candidate:
        return False
    if candidate.isdigit():
        return False
    return True


def dedupe_casefold(items: List[str]) -> List[str]:
    """Drop case-insensitive duplicates, keeping the first spelling seen."""
    seen = set()
    out = []
    for item in items:
        key = item.casefold()
        if key in seen:
            continue
        seen.add(key)
        out.append(item)
    return out


def extract_skills(section_text: str, min_chars: int = MIN_SECTION_CHARS) -> List[str]:
    """
    Split a skills section into individual skills.

    Strategy by delimiter, in priority order: bullets, then commas, then
    newlines.

    Examples:
        "JavaScript, javascript, Python" -> ["JavaScript", "Python"]
        "• Python\\n• SQL\\n• Python"     -> ["Python", "SQL"]
    """
    if not section_text or len(section_text.strip()) < min_chars:
        return []

    if SKILL_BULLET_PRESENT_RE.search(section_text):
        candidates = SKILL_BULLET_SPLIT_RE.split(section_text)
    elif "," in section_text:
        candidates = section_text.split(",")
    else:
        candidates = section_text.splitlines()

    skills = [c.strip() for c in candidates]
    skills = [s for s in skills if _looks_like_skill(s)]
    return dedupe_casefold(skills)


# ===== CERTIFICATIONS =====

# Blank-line runs, a newline before a list marker, or an inline "•"
CERT_SPLIT_RE = re.compile(r"\n[ \t]*\n\s*|\n(?=[ \t]*(?:[•*-]|\d+[.)])\s)|•")
LIST_MARKER_RE = re.compile(r"^\s*(?:[•*-]|\d+[.)])\s*")
_ORG_STRIP = " \t,;:|-–—"


def _strip_marker(line: str) -> str:
    return LIST_MARKER_RE.sub("", line, count=1).strip()


def _remove_date(line: str, date_text: str) -> str:
    return line.replace(date_text, " ", 1).strip(_ORG_STRIP).strip()


def _parse_certification(lines: List[str]) -> CertificationEntry:
    cert = CertificationEntry(name=lines[0])

    for line in lines[1:]:
        m = find_single_date(line)
        if m:
            if not cert.issue_date:
                cert.issue_date = normalize_or_keep(m.group(0))
                residue = _remove_date(line, m.group(0))
                if residue and not cert.organization:
                    cert.organization = residue
        elif not cert.organization:
            cert.organization = line

    # A date on the name line is used when no later line has one. The name is
    # only cut when it is the whole entry:
    # "AWS Solutions Architect, Amazon Web Services - 2021"
    if not cert.issue_date:
        m = find_single_date(cert.name)
        if m:
            cert.issue_date = normalize_or_keep(m.group(0))
            residue = _remove_date(cert.name, m.group(0))
            if len(lines) == 1 and residue:
                cert.name = residue

    if not cert.organization and "," in cert.name:
        name, org = cert.name.split(",", 1)
        cert.name = name.strip()
        cert.organization = org.strip(_ORG_STRIP).strip()

    return cert


def extract_certifications(section_text: str, min_chars: int = MIN_SECTION_CHARS) -> List[CertificationEntry]:
    """
    Parse a certifications section.

    The first line of each entry is the name. The first later line carrying a
    date gives the issue date, and whatever else is on that line becomes the
    organization. An undated line before any organization is the organization.
    """
    if not section_text or len(section_text.strip()) < min_chars:
        return []

    certs: List[CertificationEntry] = []
    for block in CERT_SPLIT_RE.split(section_text.strip()):
        lines = [_strip_marker(ln) for ln in block.splitlines()]
        lines = [ln for ln in lines if ln]
        if not lines:
            continue
        certs.append(_parse_certification(lines))

    logger.debug(f"Extracted {len(certs)} certifications")
    return certs


# ===== LANGUAGES =====

LEVEL_KEYWORD_RE = re.compile(
    r"\b(?:native(?:\s+speaker)?|mother\s*tongue|first\s+language|bilingual|fluent|proficient|"
    r"upper[\s-]*intermediate|advanced|intermediate|basic|beginner|elementary|[abc][12])\b",
    re.IGNORECASE,
)

# Checked in order; first hit wins
PROFICIENCY_RULES: Tuple[Tuple[str, re.Pattern], ...] = (
    ("Native", re.compile(r"native|mother\s*tongue|first\s*language|bilingual", re.IGNORECASE)),
    ("Fluent", re.compile(r"fluent|\bproficient\b|excellent|\bc2\b", re.IGNORECASE)),
    ("Advanced", re.compile(r"advanced|\bc1\b|upper[\s-]*intermediate|\bb2\b", re.IGNORECASE)),
    ("Intermediate", re.compile(r"intermediate|\bb1\b", re.IGNORECASE)),
    ("Basic", re.compile(r"basic|beginner|elementary|\ba1\b|\ba2\b", re.IGNORECASE)),
)
DEFAULT_PROFICIENCY = "Intermediate"

LANGUAGE_LINE_MODE_RE = re.compile(r"[:•\-–—]")
LANGUAGE_BULLET_RE = re.compile(r"^[•*-]\s*")
# A dash with space on at least one side, so "upper-intermediate" stays whole
LANGUAGE_DASH_RE = re.compile(r"\s+[-–—]\s*|\s*[-–—]\s+")
_NAME_STRIP = " \t,;:()[]-–—|"


def map_proficiency(level: Optional[str]) -> str:
    """
    Map free-text level to Native/Fluent/Advanced/Intermediate/Basic.

    Examples:
        "Mother tongue" -> "Native"
        "C1"            -> "Advanced"
        "Upper intermediate" -> "Advanced"
        ""              -> "Intermediate"
    """
    if not level:
        return DEFAULT_PROFICIENCY
    for name, pattern in PROFICIENCY_RULES:
        if pattern.search(level):
            return name
    return DEFAULT_PROFICIENCY


def parse_language_entry(entry: str) -> Optional[LanguageEntry]:
    """
    One language entry: "French: Fluent", "German - B2", "Spanish (Native)",
    "Native English", or just "Italian".
    """
    entry = LANGUAGE_BULLET_RE.sub("", entry.strip())
    if not entry:
        return None

    if ":" in entry:
        name, level = entry.split(":", 1)
    elif LANGUAGE_DASH_RE.search(entry):
        name, level = LANGUAGE_DASH_RE.split(entry, 1)
    else:
        m = LEVEL_KEYWORD_RE.search(entry)
        if m and m.start() == 0:
            name, level = entry[m.end():], m.group(0)
        elif m:
            name, level = entry[:m.start()], entry[m.start():]
        else:
            name, level = entry, ""

    name = name.strip(_NAME_STRIP).strip()
    level = level.replace("(", " ").replace(")", " ").strip()
    if not name:
        return None
    return LanguageEntry(name=name, proficiency=map_proficiency(level))


def _level_separator_count(line: str) -> int:
    return line.count(":") + len(LANGUAGE_DASH_RE.findall(line))


def _line_mode_candidates(section_text: str) -> List[str]:
    """
    One candidate per line or "•" item. A line holding several "name - level"
    pairs joined by commas is split on the commas:
    "English - Native, French - Fluent" -> ["English - Native", " French - Fluent"]
    """
    candidates: List[str] = []
    for line in re.split(r"\n|•", section_text):
        if "," in line and _level_separator_count(line) > 1:
            candidates.extend(line.split(","))
        else:
            candidates.append(line)
    return candidates


def extract_languages(section_text: str, min_chars: int = MIN_SECTION_CHARS) -> List[LanguageEntry]:
    """
    Parse a languages section.

    With ":", "-" or "•" present, one language per line (or per comma-joined
    "name - level" pair). Otherwise the text is a plain comma- or
    newline-separated list; any level words present are still honoured, and
    languages without one default to Intermediate.
    """
    if not section_text or len(section_text.strip()) < min_chars:
        return []

    if LANGUAGE_LINE_MODE_RE.search(section_text):
        candidates = _line_mode_candidates(section_text)
    else:
        candidates = re.split(r"[,\n]", section_text)

    languages = []
    for candidate in candidates:
        parsed = parse_language_entry(candidate)
        if parsed:
            languages.append(parsed)
    logger.debug(f"Extracted {len(languages)} languages")
    return languages
