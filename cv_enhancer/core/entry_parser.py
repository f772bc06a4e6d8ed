"""
Experience and education entry extraction.

Both sections share one layout heuristic: entries are separated by blank
lines, and the position of the date-range line decides which of the leading
lines hold the title (degree) and the company (institution). Education adds a
degree-keyword check that only decides which of those two slots is the degree.
"""

import logging
import re
from dataclasses import dataclass
from typing import List, Optional

from cv_enhancer.core.date_normalizer import DateRange, find_date_range
from cv_enhancer.core.schemas import EducationEntry, ExperienceEntry
from cv_enhancer.core.section_segmenter import MIN_SECTION_CHARS

logger = logging.getLogger(__name__)

MIN_ENTRY_LINES = 2

BLANK_LINE_RUN_RE = re.compile(r"\n[ \t]*\n\s*")

# Punctuation left dangling once the date text is cut out of a line
_RESIDUE_STRIP = " \t,;:|·•-–—"
EMPTY_PARENS_RE = re.compile(r"\(\s*\)")

# ===== DEGREE KEYWORDS =====
DEGREE_WORD_RE = re.compile(
    r"\b(?:bachelor|master|ph\.?\s?d|doctorate|doctoral|associate)", re.IGNORECASE
)
# Abbreviations are case-sensitive so "as" / "ma" in prose do not count
DEGREE_ABBREV_RE = re.compile(
    r"(?<![A-Za-z])(?:[BM]\.\s?[A-Z][A-Za-z]*\.?|Ph\.?D\.?|BS|BA|MS|MA|MBA|BBA|AA|AS|BSc|MSc|BEng|MEng)(?![A-Za-z])"
)


def has_degree_keyword(text: str) -> bool:
    """
    Check if a line names a degree.

    Examples:
        "Bachelor of Science in Physics" -> True
        "B.S. Computer Science" -> True
        "MBA" -> True
        "Stanford University" -> False
    """
    if not text:
        return False
    return bool(DEGREE_WORD_RE.search(text) or DEGREE_ABBREV_RE.search(text))


def split_entries(section_text: str) -> List[List[str]]:
    """Split a section on blank-line runs into lists of trimmed, non-blank lines."""
    entries = []
    for block in BLANK_LINE_RUN_RE.split(section_text.strip()):
        lines = [ln.strip() for ln in block.splitlines() if ln.strip()]
        if lines:
            entries.append(lines)
    return entries


def _strip_date(line: str, date_text: str) -> str:
    residue = EMPTY_PARENS_RE.sub(" ", line.replace(date_text, " ", 1))
    return residue.strip(_RESIDUE_STRIP).strip()


@dataclass
class EntryLayout:
    """Positional reading of one entry, before field names are attached."""
    first: str  # title / degree slot
    second: str  # company / institution slot
    dates: Optional[DateRange]
    description: str


def read_entry_layout(lines: List[str]) -> EntryLayout:
    """
    Assign the leading lines of an entry to slots based on the date line.

    - date on line 1: rest of line 1 is the first slot, line 2 the second
    - date on line 2: line 1 is the first slot, rest of line 2 the second
    - date elsewhere or absent: lines 1 and 2 fill the slots

    When the text left after removing the date is empty, the next unused line
    takes its place. Lines not used for a slot or the date form the description.
    """
    date_idx = None
    dates = None
    for i, line in enumerate(lines):
        found = find_date_range(line)
        if found:
            date_idx, dates = i, found
            break

    used = set()
    remaining = iter(i for i in range(len(lines)) if i != date_idx)

    def take_next() -> str:
        for i in remaining:
            if i not in used:
                used.add(i)
                return lines[i]
        return ""

    if date_idx == 0:
        used.add(0)
        first = _strip_date(lines[0], dates.text) or take_next()
        second = take_next()
    elif date_idx == 1:
        used.update({0, 1})
        first = lines[0]
        second = _strip_date(lines[1], dates.text) or take_next()
    else:
        first = take_next()
        second = take_next()
        if date_idx is not None:
            used.add(date_idx)

    description = "\n".join(line for i, line in enumerate(lines) if i not in used)
    return EntryLayout(first=first, second=second, dates=dates, description=description)


def _candidate_entries(section_text: str, min_chars: int, kind: str) -> List[List[str]]:
    if not section_text or len(section_text.strip()) < min_chars:
        return []
    entries = []
    for lines in split_entries(section_text):
        if len(lines) < MIN_ENTRY_LINES:
            logger.debug(f"Discarding {kind} entry with too few lines: {lines!r}")
            continue
        entries.append(lines)
    return entries


def extract_experience(section_text: str, min_chars: int = MIN_SECTION_CHARS) -> List[ExperienceEntry]:
    """
    Parse an experience section into entries, in order of appearance.

    Example:
        "Senior Developer\\nAcme Corp\\nJan 2020 - Present\\nLed a team."
        -> [ExperienceEntry(title="Senior Developer", company="Acme Corp",
                            start_date="2020-01", is_current=True, ...)]
    """
    out: List[ExperienceEntry] = []
    for lines in _candidate_entries(section_text, min_chars, "experience"):
        layout = read_entry_layout(lines)
        entry = ExperienceEntry(
            title=layout.first,
            company=layout.second,
            description=layout.description,
        )
        if layout.dates:
            entry.start_date = layout.dates.start
            entry.end_date = layout.dates.end
            entry.is_current = layout.dates.is_current
        out.append(entry)
    logger.debug(f"Extracted {len(out)} experience entries")
    return out


def _institution_first(layout: EntryLayout) -> bool:
    """
    Whether the first slot holds the institution rather than the degree.

    A degree keyword in the first slot settles it as the degree. Otherwise a
    dated entry, or one naming a degree in its second slot, is read
    institution first. An undated entry with no degree keyword at all keeps
    the first slot as the degree.
    """
    if has_degree_keyword(layout.first):
        return False
    return layout.dates is not None or has_degree_keyword(layout.second)


def extract_education(section_text: str, min_chars: int = MIN_SECTION_CHARS) -> List[EducationEntry]:
    """
    Parse an education section into entries, in order of appearance.

    The date line decides the two leading slots; the degree keyword check only
    decides which slot is the degree.

    Example:
        "Stanford University\\nComputer Science\\n2016 - 2020"
        -> [EducationEntry(degree="Computer Science", institution="Stanford University",
                           start_date="2016-01", end_date="2020-01", ...)]
    """
    out: List[EducationEntry] = []
    for lines in _candidate_entries(section_text, min_chars, "education"):
        layout = read_entry_layout(lines)
        degree, institution = layout.first, layout.second
        if _institution_first(layout):
            degree, institution = layout.second, layout.first

        entry = EducationEntry(
            degree=degree,
            institution=institution,
            description=layout.description,
        )
        if layout.dates:
            entry.start_date = layout.dates.start
            entry.end_date = layout.dates.end
            entry.is_current = layout.dates.is_current
        out.append(entry)
    logger.debug(f"Extracted {len(out)} education entries")
    return out
