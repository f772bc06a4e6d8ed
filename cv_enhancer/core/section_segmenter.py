"""
Section segmentation for resume text.

Slices raw text into named spans keyed by the heading that precedes them.
A heading only counts when it stands at the start of a line and is followed
by a colon or the end of the line, so "experience" inside a sentence never
opens a section.
"""

import logging
import re
from typing import Dict, Optional

logger = logging.getLogger(__name__)

HEADER_KEY = "header"

# Sections shorter than this are noise; extractors return empty results for them
MIN_SECTION_CHARS = 10

# ===== HEADING VOCABULARY =====
# Canonical field -> heading synonyms (lowercase, single-spaced)

SECTION_HEADINGS: Dict[str, tuple] = {
    "summary": (
        "summary",
        "professional summary",
        "career summary",
        "profile",
        "professional profile",
        "objective",
        "career objective",
        "about me",
    ),
    "experience": (
        "experience",
        "work experience",
        "professional experience",
        "employment history",
        "employment",
        "work history",
        "career history",
    ),
    "education": (
        "education",
        "academic background",
        "educational background",
        "academic qualifications",
        "education and training",
    ),
    "skills": (
        "skills",
        "technical skills",
        "professional skills",
        "key skills",
        "core competencies",
        "competencies",
        "technologies",
        "expertise",
        "areas of expertise",
        "proficiencies",
    ),
    "certifications": (
        "certifications",
        "certificates",
        "professional certifications",
        "licenses and certifications",
        "licenses & certifications",
        "qualifications",
        "accreditations",
    ),
    "languages": (
        "languages",
        "language proficiency",
        "language skills",
    ),
    "additional": (
        "additional information",
        "additional",
        "interests",
        "hobbies",
        "hobbies and interests",
        "volunteering",
        "volunteer experience",
        "publications",
        "projects",
        "awards",
        "honors and awards",
    ),
}

HEADING_TO_FIELD: Dict[str, str] = {
    heading: field
    for field, headings in SECTION_HEADINGS.items()
    for heading in headings
}


def _heading_alternation() -> str:
    # Longest first so "work experience" wins over "work" style prefixes
    phrases = sorted(HEADING_TO_FIELD, key=len, reverse=True)
    return "|".join(r"[ \t]+".join(re.escape(word) for word in p.split()) for p in phrases)


HEADING_RE = re.compile(
    rf"^[ \t]*(?P<heading>{_heading_alternation()})[ \t]*(?::|$)",
    re.IGNORECASE | re.MULTILINE,
)


def normalize_heading(heading: str) -> str:
    """'  Work   EXPERIENCE ' -> 'work experience'"""
    return " ".join(heading.split()).lower()


def canonical_field(heading: str) -> Optional[str]:
    """Map a heading (any case/spacing) to its canonical field, or None."""
    return HEADING_TO_FIELD.get(normalize_heading(heading))


def segment_sections(text: str) -> Dict[str, str]:
    """
    Split resume text into sections.

    Returns a dict of normalized heading -> trimmed content, in encounter
    order. The "header" key holds whatever precedes the first heading; when no
    heading is found it holds the whole text. A heading seen twice keeps the
    content of its last occurrence.

    Example:
        "Jane Doe\\nSkills: Python, SQL\\nEducation\\nMIT"
        -> {"header": "Jane Doe", "skills": "Python, SQL", "education": "MIT"}
    """
    if not text:
        return {HEADER_KEY: ""}

    matches = list(HEADING_RE.finditer(text))
    if not matches:
        logger.debug("No section headings found; treating whole text as header")
        return {HEADER_KEY: text.strip()}

    sections: Dict[str, str] = {HEADER_KEY: text[: matches[0].start()].strip()}

    for i, m in enumerate(matches):
        next_start = matches[i + 1].start() if i + 1 < len(matches) else len(text)
        heading = normalize_heading(m.group("heading"))
        content = text[m.end():next_start].strip()
        if heading in sections:
            logger.debug(f"Heading '{heading}' repeated at offset {m.start()}; later content wins")
        sections[heading] = content
        logger.debug(f"SECTION '{heading}' at offset {m.start()} ({len(content)} chars)")

    return sections
