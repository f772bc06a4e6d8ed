"""
Completeness assessment for a parsed resume.

Tells the caller how much of the record the heuristics managed to fill, so a
client can decide to show placeholder content instead of a mostly blank form.

Quality Scale:
  high   = name, email and at least 3 populated sections
  medium = something in between
  low    = fewer than 2 populated signals overall (name, email, sections)
"""

from typing import List, Tuple

from cv_enhancer.core.schemas import ParseQuality, ResumeRecord

TYPED_SECTIONS = ("summary", "experience", "education", "skills", "certifications", "languages")
CORE_SECTIONS = ("experience", "education", "skills")

HIGH_MIN_SECTIONS = 3
LOW_MAX_SIGNALS = 2


def populated_sections(record: ResumeRecord) -> List[str]:
    return [name for name in TYPED_SECTIONS if getattr(record, name)]


def assess_parse_quality(record: ResumeRecord, headings: List[str]) -> Tuple[ParseQuality, List[str]]:
    """
    Grade a record and list what is missing.

    Args:
        record: parser output
        headings: headings recognized by the segmenter, in encounter order

    Returns:
        (quality, warnings)
    """
    warnings: List[str] = []

    if not headings:
        warnings.append("No section headings recognized; the document was treated as unstructured text.")

    for name in CORE_SECTIONS:
        if not getattr(record, name):
            warnings.append(f"No {name} entries extracted.")

    info = record.personal_info
    if not info.full_name:
        warnings.append("Full name not found.")
    if not info.email:
        warnings.append("Email address not found.")

    sections = populated_sections(record)
    signals = len(sections) + bool(info.full_name) + bool(info.email)

    if info.full_name and info.email and len(sections) >= HIGH_MIN_SECTIONS:
        quality: ParseQuality = "high"
    elif signals < LOW_MAX_SIGNALS:
        quality = "low"
    else:
        quality = "medium"

    return quality, warnings
