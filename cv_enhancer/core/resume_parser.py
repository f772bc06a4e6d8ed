"""
Resume text parser: raw extracted text -> ResumeRecord.

This is the one portable core behind every entry point. The server-side route
feeds it text pulled from an uploaded file; the client-side route feeds it text
the browser extracted itself. Same text in, same record out.

The parse is pure and synchronous: no I/O, no shared state.
"""

import logging
from typing import Dict, List, Tuple

from cv_enhancer.core import entry_parser, list_parsers
from cv_enhancer.core.parse_quality import assess_parse_quality
from cv_enhancer.core.personal_info import extract_personal_info
from cv_enhancer.core.schemas import ParseResponse, ParseSource, ResumeRecord
from cv_enhancer.core.section_segmenter import (
    HEADER_KEY,
    MIN_SECTION_CHARS,
    canonical_field,
    segment_sections,
)
from cv_enhancer.core.text_normalization import normalize_raw_text

logger = logging.getLogger(__name__)


def group_sections(sections: Dict[str, str]) -> Tuple[Dict[str, str], List[str]]:
    """
    Fold heading-keyed sections into canonical fields.

    Returns (canonical field -> text, additional chunks). Synonyms of the same
    field overwrite each other, later wins; every "additional" style section is
    kept, in encounter order.
    """
    fields: Dict[str, str] = {}
    additional: List[str] = []
    for heading, content in sections.items():
        if heading == HEADER_KEY:
            continue
        field = canonical_field(heading)
        if field == "additional" or field is None:
            additional.append(content)
            continue
        if field in fields:
            logger.debug(f"'{heading}' overrides earlier {field} section")
        fields[field] = content
    return fields, additional


def _free_text(content: str, min_chars: int) -> str:
    content = (content or "").strip()
    return content if len(content) >= min_chars else ""


def parse_sections(raw_text: str, min_chars: int = MIN_SECTION_CHARS) -> Tuple[ResumeRecord, List[str]]:
    """Parse text and also return the headings recognized, in encounter order."""
    if raw_text is None:
        raise TypeError("raw_text is required")
    if not isinstance(raw_text, str):
        raise TypeError(f"raw_text must be str, not {type(raw_text).__name__}")

    text = normalize_raw_text(raw_text)
    sections = segment_sections(text)
    headings = [h for h in sections if h != HEADER_KEY]
    fields, additional = group_sections(sections)

    record = ResumeRecord(
        personal_info=extract_personal_info(sections.get(HEADER_KEY, "")),
        summary=_free_text(fields.get("summary", ""), min_chars),
        experience=entry_parser.extract_experience(fields.get("experience", ""), min_chars),
        education=entry_parser.extract_education(fields.get("education", ""), min_chars),
        skills=list_parsers.extract_skills(fields.get("skills", ""), min_chars),
        certifications=list_parsers.extract_certifications(fields.get("certifications", ""), min_chars),
        languages=list_parsers.extract_languages(fields.get("languages", ""), min_chars),
        additional="\n\n".join(chunk for chunk in (_free_text(c, min_chars) for c in additional) if chunk),
    )
    logger.debug(
        f"Parsed resume: {len(headings)} headings, {len(record.experience)} experience, "
        f"{len(record.education)} education, {len(record.skills)} skills"
    )
    return record, headings


def parse_resume_text(raw_text: str, min_chars: int = MIN_SECTION_CHARS) -> ResumeRecord:
    """
    Parse extracted resume text into a structured record.

    Never raises on odd or empty text: every field falls back to its empty
    default. Raises TypeError only when no text is given at all.

    Args:
        raw_text: full document text as produced by the text extractor
        min_chars: sections shorter than this are treated as noise
    """
    record, _ = parse_sections(raw_text, min_chars)
    return record


def parse_text_to_response(raw_text: str, source: ParseSource = "text", min_chars: int = MIN_SECTION_CHARS) -> ParseResponse:
    """Parse text and wrap the record with the headings found and a quality grade."""
    record, headings = parse_sections(raw_text, min_chars)
    quality, warnings = assess_parse_quality(record, headings)
    return ParseResponse(
        resume=record,
        sections=headings,
        parse_quality=quality,
        warnings=warnings,
        source=source,
    )
