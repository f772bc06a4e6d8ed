"""Tests for parse quality grading and warnings."""

from cv_enhancer.core.parse_quality import assess_parse_quality, populated_sections
from cv_enhancer.core.schemas import (
    EducationEntry,
    ExperienceEntry,
    PersonalInfo,
    ResumeRecord,
)


def _record(**kwargs):
    return ResumeRecord(**kwargs)


def test_empty_record_is_low():
    quality, warnings = assess_parse_quality(_record(), [])
    assert quality == "low"
    assert warnings == [
        "No section headings recognized; the document was treated as unstructured text.",
        "No experience entries extracted.",
        "No education entries extracted.",
        "No skills entries extracted.",
        "Full name not found.",
        "Email address not found.",
    ]


def test_name_email_and_one_section_is_medium():
    record = _record(
        personal_info=PersonalInfo(full_name="Jane Doe", email="jane@example.com"),
        skills=["Python"],
    )
    quality, warnings = assess_parse_quality(record, ["skills"])
    assert quality == "medium"
    assert "No experience entries extracted." in warnings
    assert "Full name not found." not in warnings


def test_name_email_and_three_sections_is_high():
    record = _record(
        personal_info=PersonalInfo(full_name="Jane Doe", email="jane@example.com"),
        experience=[ExperienceEntry(title="Developer", company="Acme")],
        education=[EducationEntry(degree="BSc", institution="MIT")],
        skills=["Python"],
    )
    quality, warnings = assess_parse_quality(record, ["experience", "education", "skills"])
    assert quality == "high"
    assert warnings == []


def test_three_sections_without_email_is_medium():
    record = _record(
        personal_info=PersonalInfo(full_name="Jane Doe"),
        summary="Engineer",
        skills=["Python"],
        experience=[ExperienceEntry(title="Developer")],
    )
    quality, _ = assess_parse_quality(record, ["summary", "skills", "experience"])
    assert quality == "medium"


def test_populated_sections_ignores_additional():
    record = _record(additional="Chess", summary="Engineer")
    assert populated_sections(record) == ["summary"]
