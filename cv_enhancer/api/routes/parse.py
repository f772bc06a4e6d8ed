import logging

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile

from cv_enhancer.config import Settings, get_settings
from cv_enhancer.core.document_text import extract_document_text
from cv_enhancer.core.errors import TextExtractionError, UnsupportedFileTypeError
from cv_enhancer.core.resume_parser import parse_text_to_response
from cv_enhancer.core.schemas import ParseResponse, ParseTextRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["parse"])

EXAMPLE_RESPONSE = {
    "resume": {
        "personalInfo": {
            "fullName": "Jane Doe",
            "email": "jane.doe@example.com",
            "phone": "(555) 123-4567",
            "location": "San Francisco, CA",
            "linkedinHandle": "linkedin.com/in/janedoe",
            "portfolioUrl": "https://janedoe.dev",
        },
        "summary": "Backend engineer with eight years of experience.",
        "experience": [
            {
                "title": "Senior Developer",
                "company": "Acme Corp",
                "startDate": "2020-01",
                "endDate": "",
                "isCurrent": True,
                "description": "Led a team of five engineers.",
            }
        ],
        "education": [],
        "skills": ["Python", "SQL"],
        "certifications": [],
        "languages": [{"name": "French", "proficiency": "Fluent"}],
        "additional": "",
    },
    "sections": ["summary", "experience", "skills", "languages"],
    "parseQuality": "high",
    "warnings": ["No education entries extracted."],
    "source": "pdf",
}


@router.post(
    "/parse",
    response_model=ParseResponse,
    summary="Parse Resume File",
    description="Extract text from an uploaded resume (PDF, DOCX or TXT) and parse it into a structured record.",
    responses={
        200: {"description": "Successfully parsed resume", "content": {"application/json": {"example": EXAMPLE_RESPONSE}}},
        400: {"description": "Empty file uploaded"},
        413: {"description": "File too large"},
        415: {"description": "Unsupported file format"},
        422: {"description": "File has no extractable text"},
    },
)
async def parse_resume(
    file: UploadFile = File(..., description="Resume file (PDF, DOCX, or TXT format)"),
    settings: Settings = Depends(get_settings),
):
    """
    Parse a resume file in one step, without storing it.

    **Returns:**
    - **resume**: the structured record (personal info, summary, experience, education, skills, certifications, languages, additional)
    - **sections**: headings recognized in the document
    - **parseQuality**: high/medium/low completeness grade
    - **warnings**: what could not be extracted
    """
    raw = await file.read()
    if not raw:
        raise HTTPException(status_code=400, detail="Empty file uploaded.")
    if len(raw) > settings.max_upload_bytes:
        raise HTTPException(status_code=413, detail="File exceeds the upload size limit.")

    try:
        text, source = extract_document_text(raw, file.filename or "", file.content_type or "")
    except UnsupportedFileTypeError as exc:
        raise HTTPException(status_code=415, detail=str(exc))
    except TextExtractionError as exc:
        logger.warning(f"Text extraction failed for {file.filename!r}: {exc}")
        raise HTTPException(status_code=422, detail=str(exc))

    return parse_text_to_response(text, source=source, min_chars=settings.min_section_chars)


@router.post(
    "/parse/text",
    response_model=ParseResponse,
    summary="Parse Extracted Text",
    description="Parse resume text that the client already extracted from the document.",
)
def parse_resume_text(body: ParseTextRequest, settings: Settings = Depends(get_settings)):
    return parse_text_to_response(body.text, source="text", min_chars=settings.min_section_chars)
