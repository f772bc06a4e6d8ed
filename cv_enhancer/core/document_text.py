from typing import Tuple

from cv_enhancer.core.docx_extractor import extract_docx_text
from cv_enhancer.core.errors import TextExtractionError, UnsupportedFileTypeError
from cv_enhancer.core.pdf_extractor import extract_pdf_text
from cv_enhancer.core.schemas import ParseSource

DOCX_CONTENT_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
TEXT_CONTENT_TYPES = {"text/plain", "text/markdown"}


def is_pdf(filename: str, content_type: str) -> bool:
    return (filename or "").lower().endswith(".pdf") or (content_type or "").lower() == "application/pdf"


def extract_document_text(raw: bytes, filename: str = "", content_type: str = "") -> Tuple[str, ParseSource]:
    """
    Pick an extractor by file name / content type and return (text, source).

    Raises UnsupportedFileTypeError for anything that is not PDF, DOCX or
    plain text, and TextExtractionError when the file cannot be read.
    """
    filename = (filename or "").lower()
    content_type = (content_type or "").lower()

    if is_pdf(filename, content_type):
        return extract_pdf_text(raw), "pdf"

    if filename.endswith(".docx") or content_type == DOCX_CONTENT_TYPE:
        return extract_docx_text(raw), "docx"

    if content_type in TEXT_CONTENT_TYPES or filename.endswith((".txt", ".md")):
        text = raw.decode("utf-8", errors="replace")
        if not text.strip():
            raise TextExtractionError("Text file is empty.")
        return text, "text"

    raise UnsupportedFileTypeError(f"Unsupported content type: {content_type or filename or 'unknown'}")
