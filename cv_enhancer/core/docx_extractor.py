from io import BytesIO

from docx import Document

from cv_enhancer.core.errors import TextExtractionError


def extract_docx_text(docx_bytes: bytes) -> str:
    """
    Extract paragraph text from a DOCX, one paragraph per line.

    Empty paragraphs are kept as blank lines: they are what separates one
    resume entry from the next.
    """
    try:
        doc = Document(BytesIO(docx_bytes))
    except Exception as exc:
        raise TextExtractionError(f"Could not read DOCX: {exc}") from exc

    text = "\n".join((p.text or "").strip() for p in doc.paragraphs)
    if not text.strip():
        raise TextExtractionError("DOCX contains no text.")
    return text
