import logging

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile

from cv_enhancer.api.dependencies import get_upload_store
from cv_enhancer.config import Settings, get_settings
from cv_enhancer.core.document_text import is_pdf
from cv_enhancer.core.errors import TextExtractionError, UploadNotFoundError, UploadTooLargeError
from cv_enhancer.core.pdf_extractor import extract_pdf_text
from cv_enhancer.core.resume_parser import parse_text_to_response
from cv_enhancer.core.schemas import ParseResponse, UploadResponse
from cv_enhancer.core.upload_store import LocalUploadStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["upload"])


@router.post(
    "/upload",
    response_model=UploadResponse,
    summary="Upload CV",
    responses={
        400: {"description": "Empty file uploaded"},
        413: {"description": "File too large"},
        415: {"description": "Only PDF files are accepted"},
    },
)
async def upload_cv(
    cv: UploadFile = File(..., description="CV in PDF format"),
    store: LocalUploadStore = Depends(get_upload_store),
):
    """Store an uploaded PDF and return the id to extract it with."""
    if not is_pdf(cv.filename or "", cv.content_type or ""):
        raise HTTPException(status_code=415, detail="Only PDF files are allowed!")

    raw = await cv.read()
    if not raw:
        raise HTTPException(status_code=400, detail="No file uploaded")
    try:
        file_id = store.save(raw, cv.filename or "")
    except UploadTooLargeError as exc:
        raise HTTPException(status_code=413, detail=str(exc))
    return UploadResponse(file_id=file_id)


@router.get(
    "/extract/{file_id}",
    response_model=ParseResponse,
    summary="Extract CV",
    responses={
        404: {"description": "File not found"},
        422: {"description": "File has no extractable text"},
    },
)
def extract_cv(
    file_id: str,
    settings: Settings = Depends(get_settings),
    store: LocalUploadStore = Depends(get_upload_store),
):
    """Extract text from a previously uploaded PDF and parse it."""
    logger.info(f"Starting CV extraction for fileId: {file_id}")
    try:
        raw = store.load(file_id)
    except UploadNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc))

    try:
        text = extract_pdf_text(raw)
    except TextExtractionError as exc:
        logger.warning(f"Text extraction failed for {file_id}: {exc}")
        raise HTTPException(status_code=422, detail=str(exc))

    return parse_text_to_response(text, source="pdf", min_chars=settings.min_section_chars)
