import logging
import re
from io import BytesIO
from statistics import median
from typing import Any, Dict, List, Tuple

import pdfplumber

from cv_enhancer.core.errors import TextExtractionError

logger = logging.getLogger(__name__)

# A vertical gap this many times the typical line height starts a new paragraph
PARAGRAPH_GAP_FACTOR = 1.2


def _group_words_into_lines(words: List[Dict[str, Any]], line_y_tolerance: float) -> List[List[Dict[str, Any]]]:
    words = sorted(words, key=lambda w: (round(w["top"] / line_y_tolerance), w["x0"]))
    lines: List[List[Dict[str, Any]]] = []
    current_key = None

    for w in words:
        key = round(w["top"] / line_y_tolerance)
        if current_key is None or key != current_key:
            lines.append([])
            current_key = key
        lines[-1].append(w)

    return lines


def _words_to_text(page: Any, *, x_tolerance: float = 3, y_tolerance: float = 2, line_y_tolerance: float = 3) -> str:
    """
    Extract text from a PDF page using word objects.

    Groups words by vertical position into lines and joins them with single
    spaces. Where the gap above a line is clearly larger than the usual line
    pitch, a blank line is emitted, so paragraph breaks between resume entries
    survive extraction.
    """
    words = page.extract_words(
        x_tolerance=x_tolerance,
        y_tolerance=y_tolerance,
        keep_blank_chars=False,
        use_text_flow=True,
    )
    if not words:
        return ""

    lines = _group_words_into_lines(words, line_y_tolerance)
    heights = [max(w["bottom"] for w in ln) - min(w["top"] for w in ln) for ln in lines]
    typical_height = median(heights) if heights else 0

    out: List[str] = []
    prev_bottom = None
    for ln in lines:
        top = min(w["top"] for w in ln)
        if prev_bottom is not None and typical_height and (top - prev_bottom) > typical_height * PARAGRAPH_GAP_FACTOR:
            out.append("")
        out.append(" ".join(w["text"] for w in ln))
        prev_bottom = max(w["bottom"] for w in ln)

    return "\n".join(out)


def _score_text(s: str) -> float:
    """
    Score extracted text quality (lower is better).

    Penalizes very long alphabetic tokens (glued words) and an excess of
    single-letter tokens (fragmented words).
    """
    tokens = re.findall(r"[A-Za-z]+", s)
    if not tokens:
        return 1e9

    long_glued = sum(1 for t in tokens if len(t) >= 18)
    one_letter_count = sum(1 for t in tokens if len(t) == 1)
    excessive_singles = max(0, one_letter_count - 10)

    return long_glued * 10 + excessive_singles * 3


def _extract_best(page: Any, x_tolerance_range: Tuple[float, ...] = (1.5, 2, 2.5, 3)) -> str:
    """Try several x_tolerance values and keep the text with the best score."""
    candidates = []
    for xt in x_tolerance_range:
        txt = _words_to_text(page, x_tolerance=xt)
        candidates.append((_score_text(txt), xt, txt))

    candidates.sort(key=lambda c: c[0])
    best_score, best_xt, best_txt = candidates[0]
    logger.debug(f"Page {page.page_number}: x_tolerance={best_xt} score={best_score}")
    return best_txt


def extract_pdf_text(pdf_bytes: bytes) -> str:
    """
    Extract the visible text of a PDF, in reading order.

    Pages are separated by a blank line. Raises TextExtractionError when the
    document cannot be opened or holds no text layer (scanned images).
    """
    pages: List[str] = []
    try:
        with pdfplumber.open(BytesIO(pdf_bytes)) as pdf:
            for page in pdf.pages:
                text = _extract_best(page).strip()
                if text:
                    pages.append(text)
    except Exception as exc:
        raise TextExtractionError(f"Could not read PDF: {exc}") from exc

    if not pages:
        raise TextExtractionError("PDF appears to have no extractable text. OCR is not supported.")

    logger.debug(f"Extracted {len(pages)} pages of text from PDF")
    return "\n\n".join(pages)
