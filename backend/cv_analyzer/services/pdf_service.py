"""
PDF Service — turn an uploaded PDF into plain text.

Responsibilities:
  • Extract raw text page by page with pdfplumber
  • Clean up extracted text
  • Fail loudly (ExtractionFailed) on corrupt input or text-less documents
"""

from __future__ import annotations

import asyncio
import logging
from io import BytesIO
from typing import Awaitable, Callable

import pdfplumber

from cv_analyzer.exceptions import ExtractionFailed
from cv_analyzer.utils.text_cleanup import normalize_text

logger = logging.getLogger(__name__)

TextExtractor = Callable[[bytes], Awaitable[str]]


async def extract_text(file_bytes: bytes) -> str:
    """Extract text off the event loop; pdfplumber parsing is CPU bound."""
    return await asyncio.to_thread(extract_pdf_text, file_bytes)


def extract_pdf_text(file_bytes: bytes) -> str:
    """Extract and normalize text from a PDF file using pdfplumber."""
    text_parts: list[str] = []
    try:
        with pdfplumber.open(BytesIO(file_bytes)) as pdf:
            for page in pdf.pages:
                page_text = page.extract_text()
                if page_text:
                    text_parts.append(page_text)
    except Exception as e:
        logger.warning(f"PDF extraction failed ({len(file_bytes)} bytes): {e}")
        raise ExtractionFailed(f"Could not read the uploaded PDF: {e}") from e

    text = normalize_text("\n\n".join(text_parts))
    if not text:
        raise ExtractionFailed(
            "No text could be extracted from the uploaded PDF. "
            "The file may be image-based or empty."
        )

    logger.info(f"Extracted {len(text)} chars from {len(text_parts)} page(s)")
    return text
