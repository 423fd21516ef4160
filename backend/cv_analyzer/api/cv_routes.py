import json
import logging
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile
from fastapi.responses import PlainTextResponse

from cv_analyzer.config import Settings, get_settings
from cv_analyzer.exceptions import CVAnalysisError, CVProcessingError, InvalidUpload
from cv_analyzer.models.analysis_models import (
    AnalysisResponse,
    ErrorResponse,
    ResponseMetadata,
    SummaryData,
    SummaryResponse,
)
from cv_analyzer.services.analysis_service import CVAnalyzer
from cv_analyzer.services.pdf_service import TextExtractor
from cv_analyzer.services.upload_guard import read_upload
from cv_analyzer.utils.dependencies import get_cv_analyzer, get_text_extractor

logger = logging.getLogger(__name__)

router = APIRouter()

WELCOME_MESSAGE = (
    "Welcome to the Professional CV Analysis API! Use the /upload endpoint to upload a CV."
)

_ERROR_RESPONSES = {400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}}


def _parse_json_list(raw: Optional[str], field_name: str) -> list:
    """Decode an optional JSON-array form field; absent or blank means []."""
    if raw is None or not raw.strip():
        return []
    try:
        value = json.loads(raw)
    except json.JSONDecodeError as e:
        raise InvalidUpload(f"Field '{field_name}' must be a JSON array: {e}") from e
    if not isinstance(value, list):
        raise InvalidUpload(f"Field '{field_name}' must be a JSON array.")
    return value


@router.get("/", response_class=PlainTextResponse)
async def root():
    """Confirm the server is running."""
    return WELCOME_MESSAGE


@router.post("/upload", response_model=AnalysisResponse, responses=_ERROR_RESPONSES)
async def upload_cv(
    cv: Optional[list[UploadFile]] = File(None),
    elements: Optional[str] = Form(None),
    qualifications: Optional[str] = Form(None),
    job_requirements: Optional[str] = Form(None, alias="jobRequirements"),
    settings: Settings = Depends(get_settings),
    analyzer: CVAnalyzer = Depends(get_cv_analyzer),
    extract: TextExtractor = Depends(get_text_extractor),
):
    """Upload a PDF CV and run the full analysis.

    ``elements`` is a JSON array of basic-info fields to pull (name, email, phone).
    ``qualifications`` is accepted for compatibility but not used.
    ``jobRequirements`` enables qualification matching when non-empty.
    """
    document = await read_upload(cv, settings)
    requested = _parse_json_list(elements, "elements")
    _parse_json_list(qualifications, "qualifications")

    try:
        cv_text = await extract(document.content)
        data = await analyzer.analyze(cv_text, requested, job_requirements)
    except CVAnalysisError:
        raise
    except Exception as e:
        logger.exception(f"Unexpected error analyzing '{document.filename}'")
        raise CVProcessingError(str(e)) from e

    return AnalysisResponse(data=data, metadata=ResponseMetadata.now(settings.version))


@router.post("/summary", response_model=SummaryResponse, responses=_ERROR_RESPONSES)
async def summarize_cv(
    cv: Optional[list[UploadFile]] = File(None),
    settings: Settings = Depends(get_settings),
    analyzer: CVAnalyzer = Depends(get_cv_analyzer),
    extract: TextExtractor = Depends(get_text_extractor),
):
    """Upload a PDF CV and get a free-text profile assessment."""
    document = await read_upload(cv, settings)

    try:
        cv_text = await extract(document.content)
        summary = await analyzer.summarize_cv(cv_text)
    except CVAnalysisError:
        raise
    except Exception as e:
        logger.exception(f"Unexpected error summarizing '{document.filename}'")
        raise CVProcessingError(str(e)) from e

    return SummaryResponse(
        data=SummaryData(summary=summary),
        metadata=ResponseMetadata.now(settings.version),
    )
