"""
Request-scoped helpers — settings, completion client, analyzer and text extractor.

Routes only receive these through ``Depends`` so tests can swap any of them
via ``app.dependency_overrides``.
"""

from __future__ import annotations

from fastapi import Depends

from cv_analyzer.config import Settings, get_settings
from cv_analyzer.services.analysis_service import CVAnalyzer
from cv_analyzer.services.llm_service import CompletionClient, LiteLLMCompletionClient
from cv_analyzer.services.pdf_service import TextExtractor, extract_text


def get_completion_client(settings: Settings = Depends(get_settings)) -> CompletionClient:
    """FastAPI dependency that builds the LiteLLM-backed completion client."""
    return LiteLLMCompletionClient.from_settings(settings)


def get_cv_analyzer(
    client: CompletionClient = Depends(get_completion_client),
    settings: Settings = Depends(get_settings),
) -> CVAnalyzer:
    return CVAnalyzer(client, settings)


def get_text_extractor() -> TextExtractor:
    return extract_text
