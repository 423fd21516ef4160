"""
Analysis Service — run the CV prompts and merge their results.

Responsibilities:
  • Build each prompt from the extracted CV text and send it to the completion client
  • Parse the JSON-shaped analyses (skills, experience, sentiment, validation)
  • Run the four mandatory analyses concurrently, all-or-nothing
  • Run qualification matching only when job requirements were supplied
  • Derive the overall assessment
"""

from __future__ import annotations

import asyncio
import logging
import math
from types import ModuleType
from typing import Any, Iterable

from cv_analyzer.config import Settings
from cv_analyzer.exceptions import MalformedAIResponse
from cv_analyzer.models.analysis_models import AnalysisData, OverallAssessment
from cv_analyzer.prompts import (
    cv_summary,
    experience_analyzer,
    experience_validator,
    qualification_matcher,
    sentiment_analyzer,
    skills_extractor,
)
from cv_analyzer.services.field_extractor import extract_basic_info
from cv_analyzer.services.llm_service import CompletionClient, parse_json_response, resolve_params

logger = logging.getLogger(__name__)

STRONG_CANDIDATE = "Strong Candidate"
NEEDS_REVIEW = "Needs Review"

_PROMPTS: dict[str, ModuleType] = {
    "skills_extractor": skills_extractor,
    "experience_analyzer": experience_analyzer,
    "sentiment_analyzer": sentiment_analyzer,
    "experience_validator": experience_validator,
    "qualification_matcher": qualification_matcher,
    "cv_summary": cv_summary,
}


class CVAnalyzer:
    """Runs the analysis prompts for one CV against a completion client."""

    def __init__(self, client: CompletionClient, settings: Settings):
        self._client = client
        self._settings = settings

    # ── Individual analyses ──────────────────────────────────────────────────

    async def extract_skills(self, cv_text: str) -> dict[str, Any]:
        return await self._complete_json("skills_extractor", cv_text=cv_text)

    async def analyze_experience(self, cv_text: str) -> dict[str, Any]:
        return await self._complete_json("experience_analyzer", cv_text=cv_text)

    async def analyze_sentiment(self, cv_text: str) -> dict[str, Any]:
        return await self._complete_json("sentiment_analyzer", cv_text=cv_text)

    async def validate_experience(self, cv_text: str) -> dict[str, Any]:
        return await self._complete_json("experience_validator", cv_text=cv_text)

    async def match_qualifications(self, cv_text: str, job_requirements: str) -> str:
        return await self._complete_text(
            "qualification_matcher", cv_text=cv_text, job_requirements=job_requirements
        )

    async def summarize_cv(self, cv_text: str) -> str:
        return await self._complete_text("cv_summary", cv_text=cv_text)

    # ── Aggregate ────────────────────────────────────────────────────────────

    async def analyze(
        self,
        cv_text: str,
        elements: Iterable[object] = (),
        job_requirements: str | None = None,
    ) -> AnalysisData:
        """Run every analysis for ``cv_text`` and merge the results."""
        basic_info = extract_basic_info(cv_text, elements)

        names = ("skills", "experience", "sentiment", "validation")
        results = await asyncio.gather(
            self.extract_skills(cv_text),
            self.analyze_experience(cv_text),
            self.analyze_sentiment(cv_text),
            self.validate_experience(cv_text),
            return_exceptions=True,
        )
        failures = [(n, r) for n, r in zip(names, results) if isinstance(r, BaseException)]
        for name, error in failures:
            logger.error(f"{name} analysis failed: {error}")
        if failures:
            raise failures[0][1]

        skills, experience, sentiment, validation = results

        qualification_match = None
        if job_requirements and job_requirements.strip():
            qualification_match = await self.match_qualifications(cv_text, job_requirements)

        return AnalysisData(
            basic_info=basic_info,
            skills_analysis=skills,
            experience_analysis=experience,
            sentiment_analysis=sentiment,
            experience_validation=validation,
            qualification_match=qualification_match,
            overall_assessment=build_overall_assessment(skills, sentiment, validation),
        )

    # ── Helpers ──────────────────────────────────────────────────────────────

    async def _complete_text(self, prompt_name: str, json_mode: bool = False, **fields: str) -> str:
        prompt = _PROMPTS[prompt_name]
        params = resolve_params(self._settings, prompt_name, json_mode=json_mode)
        raw = await self._client.complete(
            prompt.USER_PROMPT_TEMPLATE.format(**fields),
            params,
            system=prompt.SYSTEM_PROMPT,
        )
        return raw.strip()

    async def _complete_json(self, prompt_name: str, **fields: str) -> dict[str, Any]:
        text = await self._complete_text(prompt_name, json_mode=True, **fields)
        try:
            return parse_json_response(text)
        except MalformedAIResponse as e:
            raise MalformedAIResponse(f"{prompt_name}: {e}") from e


# ── Overall Assessment ───────────────────────────────────────────────────────


def build_overall_assessment(
    skills: dict[str, Any],
    sentiment: dict[str, Any],
    validation: dict[str, Any],
) -> OverallAssessment:
    """
    confidence = mean(sentiment.confidenceLevel, validation.confidenceScore)
    strengths = skills.technical + sentiment.keyPositiveAspects
    areas for improvement = sentiment.areasForImprovement + validation.redFlags
    """
    sentiment_confidence = _require_number(sentiment, "confidenceLevel", "sentiment")
    validation_confidence = _require_number(validation, "confidenceScore", "validation")

    return OverallAssessment(
        confidence_score=(sentiment_confidence + validation_confidence) / 2,
        strengths=[
            *_require_list(skills, "technical", "skills"),
            *_require_list(sentiment, "keyPositiveAspects", "sentiment"),
        ],
        areas_for_improvement=[
            *_require_list(sentiment, "areasForImprovement", "sentiment"),
            *_require_list(validation, "redFlags", "validation"),
        ],
        recommendation=(
            STRONG_CANDIDATE if sentiment.get("overallTone") == "professional" else NEEDS_REVIEW
        ),
    )


def _require_number(data: dict[str, Any], key: str, source: str) -> float:
    value = data.get(key)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise MalformedAIResponse(f"{source} analysis is missing numeric field '{key}'")
    if not math.isfinite(value):
        raise MalformedAIResponse(f"{source} analysis has non-finite value for '{key}'")
    return value


def _require_list(data: dict[str, Any], key: str, source: str) -> list[Any]:
    value = data.get(key)
    if not isinstance(value, list):
        raise MalformedAIResponse(f"{source} analysis is missing list field '{key}'")
    return value
