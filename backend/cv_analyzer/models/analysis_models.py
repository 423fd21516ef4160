from datetime import datetime, timezone
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Serializes snake_case fields with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ── Analysis Payload ────────────────────────────────────────────────────────


class OverallAssessment(CamelModel):
    """Summary derived from the skills, sentiment and validation analyses."""

    confidence_score: float  # mean of sentiment + validation confidence
    strengths: list[Any] = []
    areas_for_improvement: list[Any] = []
    recommendation: str  # "Strong Candidate" | "Needs Review"


class AnalysisData(CamelModel):
    """Merged output of every analysis run for one CV."""

    basic_info: dict[str, str] = {}
    skills_analysis: dict[str, Any]
    experience_analysis: dict[str, Any]
    sentiment_analysis: dict[str, Any]
    experience_validation: dict[str, Any]
    qualification_match: Optional[str] = None
    overall_assessment: OverallAssessment


class SummaryData(CamelModel):
    summary: str


# ── Envelopes ───────────────────────────────────────────────────────────────


class ResponseMetadata(CamelModel):
    processing_time: str  # ISO-8601 timestamp of when the response was built
    version: str

    @classmethod
    def now(cls, version: str) -> "ResponseMetadata":
        stamp = datetime.now(timezone.utc).isoformat(timespec="milliseconds")
        return cls(processing_time=stamp.replace("+00:00", "Z"), version=version)


class AnalysisResponse(CamelModel):
    success: bool = True
    data: AnalysisData
    metadata: ResponseMetadata


class SummaryResponse(CamelModel):
    success: bool = True
    data: SummaryData
    metadata: ResponseMetadata


class ErrorResponse(BaseModel):
    """Body of every 4xx/5xx response."""

    success: bool = False
    error: str
    details: Optional[str] = None
