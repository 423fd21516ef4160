"""
LLM Service — the single completion capability, backed by LiteLLM.

Responsibilities:
  • Resolve model parameters (global defaults + per-prompt overrides)
  • Send one prompt to the configured model and return the generated text
  • Map provider / transport failures to UpstreamServiceError
  • Parse JSON-shaped model output, raising MalformedAIResponse when it is not
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Protocol

import litellm
from litellm import acompletion

from cv_analyzer.config import PROMPT_CONFIG, Settings
from cv_analyzer.exceptions import MalformedAIResponse, UpstreamServiceError

logger = logging.getLogger(__name__)

# Silence verbose LiteLLM logs
litellm.suppress_debug_info = True


# ── Model Parameters ─────────────────────────────────────────────────────────


@dataclass(frozen=True)
class ModelParams:
    """Parameters for one completion call."""

    model: str
    max_tokens: int
    temperature: float
    json_mode: bool = False


def resolve_params(
    settings: Settings, prompt_name: str | None = None, *, json_mode: bool = False
) -> ModelParams:
    """Merge PROMPT_CONFIG overrides for ``prompt_name`` over the configured defaults."""
    config = PROMPT_CONFIG.get(prompt_name, {}) if prompt_name else {}
    return ModelParams(
        model=settings.ai_model,
        max_tokens=config.get("max_tokens", settings.ai_max_tokens),
        temperature=config.get("temperature", settings.ai_temperature),
        json_mode=json_mode,
    )


# ── Completion Client ────────────────────────────────────────────────────────


class CompletionClient(Protocol):
    async def complete(
        self, prompt: str, params: ModelParams, *, system: str | None = None
    ) -> str: ...


class LiteLLMCompletionClient:
    """CompletionClient that routes every call through ``litellm.acompletion``."""

    def __init__(self, api_key: str, timeout: float | None = None):
        self._api_key = api_key
        self._timeout = timeout

    @classmethod
    def from_settings(cls, settings: Settings) -> "LiteLLMCompletionClient":
        return cls(api_key=settings.openai_api_key, timeout=settings.ai_timeout_seconds)

    async def complete(
        self, prompt: str, params: ModelParams, *, system: str | None = None
    ) -> str:
        """
        Send a single prompt and return the assistant's response text.

        Args:
            prompt: User prompt with the CV text already embedded
            params: Model identifier, token budget, temperature and JSON mode
            system: Optional system instructions sent ahead of the prompt
        """
        messages: list[dict[str, str]] = []
        if system:
            messages.append({"role": "system", "content": system})
        messages.append({"role": "user", "content": prompt})

        kwargs: dict[str, Any] = {
            "model": params.model,
            "messages": messages,
            "temperature": params.temperature,
            "max_tokens": params.max_tokens,
            "api_key": self._api_key,
        }
        if self._timeout is not None:
            kwargs["timeout"] = self._timeout
        if params.json_mode:
            kwargs["response_format"] = {"type": "json_object"}

        logger.info(
            f"LLM call: model={params.model} temp={params.temperature} tokens={params.max_tokens} json={params.json_mode}"
        )

        try:
            response = await acompletion(**kwargs)
        except Exception as e:
            logger.error(f"LLM error ({params.model}): {e}")
            raise UpstreamServiceError(f"Completion request failed: {e}") from e

        content = response.choices[0].message.content or ""
        logger.info(f"LLM response: {len(content)} chars, usage={getattr(response, 'usage', None)}")
        return content


# ── JSON Parsing ─────────────────────────────────────────────────────────────


def parse_json_response(raw: str) -> dict[str, Any]:
    """
    Parse model output as a JSON object.

    Accepts a bare object or one wrapped in a ```json ... ``` / ``` ... ``` block.
    Raises MalformedAIResponse for anything else, including top-level arrays.
    """
    text = raw.strip()
    data = _loads_or_none(text)

    if data is None and "```" in text:
        marker = "```json" if "```json" in text else "```"
        start = text.index(marker) + len(marker)
        end = text.find("```", start)
        if end != -1:
            data = _loads_or_none(text[start:end].strip())

    if data is None:
        raise MalformedAIResponse(f"Could not parse AI response as JSON: {text[:200]}")
    if not isinstance(data, dict):
        raise MalformedAIResponse(
            f"Expected a JSON object from the AI service, got {type(data).__name__}"
        )
    return data


def _loads_or_none(text: str) -> Any:
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except json.JSONDecodeError:
        return None


def _reject_constant(name: str) -> Any:
    # json.loads accepts NaN / Infinity / -Infinity, which are not valid JSON
    raise MalformedAIResponse(f"AI response contains non-standard JSON constant '{name}'")
