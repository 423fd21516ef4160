import sys
import unittest
from pathlib import Path
from types import SimpleNamespace
from unittest.mock import AsyncMock, patch

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from cv_analyzer.config import Settings  # noqa: E402
from cv_analyzer.exceptions import MalformedAIResponse, UpstreamServiceError  # noqa: E402
from cv_analyzer.services.llm_service import (  # noqa: E402
    LiteLLMCompletionClient,
    ModelParams,
    parse_json_response,
    resolve_params,
)


def _completion(content):
    message = SimpleNamespace(content=content)
    return SimpleNamespace(choices=[SimpleNamespace(message=message)], usage=None)


class ParseJsonResponseTests(unittest.TestCase):
    def test_bare_object(self):
        self.assertEqual(parse_json_response(' {"technical": ["Go"]} '), {"technical": ["Go"]})

    def test_fenced_object(self):
        raw = 'Here you go:\n```json\n{"overallTone": "professional"}\n```'
        self.assertEqual(parse_json_response(raw), {"overallTone": "professional"})

    def test_plain_fence(self):
        raw = '```\n{"redFlags": []}\n```'
        self.assertEqual(parse_json_response(raw), {"redFlags": []})

    def test_prose_is_rejected(self):
        with self.assertRaises(MalformedAIResponse):
            parse_json_response("The candidate has strong Python skills.")

    def test_top_level_array_is_rejected(self):
        with self.assertRaises(MalformedAIResponse):
            parse_json_response('["Python", "Go"]')

    def test_non_standard_constants_are_rejected(self):
        for raw in ('{"confidenceLevel": NaN}', '{"confidenceScore": -Infinity}', '```json\n{"confidenceLevel": Infinity}\n```'):
            with self.assertRaises(MalformedAIResponse) as ctx:
                parse_json_response(raw)
            self.assertIn("non-standard JSON constant", str(ctx.exception))


class ResolveParamsTests(unittest.TestCase):
    def setUp(self):
        self.settings = Settings(
            openai_api_key="sk-test",
            ai_model="gpt-4o-mini",
            ai_max_tokens=1000,
            ai_temperature=0.3,
            _env_file=None,
        )

    def test_defaults_come_from_settings(self):
        self.assertEqual(
            resolve_params(self.settings, "skills_extractor"),
            ModelParams(model="gpt-4o-mini", max_tokens=1000, temperature=0.3),
        )
        self.assertEqual(resolve_params(self.settings), resolve_params(self.settings, "skills_extractor"))

    def test_json_mode_is_off_unless_requested(self):
        self.assertFalse(resolve_params(self.settings, "skills_extractor").json_mode)
        self.assertTrue(resolve_params(self.settings, "skills_extractor", json_mode=True).json_mode)

    def test_prompt_config_overrides(self):
        self.assertEqual(
            resolve_params(self.settings, "qualification_matcher"),
            ModelParams(model="gpt-4o-mini", max_tokens=800, temperature=0.7),
        )


class LiteLLMCompletionClientTests(unittest.IsolatedAsyncioTestCase):
    async def test_complete_sends_prompt_and_params(self):
        client = LiteLLMCompletionClient(api_key="sk-test", timeout=12.0)
        params = ModelParams(model="gpt-4o-mini", max_tokens=500, temperature=0.2)

        with patch(
            "cv_analyzer.services.llm_service.acompletion",
            new=AsyncMock(return_value=_completion("  analysis text  ")),
        ) as mocked:
            text = await client.complete("Analyze this CV", params, system="You are a recruiter.")

        self.assertEqual(text, "  analysis text  ")
        kwargs = mocked.await_args.kwargs
        self.assertEqual(kwargs["model"], "gpt-4o-mini")
        self.assertEqual(kwargs["max_tokens"], 500)
        self.assertEqual(kwargs["temperature"], 0.2)
        self.assertEqual(kwargs["api_key"], "sk-test")
        self.assertEqual(kwargs["timeout"], 12.0)
        self.assertEqual(
            kwargs["messages"],
            [
                {"role": "system", "content": "You are a recruiter."},
                {"role": "user", "content": "Analyze this CV"},
            ],
        )

    async def test_complete_without_system_prompt(self):
        client = LiteLLMCompletionClient(api_key="sk-test")
        params = ModelParams(model="gpt-4o-mini", max_tokens=10, temperature=0.0)

        with patch(
            "cv_analyzer.services.llm_service.acompletion",
            new=AsyncMock(return_value=_completion(None)),
        ) as mocked:
            text = await client.complete("ping", params)

        self.assertEqual(text, "")
        self.assertEqual(mocked.await_args.kwargs["messages"], [{"role": "user", "content": "ping"}])
        self.assertNotIn("timeout", mocked.await_args.kwargs)
        self.assertNotIn("response_format", mocked.await_args.kwargs)

    async def test_json_mode_requests_a_json_object(self):
        client = LiteLLMCompletionClient(api_key="sk-test")
        params = ModelParams(model="gpt-4o-mini", max_tokens=10, temperature=0.0, json_mode=True)

        with patch(
            "cv_analyzer.services.llm_service.acompletion",
            new=AsyncMock(return_value=_completion("{}")),
        ) as mocked:
            await client.complete("ping", params)

        self.assertEqual(mocked.await_args.kwargs["response_format"], {"type": "json_object"})

    async def test_provider_errors_become_upstream_errors(self):
        client = LiteLLMCompletionClient.from_settings(Settings(openai_api_key="sk-test", _env_file=None))
        params = ModelParams(model="gpt-4o-mini", max_tokens=10, temperature=0.0)

        with patch(
            "cv_analyzer.services.llm_service.acompletion",
            new=AsyncMock(side_effect=RuntimeError("429 rate limit")),
        ):
            with self.assertRaises(UpstreamServiceError) as ctx:
                await client.complete("ping", params)

        self.assertIn("429 rate limit", str(ctx.exception))


if __name__ == "__main__":
    unittest.main()
