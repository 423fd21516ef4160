import os
import sys
import unittest
from pathlib import Path
from unittest.mock import patch

from pydantic import ValidationError

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from cv_analyzer.config import PROMPT_CONFIG, Settings  # noqa: E402


class SettingsTests(unittest.TestCase):
    def test_missing_api_key_fails_fast(self):
        with patch.dict(os.environ, {}, clear=True):
            with self.assertRaises(ValidationError) as ctx:
                Settings(_env_file=None)
        self.assertIn("Missing required environment variables: OPENAI_API_KEY", str(ctx.exception))

    def test_blank_api_key_is_rejected(self):
        with patch.dict(os.environ, {}, clear=True):
            with self.assertRaises(ValidationError):
                Settings(openai_api_key="   ", _env_file=None)

    def test_defaults(self):
        with patch.dict(os.environ, {"OPENAI_API_KEY": "sk-test"}, clear=True):
            settings = Settings(_env_file=None)

        self.assertEqual(settings.openai_api_key, "sk-test")
        self.assertEqual(settings.port, 3000)
        self.assertEqual(settings.ai_max_tokens, 1000)
        self.assertEqual(settings.ai_temperature, 0.3)
        self.assertEqual(settings.max_upload_size, 5 * 1024 * 1024)
        self.assertEqual(settings.allowed_upload_types, ["application/pdf"])
        self.assertEqual(settings.cors_origin, "*")
        self.assertEqual(settings.cors_methods, ["GET", "POST"])
        self.assertEqual(settings.cors_allowed_headers, ["Content-Type", "Authorization"])

    def test_environment_overrides(self):
        env = {
            "OPENAI_API_KEY": "sk-test",
            "PORT": "8080",
            "AI_MODEL": "gpt-4o",
            "AI_TEMPERATURE": "0.1",
            "MAX_UPLOAD_SIZE": "1048576",
            "ALLOWED_UPLOAD_TYPES": '["application/pdf", "application/x-pdf"]',
            "CORS_ORIGIN": "https://cv.example.com",
        }
        with patch.dict(os.environ, env, clear=True):
            settings = Settings(_env_file=None)

        self.assertEqual(settings.port, 8080)
        self.assertEqual(settings.ai_model, "gpt-4o")
        self.assertEqual(settings.ai_temperature, 0.1)
        self.assertEqual(settings.max_upload_size, 1024 * 1024)
        self.assertEqual(settings.allowed_upload_types, ["application/pdf", "application/x-pdf"])
        self.assertEqual(settings.cors_origin, "https://cv.example.com")

    def test_settings_are_immutable(self):
        settings = Settings(openai_api_key="sk-test", _env_file=None)
        with self.assertRaises(ValidationError):
            settings.max_upload_size = 1

    def test_prompt_overrides_for_free_text_prompts(self):
        self.assertEqual(PROMPT_CONFIG["qualification_matcher"], {"temperature": 0.7, "max_tokens": 800})
        self.assertEqual(PROMPT_CONFIG["cv_summary"], {"temperature": 0.7, "max_tokens": 1000})


if __name__ == "__main__":
    unittest.main()
