import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from cv_analyzer.services.field_extractor import NOT_FOUND, extract_basic_info  # noqa: E402


class FieldExtractorTests(unittest.TestCase):
    def test_labelled_email_is_extracted(self):
        text = "Jane Doe\nEmail: jane@example.com\nPython developer"
        self.assertEqual(extract_basic_info(text, ["email"]), {"email": "jane@example.com"})

    def test_missing_field_uses_sentinel(self):
        info = extract_basic_info("Jane Doe\nPython developer", ["email"])
        self.assertEqual(info, {"email": NOT_FOUND})
        self.assertEqual(NOT_FOUND, "Not found")

    def test_only_requested_fields_are_returned(self):
        text = "Name: Jane Doe\nEmail: jane@example.com\nPhone: +1 555 0100"
        self.assertEqual(extract_basic_info(text, ["phone"]), {"phone": "+1 555 0100"})
        self.assertEqual(extract_basic_info(text, []), {})

    def test_labels_match_case_insensitively_and_first_match_wins(self):
        text = "NAME:   Jane Doe  \nname: Someone Else"
        self.assertEqual(extract_basic_info(text, ["name"]), {"name": "Jane Doe"})

    def test_unknown_and_duplicate_fields(self):
        text = "Name: Jane Doe\nEmail: jane@example.com"
        info = extract_basic_info(text, ["email", "Email", "linkedin", 42])
        self.assertEqual(info, {"email": "jane@example.com"})


if __name__ == "__main__":
    unittest.main()
