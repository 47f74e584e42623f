import sys
import tempfile
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from atsmatch.core.rules_cache import (  # noqa: E402
    COVER_LETTER_RULES_FILE,
    RESUME_RULES_FILE,
    RulesCache,
    has_rule_content,
)


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


class RulesCacheTests(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.rules_dir = Path(self._tmp.name)
        self.clock = FakeClock()
        self.cache = RulesCache(self.rules_dir, ttl_seconds=60, clock=self.clock)

    def tearDown(self):
        self._tmp.cleanup()

    def _write(self, name: str, content: str) -> None:
        (self.rules_dir / name).write_text(content, encoding="utf-8")

    def test_missing_file_is_none(self):
        self.assertIsNone(self.cache.resume_rules())

    def test_comment_and_heading_only_file_is_none(self):
        self._write(RESUME_RULES_FILE, "# Resume rules\n<!-- add rules here -->\n")
        self.assertIsNone(self.cache.resume_rules())

    def test_full_content_returned_when_rules_present(self):
        content = "# Rules\n<!-- note -->\n- Keep bullets short\n"
        self._write(COVER_LETTER_RULES_FILE, content)
        self.assertEqual(self.cache.cover_letter_rules(), content)

    def test_value_is_reused_until_ttl_expires(self):
        self._write(RESUME_RULES_FILE, "- first")
        self.assertEqual(self.cache.resume_rules(), "- first")

        self._write(RESUME_RULES_FILE, "- second")
        self.clock.now = 59.0
        self.assertEqual(self.cache.resume_rules(), "- first")

        self.clock.now = 60.0
        self.assertEqual(self.cache.resume_rules(), "- second")

    def test_invalidate_forces_reload(self):
        self._write(RESUME_RULES_FILE, "- first")
        self.cache.resume_rules()
        self._write(RESUME_RULES_FILE, "- second")
        self.cache.invalidate()
        self.assertEqual(self.cache.resume_rules(), "- second")

    def test_non_positive_ttl_rejected(self):
        with self.assertRaises(ValueError):
            RulesCache(self.rules_dir, ttl_seconds=0)

    def test_rule_content_detection(self):
        self.assertFalse(has_rule_content("## Heading\n\n<!--\nmulti-line\n-->"))
        self.assertTrue(has_rule_content("Use plain bullets."))


if __name__ == "__main__":
    unittest.main()
