import sys
import tempfile
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from atsmatch.core.rules_cache import COVER_LETTER_RULES_FILE, RESUME_RULES_FILE, RulesCache  # noqa: E402
from atsmatch.prompts import (  # noqa: E402
    build_cover_letter_system_prompt,
    build_headline_guidance,
    build_resume_system_prompt,
)
from atsmatch.prompts.system import (  # noqa: E402
    BASE_RESUME_PROMPT,
    COVER_LETTER_PROMPT,
    DOCUMENT_TYPE_INSTRUCTIONS,
    HEADLINE_RULE,
    STRATEGY_INSTRUCTIONS,
)


class ResumePromptTests(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.rules_dir = Path(self._tmp.name)
        self.cache = RulesCache(self.rules_dir)

    def tearDown(self):
        self._tmp.cleanup()

    def test_blocks_in_order_without_rules(self):
        prompt = build_resume_system_prompt(self.cache, "keyword", "cv")
        self.assertEqual(
            prompt,
            BASE_RESUME_PROMPT + STRATEGY_INSTRUCTIONS["keyword"] + DOCUMENT_TYPE_INSTRUCTIONS["cv"],
        )

    def test_rules_inserted_before_strategy(self):
        (self.rules_dir / RESUME_RULES_FILE).write_text("- No tables", encoding="utf-8")
        prompt = build_resume_system_prompt(self.cache)
        rules_at = prompt.index("The following rules MUST be followed when tailoring the resume:\n- No tables")
        self.assertLess(rules_at, prompt.index("STRATEGY: HYBRID"))
        self.assertTrue(prompt.endswith(DOCUMENT_TYPE_INSTRUCTIONS["resume"]))

    def test_unknown_modes_fall_back(self):
        prompt = build_resume_system_prompt(self.cache, "aggressive", "letter")
        self.assertIn("STRATEGY: HYBRID", prompt)
        self.assertIn("DOCUMENT TYPE: RESUME", prompt)

    def test_cover_letter_prompt_with_rules(self):
        self.assertEqual(build_cover_letter_system_prompt(self.cache), COVER_LETTER_PROMPT)
        (self.rules_dir / COVER_LETTER_RULES_FILE).write_text("- Three paragraphs", encoding="utf-8")
        self.cache.invalidate()
        self.assertTrue(
            build_cover_letter_system_prompt(self.cache).endswith(
                "The following cover letter rules MUST be followed:\n- Three paragraphs"
            )
        )


class HeadlineGuidanceTests(unittest.TestCase):
    def test_guidance_lists_title_parts(self):
        guidance = build_headline_guidance("Senior Software Engineer - Backend (Python, AWS)")
        lines = guidance.split("\n")
        self.assertEqual(lines[0], "[Headline Guidance]")
        self.assertIn("Exact Job Posting Title: Senior Software Engineer - Backend (Python, AWS)", lines)
        self.assertIn("Core Role: Software Engineer", lines)
        self.assertIn("Level: Senior", lines)
        self.assertIn("Qualifiers: Backend", lines)
        self.assertIn("Tech Stack Keywords: Python, AWS", lines)
        self.assertEqual(lines[-1], HEADLINE_RULE)

    def test_plain_title_omits_empty_parts(self):
        guidance = build_headline_guidance("Data Analyst")
        self.assertNotIn("Level:", guidance)
        self.assertNotIn("Tech Stack Keywords:", guidance)


if __name__ == "__main__":
    unittest.main()
