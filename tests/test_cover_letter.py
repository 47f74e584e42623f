import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from atsmatch.schemas.jd import ExtractedSkills, JDSections, ProcessedJD  # noqa: E402
from atsmatch.scoring import AI_ISM_BLACKLIST, score_cover_letter  # noqa: E402
from atsmatch.scoring.cover_letter import top_requirements  # noqa: E402

PROCESSED_JD = ProcessedJD(
    sections=JDSections(
        full_relevant_text=(
            "Requirements: 5+ years of experience with Python, AWS and PostgreSQL. We value a calm team player."
        )
    ),
    extracted_skills=ExtractedSkills(hard_skills=["Python", "AWS", "PostgreSQL"]),
)

LETTER = """Dear Hiring Manager,

I am passionate about building reliable lending products with Python and AWS. Migrated billing platform to Kubernetes reducing deploy time.

At my last company I owned the credit decision service end to end.

Thank you for your consideration."""

RESUME_TEXT = "Migrated billing platform to Kubernetes reducing deploy time"


class CoverLetterScoreTests(unittest.TestCase):
    def setUp(self):
        self.result = score_cover_letter(LETTER, PROCESSED_JD, RESUME_TEXT)
        self.tiers = self.result.tier_scores

    def test_keyword_reinforcement(self):
        self.assertEqual(self.tiers.keyword_reinforcement.found, ["Python", "AWS"])
        self.assertEqual(self.tiers.keyword_reinforcement.missing, ["PostgreSQL"])
        self.assertEqual(self.tiers.keyword_reinforcement.score, 67)

    def test_pain_points(self):
        self.assertEqual(self.tiers.pain_point_coverage.score, 100)
        self.assertEqual(len(self.tiers.pain_point_coverage.addressed), 1)
        self.assertEqual(self.tiers.pain_point_coverage.missed, [])

    def test_duplicated_resume_sentence(self):
        duplicated = self.tiers.no_duplication.duplicated_sentences
        self.assertEqual(len(duplicated), 1)
        self.assertTrue(duplicated[0].startswith("Migrated billing platform"))
        self.assertTrue(duplicated[0].endswith("..."))
        self.assertEqual(self.tiers.no_duplication.score, 80)

    def test_voice_structure_and_length(self):
        self.assertEqual(self.tiers.authentic_voice.flagged_phrases, ["i am passionate about"])
        self.assertEqual(self.tiers.authentic_voice.score, 85)
        self.assertEqual(self.tiers.structural_compliance.paragraph_count, 4)
        self.assertEqual(self.tiers.structural_compliance.score, 100)
        self.assertFalse(self.tiers.structural_compliance.has_bullets)
        self.assertEqual(self.tiers.length_compliance.score, 30)

    def test_total_and_recommendations(self):
        self.assertEqual(self.result.total_score, 80)
        recommendations = self.result.recommendations
        self.assertEqual(recommendations[0], "Weave these JD keywords into the cover letter: PostgreSQL")
        self.assertTrue(recommendations[1].startswith("Cover letter is too short ("))
        self.assertIn("Remove AI-sounding phrases: i am passionate about", recommendations)

    def test_blacklist_is_lowercase(self):
        self.assertEqual(len(AI_ISM_BLACKLIST), 17)
        self.assertTrue(all(phrase == phrase.lower() for phrase in AI_ISM_BLACKLIST))


class RequirementSelectionTests(unittest.TestCase):
    def test_requirement_cues_and_skills_select_sentences(self):
        text = (
            "You must own the billing roadmap end to end. We love dogs in the office. "
            "Daily work in Python and Kafka pipelines"
        )
        self.assertEqual(
            top_requirements(text, ["Python"], limit=5),
            ["You must own the billing roadmap end to end", "Daily work in Python and Kafka pipelines"],
        )

    def test_limit_is_respected(self):
        text = ". ".join(f"Requirement number {index} must be met" for index in range(8))
        self.assertEqual(len(top_requirements(text, [], limit=5)), 5)


if __name__ == "__main__":
    unittest.main()
