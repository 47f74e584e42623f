import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from atsmatch.matching import get_default_matcher  # noqa: E402
from atsmatch.parsing.sections import parse_resume_zones  # noqa: E402
from atsmatch.schemas.jd import ExtractedSkills, ProcessedJD  # noqa: E402
from atsmatch.scoring import check_parsing_gate, compute_ats_score, decompose_job_title, normalize_title  # noqa: E402
from atsmatch.scoring.gate import NO_CONTACT_REASON, NO_DATES_REASON, NO_HEADINGS_REASON  # noqa: E402
from atsmatch.scoring.recommendations import QUANTIFY_RECOMMENDATION  # noqa: E402
from atsmatch.scoring.tiers import (  # noqa: E402
    frequency_score,
    is_reverse_chronological,
    overlapping_skills,
    score_hard_skill_match,
    score_structural_compliance,
)
from atsmatch.scoring.title import score_job_title_alignment  # noqa: E402

RESUME = """Jane Doe
Senior Software Engineer
jane@example.com | (555) 123-4567

SUMMARY
Backend engineer focused on payments.

EXPERIENCE
Acme Corp, Jan 2020 - Present
- Built Python services on AWS

SKILLS
Python, AWS, PostgreSQL

EDUCATION
BS Computer Science, 2015"""


def _jd(hard_skills, soft_skills=None, job_title="Senior Software Engineer"):
    return ProcessedJD(
        extracted_skills=ExtractedSkills(hard_skills=hard_skills, soft_skills=soft_skills or []),
        job_title=job_title,
    )


class ParsingGateTests(unittest.TestCase):
    def test_unstructured_text_fails_with_reasons(self):
        result = check_parsing_gate("just a few words without any structure")
        self.assertFalse(result.passed)
        self.assertEqual(result.reasons, [NO_HEADINGS_REASON, NO_CONTACT_REASON, NO_DATES_REASON])

    def test_structured_resume_passes(self):
        self.assertTrue(check_parsing_gate(RESUME).passed)

    def test_inline_heading_label_counts_as_heading(self):
        text = "Jane Doe\njane@example.com\nExperience: Acme Corp, Jan 2020 - Present"
        self.assertTrue(check_parsing_gate(text).passed)
        tier = score_structural_compliance(text, parse_resume_zones(text))
        self.assertTrue(tier.content_checks[0].passed)
        self.assertFalse(check_parsing_gate("Jane Doe\njane@example.com\nHobbies: chess, Jan 2020").passed)

    def test_gate_failure_zeroes_every_tier(self):
        result = compute_ats_score("just a few words without any structure", _jd(["Python", "Java"], ["leadership"]))
        self.assertFalse(result.passed_parsing_gate)
        self.assertEqual(result.total_score, 0)
        self.assertEqual(len(result.parsing_fail_reasons), 3)
        self.assertEqual(result.tier_scores.hard_skill_match.missing, ["Python", "Java"])
        self.assertEqual(result.tier_scores.soft_skill_match.missing, ["leadership"])
        self.assertEqual(result.tier_scores.scores(), dict.fromkeys(result.tier_scores.scores(), 0))
        self.assertTrue(all(item.startswith("Fix parsing issue: ") for item in result.recommendations))


class ATSScoreTests(unittest.TestCase):
    def test_skills_missing_from_original_are_a_gap_not_a_penalty(self):
        result = compute_ats_score(RESUME, _jd(["Python", "Java"]), original=RESUME)
        hard = result.tier_scores.hard_skill_match
        self.assertEqual(hard.matched, ["Python"])
        self.assertEqual(hard.missing, [])
        self.assertEqual(hard.skills_gap, ["Java"])
        self.assertEqual(hard.score, 100)
        self.assertEqual(result.jd_coverage_score, 50)
        self.assertEqual(result.coverage_percentage, 50)
        self.assertEqual(result.scoring_debug.skills_gap, ["Java"])
        self.assertTrue(any(item.startswith("Skills gap:") and "Java" in item for item in result.recommendations))

    def test_without_original_every_jd_skill_counts(self):
        result = compute_ats_score(RESUME, _jd(["Python", "Java"]))
        hard = result.tier_scores.hard_skill_match
        self.assertEqual(hard.missing, ["Java"])
        self.assertEqual(hard.skills_gap, [])
        self.assertEqual(hard.score, 50)
        self.assertIn("Consider adding these skills more prominently: Java", result.recommendations)

    def test_skill_lost_while_tailoring_is_missing(self):
        tailored = RESUME.replace("Python, AWS, PostgreSQL", "AWS, PostgreSQL").replace("Built Python services", "Built services")
        result = compute_ats_score(tailored, _jd(["Python", "AWS"]), original=RESUME)
        self.assertEqual(result.tier_scores.hard_skill_match.missing, ["Python"])
        self.assertEqual(result.tier_scores.hard_skill_match.matched, ["AWS"])

    def test_empty_original_counts_as_no_original(self):
        hard = compute_ats_score(RESUME, _jd(["Python", "Java"]), original="").tier_scores.hard_skill_match
        self.assertEqual(hard.skills_gap, [])
        self.assertEqual(hard.missing, ["Java"])
        self.assertEqual(hard.score, 50)

    def test_empty_original_in_tier_helpers(self):
        sections = parse_resume_zones(RESUME)
        matcher = get_default_matcher()
        without = score_hard_skill_match(RESUME, ["Python", "Java"], sections, None, matcher)
        empty = score_hard_skill_match(RESUME, ["Python", "Java"], sections, "", matcher)
        self.assertEqual(empty, without)
        self.assertEqual(overlapping_skills(["Python", "Java"], "", matcher), ["Python", "Java"])

    def test_scoring_is_deterministic(self):
        jd = _jd(["Python", "AWS", "Java"], ["leadership"])
        first = compute_ats_score(RESUME, jd, original=RESUME)
        second = compute_ats_score(RESUME, jd, original=RESUME)
        self.assertEqual(first, second)
        self.assertEqual(first.model_dump_json(), second.model_dump_json())

    def test_result_shape(self):
        result = compute_ats_score(RESUME, _jd(["Python", "AWS"], ["leadership"]))
        self.assertTrue(result.passed_parsing_gate)
        self.assertTrue(0 <= result.total_score <= 100)
        self.assertLessEqual(len(result.recommendations), 5)
        self.assertIn(QUANTIFY_RECOMMENDATION, result.recommendations)
        self.assertEqual(result.tier_scores.soft_skill_match.missing, ["leadership"])
        self.assertEqual([item.term for item in result.keyword_density], ["Python", "AWS"])
        self.assertEqual(result.scoring_debug.sections, ["headline", "summary", "experience", "skills", "education"])


class TitleAlignmentTests(unittest.TestCase):
    def test_exact_title_in_headline(self):
        title = "Software Engineer II, Backend (Credit Decisioning)"
        resume = f"{title}\njane@example.com\n\nEXPERIENCE\nAcme, Jan 2020 - Present"
        tier = score_job_title_alignment(resume, title, parse_resume_zones(resume))
        self.assertEqual(tier.score, 100)
        self.assertEqual(tier.match_type, "exact")

    def test_core_words_in_headline(self):
        resume = "Jane Doe\nEngineer, Software Platforms\n\nEXPERIENCE\nAcme"
        tier = score_job_title_alignment(resume, "Senior Software Engineer", parse_resume_zones(resume))
        self.assertEqual(tier.match_type, "core")
        self.assertEqual(tier.score, 95)

    def test_missing_title_is_neutral(self):
        tier = score_job_title_alignment(RESUME, "", parse_resume_zones(RESUME))
        self.assertEqual((tier.score, tier.match_type), (50, "none"))

    def test_unrelated_title(self):
        tier = score_job_title_alignment(RESUME, "Product Designer", parse_resume_zones(RESUME))
        self.assertEqual((tier.score, tier.match_type), (0, "none"))

    def test_normalize_and_decompose(self):
        self.assertEqual(normalize_title("Senior C++ Engineer (Remote)"), "c++ engineer")
        decomposed = decompose_job_title("Senior Software Engineer - Backend (Python, AWS)")
        self.assertEqual(decomposed.core_role, "Software Engineer")
        self.assertEqual(decomposed.qualifiers, ["Backend"])
        self.assertEqual(decomposed.tech_stack, ["Python", "AWS"])
        self.assertEqual(decomposed.level, "Senior")


class TierHelperTests(unittest.TestCase):
    def test_frequency_saturates(self):
        self.assertEqual(frequency_score(0), 0.0)
        self.assertEqual(frequency_score(2), 1.5)
        self.assertEqual(frequency_score(10), 1.75)

    def test_reverse_chronology_tolerates_one_year(self):
        self.assertTrue(is_reverse_chronological([2023, 2024, 2021, 2019], checked=8))
        self.assertFalse(is_reverse_chronological([2018, 2022], checked=8))

    def test_single_year_passes_chronology_with_full_points(self):
        text = "EXPERIENCE\nEngineer, Acme 2021\njane@x.com"
        tier = score_structural_compliance(text, parse_resume_zones(text))
        chronology = next(check for check in tier.content_checks if check.label == "Reverse chronological order")
        self.assertTrue(chronology.passed)
        self.assertNotIn("May not be in reverse-chronological order", tier.issues)
        self.assertTrue(is_reverse_chronological([2021], checked=8))
        self.assertTrue(is_reverse_chronological([], checked=8))

    def test_structural_checks(self):
        tier = score_structural_compliance(RESUME, parse_resume_zones(RESUME))
        self.assertEqual(len(tier.content_checks), 6)
        labels = [check.label for check in tier.content_checks]
        self.assertIn("Reverse chronological order", labels)
        self.assertTrue(any("significantly outside optimal range" in issue for issue in tier.issues))

    def test_decorative_characters_are_penalized(self):
        plain = score_structural_compliance(RESUME, parse_resume_zones(RESUME))
        fancy_text = RESUME.replace("- Built", "★ Built")
        fancy = score_structural_compliance(fancy_text, parse_resume_zones(fancy_text))
        self.assertEqual(fancy.score, max(0, plain.score - 15))


if __name__ == "__main__":
    unittest.main()
