import sys
import unittest
from pathlib import Path

from pydantic import ValidationError

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from atsmatch.jd import FEW_SKILLS_WARNING, process_jd, sanitize_job_paste  # noqa: E402
from atsmatch.jd.segmenter import segment_jd_sections  # noqa: E402
from atsmatch.normalize.text import clean_jd_text  # noqa: E402
from atsmatch.schemas.jd import ProcessedJD  # noqa: E402

JD_TEXT = """About the role
We build payment systems for lenders.

Requirements
5+ years of experience with Python, AWS and PostgreSQL. Strong communication and leadership.

Benefits
401k matching and dental coverage."""

JOB_PASTE = """Senior Backend Engineer
Acme Payments
Remote
142 applicants
Easy Apply
Save

About the job
We build lending APIs with Python and Kafka.

Requirements
3+ years of experience with Python, Kafka and Docker.

We are an equal opportunity employer and value diversity regardless of race."""


class CleanTextTests(unittest.TestCase):
    def test_repairs_glued_sentences_and_normalizes_characters(self):
        cleaned = clean_jd_text("Join our team.You will ship code—fast.\n\nUse “Python”​ daily")
        self.assertEqual(cleaned, 'Join our team. You will ship code-fast. Use "Python" daily')


class SegmentationTests(unittest.TestCase):
    def test_headers_split_relevant_and_noise(self):
        sections = segment_jd_sections(clean_jd_text(JD_TEXT))
        self.assertTrue(sections.relevant.role_overview.startswith("About the role"))
        self.assertTrue(sections.relevant.requirements.startswith("Requirements"))
        self.assertIn("401k", sections.noise.benefits)
        self.assertNotIn("dental", sections.full_relevant_text)
        self.assertEqual(sections.found_fields(), (["role_overview", "requirements"], ["benefits"]))

    def test_headerless_text_falls_back_to_sentences(self):
        sections = segment_jd_sections("You will write Python services. Pay is $120,000 per year.")
        self.assertIn("Python", sections.full_relevant_text)
        self.assertNotIn("$120,000", sections.full_relevant_text)
        self.assertIn("$120,000", sections.noise.other_noise)


class ProcessJDTests(unittest.TestCase):
    def test_extracts_skills_and_metadata(self):
        processed = process_jd(JD_TEXT, job_title="  Backend Engineer ")
        self.assertCountEqual(processed.extracted_skills.hard_skills, ["Python", "AWS", "PostgreSQL"])
        self.assertCountEqual(processed.extracted_skills.soft_skills, ["communication", "leadership"])
        self.assertEqual(processed.job_title, "Backend Engineer")
        self.assertEqual(processed.metadata.years_experience[0].min_years, 5)
        self.assertEqual(processed.metadata.years_experience[0].area, "Python")
        self.assertEqual(processed.warnings, [])
        self.assertGreater(processed.debug.noise_percentage_filtered, 0)
        self.assertEqual(processed.debug.extraction_method["Python"], "both")

    def test_processing_cleaned_text_again_is_stable(self):
        first = process_jd(JD_TEXT)
        second = process_jd(first.cleaned_text)
        self.assertEqual(second.cleaned_text, first.cleaned_text)
        self.assertEqual(second.sections, first.sections)
        self.assertEqual(second.extracted_skills, first.extracted_skills)

    def test_same_input_serializes_identically(self):
        first = process_jd(JD_TEXT, job_title="Backend Engineer")
        second = process_jd(JD_TEXT, job_title="Backend Engineer")
        self.assertEqual(first.model_dump_json(), second.model_dump_json())

    def test_long_capitalized_list_items_are_not_skills(self):
        processed = process_jd("Experience with Building Large Scale Payment APIs, Python and Docker.")
        self.assertNotIn("Building Large Scale Payment APIs", processed.extracted_skills.hard_skills)
        self.assertIn("Python", processed.extracted_skills.hard_skills)

    def test_few_skills_warning(self):
        processed = process_jd("We need someone friendly who loves helping people.")
        self.assertIn(FEW_SKILLS_WARNING, processed.warnings)

    def test_ambiguous_short_terms_need_context(self):
        without_context = process_jd("We go above and beyond for customers.")
        self.assertNotIn("Go", without_context.extracted_skills.hard_skills)
        with_context = process_jd("Experience with Go, Python and Docker.")
        self.assertIn("Go", with_context.extracted_skills.hard_skills)

    def test_synonym_forms_counted_once(self):
        processed = process_jd("Experience with AWS and Amazon Web Services, Python and Docker.")
        hard = [skill.lower() for skill in processed.extracted_skills.hard_skills]
        self.assertEqual(sum(1 for skill in hard if skill in {"aws", "amazon web services"}), 1)

    def test_processed_jd_round_trips_and_rejects_unknown_fields(self):
        processed = process_jd(JD_TEXT)
        restored = ProcessedJD.model_validate(processed.model_dump())
        self.assertEqual(restored, processed)
        with self.assertRaises(ValidationError):
            ProcessedJD.model_validate({"unexpected": True})


class SanitizeJobPasteTests(unittest.TestCase):
    def test_strips_board_artifacts_and_boilerplate(self):
        posting = sanitize_job_paste(JOB_PASTE)
        self.assertEqual(posting.title, "Senior Backend Engineer")
        self.assertEqual(posting.company, "Acme Payments")
        self.assertIn("142 applicants", posting.stats.stripped_items)
        self.assertIn("Easy Apply", posting.stats.stripped_items)
        self.assertGreater(posting.stats.boilerplate_word_count, 0)
        self.assertNotIn("equal opportunity", posting.description)
        self.assertIn("Kafka", posting.extracted_skills.hard_skills)
        self.assertIn("3+ years of Python", posting.requirements)
        self.assertGreater(posting.stats.words_removed, 0)

    def test_manual_values_override_detected_ones(self):
        posting = sanitize_job_paste(JOB_PASTE, manual_title="Staff Engineer", manual_company="Globex")
        self.assertEqual(posting.title, "Staff Engineer")
        self.assertEqual(posting.company, "Globex")
        self.assertEqual(posting.auto_title, "Senior Backend Engineer")


if __name__ == "__main__":
    unittest.main()
