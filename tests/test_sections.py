import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from atsmatch.parsing.sections import (  # noqa: E402
    is_inline_heading,
    is_section_heading,
    parse_resume_into_sections,
    parse_resume_zones,
    zone_for_heading,
)
from atsmatch.schemas.resume import Zone  # noqa: E402

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


class HeadingDetectionTests(unittest.TestCase):
    def test_recognized_heading_styles(self):
        self.assertTrue(is_section_heading("## Experience"))
        self.assertTrue(is_section_heading("**Technical Skills**"))
        self.assertTrue(is_section_heading("Education:"))
        self.assertTrue(is_section_heading("PROFESSIONAL EXPERIENCE"))

    def test_rejected_lines(self):
        self.assertFalse(is_section_heading("MBA"))
        self.assertFalse(is_section_heading("ACME CORP"))
        self.assertFalse(is_section_heading("Built Python services"))
        self.assertFalse(is_section_heading(""))

    def test_inline_heading_labels(self):
        self.assertTrue(is_inline_heading("Experience: Acme Corp, 2020 - Present"))
        self.assertTrue(is_inline_heading("**Skills:** Python, AWS"))
        self.assertFalse(is_inline_heading("Education:"))
        self.assertFalse(is_inline_heading("Tools: Jira"))
        self.assertFalse(is_section_heading("Experience: Acme Corp, 2020 - Present"))

    def test_zone_mapping(self):
        self.assertEqual(zone_for_heading("core competencies"), Zone.SKILLS)
        self.assertEqual(zone_for_heading("employment history"), Zone.EXPERIENCE)
        self.assertEqual(zone_for_heading("certifications"), Zone.EDUCATION)
        self.assertEqual(zone_for_heading("projects"), Zone.EXPERIENCE)


class ZoneParsingTests(unittest.TestCase):
    def test_sections_in_document_order(self):
        sections = parse_resume_zones(RESUME)
        self.assertEqual([section.name for section in sections], ["headline", "summary", "experience", "skills", "education"])
        self.assertEqual(
            [section.zone for section in sections],
            [Zone.HEADLINE, Zone.SUMMARY, Zone.EXPERIENCE, Zone.SKILLS, Zone.EDUCATION],
        )
        self.assertIn("Senior Software Engineer", sections[0].content)
        self.assertIn("Built Python services", sections[2].content)

    def test_long_preamble_spills_into_summary(self):
        lines = [f"Line {index}" for index in range(7)]
        sections = parse_resume_zones("\n".join(lines + ["Skills", "Python"]))
        self.assertEqual(sections[0].content.split("\n"), lines[:5])
        self.assertEqual(sections[1].name, "summary")
        self.assertEqual(sections[1].content, "Line 5\nLine 6")
        self.assertEqual(sections[2].zone, Zone.SKILLS)

    def test_empty_text_still_has_headline(self):
        sections = parse_resume_zones("")
        self.assertEqual(len(sections), 1)
        self.assertEqual(sections[0].zone, Zone.HEADLINE)
        self.assertEqual(sections[0].content, "")


class DocumentSectionTests(unittest.TestCase):
    def test_leading_lines_grouped_under_header(self):
        sections = parse_resume_into_sections(RESUME)
        self.assertEqual([section.title for section in sections], ["Header", "SUMMARY", "EXPERIENCE", "SKILLS", "EDUCATION"])
        self.assertEqual(sections[0].content[0], "Jane Doe")
        self.assertEqual(sections[3].content, ["Python, AWS, PostgreSQL"])


if __name__ == "__main__":
    unittest.main()
