import logging
import sys
import unittest
from datetime import date
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from atsmatch.matching import (  # noqa: E402
    SynonymTermMatcher,
    contains_word,
    count_occurrences,
    extract_date_ranges,
    extract_dates,
    term_exists,
)
from atsmatch.matching.dates import date_formats_used, extract_years, format_month_year  # noqa: E402


class TermMatcherTests(unittest.TestCase):
    def setUp(self):
        self.matcher = SynonymTermMatcher()

    def test_abbreviation_matches_expansion_both_ways(self):
        self.assertTrue(self.matcher.term_exists("AWS", "Deployed services on Amazon Web Services."))
        self.assertTrue(self.matcher.term_exists("Amazon Web Services", "Deployed services on AWS."))

    def test_partial_words_never_match(self):
        self.assertFalse(term_exists("REST", "Built RESTful APIs"))
        self.assertFalse(term_exists("Java", "Wrote JavaScript daily"))
        self.assertTrue(term_exists("REST", "Designed REST APIs"))

    def test_punctuation_boundaries(self):
        self.assertTrue(term_exists("Python", "(Python, Go)"))
        self.assertTrue(term_exists("Kafka", "Kafka/Spark pipelines"))
        self.assertTrue(term_exists("SQL", "Wrote SQL."))

    def test_colon_and_markdown_are_not_boundaries(self):
        self.assertFalse(term_exists("MySQL", "Databases:MySQL"))
        self.assertFalse(term_exists("MySQL", "**MySQL**"))

    def test_empty_inputs(self):
        self.assertFalse(term_exists("", "anything"))
        self.assertFalse(term_exists("Python", ""))

    def test_boundary_miss_is_logged_when_logger_given(self):
        logger_name = "atsmatch.tests.match"
        matcher = SynonymTermMatcher(logger=logging.getLogger(logger_name))
        with self.assertLogs(logger_name, level="DEBUG") as captured:
            self.assertFalse(matcher.term_exists("MySQL", "Databases:MySQL"))
        self.assertIn("term_boundary_miss", captured.output[0])


class WordSearchTests(unittest.TestCase):
    def test_symbols_in_terms(self):
        self.assertTrue(contains_word("C++", "Modern C++ and Rust"))
        self.assertFalse(contains_word("C", "Modern C++ and Rust"))
        self.assertTrue(contains_word(".NET", "Built on .NET Core"))

    def test_count_occurrences_case_insensitive(self):
        self.assertEqual(count_occurrences("python", "Python, python and PYTHON; pythonic"), 3)


class DateExtractionTests(unittest.TestCase):
    def test_formats_are_classified(self):
        mentions = extract_dates("January 2020, Feb 2021, 03/2022, May 2023")
        self.assertEqual([mention.format for mention in mentions], ["month_name", "month_abbreviation", "numeric", "ambiguous"])
        self.assertEqual(date_formats_used("January 2020 - May 2021"), {"month_name"})

    def test_invalid_numeric_month_is_skipped(self):
        self.assertEqual(extract_dates("13/2020"), [])

    def test_ranges_resolve_present_against_today(self):
        ranges = extract_date_ranges("Engineer, June 2019 – Present", today=date(2026, 10, 18))
        self.assertEqual(len(ranges), 1)
        self.assertEqual(ranges[0].start, date(2019, 6, 1))
        self.assertEqual(ranges[0].end, date(2026, 10, 18))
        self.assertTrue(ranges[0].is_current)

    def test_years_and_month_formatting(self):
        self.assertEqual(extract_years("2021 - 2019, class of 1999"), [2021, 2019])
        self.assertEqual(format_month_year(date(2022, 8, 1)), "August 2022")


if __name__ == "__main__":
    unittest.main()
