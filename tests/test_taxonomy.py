import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from atsmatch.taxonomy.local_taxonomy import LocalTaxonomy  # noqa: E402


class TaxonomyTests(unittest.TestCase):
    def setUp(self):
        self.taxonomy = LocalTaxonomy()

    def test_abbreviation_and_expansion_lookups_are_symmetric(self):
        self.assertEqual(self.taxonomy.expansions("aws"), ("amazon web services",))
        self.assertEqual(self.taxonomy.abbreviations("amazon web services"), ("aws",))
        self.assertEqual(self.taxonomy.expansions("python"), ())

    def test_synonym_normalization_resolves_group_key(self):
        normalized, canonical = self.taxonomy.normalize_skill("  Google Cloud ")
        self.assertEqual(normalized, "google cloud")
        self.assertEqual(canonical, "gcp")

        normalized, canonical = self.taxonomy.normalize_skill("Django")
        self.assertEqual(normalized, "django")
        self.assertIsNone(canonical)

    def test_technical_lookup_keeps_canonical_spelling(self):
        self.assertEqual(self.taxonomy.technical_lookup["postgresql"], "PostgreSQL")
        self.assertEqual(self.taxonomy.technical_lookup["c++"], "C++")
        self.assertIn("languages", self.taxonomy.categories)

    def test_soft_skills_and_ambiguous_terms_loaded(self):
        self.assertIn("leadership", self.taxonomy.soft_skills)
        self.assertIn("go", self.taxonomy.ambiguous_terms)
        self.assertIn("experience with", self.taxonomy.context_indicators)

    def test_lookups_are_read_only(self):
        with self.assertRaises(TypeError):
            self.taxonomy.technical_lookup["made-up"] = "Made Up"  # type: ignore[index]


if __name__ == "__main__":
    unittest.main()
