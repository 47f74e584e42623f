import sys
import unittest
from pathlib import Path

from fastapi.testclient import TestClient

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from atsmatch import __version__  # noqa: E402
from atsmatch.main import app  # noqa: E402

JD_TEXT = (
    "About the role\nWe build payment systems for lenders.\n\n"
    "Requirements\n5+ years of experience with Python, AWS and PostgreSQL. Strong communication."
)

RESUME = """Jane Doe
Senior Software Engineer
jane@example.com | (555) 123-4567

EXPERIENCE
Acme Corp, Jan 2020 - Present
- Built Python services on AWS

SKILLS
Python, AWS, PostgreSQL"""


class ApiTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.client = TestClient(app)

    def test_health(self):
        response = self.client.get("/v1/health")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"status": "healthy", "version": __version__})

    def test_process_jd(self):
        response = self.client.post("/v1/jd/process", json={"jd_text": JD_TEXT, "job_title": "Backend Engineer"})
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertIn("Python", body["extracted_skills"]["hard_skills"])
        self.assertEqual(body["job_title"], "Backend Engineer")

    def test_empty_jd_rejected(self):
        response = self.client.post("/v1/jd/process", json={"jd_text": ""})
        self.assertEqual(response.status_code, 422)

    def test_sanitize(self):
        response = self.client.post("/v1/jd/sanitize", json={"raw_text": "Backend Engineer\nAcme\n\n" + JD_TEXT})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["title"], "Backend Engineer")

    def test_score_resume_with_raw_jd_text(self):
        response = self.client.post(
            "/v1/score/resume",
            json={"tailored_resume": RESUME, "jd_text": JD_TEXT, "job_title": "Senior Software Engineer"},
        )
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertTrue(body["passed_parsing_gate"])
        self.assertEqual(body["tier_scores"]["job_title_alignment"]["match_type"], "exact")

    def test_score_resume_with_processed_jd(self):
        processed = self.client.post("/v1/jd/process", json={"jd_text": JD_TEXT}).json()
        response = self.client.post(
            "/v1/score/resume",
            json={"tailored_resume": RESUME, "processed_jd": processed, "original_resume": RESUME},
        )
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["tier_scores"]["hard_skill_match"]["skills_gap"], [])

    def test_score_requires_a_jd(self):
        response = self.client.post("/v1/score/resume", json={"tailored_resume": RESUME})
        self.assertEqual(response.status_code, 422)

    def test_malformed_processed_jd_rejected(self):
        response = self.client.post(
            "/v1/score/resume",
            json={"tailored_resume": RESUME, "processed_jd": {"unexpected": True}},
        )
        self.assertEqual(response.status_code, 422)

    def test_score_cover_letter(self):
        response = self.client.post(
            "/v1/score/cover-letter",
            json={"cover_letter": "I build Python services.", "jd_text": JD_TEXT, "resume_text": RESUME},
        )
        self.assertEqual(response.status_code, 200)
        self.assertIn("total_score", response.json())

    def test_validate(self):
        response = self.client.post(
            "/v1/validate",
            json={"original": "Improved latency", "draft": "Improved latency by 40%"},
        )
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["metrics"]["flagged_items"], ["40%"])

    def test_validate_feedback(self):
        response = self.client.post(
            "/v1/validate/feedback",
            json={
                "feedback": "Add Kubernetes",
                "feedback_history": ["Mention Terraform"],
                "previous_draft": "Python",
                "new_draft": "Python and Kubernetes",
            },
        )
        self.assertEqual(response.status_code, 200)
        self.assertEqual([item["applied"] for item in response.json()], [False, True])

    def test_resume_prompt(self):
        response = self.client.post(
            "/v1/prompts/resume",
            json={"strategy_mode": "keyword", "job_title": "Senior Data Engineer (Spark)"},
        )
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertIn("STRATEGY: STRICT KEYWORD MIRRORING", body["system_prompt"])
        self.assertIn("Tech Stack Keywords: Spark", body["headline_guidance"])

    def test_cover_letter_prompt(self):
        response = self.client.get("/v1/prompts/cover-letter")
        self.assertEqual(response.status_code, 200)
        self.assertIsNone(response.json()["headline_guidance"])


if __name__ == "__main__":
    unittest.main()
