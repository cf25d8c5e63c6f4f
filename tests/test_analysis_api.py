import os
import sys
import unittest
from dataclasses import replace
from pathlib import Path
from unittest.mock import patch

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

# Keep API tests deterministic: no network enrichment, no rate limiting.
os.environ["ENRICHMENT_PROVIDER"] = "none"
os.environ.setdefault("RATE_LIMIT_ENABLED", "0")

from fastapi.testclient import TestClient  # noqa: E402

from app.core.config import settings  # noqa: E402
from app.enrichment.types import EnrichmentError  # noqa: E402
from app.main import app  # noqa: E402


class _FailingProvider:
    name = "failing"

    async def enrich(self, text: str):
        raise EnrichmentError("service unavailable")


class AnalysisApiTests(unittest.TestCase):
    payload = {
        "resume_text": (
            "John Smith\n"
            "john@x.com 555-123-4567\n"
            "Experience\n"
            "Managed a team of 5 engineers using Python and AWS.\n"
            "Worked on internal tooling\n"
            "Skills\n"
            "Python, Docker, Linux, SQL\n"
        ),
        "job_description": "Python, Docker and Kubernetes",
    }

    def setUp(self):
        self._client_cm = TestClient(app)
        self.client = self._client_cm.__enter__()

    def tearDown(self):
        self._client_cm.__exit__(None, None, None)

    def test_health_reports_provider(self):
        response = self.client.get("/v1/health")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"status": "healthy", "enrichment_provider": "none"})

    def test_analysis_contract_shape(self):
        response = self.client.post("/v1/analysis", json=self.payload)
        self.assertEqual(response.status_code, 200)
        body = response.json()

        self.assertEqual(body["candidate_info"]["name"], "John Smith")
        self.assertEqual(body["candidate_info"]["phone"], "555-123-4567")
        self.assertIn("Python", body["skill_match"]["technical"])
        self.assertIn("Kubernetes", body["ats"]["missing_keywords"])
        self.assertTrue(0 <= body["ats"]["score_percent"] <= 100)
        self.assertLessEqual(len(body["job_suggestions"]), 3)
        self.assertEqual(
            [i["bullet_text"] for i in body["work_experience_analysis"]["action_verb_issues"]],
            ["Worked on internal tooling"],
        )
        self.assertEqual(body["sections"]["skills"], ["Python, Docker, Linux, SQL"])
        self.assertEqual(body["readability_analysis"]["estimated_pages"], 1)
        self.assertEqual(body["sentiment"], "NEUTRAL")
        self.assertEqual(body["enrichment_status"], "skipped")
        self.assertTrue(body["summary"].endswith("..."))

    def test_empty_resume_is_rejected_with_field(self):
        response = self.client.post("/v1/analysis", json={"resume_text": "   ", "job_description": "Python"})
        self.assertEqual(response.status_code, 422)
        self.assertEqual(response.json()["detail"]["field"], "resume_text")

    def test_enrichment_failure_does_not_fail_the_request(self):
        app.state.enrichment_provider = _FailingProvider()
        response = self.client.post("/v1/analysis", json=self.payload)
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["enrichment_status"], "failed")
        self.assertEqual(body["enrichment_error"], "enrichment_unavailable")
        self.assertEqual(body["key_phrases"], [])
        self.assertEqual(body["sentiment"], "NEUTRAL")

    def test_unexpected_errors_become_internal_error(self):
        with patch("app.api.v1.analysis.analyze_resume", side_effect=RuntimeError("boom")):
            response = self.client.post("/v1/analysis", json=self.payload)
        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json()["detail"]["error_type"], "internal_error")

    def test_api_key_is_enforced_when_configured(self):
        with patch("app.core.security.settings", replace(settings, api_key="secret")):
            denied = self.client.post("/v1/analysis", json=self.payload)
            allowed = self.client.post("/v1/analysis", json=self.payload, headers={"X-API-Key": "secret"})
        self.assertEqual(denied.status_code, 401)
        self.assertEqual(allowed.status_code, 200)


if __name__ == "__main__":
    unittest.main()
